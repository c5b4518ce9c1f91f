"""
Full-Text Search Engine

An in-memory full-text search engine with a Snowball-stemming analyzer,
an inverted index and three query modes.

Main components:
- SearchEngine: Owns the corpus and index, answers queries
- Analyzer: Tokenization, stop-word filtering and stemming
- Indexer: Inverted index construction and posting-list intersection
- Ranker: TF-IDF scoring with a title boost
- PhraseMatcher: Exact contiguous phrase matching
- WildcardMatcher: Glob-style matching over the vocabulary
- ResultFormatter: Snippets, highlighting and console output
"""

from .search_engine import SearchEngine
from .analyzer import Analyzer, STOP_WORDS
from .documents import Document, documents_from_records, load_documents
from .exceptions import DocumentLoadError, InvalidQueryError, SearchEngineError
from .indexer import Indexer, intersect_postings
from .phrase import PhraseMatcher, contains_exact_phrase
from .query import QueryMode, classify_query
from .ranker import Ranker
from .utils import ResultFormatter
from .wildcard import WildcardMatcher

__version__ = "1.0.0"

__all__ = [
    "SearchEngine",
    "Analyzer",
    "STOP_WORDS",
    "Document",
    "documents_from_records",
    "load_documents",
    "SearchEngineError",
    "DocumentLoadError",
    "InvalidQueryError",
    "Indexer",
    "intersect_postings",
    "PhraseMatcher",
    "contains_exact_phrase",
    "QueryMode",
    "classify_query",
    "Ranker",
    "ResultFormatter",
    "WildcardMatcher",
]
