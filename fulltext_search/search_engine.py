"""
Main SearchEngine class that owns the corpus and answers queries.

This module contains the SearchEngine class that coordinates document
storage, index construction and the three query evaluators: ranked
keyword search, exact phrase search and wildcard search.
"""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from .analyzer import Analyzer
from .documents import Document, load_documents
from .exceptions import DocumentLoadError, InvalidQueryError
from .indexer import Indexer
from .phrase import PhraseMatcher, strip_quotes
from .query import QueryMode, classify_query
from .ranker import Ranker
from .utils import ResultFormatter
from .wildcard import WildcardMatcher
import config

logger = logging.getLogger(__name__)


class SearchEngine:
    """
    In-memory full-text search engine over a fixed corpus.

    The document store and the inverted index are built once, in the
    constructor, and are read-only afterwards. Every query method is a
    synchronous computation over those structures.
    """

    def __init__(self, documents: Iterable[Document], config_dict: Optional[Dict] = None):
        """
        Initialize the engine and index the corpus.

        Args:
            documents: Documents whose IDs are 0..n-1 in order.
            config_dict: Optional configuration dictionary to override defaults.

        Raises:
            DocumentLoadError: If document IDs do not match their positions.
        """
        self.config = self._load_config(config_dict)

        # Initialize components
        self.analyzer = Analyzer(self.config.STEMMER_LANGUAGE)
        self.indexer = Indexer(self.config)
        self.ranker = Ranker(self.config, self.analyzer)
        self.phrase_matcher = PhraseMatcher(self.config, self.analyzer)
        self.wildcard_matcher = WildcardMatcher(self.config)
        self.result_formatter = ResultFormatter(self.config, self.analyzer)

        self._documents: Tuple[Document, ...] = tuple(documents)
        for position, doc in enumerate(self._documents):
            if doc.id != position:
                raise DocumentLoadError(
                    f"Document at position {position} has ID {doc.id}; IDs must equal positions"
                )

        logger.info("Indexing %d documents...", len(self._documents))
        self._index = MappingProxyType(
            self.indexer.build_inverted_index(self._documents, self.analyzer)
        )
        logger.info("Built inverted index: %d tokens", len(self._index))

    @classmethod
    def from_file(cls, path: Union[str, Path], config_dict: Optional[Dict] = None) -> "SearchEngine":
        """
        Load an XML abstract dump and build an engine over it.

        Raises:
            DocumentLoadError: If the dump cannot be loaded.
        """
        return cls(load_documents(path), config_dict=config_dict)

    def _load_config(self, config_dict: Optional[Dict]) -> Any:
        """Load configuration from config module, overlaid with the provided dictionary."""
        if config_dict:
            class Config:
                def __init__(self, overrides):
                    for key in dir(config):
                        if key.isupper():
                            setattr(self, key, getattr(config, key))
                    for key, value in overrides.items():
                        setattr(self, key, value)
            return Config(config_dict)
        return config

    @property
    def documents(self) -> Tuple[Document, ...]:
        return self._documents

    @property
    def index(self) -> Mapping[str, Tuple[int, ...]]:
        return self._index

    def get_document(self, doc_id: int) -> Document:
        """
        Fetch a document by ID.

        Raises:
            KeyError: If no document has this ID.
        """
        if not 0 <= doc_id < len(self._documents):
            raise KeyError(doc_id)
        return self._documents[doc_id]

    def search_with_scores(self, query: str, top_k: Optional[int] = None) -> List[Tuple[int, float]]:
        """
        Ranked keyword search returning scores.

        Every query token must occur in a document for it to match. Matching
        documents are scored with TF-IDF plus a title boost.

        Args:
            query: Free-text query.
            top_k: Number of results to return; all when None.

        Returns:
            List of (doc_id, score) sorted by descending score, then ascending ID.
        """
        query_tokens = self.analyzer.analyze(query)
        if not query_tokens:
            return []

        candidates = self.indexer.get_common_documents(query_tokens, self._index)
        if not candidates:
            return []

        ranked = self.ranker.rank(candidates, query_tokens, self._documents, self._index, topk=top_k)
        logger.debug("Keyword %r: %d matches", query_tokens, len(ranked))
        return ranked

    def search(self, query: str, top_k: Optional[int] = None) -> List[int]:
        """
        Ranked keyword search.

        Args:
            query: Free-text query.
            top_k: Number of results to return; all when None.

        Returns:
            Document IDs in descending relevance.
        """
        return [doc_id for doc_id, _score in self.search_with_scores(query, top_k=top_k)]

    def search_phrase(self, query: str) -> List[int]:
        """
        Exact phrase search; quote characters in ``query`` are ignored.

        Returns:
            Ascending IDs of documents containing the phrase.
        """
        return self.phrase_matcher.match(query, self._documents, self._index)

    def find_wildcard_matches(self, pattern: str) -> List[int]:
        """
        Wildcard search over the vocabulary.

        Returns:
            Concatenated posting lists of every matching token, in sorted
            token order; may contain duplicates.

        Raises:
            InvalidQueryError: If the pattern cannot be compiled.
        """
        return self.wildcard_matcher.match(pattern, self._index)

    def query(self, text: str, mode: Optional[Union[QueryMode, str]] = None) -> List[int]:
        """
        Dispatch a raw query to the evaluator matching its shape.

        Args:
            text: Raw query string.
            mode: Force a query mode; classified from ``text`` when None.

        Returns:
            Document IDs as returned by the selected evaluator.
        """
        results, _tokens = self.evaluate(text, mode=mode)
        return [doc_id for doc_id, _score in results]

    def evaluate(self, text: str, mode: Optional[Union[QueryMode, str]] = None,
                 top_k: Optional[int] = None) -> Tuple[List[Tuple[int, Optional[float]]], List[str]]:
        """
        Run a query and return results together with the tokens to highlight.

        Args:
            text: Raw query string.
            mode: Force a query mode; classified from ``text`` when None.
            top_k: Number of results to return; all when None.

        Returns:
            Tuple of (results, highlight_tokens) where results are
            (doc_id, score) pairs and score is None for unranked modes.
        """
        if not text or not text.strip():
            return [], []

        mode = QueryMode(mode) if mode is not None else classify_query(text)

        if mode == QueryMode.PHRASE:
            ids = self.search_phrase(text)
            tokens = self.analyzer.analyze(strip_quotes(text))
            results = [(doc_id, None) for doc_id in ids]
        elif mode == QueryMode.WILDCARD:
            ids = self.find_wildcard_matches(text)
            tokens = self.wildcard_matcher.matching_tokens(text, self._index)
            results = [(doc_id, None) for doc_id in ids]
        else:
            tokens = self.analyzer.analyze(text)
            results = self.search_with_scores(text)

        if top_k is not None:
            results = results[:top_k]
        return results, tokens

    def get_result_snippet(self, doc_id: int, query_tokens: List[str], max_chars: Optional[int] = None) -> str:
        """
        Get a highlighted snippet of a document's text.

        Args:
            doc_id: Document ID.
            query_tokens: Analyzed tokens to highlight.
            max_chars: Maximum snippet length. If None, uses config default.

        Returns:
            Highlighted snippet string, empty for an unknown ID.
        """
        if not 0 <= doc_id < len(self._documents):
            return ""
        return self.result_formatter.make_snippet(self._documents[doc_id].text, query_tokens, max_chars)

    def interactive_search(self, top_k: Optional[int] = None) -> None:
        """
        Start an interactive search session.

        Queries containing a quote run a phrase search, queries containing
        ``*`` run a wildcard search and anything else is a keyword search.
        Type 'exit' or 'quit' to end the session.
        """
        if top_k is None:
            top_k = self.config.TOP_K_RESULTS

        print("\n=== Interactive Search ===")
        print(f"{len(self._documents)} documents indexed. Type 'exit' or 'quit' to quit.")

        while True:
            try:
                query = input("Enter search query: ").strip()
            except (EOFError, KeyboardInterrupt):
                print("\nExiting.")
                break

            if not query:
                continue
            if query.lower() in ('exit', 'quit'):
                print("Goodbye!")
                break

            try:
                results, tokens = self.evaluate(query, top_k=top_k)
            except InvalidQueryError as e:
                print(f"Invalid query: {e}")
                continue
            self.result_formatter.print_results(results, self._documents, tokens)

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the built index.

        Returns:
            Dictionary containing various statistics.
        """
        stats = self.indexer.summarize_index(self._index, len(self._documents))
        stats["avg_document_length"] = (
            sum(len(doc.text) for doc in self._documents) / len(self._documents)
            if self._documents else 0
        )
        return stats
