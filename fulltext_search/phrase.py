"""
Exact phrase matching.

A phrase matches a document when its analyzed tokens occur as one
contiguous, order-preserving run inside the document's analyzed text.
"""

import logging
from typing import List, Sequence

from .analyzer import Analyzer
from .documents import Document
from .indexer import Index

logger = logging.getLogger(__name__)

QUOTE_CHARS = '"'


def strip_quotes(query: str) -> str:
    """Remove every quote character from a raw phrase query."""
    for quote in QUOTE_CHARS:
        query = query.replace(quote, "")
    return query


def contains_exact_phrase(doc_tokens: Sequence[str], query_tokens: Sequence[str]) -> bool:
    """
    Check whether ``query_tokens`` appears contiguously in ``doc_tokens``.

    Args:
        doc_tokens: Analyzed document text.
        query_tokens: Analyzed phrase.

    Returns:
        True if some window of the document equals the phrase.
    """
    n = len(query_tokens)
    if n == 0:
        return False
    for i in range(len(doc_tokens) - n + 1):
        if doc_tokens[i] == query_tokens[0] and list(doc_tokens[i:i + n]) == list(query_tokens):
            return True
    return False


class PhraseMatcher:
    """Evaluates phrase queries against the index and document store."""

    def __init__(self, config, analyzer: Analyzer):
        self.config = config
        self.analyzer = analyzer

    def match(self, query: str, documents: Sequence[Document], index: Index) -> List[int]:
        """
        Find documents containing the exact phrase.

        Candidates are restricted to the posting list of the phrase's first
        token, then each is verified against its analyzed text.

        Args:
            query: Raw phrase query, quotes allowed.
            documents: The document store, indexed by ID.
            index: The inverted index.

        Returns:
            Ascending list of matching document IDs.
        """
        query_tokens = self.analyzer.analyze(strip_quotes(query))
        if not query_tokens:
            return []

        candidates = index.get(query_tokens[0])
        if candidates is None:
            return []

        matches = []
        for doc_id in candidates:
            doc_tokens = self.analyzer.analyze(documents[doc_id].text)
            if contains_exact_phrase(doc_tokens, query_tokens):
                matches.append(doc_id)

        logger.debug("Phrase %r: %d candidates, %d matches", query_tokens, len(candidates), len(matches))
        return matches
