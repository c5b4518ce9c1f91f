"""
Inverted index construction and management.

This module builds the token -> posting list mapping used by every query
mode and provides the posting-list operations the query evaluators share.
"""

import logging
from typing import Any, Dict, List, Sequence, Tuple

from .analyzer import Analyzer
from .documents import Document

logger = logging.getLogger(__name__)

Index = Dict[str, Tuple[int, ...]]


def intersect_postings(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """
    Intersect two ascending posting lists with a two-pointer merge.

    Args:
        a: Ascending, duplicate-free document IDs.
        b: Ascending, duplicate-free document IDs.

    Returns:
        Ascending list of IDs present in both inputs.
    """
    result = []
    i, j = 0, 0
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            i += 1
        elif a[i] > b[j]:
            j += 1
        else:
            result.append(a[i])
            i += 1
            j += 1
    return result


class Indexer:
    """Handles inverted index construction and lookups."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def build_inverted_index(self, documents: Sequence[Document], analyzer: Analyzer) -> Index:
        """
        Build an inverted index over the documents' text.

        Documents must be supplied in ascending ID order: a document ID is
        appended to a posting list only when the list is empty or ends with a
        different ID, which deduplicates correctly only under that ordering.

        Args:
            documents: Documents ordered by ID.
            analyzer: Analyzer used to normalize the text.

        Returns:
            Mapping from token to an ascending tuple of document IDs.
        """
        postings: Dict[str, List[int]] = {}

        for doc in documents:
            for token in analyzer.analyze(doc.text):
                ids = postings.get(token)
                if ids is None:
                    postings[token] = [doc.id]
                elif ids[-1] != doc.id:
                    ids.append(doc.id)

        # Freeze postings so the finished index cannot be appended to
        return {tok: tuple(ids) for tok, ids in postings.items()}

    def get_posting_list(self, token: str, index: Index) -> Tuple[int, ...]:
        """Return the posting list for a token, or an empty tuple."""
        return index.get(token, ())

    def get_document_frequency(self, token: str, index: Index) -> int:
        return len(self.get_posting_list(token, index))

    def get_common_documents(self, tokens: Sequence[str], index: Index) -> List[int]:
        """
        Get the documents containing all of the given tokens.

        Args:
            tokens: Query tokens.
            index: The inverted index.

        Returns:
            Ascending list of document IDs; empty if any token is absent.
        """
        if not tokens:
            return []

        first = index.get(tokens[0])
        if first is None:
            return []
        common = list(first)

        for token in tokens[1:]:
            ids = index.get(token)
            if ids is None:
                logger.debug("Token %r not in index; no results", token)
                return []
            common = intersect_postings(common, ids)

        return common

    def summarize_index(self, index: Index, num_documents: int) -> Dict[str, Any]:
        """
        Compute and log summary statistics of the inverted index.

        Args:
            index: The inverted index.
            num_documents: Total number of documents.

        Returns:
            Dictionary of statistics.
        """
        num_tokens = len(index)
        posting_lengths = sorted(len(ids) for ids in index.values())
        total_postings = sum(posting_lengths)

        stats: Dict[str, Any] = {
            "documents_indexed": num_documents,
            "unique_tokens": num_tokens,
            "total_postings": total_postings,
            "avg_postings_per_token": total_postings / num_tokens if num_tokens else 0.0,
        }
        if posting_lengths:
            stats["min_posting_length"] = posting_lengths[0]
            stats["max_posting_length"] = posting_lengths[-1]
            stats["median_posting_length"] = posting_lengths[len(posting_lengths) // 2]

        logger.info(
            "Index summary: %d unique tokens, %d postings across %d documents",
            num_tokens, total_postings, num_documents,
        )
        return stats
