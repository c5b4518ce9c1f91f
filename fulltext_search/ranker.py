"""
Document ranking and scoring module.

This module handles TF-IDF scoring with a title-match boost for the
documents that survive a boolean-AND keyword query.
"""

import math
from typing import List, Optional, Sequence, Tuple

from .analyzer import Analyzer
from .documents import Document
from .indexer import Index


class Ranker:
    """Scores and orders candidate documents using TF-IDF."""

    def __init__(self, config, analyzer: Analyzer):
        """Initialize with configuration and the shared analyzer."""
        self.config = config
        self.analyzer = analyzer

    def term_frequency(self, token: str, doc_tokens: Sequence[str]) -> float:
        """
        Fraction of a document's analyzed tokens equal to ``token``.

        Args:
            token: Query token.
            doc_tokens: Analyzed document text.

        Returns:
            Term frequency, 0.0 for a document with no tokens.
        """
        if not doc_tokens:
            return 0.0
        count = sum(1 for t in doc_tokens if t == token)
        return count / len(doc_tokens)

    def inverse_document_frequency(self, token: str, index: Index, num_documents: int) -> float:
        """
        IDF formula: idf = ln(N / df)

        Args:
            token: Query token.
            index: The inverted index.
            num_documents: Total number of documents (N).

        Returns:
            IDF score, 0.0 for a token not in the index.
        """
        df = len(index.get(token, ()))
        if df == 0 or num_documents == 0:
            return 0.0
        return math.log(num_documents / df)

    def score_document(self, query_tokens: Sequence[str], document: Document,
                       index: Index, num_documents: int) -> float:
        """
        Compute the relevance of one document for the query.

        Each query token contributes ``tf * idf``; every occurrence of the
        token in the analyzed title adds ``tf * idf * TITLE_BOOST``.

        Args:
            query_tokens: Analyzed query tokens.
            document: Candidate document.
            index: The inverted index.
            num_documents: Total number of documents.

        Returns:
            Relevance score.
        """
        doc_tokens = self.analyzer.analyze(document.text)
        title_tokens = self.analyzer.analyze(document.title)
        boost = self.config.TITLE_BOOST

        score = 0.0
        for token in query_tokens:
            tf = self.term_frequency(token, doc_tokens)
            tfidf = tf * self.inverse_document_frequency(token, index, num_documents)
            score += tfidf
            for title_token in title_tokens:
                if title_token == token:
                    score += tfidf * boost
        return score

    def rank(self, candidates: Sequence[int], query_tokens: Sequence[str],
             documents: Sequence[Document], index: Index,
             topk: Optional[int] = None) -> List[Tuple[int, float]]:
        """
        Score candidates and sort them by relevance.

        Args:
            candidates: Document IDs matching every query token.
            query_tokens: Analyzed query tokens.
            documents: The document store, indexed by ID.
            index: The inverted index.
            topk: Number of results to keep; all when None.

        Returns:
            List of (doc_id, score) tuples, descending score then ascending ID.
        """
        num_documents = len(documents)
        ranked = [
            (doc_id, self.score_document(query_tokens, documents[doc_id], index, num_documents))
            for doc_id in candidates
        ]
        ranked.sort(key=lambda x: (-x[1], x[0]))
        if topk is not None:
            return ranked[:topk]
        return ranked
