"""
Query-mode classification.
"""

from enum import Enum


class QueryMode(str, Enum):
    KEYWORD = "keyword"
    PHRASE = "phrase"
    WILDCARD = "wildcard"


def classify_query(text: str) -> QueryMode:
    """
    Pick the evaluator for a raw query string.

    A quote character selects phrase search, otherwise a ``*`` selects
    wildcard search, otherwise the query is ranked keyword search.
    """
    if '"' in text:
        return QueryMode.PHRASE
    if "*" in text:
        return QueryMode.WILDCARD
    return QueryMode.KEYWORD
