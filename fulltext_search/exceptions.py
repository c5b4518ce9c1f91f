"""
Exception types raised by the full-text search engine.
"""


class SearchEngineError(Exception):
    """Base class for all search engine errors."""


class DocumentLoadError(SearchEngineError):
    """Raised when the corpus cannot be read, decompressed or decoded."""


class InvalidQueryError(SearchEngineError):
    """Raised when a query cannot be compiled into a matcher."""
