"""
Wildcard matching over the index vocabulary.

A pattern such as ``cat*`` is compiled into an anchored regular expression
where ``*`` stands for any run of characters, including none.
"""

import logging
import re
from typing import List, Pattern

from .exceptions import InvalidQueryError
from .indexer import Index

logger = logging.getLogger(__name__)

WILDCARD = "*"


class WildcardMatcher:
    """Matches glob-style token patterns against the vocabulary."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def compile_pattern(self, pattern: str) -> Pattern:
        """
        Translate a wildcard pattern into a compiled regular expression.

        With ``WILDCARD_ESCAPE_METACHARACTERS`` enabled every character other
        than ``*`` matches literally. When disabled, other regex
        metacharacters keep their meaning.

        Args:
            pattern: Wildcard pattern, already normalized.

        Returns:
            Compiled expression, to be used with ``fullmatch``.

        Raises:
            InvalidQueryError: If the pattern is not a valid expression.
        """
        if self.config.WILDCARD_ESCAPE_METACHARACTERS:
            regex = ".*".join(re.escape(part) for part in pattern.split(WILDCARD))
        else:
            regex = pattern.replace(WILDCARD, ".*")

        try:
            return re.compile(regex)
        except re.error as e:
            raise InvalidQueryError(f"Invalid wildcard pattern {pattern!r}: {e}") from e

    def matching_tokens(self, pattern: str, index: Index) -> List[str]:
        """
        List the vocabulary tokens fully matching the pattern, sorted.

        Args:
            pattern: Raw wildcard pattern.
            index: The inverted index.

        Returns:
            Matching tokens in ascending order.
        """
        normalized = pattern.strip().lower()
        if not normalized:
            return []
        regex = self.compile_pattern(normalized)
        return [token for token in sorted(index) if regex.fullmatch(token)]

    def match(self, pattern: str, index: Index) -> List[int]:
        """
        Concatenate the posting lists of every matching token.

        Tokens are visited in sorted order. A document listed under several
        matching tokens appears once per token.

        Args:
            pattern: Raw wildcard pattern.
            index: The inverted index.

        Returns:
            Document IDs, possibly with duplicates.
        """
        results: List[int] = []
        tokens = self.matching_tokens(pattern, index)
        for token in tokens:
            results.extend(index[token])
        logger.debug("Wildcard %r matched %d tokens", pattern, len(tokens))
        return results
