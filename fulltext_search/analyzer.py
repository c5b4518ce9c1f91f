"""
Text analysis pipeline.

This module turns raw text into normalized tokens: tokenization on
non-alphanumeric characters, lowercasing, stop-word removal and Snowball
stemming. The same pipeline is applied to documents at index time and to
queries at search time so both sides share one vocabulary.
"""

import re
from typing import List

from nltk.stem.snowball import SnowballStemmer


# Common English function words excluded from the index.
STOP_WORDS = frozenset({
    "a", "about", "above", "after", "again", "against", "all", "am", "an",
    "and", "any", "are", "aren't", "as", "at", "be", "because", "been",
    "before", "being", "below", "between", "both", "but", "by", "can't",
    "cannot", "could", "couldn't", "did", "didn't", "do", "does", "doesn't",
    "doing", "don't", "down", "during", "each", "few", "for", "from",
    "further", "had", "hadn't", "has", "hasn't", "have", "haven't", "having",
    "he", "he'd", "he'll", "he's", "her", "here", "here's", "hers", "herself",
    "him", "himself", "his", "how", "how's", "i", "i'd", "i'll", "i'm",
    "i've", "if", "in", "into", "is", "isn't", "it", "it's", "its", "itself",
    "let's", "me", "more", "most", "mustn't", "my", "myself", "no", "nor",
    "not", "of", "off", "on", "once", "only", "or", "other", "ought", "our",
    "ours", "ourselves", "out", "over", "own", "same", "shan't", "she",
    "she'd", "she'll", "she's", "should", "shouldn't", "so", "some", "such",
    "than", "that", "that's", "the", "their", "theirs", "them", "themselves",
    "then", "there", "there's", "these", "they", "they'd", "they'll",
    "they're", "they've", "this", "those", "through", "to", "too", "under",
    "until", "up", "very", "was", "wasn't", "we", "we'd", "we'll", "we're",
    "we've", "were", "weren't", "what", "what's", "when", "when's", "where",
    "where's", "which", "while", "who", "who's", "whom", "why", "why's",
    "with", "won't", "would", "wouldn't", "you", "you'd", "you'll", "you're",
    "you've", "your", "yours", "yourself", "yourselves",
})

# A run of Unicode letters and numbers; underscore counts as a separator.
WORD_REGEX = re.compile(r"[^\W_]+")


class Analyzer:
    """Tokenizes, lowercases, filters and stems text."""

    def __init__(self, language: str = "english"):
        """
        Initialize the analyzer.

        Args:
            language: Snowball stemmer language.
        """
        self.language = language
        self.stemmer = SnowballStemmer(language)

    def tokenize(self, text: str) -> List[str]:
        """
        Split text on every character that is not a letter or a number.

        Args:
            text: Raw text.

        Returns:
            List of non-empty tokens in their original case.
        """
        if not text:
            return []
        return WORD_REGEX.findall(text)

    def lowercase_filter(self, tokens: List[str]) -> List[str]:
        return [token.lower() for token in tokens]

    def stop_word_filter(self, tokens: List[str]) -> List[str]:
        return [token for token in tokens if token not in STOP_WORDS]

    def stemmer_filter(self, tokens: List[str]) -> List[str]:
        """Reduce each token to its Snowball root form."""
        stem = self.stemmer.stem
        return [stem(token) for token in tokens]

    def analyze(self, text: str) -> List[str]:
        """
        Run text through the full analysis pipeline.

        Args:
            text: Raw text (document body, title or query).

        Returns:
            Normalized tokens in their original relative order.
        """
        tokens = self.tokenize(text)
        tokens = self.lowercase_filter(tokens)
        tokens = self.stop_word_filter(tokens)
        return self.stemmer_filter(tokens)

    def __call__(self, text: str) -> List[str]:
        return self.analyze(text)
