"""
Configuration settings for the Full-Text Search Engine.

This module contains all configurable parameters for the search engine.
Modify these values to customize the behavior of the system, or pass a
dictionary of overrides to ``SearchEngine``.
"""

from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent
DATA_DIR = PROJECT_ROOT / "data"
DATA_FILE = DATA_DIR / "enwiki-latest-abstract1.xml.gz"  # Default corpus dump

# Text processing settings
STEMMER_LANGUAGE = "english"  # Snowball stemmer language

# Ranking settings
TITLE_BOOST = 0.5  # Extra tf-idf fraction per query-token occurrence in the title

# Wildcard settings
WILDCARD_ESCAPE_METACHARACTERS = True  # Treat every character except '*' literally

# Search settings
TOP_K_RESULTS = 10  # Number of results shown by the CLI
SNIPPET_CHARS = 200  # Maximum characters in result snippets

# Highlighting settings
HIGHLIGHT_START = "[["  # Start marker for highlighting
HIGHLIGHT_END = "]]"  # End marker for highlighting

# Result formatting
RESULT_FORMAT = "table"  # Result format: "table" or "list"
SHOW_SCORES = True  # Show relevance scores in results

# Logging settings
LOG_LEVEL = "INFO"  # Logging level: DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
