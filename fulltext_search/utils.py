"""
Result formatting utilities.

This module contains helpers for snippet extraction, highlighting of
matched words and console rendering of search results.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from .analyzer import WORD_REGEX, Analyzer
from .documents import Document

Result = Tuple[int, Optional[float]]


class ResultFormatter:
    """Handles result formatting and display."""

    def __init__(self, config, analyzer: Analyzer):
        """Initialize with configuration and the shared analyzer."""
        self.config = config
        self.analyzer = analyzer

    def _format_tokens(self, tokens: List[str], maxn: int = 12) -> str:
        """Return tokens as a compact string; truncate long lists with an ellipsis."""
        if len(tokens) <= maxn:
            return "[" + ", ".join(tokens) + "]"
        head = ", ".join(tokens[:maxn // 2])
        tail = ", ".join(tokens[-maxn // 2:])
        return "[" + head + ", …, " + tail + "]"

    def highlight_words(self, text: str, query_tokens: Sequence[str]) -> str:
        """
        Wrap every word whose analyzed form is a query token.

        Words are compared after analysis, so "Running" is highlighted for
        the query token "run".

        Args:
            text: Text to highlight.
            query_tokens: Analyzed query tokens.

        Returns:
            Highlighted text.
        """
        wanted = set(query_tokens)
        if not wanted:
            return text

        # Analysis cached per distinct word
        seen: Dict[str, bool] = {}

        def repl(match):
            word = match.group(0)
            if word not in seen:
                analyzed = self.analyzer.analyze(word)
                seen[word] = bool(analyzed) and analyzed[0] in wanted
            if seen[word]:
                return f"{self.config.HIGHLIGHT_START}{word}{self.config.HIGHLIGHT_END}"
            return word

        return WORD_REGEX.sub(repl, text)

    def make_snippet(self, text: str, query_tokens: Sequence[str], max_chars: int = None) -> str:
        """
        Produce a snippet with highlighted query words and trimmed to max_chars.

        Args:
            text: Text to create snippet from.
            query_tokens: Analyzed query tokens to highlight.
            max_chars: Maximum characters in snippet.

        Returns:
            Highlighted snippet string.
        """
        if max_chars is None:
            max_chars = self.config.SNIPPET_CHARS

        highlighted = self.highlight_words(text, query_tokens)
        if len(highlighted) <= max_chars:
            return highlighted.replace("\n", " ")

        marker = highlighted.find(self.config.HIGHLIGHT_START)
        if marker == -1:
            return highlighted[:max_chars].replace("\n", " ") + "…"

        # Center the window a third of the way before the first highlight
        start = max(0, marker - max_chars // 3)
        end = min(len(highlighted), start + max_chars)
        snippet = highlighted[start:end]

        if start > 0:
            snippet = "…" + snippet
        if end < len(highlighted):
            snippet = snippet + "…"

        return snippet.replace("\n", " ")

    def _score_cell(self, score: Optional[float]) -> str:
        if score is None or not self.config.SHOW_SCORES:
            return "-"
        return f"{score:.4f}"

    def print_results_table(self, results: Sequence[Result], documents: Sequence[Document],
                            query_tokens: Sequence[str], max_chars: int = None) -> None:
        """
        Render results as an ASCII table.

        Args:
            results: (doc_id, score) pairs; score is None for unranked modes.
            documents: The document store, indexed by ID.
            query_tokens: Analyzed query tokens used for highlighting.
            max_chars: Maximum characters in snippet.
        """
        if max_chars is None:
            max_chars = self.config.SNIPPET_CHARS

        if not results:
            print("No results found.")
            return

        rows = []
        for rank, (doc_id, score) in enumerate(results, start=1):
            doc = documents[doc_id]
            snippet = self.make_snippet(doc.text, query_tokens, max_chars=max_chars)
            rows.append([str(rank), str(doc_id), self._score_cell(score), doc.title, doc.url, snippet])

        headers = ["#", "ID", "Score", "Title", "URL", "Snippet"]

        # Caps for the free-text columns
        max_widths = [4, 8, 8, 40, 50, max_chars]
        col_widths = []
        for j, h in enumerate(headers):
            width = len(h)
            for row in rows:
                width = max(width, len(row[j]))
            col_widths.append(min(width, max_widths[j]))

        def clip_pad(s, w):
            if len(s) > w:
                return s[: max(0, w - 1)] + "…" if w >= 2 else s[:w]
            return s.ljust(w)

        line = " | ".join(clip_pad(h, col_widths[i]) for i, h in enumerate(headers))
        sep = "-+-".join("-" * col_widths[i] for i in range(len(headers)))
        print("\n=== Top Results ===")
        print(line)
        print(sep)
        for row in rows:
            print(" | ".join(clip_pad(row[i], col_widths[i]) for i in range(len(headers))))

        print(f"\n(query tokens used: {self._format_tokens(list(query_tokens))})\n")

    def print_results_simple(self, results: Sequence[Result], documents: Sequence[Document],
                             query_tokens: Sequence[str], max_chars: int = None) -> None:
        """Print results one per block with a highlighted snippet."""
        if max_chars is None:
            max_chars = self.config.SNIPPET_CHARS

        if not results:
            print("No results found.")
            return

        print("\n=== Top Results ===")
        for rank, (doc_id, score) in enumerate(results, start=1):
            doc = documents[doc_id]
            snippet = self.make_snippet(doc.text, query_tokens, max_chars=max_chars)
            print(f"#{rank}  id={doc_id}  score={self._score_cell(score)}  {doc.title}")
            print(f"     {doc.url}")
            print(f"     {snippet}")

        print(f"\n(query tokens used: {self._format_tokens(list(query_tokens))})\n")

    def print_results(self, results: Sequence[Result], documents: Sequence[Document],
                      query_tokens: Sequence[str]) -> None:
        """Render results in the configured RESULT_FORMAT."""
        if self.config.RESULT_FORMAT == "list":
            self.print_results_simple(results, documents, query_tokens)
        else:
            self.print_results_table(results, documents, query_tokens)
