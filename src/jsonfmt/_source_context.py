"""Source line lookup for rendering error context and caret markers."""

from __future__ import annotations

from typing import Final


class SourceContext:
    """Line lookup over a JSON document with lazily built line starts.

    Lines are delimited by ``\\n`` only, matching how the lexer counts
    lines, so a line number reported on a token or error always maps to
    exactly one entry here.
    """

    def __init__(self, text: str) -> None:
        """Initialize context lookup for a document.

        Args:
            text: The complete source text the positions refer to
        """
        self.text: Final = text
        self._line_starts: list[int] | None = None

    def _build_line_starts(self) -> list[int]:
        """Record the offset of the first character of every line."""
        starts = [0]
        index = self.text.find("\n")
        while index != -1:
            starts.append(index + 1)
            index = self.text.find("\n", index + 1)
        return starts

    @property
    def line_starts(self) -> list[int]:
        # Only needed on the error path
        if self._line_starts is None:
            self._line_starts = self._build_line_starts()
        return self._line_starts

    def line_text(self, lineno: int) -> str:
        """Returns the text of a 1-based line without its line terminator.

        Args:
            lineno: Line number, clamped to the lines present in the text

        Returns:
            Source line text, empty for an empty document
        """
        starts = self.line_starts
        lineno = min(max(lineno, 1), len(starts))
        start = starts[lineno - 1]
        end = self.text.find("\n", start)
        if end == -1:
            end = len(self.text)
        return self.text[start:end].rstrip("\r")

    @staticmethod
    def caret(line_text: str, colno: int) -> str:
        """Builds a caret line with ``^`` under a 1-based column.

        Tabs in the source line are copied so the caret stays aligned in
        terminals that expand them.
        """
        prefix = line_text[: colno - 1]
        padding = "".join("\t" if char == "\t" else " " for char in prefix)
        return padding + " " * (colno - 1 - len(prefix)) + "^"

    def render(self, lineno: int, colno: int) -> tuple[str, str]:
        """Returns the context line and caret line for a position."""
        line_text = self.line_text(lineno)
        return line_text, self.caret(line_text, colno)
