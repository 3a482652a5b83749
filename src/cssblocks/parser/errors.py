"""Parser error types."""

from __future__ import annotations

from cssblocks.model.location import SourceLocation


class ParseError(Exception):
    """Raised when stylesheet or selector text cannot be tokenized.

    For a stylesheet, ``line`` and ``column`` are positions in the file.  For
    a selector, ``selector`` holds the text that failed and the position is
    relative to it.
    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        selector: str | None = None,
    ):
        self.line = line
        self.column = column
        self.selector = selector
        super().__init__(message)

    @property
    def location(self) -> SourceLocation:
        return SourceLocation(self.line, self.column)
