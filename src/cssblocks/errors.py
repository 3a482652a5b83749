"""Compiler error types.

All compile errors share one exception class tagged with an :class:`ErrorKind`.
Code that needs to tell them apart looks at ``error.kind``.
"""

from __future__ import annotations

from enum import Enum

from cssblocks.model.location import SourceLocation


class ErrorKind(Enum):
    """The closed set of compile error kinds."""

    MISSING_SOURCE_PATH = "MissingSourcePath"
    INVALID_SYNTAX = "InvalidBlockSyntax"


class CssBlocksError(Exception):
    """Raised when a stylesheet cannot be compiled.

    Attributes:
        kind: Which error this is.
        message: Description without location information.
        location: Where the problem is, if known.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        location: SourceLocation | None = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.location = location
        super().__init__(message)

    def __str__(self) -> str:
        text = f"[css-blocks] {self.kind.value}: {self.message}"
        if self.location is not None:
            text += f" ({self.location})"
        return text


def missing_source_path() -> CssBlocksError:
    return CssBlocksError(
        ErrorKind.MISSING_SOURCE_PATH,
        "The source filename is required for CSS Blocks to work correctly.",
    )


def invalid_syntax(
    message: str, location: SourceLocation | None = None
) -> CssBlocksError:
    return CssBlocksError(ErrorKind.INVALID_SYNTAX, message, location)
