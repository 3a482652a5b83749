"""Compiler for block-scoped CSS: rewrites :block and :state selectors."""

__version__ = "0.1.0"

from cssblocks.errors import CssBlocksError, ErrorKind  # noqa: E402
from cssblocks.model import Block, SourceLocation, State, StateInfo  # noqa: E402
from cssblocks.options import CssBlocksOptions, OutputMode  # noqa: E402
from cssblocks.parser import ParseError, parse_stylesheet  # noqa: E402
from cssblocks.transforms import BlockRewriter, CompileResult, compile_css  # noqa: E402

__all__ = [
    "__version__",
    "Block",
    "BlockRewriter",
    "CompileResult",
    "CssBlocksError",
    "CssBlocksOptions",
    "ErrorKind",
    "OutputMode",
    "ParseError",
    "SourceLocation",
    "State",
    "StateInfo",
    "compile_css",
    "parse_stylesheet",
]
