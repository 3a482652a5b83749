"""Block rewrite transform: replaces :block and :state with generated classes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from cssblocks.errors import CssBlocksError, ErrorKind, missing_source_path
from cssblocks.model.block import Block
from cssblocks.model.location import SourceLocation
from cssblocks.options import CssBlocksOptions
from cssblocks.parser.nodes import ClassName, Node, Pseudo
from cssblocks.parser.selector import parse_selector
from cssblocks.parser.stylesheet import Rule, Stylesheet, parse_stylesheet
from cssblocks.validation.combinators import assert_valid_combinators
from cssblocks.validation.state_args import BLOCK_PSEUDO, STATE_PSEUDO, parse_state

logger = logging.getLogger(__name__)

# Error kinds that get the source file name attached on the way out.
_LOCATED_KINDS = frozenset({ErrorKind.INVALID_SYNTAX})


class BlockRewriter:
    """Rewrite the block selectors of a stylesheet into plain class selectors.

    ``:block`` becomes the block's class and ``:state(...)`` the class of
    that state.  Every other part of a selector is left as written.
    """

    def __init__(self, options: CssBlocksOptions | None = None) -> None:
        self.options = options or CssBlocksOptions()

    def process(self, stylesheet: Stylesheet, source_path: str | None) -> Block:
        """Rewrite *stylesheet* in place and return the block it defines.

        The block is named after *source_path* without directory or
        extension.  Nothing is returned when compilation fails; the
        stylesheet must then be considered unusable.
        """
        if not source_path:
            raise missing_source_path()
        try:
            block = Block(Path(source_path).stem)
            for rule in stylesheet.walk_rules():
                self._rewrite_rule(rule, block)
        except CssBlocksError as e:
            if e.kind in _LOCATED_KINDS:
                if e.location is None:
                    e.location = SourceLocation(filename=source_path)
                elif e.location.filename is None:
                    e.location.filename = source_path
            raise
        logger.info(
            "Compiled block %r from %s with %d state(s)",
            block.name,
            source_path,
            len(block),
        )
        return block

    def _rewrite_rule(self, rule: Rule, block: Block) -> None:
        root = parse_selector(rule.selector)
        for selector in root.nodes:
            assert_valid_combinators(rule, selector)

        # Nodes are only replaced once the walk is over.
        replacements: list[tuple[Node, Node]] = []
        for pseudo in root.walk_pseudos():
            replacement = self._replacement(rule, pseudo, block)
            if replacement is not None:
                replacements.append((pseudo, replacement))
        for existing, replacement in replacements:
            existing.replace_with(replacement)

        if replacements:
            rewritten = str(root)
            logger.debug("Rewrote %r as %r", rule.selector, rewritten)
            rule.selector = rewritten

    def _replacement(self, rule: Rule, pseudo: Pseudo, block: Block) -> Node | None:
        if pseudo.value == BLOCK_PSEUDO:
            return ClassName(value=block.class_token(self.options), source=pseudo.source)
        if pseudo.value == STATE_PSEUDO:
            known = len(block)
            state = block.ensure_state(parse_state(rule, pseudo))
            if len(block) > known:
                logger.debug("New state %r in block %r", state.identity, block.name)
            return ClassName(value=state.class_token(self.options), source=pseudo.source)
        return None


@dataclass(frozen=True)
class CompileResult:
    css: str
    block: Block


def compile_css(
    source: str,
    source_path: str | None,
    options: CssBlocksOptions | None = None,
) -> CompileResult:
    """Parse, rewrite and serialize a stylesheet in one step."""
    if not source_path:
        raise missing_source_path()
    stylesheet = parse_stylesheet(source)
    block = BlockRewriter(options).process(stylesheet, source_path)
    return CompileResult(css=stylesheet.to_css(), block=block)
