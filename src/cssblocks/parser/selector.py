"""Lark Transformer that converts a selector parse tree into selector nodes."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path
from typing import Any

from lark import Lark, Token, Transformer

from cssblocks.model.location import SourceLocation, add_source_locations
from cssblocks.parser.errors import ParseError
from cssblocks.parser.nodes import (
    Attribute,
    ClassName,
    Combinator,
    Comment,
    IdSelector,
    Nesting,
    Node,
    Pseudo,
    Selector,
    SelectorRoot,
    Separator,
    String,
    Tag,
    Universal,
    Word,
)

GRAMMAR_PATH = Path(__file__).parent / "selector.lark"

_COMMENT = re.compile(r"/\*[^*]*\*+(?:[^/*][^*]*\*+)*/")


def _symbol(raw: str) -> str:
    """Value of a combinator or separator: its symbol, or ``" "`` for a gap."""
    return _COMMENT.sub("", raw).strip() or " "


class _Arguments:
    """Intermediate result of ``pseudo_args``, consumed by ``pseudo``."""

    def __init__(self, open: str, groups: list[Selector], commas: list[str], close: str):
        self.open = open
        self.groups = groups
        self.commas = commas
        self.close = close


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into a :class:`SelectorRoot`.

    *origin* is where the parsed text starts inside the selector as written,
    so node positions stay relative to the original selector text.
    """

    def __init__(self, origin: SourceLocation) -> None:
        super().__init__()
        self._origin = origin

    def _loc(self, token: Token) -> SourceLocation:
        return add_source_locations(
            self._origin, SourceLocation(token.line, token.column)
        )

    # ---- simple selectors ----

    def tag(self, items: list[Token]) -> Tag:
        return Tag(value=str(items[0]), source=self._loc(items[0]))

    def universal(self, items: list[Token]) -> Universal:
        return Universal(value=str(items[0]), source=self._loc(items[0]))

    def nesting(self, items: list[Token]) -> Nesting:
        return Nesting(value=str(items[0]), source=self._loc(items[0]))

    def class_name(self, items: list[Token]) -> ClassName:
        raw = str(items[0])
        return ClassName(value=raw[1:], raw=raw, source=self._loc(items[0]))

    def id_name(self, items: list[Token]) -> IdSelector:
        raw = str(items[0])
        return IdSelector(value=raw[1:], raw=raw, source=self._loc(items[0]))

    def attribute(self, items: list[Token]) -> Attribute:
        return Attribute(value=str(items[0]), source=self._loc(items[0]))

    def comment(self, items: list[Token]) -> Comment:
        return Comment(value=str(items[0]), source=self._loc(items[0]))

    # ---- pseudo-classes ----

    def pseudo_args(self, items: list[Token]) -> _Arguments:
        open_token, *arguments, close_token = items
        groups: list[Selector] = []
        commas: list[str] = []
        current: list[Node] = []
        for token in arguments:
            if token.type == "COMMA":
                groups.append(Selector(nodes=current))
                commas.append(str(token))
                current = []
            elif token.type == "WORD":
                current.append(Word(value=str(token), source=self._loc(token)))
            elif token.type == "STRING":
                current.append(String(value=str(token), source=self._loc(token)))
            else:
                raw = str(token)
                current.append(
                    Separator(value=_symbol(raw), raw=raw, source=self._loc(token))
                )
        if arguments:
            groups.append(Selector(nodes=current))
        for group in groups:
            group.source = group.nodes[0].source if group.nodes else None
        return _Arguments(str(open_token), groups, commas, str(close_token))

    def pseudo(self, items: list[Any]) -> Pseudo:
        token = items[0]
        pseudo = Pseudo(value=str(token), source=self._loc(token))
        args = items[1] if len(items) > 1 and isinstance(items[1], _Arguments) else None
        if args is not None:
            pseudo.open = args.open
            pseudo.close = args.close
            pseudo.commas = args.commas
            pseudo.nodes = args.groups
            for group in args.groups:
                group.parent = pseudo
        return pseudo

    def selector_pseudo(self, items: list[Any]) -> Pseudo:
        token, open_token, *rest, close_token = items
        selectors = [item for item in rest if isinstance(item, Selector)]
        commas = [str(item) for item in rest if isinstance(item, Token)]
        return Pseudo(
            value=str(token),
            source=self._loc(token),
            nodes=selectors,
            open=str(open_token),
            close=str(close_token),
            commas=commas,
        )

    # ---- structural ----

    def compound(self, items: list[Node]) -> list[Node]:
        return items

    def selector(self, items: list[object]) -> Selector:
        nodes: list[Node] = []
        for item in items:
            if isinstance(item, Token):
                raw = str(item)
                nodes.append(
                    Combinator(value=_symbol(raw), raw=raw, source=self._loc(item))
                )
            else:
                nodes.extend(item)  # type: ignore[arg-type]
        return Selector(nodes=nodes, source=nodes[0].source)

    def start(self, items: list[object]) -> SelectorRoot:
        root = SelectorRoot()
        for item in items:
            if isinstance(item, Selector):
                item.parent = root
                root.nodes.append(item)
            elif isinstance(item, Token) and item.type == "COMMA":
                root.commas.append(str(item))
            elif isinstance(item, Token) and item.type == "LEADER":
                root.before = str(item)
            elif isinstance(item, Token) and item.type == "TRAILER":
                root.after = str(item)
        return root


@lru_cache(maxsize=None)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(encoding="utf-8"), parser="lalr", start="start")


def _text_origin(leading: str) -> SourceLocation:
    """Position of the first character after *leading*."""
    lines = leading.split("\n")
    return SourceLocation(len(lines), len(lines[-1]) + 1)


def parse_selector(text: str) -> SelectorRoot:
    """Parse a selector list into a node tree.

    Surrounding whitespace and comments are kept on the root, so ``str()`` of
    the result equals *text*.
    """
    stripped = text.strip()
    if not stripped:
        raise ParseError(f"Empty selector: {text!r}", line=1, column=1, selector=text)
    start = len(text) - len(text.lstrip())
    leading = text[:start]
    trailing = text[start + len(stripped):]
    try:
        tree = _parser().parse(stripped)
    except Exception as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        if isinstance(line, int) and isinstance(column, int) and line > 0:
            origin = add_source_locations(
                _text_origin(leading), SourceLocation(line, column)
            )
            line, column = origin.line, origin.column
        else:
            line = column = None
        raise ParseError(
            f"Invalid selector {text!r}: {e}", line=line, column=column, selector=text
        ) from e
    root = SelectorTransformer(_text_origin(leading)).transform(tree)
    root.before = leading + root.before
    root.after = root.after + trailing
    return root
