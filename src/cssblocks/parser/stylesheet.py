"""Stylesheet reader built on tinycss2.

Rules keep their selector exactly as written in the file, together with the
1-based position at which they start.  Rule bodies and anything the compiler does
not look at are kept as tinycss2 nodes and written back unchanged.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Union

import tinycss2
from tinycss2.serializer import serialize_identifier

from cssblocks.model.location import SourceLocation
from cssblocks.parser.errors import ParseError

__all__ = ["AtRule", "Rule", "Stylesheet", "parse_stylesheet"]

# At-rules whose block holds style rules that may use block selectors.
GROUPING_AT_RULES = frozenset({
    "media",
    "supports",
    "document",
    "-moz-document",
    "layer",
    "container",
    "scope",
    "starting-style",
})


@dataclass
class Rule:
    """A style rule.  ``selector`` may be reassigned to rewrite the rule."""

    selector: str
    content: list[Any]
    source: SourceLocation | None = None
    between: str = ""

    def to_css(self) -> str:
        return f"{self.selector}{self.between}{{{tinycss2.serialize(self.content)}}}"


@dataclass
class AtRule:
    """A grouping at-rule such as ``@media`` whose rules are parsed too."""

    at_keyword: str
    prelude: list[Any]
    nodes: list[StylesheetNode] = field(default_factory=list)
    source: SourceLocation | None = None

    @property
    def name(self) -> str:
        return self.at_keyword.lower()

    @property
    def params(self) -> str:
        return tinycss2.serialize(self.prelude).strip()

    def to_css(self) -> str:
        body = "".join(_node_css(node) for node in self.nodes)
        return (
            f"@{serialize_identifier(self.at_keyword)}"
            f"{tinycss2.serialize(self.prelude)}{{{body}}}"
        )


StylesheetNode = Union[Rule, AtRule, Any]


@dataclass
class Stylesheet:
    """Top-level nodes of a stylesheet in source order."""

    nodes: list[StylesheetNode] = field(default_factory=list)

    def walk_rules(self) -> Iterator[Rule]:
        """Yield every style rule, including those nested in grouping at-rules."""
        yield from _walk_rules(self.nodes)

    @property
    def rules(self) -> list[Rule]:
        return list(self.walk_rules())

    def to_css(self) -> str:
        return "".join(_node_css(node) for node in self.nodes)


def _walk_rules(nodes: list[StylesheetNode]) -> Iterator[Rule]:
    for node in nodes:
        if isinstance(node, Rule):
            yield node
        elif isinstance(node, AtRule):
            yield from _walk_rules(node.nodes)


def _node_css(node: StylesheetNode) -> str:
    if isinstance(node, (Rule, AtRule)):
        return node.to_css()
    return node.serialize()


def _location(node: Any) -> SourceLocation:
    return SourceLocation(node.source_line, node.source_column)


# One step of a prelude scan: an escape, a string, a comment or one character.
_PRELUDE_STEP = re.compile(
    r"""\\.|"(?:[^"\\\n]|\\.)*"|'(?:[^'\\\n]|\\.)*'|/\*.*?\*/|[^{]""",
    re.DOTALL,
)


class _SourceText:
    """Stylesheet text addressable by tinycss2's 1-based line/column."""

    def __init__(self, text: str) -> None:
        self.text = text
        self._line_starts = [0]
        self._line_starts.extend(m.end() for m in re.finditer("\n", text))

    def offset(self, line: int, column: int) -> int:
        return self._line_starts[line - 1] + column - 1

    def prelude(self, node: Any) -> str:
        """Return the exact text from *node*'s start up to its ``{``."""
        start = pos = self.offset(node.source_line, node.source_column)
        while pos < len(self.text) and self.text[pos] != "{":
            match = _PRELUDE_STEP.match(self.text, pos)
            pos = match.end() if match else pos + 1
        return self.text[start:pos]


def _convert(nodes: list[Any], text: _SourceText) -> list[StylesheetNode]:
    """Wrap tinycss2 rule nodes, raising on tinycss2 parse errors."""
    converted: list[StylesheetNode] = []
    for node in nodes:
        if node.type == "error":
            raise ParseError(
                f"Invalid stylesheet: {node.message}",
                line=node.source_line,
                column=node.source_column,
            )
        if node.type == "qualified-rule":
            prelude = text.prelude(node)
            selector = prelude.rstrip()
            converted.append(
                Rule(
                    selector=selector,
                    content=node.content,
                    source=_location(node),
                    between=prelude[len(selector):],
                )
            )
        elif (
            node.type == "at-rule"
            and node.content is not None
            and node.lower_at_keyword in GROUPING_AT_RULES
        ):
            children = tinycss2.parse_rule_list(
                node.content, skip_comments=False, skip_whitespace=False
            )
            converted.append(
                AtRule(
                    at_keyword=node.at_keyword,
                    prelude=node.prelude,
                    nodes=_convert(children, text),
                    source=_location(node),
                )
            )
        else:
            converted.append(node)
    return converted


def _preprocess(source: str) -> str:
    # Same newline and NUL handling as tinycss2, so its positions index this text.
    return (
        source.replace("\0", "\ufffd")
        .replace("\r\n", "\n")
        .replace("\r", "\n")
        .replace("\f", "\n")
    )


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse stylesheet text into a :class:`Stylesheet`."""
    text = _preprocess(source)
    nodes = tinycss2.parse_stylesheet(text, skip_comments=False, skip_whitespace=False)
    return Stylesheet(nodes=_convert(nodes, _SourceText(text)))
