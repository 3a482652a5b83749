"""Source locations and the composition of nested text positions.

Positions are 1-based ``(line, column)`` pairs.  A selector is parsed on its
own, so nodes inside it only know where they sit within the selector text;
composing that with the rule's position in the stylesheet yields the real
position in the file.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class SourceLocation:
    """A position in a source file.

    ``line`` and ``column`` are ``None`` when only the file is known.
    """

    line: int | None = None
    column: int | None = None
    filename: str | None = None

    def __str__(self) -> str:
        parts = [self.filename or "<unknown>"]
        if self.line is not None:
            parts.append(str(self.line))
            if self.column is not None:
                parts.append(str(self.column))
        return ":".join(parts)


def add_source_locations(*locations: SourceLocation) -> SourceLocation:
    """Compose positions left to right into one absolute position.

    Each location is taken relative to a text that starts at the position
    accumulated so far.  An offset on line 1 only shifts the column; an offset
    on a later line moves down and keeps its own column.
    """
    if not locations:
        raise ValueError("at least one location is required")
    acc = SourceLocation(locations[0].line, locations[0].column)
    for offset in locations[1:]:
        if offset.line == 1:
            acc = SourceLocation(acc.line, acc.column + offset.column - 1)
        else:
            acc = SourceLocation(acc.line + offset.line - 1, offset.column)
    return acc


def selector_source_location(rule: Any, node: Any) -> SourceLocation | None:
    """Return the file position of *node*, a node inside *rule*'s selector.

    Returns ``None`` if either the rule or the node has no position.
    """
    rule_start = getattr(rule, "source", None)
    node_start = getattr(node, "source", None)
    if rule_start is None or node_start is None:
        return None
    if rule_start.line is None or node_start.line is None:
        return None
    return add_source_locations(rule_start, node_start)
