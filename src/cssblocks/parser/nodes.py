"""Selector node tree.

A parsed selector is a :class:`SelectorRoot` holding one :class:`Selector` per
comma-separated alternative.  A selector holds simple selector nodes and
:class:`Combinator` nodes in source order.  A :class:`Pseudo` node holds its
argument groups as selectors of their own.

Every node remembers the exact text it was parsed from, so an unmodified tree
serializes back to its input unchanged.  ``source`` is the node's 1-based
position inside the selector text.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import ClassVar

from tinycss2.serializer import serialize_identifier

from cssblocks.model.location import SourceLocation


@dataclass(eq=False)
class Node:
    type: ClassVar[str] = "node"

    value: str = ""
    source: SourceLocation | None = None
    parent: Container | None = field(default=None, repr=False)

    def __str__(self) -> str:
        return self.value

    def replace_with(self, other: Node) -> None:
        """Put *other* where this node is in its parent."""
        if self.parent is None:
            raise ValueError(f"{self!r} has no parent")
        nodes = self.parent.nodes
        for index, node in enumerate(nodes):
            if node is self:
                nodes[index] = other
                other.parent = self.parent
                self.parent = None
                return
        raise ValueError(f"{self!r} is not a child of its parent")


@dataclass(eq=False)
class Container(Node):
    nodes: list = field(default_factory=list)

    def __post_init__(self) -> None:
        for node in self.nodes:
            node.parent = self

    def __iter__(self) -> Iterator[Node]:
        return iter(list(self.nodes))

    def __len__(self) -> int:
        return len(self.nodes)

    def walk(self) -> Iterator[Node]:
        """Yield every descendant, depth first, in source order."""
        for node in list(self.nodes):
            yield node
            if isinstance(node, Container):
                yield from node.walk()

    def walk_pseudos(self) -> Iterator[Pseudo]:
        for node in self.walk():
            if isinstance(node, Pseudo):
                yield node


@dataclass(eq=False)
class Tag(Node):
    type: ClassVar[str] = "tag"


@dataclass(eq=False)
class Universal(Node):
    type: ClassVar[str] = "universal"


@dataclass(eq=False)
class Nesting(Node):
    type: ClassVar[str] = "nesting"


@dataclass(eq=False)
class ClassName(Node):
    """A class selector.  ``value`` is the name without the leading dot.

    A parsed class keeps its text in ``raw``.  A class built in code has no
    ``raw`` and its name is escaped when serialized.
    """

    type: ClassVar[str] = "class"

    raw: str | None = None

    def __str__(self) -> str:
        if self.raw is not None:
            return self.raw
        return f".{serialize_identifier(self.value)}" if self.value else "."


@dataclass(eq=False)
class IdSelector(Node):
    type: ClassVar[str] = "id"

    raw: str | None = None

    def __str__(self) -> str:
        if self.raw is not None:
            return self.raw
        return f"#{self.value}"


@dataclass(eq=False)
class Attribute(Node):
    type: ClassVar[str] = "attribute"


@dataclass(eq=False)
class Combinator(Node):
    """A combinator.  ``value`` is ``" "`` for descendant, else the symbol."""

    type: ClassVar[str] = "combinator"

    raw: str = " "

    def __str__(self) -> str:
        return self.raw


@dataclass(eq=False)
class Word(Node):
    type: ClassVar[str] = "word"


@dataclass(eq=False)
class String(Node):
    type: ClassVar[str] = "string"


@dataclass(eq=False)
class Separator(Node):
    """Punctuation or whitespace between words in a pseudo-class argument."""

    type: ClassVar[str] = "separator"

    raw: str = " "

    def __str__(self) -> str:
        return self.raw


@dataclass(eq=False)
class Comment(Node):
    """A ``/* ... */`` comment inside a compound selector."""

    type: ClassVar[str] = "comment"


@dataclass(eq=False)
class Selector(Container):
    type: ClassVar[str] = "selector"

    def __str__(self) -> str:
        return "".join(str(node) for node in self.nodes)


@dataclass(eq=False)
class Pseudo(Container):
    """A pseudo-class or pseudo-element.

    ``value`` includes the colon(s), e.g. ``":state"``.  ``nodes`` holds one
    :class:`Selector` per comma-separated argument group and is empty both
    for ``:hover`` and for ``:state()``.
    """

    type: ClassVar[str] = "pseudo"

    open: str | None = None
    close: str = ")"
    commas: list[str] = field(default_factory=list)

    @property
    def has_arguments(self) -> bool:
        return self.open is not None

    def __str__(self) -> str:
        if self.open is None:
            return self.value
        parts = [self.value, self.open]
        for index, group in enumerate(self.nodes):
            if index:
                parts.append(self.commas[index - 1])
            parts.append(str(group))
        parts.append(self.close)
        return "".join(parts)


@dataclass(eq=False)
class SelectorRoot(Container):
    """All comma-separated selectors of one rule."""

    type: ClassVar[str] = "root"

    commas: list[str] = field(default_factory=list)
    before: str = ""
    after: str = ""

    def __str__(self) -> str:
        parts = [self.before]
        for index, selector in enumerate(self.nodes):
            if index:
                parts.append(self.commas[index - 1])
            parts.append(str(selector))
        parts.append(self.after)
        return "".join(parts)
