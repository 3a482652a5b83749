"""Block and State: the semantic model of a compiled stylesheet."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from cssblocks.options import CssBlocksOptions, class_name


@dataclass(frozen=True)
class StateInfo:
    """A state reference as written in a ``:state(...)`` argument."""

    name: str
    group: str | None = None


@dataclass(frozen=True)
class State:
    """A named, optionally grouped, state of a block.

    Two states are equal when their block name, group and name are equal.
    Only :meth:`Block.ensure_state` creates states.
    """

    block_name: str
    name: str
    group: str | None = None

    @property
    def identity(self) -> str:
        if self.group:
            return f"{self.group} {self.name}"
        return self.name

    def class_token(self, options: CssBlocksOptions) -> str:
        return class_name(options, self.block_name, self.name, self.group)


class Block:
    """The namespace of one stylesheet, holding every state it uses."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._states: dict[tuple[str | None, str], State] = {}

    def __repr__(self) -> str:
        return f"Block({self._name!r}, states={len(self._states)})"

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[State]:
        return iter(self._states.values())

    @property
    def name(self) -> str:
        return self._name

    @property
    def states(self) -> list[State]:
        """States in the order they were first referenced."""
        return list(self._states.values())

    def class_token(self, options: CssBlocksOptions) -> str:
        return class_name(options, self._name)

    def ensure_state(self, info: StateInfo) -> State:
        """Return the state for *info*, creating it on first use."""
        key = (info.group or None, info.name)
        state = self._states.get(key)
        if state is None:
            state = State(block_name=self._name, name=info.name, group=info.group or None)
            self._states[key] = state
        return state

    def get_state(self, name: str, group: str | None = None) -> State | None:
        return self._states.get((group or None, name))

    def to_dict(self, options: CssBlocksOptions) -> dict[str, Any]:
        """Describe the block and its states with their class names."""
        return {
            "name": self._name,
            "class": self.class_token(options),
            "states": [
                {
                    "group": state.group,
                    "name": state.name,
                    "class": state.class_token(options),
                }
                for state in self._states.values()
            ],
        }
