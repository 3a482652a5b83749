"""Compiler options and the class naming strategy."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping


class OutputMode(Enum):
    """How block and state identities become class names."""

    BEM = "BEM"


@dataclass(frozen=True)
class CssBlocksOptions:
    output_mode: OutputMode = OutputMode.BEM

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> CssBlocksOptions:
        """Build options from a plain mapping, e.g. a decoded JSON file."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown option(s): {', '.join(unknown)}")
        kwargs: dict[str, Any] = dict(data)
        if "output_mode" in kwargs and not isinstance(kwargs["output_mode"], OutputMode):
            kwargs["output_mode"] = OutputMode(kwargs["output_mode"])
        return cls(**kwargs)


def class_name(
    options: CssBlocksOptions,
    block_name: str,
    state_name: str | None = None,
    group: str | None = None,
) -> str:
    """Return the class name for a block, or for one of its states.

    BEM mode produces ``block``, ``block--state`` and ``block--group-state``.
    """
    if options.output_mode is OutputMode.BEM:
        if state_name is None:
            return block_name
        if group:
            return f"{block_name}--{group}-{state_name}"
        return f"{block_name}--{state_name}"
    raise ValueError(f"Unsupported output mode: {options.output_mode!r}")
