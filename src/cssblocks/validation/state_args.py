"""Decoding of ``:state(...)`` arguments into :class:`StateInfo` values."""

from __future__ import annotations

from cssblocks.errors import invalid_syntax
from cssblocks.model.block import StateInfo
from cssblocks.model.location import selector_source_location
from cssblocks.parser.nodes import Pseudo
from cssblocks.parser.stylesheet import Rule

BLOCK_PSEUDO = ":block"
STATE_PSEUDO = ":state"


def parse_state(rule: Rule, pseudo: Pseudo) -> StateInfo:
    """Read the state referenced by a ``:state`` pseudo-class.

    ``:state(name)`` names an ungrouped state and ``:state(group name)`` a
    grouped one.  The node between group and name is not inspected.
    """
    if len(pseudo.nodes) == 0:
        raise invalid_syntax(
            f"{STATE_PSEUDO} name is missing", selector_source_location(rule, pseudo)
        )
    if len(pseudo.nodes) != 1:
        # :state(foo, bar)
        raise invalid_syntax(
            f"Invalid state declaration: {pseudo}", selector_source_location(rule, pseudo)
        )

    argument = pseudo.nodes[0].nodes
    if len(argument) == 3:
        return StateInfo(group=argument[0].value.strip(), name=argument[2].value.strip())
    if len(argument) == 1:
        return StateInfo(name=argument[0].value.strip())
    raise invalid_syntax(
        f"Invalid state declaration: {pseudo}", selector_source_location(rule, pseudo)
    )
