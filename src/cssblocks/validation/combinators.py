"""Rejects selectors that combine distinct states across combinators."""

from __future__ import annotations

from cssblocks.errors import invalid_syntax
from cssblocks.model.location import selector_source_location
from cssblocks.parser.nodes import Combinator, Pseudo, Selector
from cssblocks.parser.stylesheet import Rule
from cssblocks.validation.state_args import STATE_PSEUDO, parse_state


def assert_valid_combinators(rule: Rule, selector: Selector) -> None:
    """Raise if *selector* uses a combinator and more than one distinct state.

    Only the top-level nodes of the selector are considered.  Repeating one
    state across a combinator is fine, as are several states on a single
    compound selector.
    """
    states: set[str] = set()
    combinators: set[str] = set()
    for node in selector.nodes:
        if isinstance(node, Pseudo) and node.value == STATE_PSEUDO:
            info = parse_state(rule, node)
            if info.group:
                states.add(f"{info.group} {info.name}")
            else:
                states.add(info.name)
        elif isinstance(node, Combinator):
            combinators.add(node.value)
    if combinators and len(states) > 1:
        first = selector.nodes[0] if selector.nodes else selector
        raise invalid_syntax(
            f"Distinct states cannot be combined: {rule.selector}",
            selector_source_location(rule, first),
        )
