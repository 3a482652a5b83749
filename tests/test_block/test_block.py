"""Tests for the Block/State model and naming options."""

import pytest

from cssblocks.model import Block, State, StateInfo
from cssblocks.options import CssBlocksOptions, OutputMode, class_name

OPTS = CssBlocksOptions()


class TestBlock:
    def test_name_is_verbatim(self):
        assert Block("widget").name == "widget"

    def test_starts_empty(self):
        block = Block("widget")
        assert len(block) == 0
        assert block.states == []

    def test_class_token(self):
        assert Block("widget").class_token(OPTS) == "widget"

    def test_class_token_is_deterministic(self):
        assert Block("widget").class_token(OPTS) == Block("widget").class_token(OPTS)


class TestEnsureState:
    def test_creates_state(self):
        block = Block("widget")
        state = block.ensure_state(StateInfo(name="is-active"))
        assert state == State(block_name="widget", name="is-active")
        assert block.states == [state]

    def test_same_identity_returns_same_state(self):
        block = Block("widget")
        first = block.ensure_state(StateInfo(name="open"))
        second = block.ensure_state(StateInfo(name="open"))
        assert first is second
        assert len(block) == 1

    def test_group_is_part_of_identity(self):
        block = Block("widget")
        plain = block.ensure_state(StateInfo(name="dark"))
        grouped = block.ensure_state(StateInfo(name="dark", group="theme"))
        assert plain is not grouped
        assert len(block) == 2

    def test_empty_group_means_ungrouped(self):
        block = Block("widget")
        a = block.ensure_state(StateInfo(name="dark", group=""))
        b = block.ensure_state(StateInfo(name="dark"))
        assert a is b
        assert a.group is None

    def test_iteration_in_discovery_order(self):
        block = Block("widget")
        for name in ["b", "a", "c", "a"]:
            block.ensure_state(StateInfo(name=name))
        assert [s.name for s in block] == ["b", "a", "c"]

    def test_get_state(self):
        block = Block("widget")
        state = block.ensure_state(StateInfo(name="red", group="theme"))
        assert block.get_state("red", group="theme") is state
        assert block.get_state("red") is None


class TestState:
    def test_value_equality(self):
        assert State("w", "a", "g") == State("w", "a", "g")
        assert State("w", "a") != State("w", "a", "g")

    def test_identity_string(self):
        assert State("w", "open").identity == "open"
        assert State("w", "red", "theme").identity == "theme red"

    def test_class_tokens(self):
        assert State("widget", "is-active").class_token(OPTS) == "widget--is-active"
        assert State("widget", "red", "theme").class_token(OPTS) == "widget--theme-red"

    def test_immutable(self):
        state = State("w", "a")
        with pytest.raises(AttributeError):
            state.name = "b"  # type: ignore[misc]


class TestToDict:
    def test_mapping(self):
        block = Block("nav")
        block.ensure_state(StateInfo(name="open"))
        block.ensure_state(StateInfo(name="dark", group="theme"))
        assert block.to_dict(OPTS) == {
            "name": "nav",
            "class": "nav",
            "states": [
                {"group": None, "name": "open", "class": "nav--open"},
                {"group": "theme", "name": "dark", "class": "nav--theme-dark"},
            ],
        }


class TestOptions:
    def test_default_mode(self):
        assert CssBlocksOptions().output_mode is OutputMode.BEM

    def test_from_mapping(self):
        opts = CssBlocksOptions.from_mapping({"output_mode": "BEM"})
        assert opts == CssBlocksOptions()

    def test_from_empty_mapping(self):
        assert CssBlocksOptions.from_mapping({}) == CssBlocksOptions()

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="colour"):
            CssBlocksOptions.from_mapping({"colour": "red"})

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            CssBlocksOptions.from_mapping({"output_mode": "atomic"})

    def test_class_name(self):
        assert class_name(OPTS, "nav") == "nav"
        assert class_name(OPTS, "nav", "open") == "nav--open"
        assert class_name(OPTS, "nav", "dark", "theme") == "nav--theme-dark"
