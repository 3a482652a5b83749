"""Tests for :state(...) argument decoding."""

import pytest

from cssblocks.errors import CssBlocksError, ErrorKind
from cssblocks.model import SourceLocation, StateInfo
from cssblocks.parser import parse_selector, parse_stylesheet
from cssblocks.validation import STATE_PSEUDO, parse_state


def _state_of(css: str) -> StateInfo:
    rule = parse_stylesheet(css).rules[0]
    pseudo = next(p for p in parse_selector(rule.selector).walk_pseudos() if p.value == STATE_PSEUDO)
    return parse_state(rule, pseudo)


class TestValidArguments:
    def test_ungrouped(self):
        assert _state_of(".a:state(is-active) {}") == StateInfo(name="is-active")

    def test_grouped(self):
        assert _state_of(".a:state(theme red) {}") == StateInfo(name="red", group="theme")

    def test_whitespace_is_trimmed(self):
        assert _state_of(".a:state(  open  ) {}") == StateInfo(name="open")

    def test_separator_content_is_ignored(self):
        dotted = _state_of(".a:state(a.b) {}")
        spaced = _state_of(".a:state( a . b ) {}")
        arrow = _state_of(".a:state(a>b) {}")
        assert dotted == spaced == arrow == StateInfo(name="b", group="a")

    def test_comments_are_ignored(self):
        assert _state_of(".a:state(/* x */ open /* y */) {}") == StateInfo(name="open")
        assert _state_of(".a:state(theme/* x */dark) {}") == StateInfo(name="dark", group="theme")


class TestInvalidArguments:
    @pytest.mark.parametrize("css", [".a:state {}", ".a:state() {}", ".a:state( ) {}"])
    def test_missing_name(self, css):
        with pytest.raises(CssBlocksError) as exc_info:
            _state_of(css)
        assert exc_info.value.kind is ErrorKind.INVALID_SYNTAX
        assert exc_info.value.message == ":state name is missing"

    def test_two_arguments(self):
        with pytest.raises(CssBlocksError) as exc_info:
            _state_of(".a:state(a, b) {}")
        assert exc_info.value.kind is ErrorKind.INVALID_SYNTAX
        assert exc_info.value.message == "Invalid state declaration: :state(a, b)"

    @pytest.mark.parametrize("argument", ["a b c", "a.b.c", ".a", "a ."])
    def test_wrong_shape(self, argument):
        with pytest.raises(CssBlocksError) as exc_info:
            _state_of(f".x:state({argument}) {{}}")
        assert exc_info.value.message.startswith("Invalid state declaration:")

    def test_error_location(self):
        with pytest.raises(CssBlocksError) as exc_info:
            _state_of("\n\n  .a:state() {}")
        assert exc_info.value.location == SourceLocation(3, 5)

    def test_error_location_on_later_selector_line(self):
        with pytest.raises(CssBlocksError) as exc_info:
            _state_of("  .a,\n.b:state(x, y) {}")
        assert exc_info.value.location == SourceLocation(2, 3)
