"""Tests for the tinycss2-backed stylesheet reader."""

import pytest

from cssblocks.model.location import SourceLocation
from cssblocks.parser import AtRule, ParseError, Rule, parse_stylesheet

SOURCE = """.a { color: red; }
@media screen {
  .b:hover { color: blue }
}
@keyframes spin { from { opacity: 0 } }
"""


class TestRules:
    def test_walks_rules_in_order(self):
        ss = parse_stylesheet(SOURCE)
        assert [r.selector for r in ss.walk_rules()] == [".a", ".b:hover"]

    def test_keyframe_selectors_are_not_rules(self):
        ss = parse_stylesheet(SOURCE)
        assert all(r.selector != "from" for r in ss.rules)

    def test_rule_positions(self):
        ss = parse_stylesheet(SOURCE)
        a, b = ss.rules
        assert a.source == SourceLocation(1, 1)
        assert b.source == SourceLocation(3, 3)

    def test_whitespace_before_brace_is_not_selector(self):
        rule = parse_stylesheet(".a   { }").rules[0]
        assert rule.selector == ".a"
        assert rule.between == "   "

    def test_selector_is_exact_source_text(self):
        rule = parse_stylesheet("li:nth-child(2n+1) , a[title='{']{}").rules[0]
        assert rule.selector == "li:nth-child(2n+1) , a[title='{']"

    def test_multiline_selector(self):
        rule = parse_stylesheet("\n\n.a,\n.b { }").rules[0]
        assert rule.selector == ".a,\n.b"
        assert rule.source == SourceLocation(3, 1)

    def test_crlf_lines(self):
        rules = parse_stylesheet(".a {}\r\n.b {}").rules
        assert rules[1].source == SourceLocation(2, 1)

    def test_grouping_at_rule(self):
        ss = parse_stylesheet(SOURCE)
        media = [n for n in ss.nodes if isinstance(n, AtRule)]
        assert len(media) == 1
        assert media[0].name == "media"
        assert media[0].params == "screen"


class TestSerialization:
    def test_unmodified_round_trip(self):
        assert parse_stylesheet(SOURCE).to_css() == SOURCE

    def test_rewritten_selector_is_written(self):
        ss = parse_stylesheet(SOURCE)
        ss.rules[1].selector = ".c"
        assert "  .c { color: blue }\n" in ss.to_css()

    def test_comments_are_kept(self):
        source = "/* header */\n.a { color: red; /* note */ }\n"
        assert parse_stylesheet(source).to_css() == source

    def test_rule_to_css(self):
        rule = Rule(selector=".x", content=[], between=" ")
        assert rule.to_css() == ".x {}"


class TestErrors:
    def test_rule_without_block(self):
        with pytest.raises(ParseError) as exc_info:
            parse_stylesheet(".a { color: red; }\n.b")
        assert exc_info.value.line == 2
        assert exc_info.value.selector is None
        assert exc_info.value.location == SourceLocation(2, 1)
