from cssblocks.parser.errors import ParseError
from cssblocks.parser.selector import parse_selector
from cssblocks.parser.stylesheet import AtRule, Rule, Stylesheet, parse_stylesheet

__all__ = [
    "ParseError",
    "parse_selector",
    "parse_stylesheet",
    "AtRule",
    "Rule",
    "Stylesheet",
]
