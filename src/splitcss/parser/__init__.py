"""Stylesheet parser: CSS text to a node tree."""

from splitcss.parser.errors import ParseError
from splitcss.parser.transformer import parse_css

__all__ = ["ParseError", "parse_css"]
