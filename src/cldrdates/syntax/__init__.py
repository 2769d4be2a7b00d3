"""CLDR date pattern syntax.

Exports:
    parse_pattern: Pattern text -> tuple of tokens
    PatternParser: Object wrapper around parse_pattern
    FieldToken, LiteralToken, Token: Parsed pattern elements

Python 3.13+. Zero external dependencies.
"""

from .parser import PatternParser, parse_pattern
from .tokens import FieldToken, LiteralToken, Token

__all__ = [
    "FieldToken",
    "LiteralToken",
    "PatternParser",
    "Token",
    "parse_pattern",
]
