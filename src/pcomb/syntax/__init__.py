"""Cursor and combinator package.

Python 3.13+.
"""

from .cursor import Cursor, ParseResult
from .parser import (
    CombinatorParser,
    Formatter,
    Grammar,
    MatchValue,
    Parser,
    alternation,
    char_class,
    literal,
    optional,
    parse,
    parse_prefix,
    reference,
    repetition,
    sequence,
)

__all__ = [
    "CombinatorParser",
    "Cursor",
    "Formatter",
    "Grammar",
    "MatchValue",
    "ParseResult",
    "Parser",
    "alternation",
    "char_class",
    "literal",
    "optional",
    "parse",
    "parse_prefix",
    "reference",
    "repetition",
    "sequence",
]
