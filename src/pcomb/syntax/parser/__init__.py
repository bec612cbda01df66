"""Combinator parser module.

This module provides the combinators and the entry point that drives them,
organized into focused submodules.

Module Organization:
- core.py: CombinatorParser class and parse() entry point
- primitives.py: Input-consuming combinators (literal, char_class)
- combinators.py: Composition operators (sequence, repetition, optional, alternation)
- reference.py: Lazy references and the Grammar registry
- types.py: Parser, Formatter and MatchValue type aliases
"""

from pcomb.syntax.parser.combinators import alternation, optional, repetition, sequence
from pcomb.syntax.parser.core import CombinatorParser, parse, parse_prefix
from pcomb.syntax.parser.primitives import char_class, literal
from pcomb.syntax.parser.reference import Grammar, reference
from pcomb.syntax.parser.types import Formatter, MatchValue, Parser

__all__ = [
    "CombinatorParser",
    "Formatter",
    "Grammar",
    "MatchValue",
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
