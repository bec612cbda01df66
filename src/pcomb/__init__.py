"""pcomb - a minimal parser-combinator engine.

Small grammars (numbers, identifiers, simple recursive languages) are
written directly in Python by composing parsers. No grammar compiler, no
generated code.

Public API:
    literal, char_class - Combinators that consume input
    sequence, repetition, optional, alternation - Composition operators
    reference, Grammar - Lazy references for recursive grammars
    parse - Match a whole string; returns the result or NO_MATCH
    parse_prefix - Match a prefix; returns ParseResult or None
    Cursor, ParseResult - Immutable parsing state
    ABSENT - Marker for an unmatched optional
    NO_MATCH - Marker for a failed parse

Exceptions:
    CombinatorError - Base exception class
    GrammarError - Invalid combinator construction
    UnboundReferenceError - Reference invoked before its rule was bound
    RecursionDepthError - Grammar recursion exhausted the interpreter stack

Submodules:
    pcomb.formatters - Formatters for the default tagged result shape
    pcomb.diagnostics - Diagnostic codes, templates and formatting
"""

from .diagnostics import (
    CombinatorError,
    GrammarError,
    RecursionDepthError,
    UnboundReferenceError,
)
from .enums import ABSENT, NO_MATCH, MatchKind
from .syntax import (
    CombinatorParser,
    Cursor,
    Grammar,
    ParseResult,
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

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("pcomb")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ABSENT",
    "NO_MATCH",
    "CombinatorError",
    "CombinatorParser",
    "Cursor",
    "Grammar",
    "GrammarError",
    "MatchKind",
    "ParseResult",
    "Parser",
    "RecursionDepthError",
    "UnboundReferenceError",
    "__version__",
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
