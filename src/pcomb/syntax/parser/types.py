"""Type aliases shared by all combinators.

A parser is any callable from Cursor to ``ParseResult[T] | None``. None is
the grammar-mismatch signal; there is no exception for it.

Python 3.13+.
"""

from collections.abc import Callable
from typing import Any

from pcomb.syntax.cursor import Cursor, ParseResult

__all__ = ["Formatter", "MatchValue", "Parser"]

type Parser[T] = Callable[[Cursor], ParseResult[T] | None]

# Default result of every tagging combinator: a one-key mapping from the
# MatchKind tag to the payload.
type MatchValue = dict[str, Any]

type Formatter[T] = Callable[[Any], T]
