"""Parser entry point.

This module provides the CombinatorParser class that drives a combinator
against a complete source string.

Architecture:
    The source is wrapped in a :class:`~pcomb.syntax.cursor.Cursor` at
    offset 0 and handed to the top-level parser. Combinators (in
    :mod:`~pcomb.syntax.parser.primitives` and
    :mod:`~pcomb.syntax.parser.combinators`) return a
    :class:`~pcomb.syntax.cursor.ParseResult` or None.

Totality:
    A parse only succeeds when the returned cursor sits at end of input.
    A parser that matches a prefix and leaves trailing text is a failure,
    reported as NO_MATCH.

Security:
    Includes a configurable input size limit. Runaway recursion (usually a
    left-recursive grammar) is reported as RecursionDepthError rather than
    leaking a bare RecursionError.
"""

import logging
import sys
from typing import Any

from pcomb.constants import MAX_SOURCE_SIZE
from pcomb.diagnostics import ErrorTemplate, RecursionDepthError
from pcomb.enums import NO_MATCH, NoMatch
from pcomb.syntax.cursor import Cursor, ParseResult
from pcomb.syntax.parser.types import Parser

__all__ = ["CombinatorParser", "parse", "parse_prefix"]

logger = logging.getLogger(__name__)


class CombinatorParser:
    """Drives combinators over whole inputs.

    Design:
    - Stateless between calls: the same instance (and the same combinators)
      can parse any number of inputs, from any number of threads
    - Mismatch is a value (NO_MATCH), misuse is an exception

    Attributes:
        max_source_size: Maximum allowed source size in characters (default: 10 MiB)
    """

    __slots__ = ("_max_source_size",)

    def __init__(self, *, max_source_size: int | None = None) -> None:
        """Initialize parser with an optional size limit.

        Args:
            max_source_size: Maximum source size in characters (default: 10 MiB).
                            Set to 0 to disable the size limit (not recommended).
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    def parse_prefix(self, parser: Parser[Any], source: str) -> ParseResult[Any] | None:
        """Apply ``parser`` at offset 0 without requiring full consumption.

        Args:
            parser: Top-level parser
            source: Input text

        Returns:
            The raw ParseResult, or None on mismatch

        Raises:
            TypeError: If source is not a string
            ValueError: If source exceeds max_source_size
            RecursionDepthError: If matching exhausts the recursion limit
            UnboundReferenceError: If a reference runs before its rule is bound
        """
        if not isinstance(source, str):
            msg = f"source must be a str, got {type(source).__name__}"
            raise TypeError(msg)

        if self._max_source_size > 0 and len(source) > self._max_source_size:
            msg = (
                f"Source size ({len(source):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in CombinatorParser constructor to increase limit."
            )
            raise ValueError(msg)

        cursor = Cursor(source, 0)
        try:
            return parser(cursor)
        except RecursionError as e:
            limit = sys.getrecursionlimit()
            logger.warning(
                "Recursion limit (%d) hit while parsing %d characters. "
                "The grammar is probably left-recursive.",
                limit,
                len(source),
            )
            raise RecursionDepthError(
                ErrorTemplate.recursion_limit_exceeded(limit, cursor.to_span())
            ) from e

    def parse(self, parser: Parser[Any], source: str) -> Any | NoMatch:
        """Match ``source`` in full.

        Args:
            parser: Top-level parser
            source: Input text

        Returns:
            The (formatted) value of the top-level parser, or NO_MATCH when
            the parser fails or leaves input unconsumed

        Raises:
            TypeError: If source is not a string
            ValueError: If source exceeds max_source_size
            RecursionDepthError: If matching exhausts the recursion limit
            UnboundReferenceError: If a reference runs before its rule is bound

        Example:
            >>> from pcomb import literal
            >>> CombinatorParser().parse(literal("hi"), "hi")
            {'literal': 'hi'}
            >>> CombinatorParser().parse(literal("hi"), "hi!")
            NO_MATCH
        """
        result = self.parse_prefix(parser, source)
        if result is None:
            return NO_MATCH
        if not result.cursor.is_eof:
            logger.debug(
                "Partial match rejected: consumed %d of %d characters",
                result.cursor.pos,
                len(source),
            )
            return NO_MATCH
        return result.value


_DEFAULT_PARSER = CombinatorParser()


def parse(parser: Parser[Any], source: str) -> Any | NoMatch:
    """Match ``source`` in full with default settings.

    Convenience function for CombinatorParser().parse().

    Example:
        >>> from pcomb import char_class, repetition
        >>> parse(repetition(char_class("0-9"), 2), "1")
        NO_MATCH
    """
    return _DEFAULT_PARSER.parse(parser, source)


def parse_prefix(parser: Parser[Any], source: str) -> ParseResult[Any] | None:
    """Apply ``parser`` at offset 0 with default settings, allowing trailing input."""
    return _DEFAULT_PARSER.parse_prefix(parser, source)
