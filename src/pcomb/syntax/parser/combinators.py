"""Combinator operators: build parsers out of other parsers.

``sequence``, ``repetition``, ``optional`` and ``alternation`` never touch
the source text themselves. They only thread cursors between child
parsers and decide which results to keep.

Backtracking is free: cursors are immutable, so an operator that gives up
simply returns None and the caller keeps using the cursor it already had.

Each operator tags its result with its MatchKind and passes it through the
optional formatter. Children contribute their own (already formatted)
values, never a raw tag.
"""

import logging
from collections.abc import Iterable
from typing import Any

from pcomb.diagnostics import ErrorTemplate, GrammarError
from pcomb.enums import ABSENT, MatchKind
from pcomb.formatters import identity
from pcomb.syntax.cursor import Cursor, ParseResult
from pcomb.syntax.parser.types import Formatter, Parser

__all__ = ["alternation", "optional", "repetition", "sequence"]

logger = logging.getLogger(__name__)


def sequence(
    parsers: Iterable[Parser[Any]], formatter: Formatter[Any] | None = None
) -> Parser[Any]:
    """Match every parser in order, each starting where the previous ended.

    Fails as a whole at the first child failure. An empty sequence matches
    the current position without consuming input.

    Args:
        parsers: Child parsers, applied in order
        formatter: Optional result formatter

    Returns:
        Parser producing ``{"sequence": [r1, r2, ...]}`` (formatted)
    """
    children = tuple(parsers)
    fmt = formatter if formatter is not None else identity

    def parse_sequence(cursor: Cursor) -> ParseResult[Any] | None:
        matches: list[Any] = []
        for child in children:
            result = child(cursor)
            if result is None:
                return None
            matches.append(result.value)
            cursor = result.cursor
        return ParseResult(fmt({MatchKind.SEQUENCE.value: matches}), cursor)

    return parse_sequence


def repetition(
    parser: Parser[Any], minimum: int = 0, formatter: Formatter[Any] | None = None
) -> Parser[Any]:
    """Match ``parser`` greedily, as many times as possible.

    Succeeds iff at least ``minimum`` applications matched. The returned
    cursor is the one after the last successful application.

    Zero-width matches:
        If an application succeeds without consuming input, every further
        application would do the same at the same position, so the greedy
        run is unbounded. Its result is kept once, the loop stops, and the
        repetition succeeds whatever ``minimum`` is.

    Args:
        parser: Child parser to repeat
        minimum: Required number of matches (0 = zero or more, 1 = one or more)
        formatter: Optional result formatter

    Returns:
        Parser producing ``{"repetition": [r1, r2, ...]}`` (formatted)

    Raises:
        GrammarError: If minimum is not a non-negative integer
    """
    if isinstance(minimum, bool) or not isinstance(minimum, int) or minimum < 0:
        raise GrammarError(ErrorTemplate.invalid_minimum(minimum))
    fmt = formatter if formatter is not None else identity

    def parse_repetition(cursor: Cursor) -> ParseResult[Any] | None:
        matches: list[Any] = []
        while True:
            result = parser(cursor)
            if result is None:
                break
            matches.append(result.value)
            if result.cursor.pos == cursor.pos:
                logger.debug(
                    "Repetition stopped on zero-width match at position %d after %d match(es)",
                    cursor.pos,
                    len(matches),
                )
                # The run is unbounded from here, so any minimum is met.
                return ParseResult(fmt({MatchKind.REPETITION.value: matches}), cursor)
            cursor = result.cursor

        if len(matches) < minimum:
            return None
        return ParseResult(fmt({MatchKind.REPETITION.value: matches}), cursor)

    return parse_repetition


def optional(parser: Parser[Any], formatter: Formatter[Any] | None = None) -> Parser[Any]:
    """Match ``parser`` zero or one time. Never fails.

    When the child fails the result holds ABSENT and the cursor is returned
    unchanged.

    Args:
        parser: Child parser
        formatter: Optional result formatter

    Returns:
        Parser producing ``{"optional": value_or_ABSENT}`` (formatted)
    """
    fmt = formatter if formatter is not None else identity

    def parse_optional(cursor: Cursor) -> ParseResult[Any]:
        result = parser(cursor)
        if result is None:
            return ParseResult(fmt({MatchKind.OPTIONAL.value: ABSENT}), cursor)
        return ParseResult(fmt({MatchKind.OPTIONAL.value: result.value}), result.cursor)

    return parse_optional


def alternation(
    parsers: Iterable[Parser[Any]], formatter: Formatter[Any] | None = None
) -> Parser[Any]:
    """Match the first parser that succeeds (ordered choice).

    Every alternative starts from the same cursor. Order is the only
    disambiguation: the first success wins even if a later alternative
    would consume more. An empty alternation never matches.

    Args:
        parsers: Alternatives, tried in order
        formatter: Optional result formatter

    Returns:
        Parser producing ``{"alternation": winning_value}`` (formatted)
    """
    choices = tuple(parsers)
    fmt = formatter if formatter is not None else identity

    def parse_alternation(cursor: Cursor) -> ParseResult[Any] | None:
        for choice in choices:
            result = choice(cursor)
            if result is not None:
                return ParseResult(fmt({MatchKind.ALTERNATION.value: result.value}), result.cursor)
        return None

    return parse_alternation
