"""Primitive combinators: the only parsers that consume input directly.

``literal`` matches an exact string, ``char_class`` matches one character
from a regular-expression style class. Both validate their arguments when
built, so a bad grammar fails at definition time rather than mid-parse.
"""

import re
from typing import Any

from pcomb.diagnostics import ErrorTemplate, GrammarError
from pcomb.enums import MatchKind
from pcomb.formatters import identity
from pcomb.syntax.cursor import Cursor, ParseResult
from pcomb.syntax.parser.types import Formatter, Parser

__all__ = ["char_class", "literal"]


def literal(text: str, formatter: Formatter[Any] | None = None) -> Parser[Any]:
    """Match ``text`` exactly (case-sensitive).

    An empty ``text`` always succeeds without consuming input.

    Args:
        text: String to match
        formatter: Optional result formatter

    Returns:
        Parser producing ``{"literal": text}`` (formatted)

    Raises:
        TypeError: If text is not a string

    Example:
        >>> hello = literal("hello")
        >>> hello(Cursor("hello world", 0)).cursor.pos
        5
        >>> hello(Cursor("world", 0)) is None
        True
    """
    if not isinstance(text, str):
        msg = f"literal() expects a str, got {type(text).__name__}"
        raise TypeError(msg)
    fmt = formatter if formatter is not None else identity
    size = len(text)

    def parse_literal(cursor: Cursor) -> ParseResult[Any] | None:
        if cursor.peek(size) != text:
            return None
        return ParseResult(fmt({MatchKind.LITERAL.value: text}), cursor.advance(size))

    return parse_literal


def _unescaped_bracket(pattern: str) -> int:
    """Offset of the first ``[`` or ``]`` not preceded by a backslash, or -1."""
    escaped = False
    for offset, ch in enumerate(pattern):
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch in "[]":
            return offset
    return -1


def char_class(pattern: str, formatter: Formatter[Any] | None = None) -> Parser[Any]:
    """Match a single character belonging to a character class.

    ``pattern`` is the body of a regular-expression bracket expression,
    without the brackets: ``"0-9"``, ``"a-zA-Z_"``, ``"^\\n"``.
    Literal brackets inside the class must be escaped (``"\\[\\]"``).
    The class is compiled once, here.

    At EOF the peeked chunk is empty and never matches.

    Args:
        pattern: Character class body
        formatter: Optional result formatter

    Returns:
        Parser producing ``{"charClass": ch}`` (formatted)

    Raises:
        TypeError: If pattern is not a string
        GrammarError: If the class is empty, contains an unescaped bracket
            or does not compile

    Example:
        >>> digit = char_class("0-9")
        >>> digit(Cursor("7", 0)).value
        {'charClass': '7'}
        >>> digit(Cursor("", 0)) is None
        True
    """
    if not isinstance(pattern, str):
        msg = f"char_class() expects a str, got {type(pattern).__name__}"
        raise TypeError(msg)
    if not pattern:
        raise GrammarError(ErrorTemplate.invalid_char_class(pattern, "empty class"))
    offset = _unescaped_bracket(pattern)
    if offset >= 0:
        reason = f"unescaped '{pattern[offset]}' at offset {offset}"
        raise GrammarError(ErrorTemplate.invalid_char_class(pattern, reason))
    try:
        compiled = re.compile(f"[{pattern}]")
    except re.error as e:
        raise GrammarError(ErrorTemplate.invalid_char_class(pattern, str(e))) from e
    fmt = formatter if formatter is not None else identity

    def parse_char_class(cursor: Cursor) -> ParseResult[Any] | None:
        chunk = cursor.peek(1)
        if not chunk or compiled.fullmatch(chunk) is None:
            return None
        return ParseResult(fmt({MatchKind.CHAR_CLASS.value: chunk}), cursor.advance(1))

    return parse_char_class
