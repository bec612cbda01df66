"""Lazy references and the grammar registry.

Combinators are built eagerly, so a rule that mentions itself (or a rule
defined further down) cannot hold the other parser directly. ``reference``
instead holds a registry and a name, and resolves the name every time it
is invoked:

    >>> rules = {}
    >>> digits = reference(rules, "digits")      # not bound yet: fine
    >>> rules["digits"] = repetition(char_class("0-9"), 1)
    >>> digits(Cursor("42", 0)).cursor.pos
    2

A name that is still unbound when the reference runs (missing, or bound to
a None placeholder) is a construction bug, reported as
UnboundReferenceError, never as a mismatch.

Grammar:
    ``Grammar`` is a ready-made registry that also remembers which names
    were referenced, so unbound rules can be listed before any parsing.
"""

import logging
from collections.abc import Callable, Iterator, Mapping, MutableMapping
from typing import Any

from pcomb.diagnostics import ErrorTemplate, GrammarError, UnboundReferenceError
from pcomb.syntax.cursor import Cursor, ParseResult
from pcomb.syntax.parser.types import Parser

__all__ = ["Grammar", "reference"]

logger = logging.getLogger(__name__)


def reference(registry: Mapping[str, Parser[Any] | None], name: str) -> Parser[Any]:
    """Parser that dispatches to ``registry[name]`` at call time.

    The result of the target parser is returned unmodified; a reference
    adds no tag of its own.

    Args:
        registry: Mapping owned by the grammar author
        name: Key to look up when invoked

    Returns:
        Transparent parser delegating to the bound rule

    Raises:
        UnboundReferenceError: When invoked while ``name`` is missing or
            bound to None
    """

    def parse_reference(cursor: Cursor) -> ParseResult[Any] | None:
        target = registry.get(name)
        if target is None:
            raise UnboundReferenceError(
                ErrorTemplate.unbound_reference(name, cursor.to_span()), name
            )
        return target(cursor)

    return parse_reference


def _check_rule_name(name: object) -> None:
    if not isinstance(name, str) or not name:
        raise GrammarError(ErrorTemplate.invalid_rule_name(name))


class Grammar(MutableMapping[str, Parser[Any]]):
    """Named rule registry for recursive grammars.

    Behaves like a dict of parsers, plus:
        - ref(name): lazy reference into this grammar
        - rule(name): binder usable as a decorator for hand-written parsers
        - unbound(): names referenced but never bound

    Example:
        >>> g = Grammar(name="numbers")
        >>> number = g.ref("number")
        >>> g.unbound()
        ['number']
        >>> g["number"] = repetition(char_class("0-9"), 1)
        >>> g.unbound()
        []

    Thread Safety:
        Binding rules is not synchronized. Bind everything first, then
        parse from as many threads as needed.
    """

    __slots__ = ("_name", "_referenced", "_rules")

    def __init__(
        self,
        rules: Mapping[str, Parser[Any]] | None = None,
        *,
        name: str = "grammar",
    ) -> None:
        """Initialize grammar.

        Args:
            rules: Initial rule bindings
            name: Label used in log messages
        """
        self._name = name
        self._rules: dict[str, Parser[Any]] = {}
        self._referenced: set[str] = set()
        if rules:
            self.update(rules)

    @property
    def name(self) -> str:
        """Label used in log messages."""
        return self._name

    def __getitem__(self, key: str) -> Parser[Any]:
        return self._rules[key]

    def __setitem__(self, key: str, value: Parser[Any]) -> None:
        _check_rule_name(key)
        if not callable(value):
            msg = f"Rule '{key}' must be bound to a parser callable, got {type(value).__name__}"
            raise TypeError(msg)
        if key in self._rules:
            logger.debug("Grammar %s: rebound rule '%s'", self._name, key)
        else:
            logger.debug("Grammar %s: bound rule '%s'", self._name, key)
        self._rules[key] = value

    def __delitem__(self, key: str) -> None:
        del self._rules[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"Grammar(name={self._name!r}, rules={sorted(self._rules)!r})"

    def ref(self, name: str) -> Parser[Any]:
        """Lazy reference to rule ``name`` of this grammar."""
        _check_rule_name(name)
        self._referenced.add(name)
        return reference(self, name)

    def rule(self, name: str) -> Callable[[Parser[Any]], Parser[Any]]:
        """Return a binder that stores its argument under ``name``.

        Example:
            >>> g = Grammar()
            >>> @g.rule("anything")
            ... def anything(cursor):
            ...     return ParseResult(cursor.peek(1), cursor.advance())
            >>> "anything" in g
            True
        """

        def bind(parser: Parser[Any]) -> Parser[Any]:
            self[name] = parser
            return parser

        return bind

    def unbound(self) -> list[str]:
        """Names passed to ref() that have no binding, sorted."""
        return sorted(self._referenced - self._rules.keys())
