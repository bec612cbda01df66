"""Enumerations for pcomb type-safe constants.

Uses StrEnum for result tags so that tagged results compare equal to
plain-string dictionaries: ``{MatchKind.LITERAL: "a"} == {"literal": "a"}``.
Sentinels are single-member enums, which gives them a stable repr,
identity semantics and a precise type for checkers.

Python 3.13+.
"""

from enum import Enum, StrEnum
from typing import Final, Literal

__all__ = [
    "ABSENT",
    "NO_MATCH",
    "Absent",
    "MatchKind",
    "NoMatch",
]


class MatchKind(StrEnum):
    """Tag naming the combinator that produced a default result.

    StrEnum provides automatic string conversion: str(MatchKind.LITERAL) == "literal"
    """

    LITERAL = "literal"
    """Exact text match: {"literal": "hello"}"""

    CHAR_CLASS = "charClass"
    """Single character from a class: {"charClass": "7"}"""

    SEQUENCE = "sequence"
    """Ordered child results: {"sequence": [...]}"""

    REPETITION = "repetition"
    """Greedy run of child results: {"repetition": [...]}"""

    OPTIONAL = "optional"
    """Child result or ABSENT: {"optional": ...}"""

    ALTERNATION = "alternation"
    """First successful alternative: {"alternation": ...}"""


class Absent(Enum):
    """Marker for an ``optional`` whose inner parser did not match."""

    ABSENT = "absent"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


class NoMatch(Enum):
    """Marker returned by ``parse`` when the input is not matched in full."""

    NO_MATCH = "no_match"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_MATCH"


ABSENT: Final[Literal[Absent.ABSENT]] = Absent.ABSENT
NO_MATCH: Final[Literal[NoMatch.NO_MATCH]] = NoMatch.NO_MATCH
