"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Grammar construction errors (invalid combinator arguments)
        2000-2999: Dispatch errors (reference lookups at match time)
        3000-3999: Matching limits (recursion depth)
    """

    # Grammar construction errors (1000-1999)
    INVALID_CHAR_CLASS = 1001
    INVALID_MINIMUM = 1002
    INVALID_RULE_NAME = 1003

    # Dispatch errors (2000-2999)
    UNBOUND_REFERENCE = 2001

    # Matching limits (3000-3999)
    RECURSION_LIMIT_EXCEEDED = 3001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1 (both are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries everything needed to
    render a misuse error for humans or tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (only for errors raised while matching)
        hint: Suggestion for fixing the error
        rule_name: Grammar rule involved in the error, if any
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    rule_name: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like the Rust compiler.

        Example output:
            error[UNBOUND_REFERENCE]: Reference 'expr' is not bound in the registry
              --> line 1, column 3
              = rule: expr
              = help: Bind 'expr' in the registry before parsing

        Location, rule and help lines appear only when the diagnostic has a
        span, rule_name or hint.

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.span is not None:
            lines.append(f"  --> line {self.span.line}, column {self.span.column}")
        if self.rule_name:
            lines.append(f"  = rule: {self.rule_name}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
