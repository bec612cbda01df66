"""pcomb exception hierarchy with structured diagnostics.

Grammar mismatches are never exceptions: parsers return None. Everything
raised from here signals a programming error in how a grammar was built
or driven.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "CombinatorError",
    "GrammarError",
    "RecursionDepthError",
    "UnboundReferenceError",
]


class CombinatorError(Exception):
    """Base exception for all pcomb misuse errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CombinatorError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class GrammarError(CombinatorError):
    """Invalid combinator construction.

    Raised eagerly, when the combinator is built, never while matching:
    - Character class that does not compile
    - Negative or non-integer repetition minimum
    - Empty or non-string grammar rule name
    """


class UnboundReferenceError(CombinatorError, LookupError):
    """Reference invoked before its name was bound in the registry.

    Subclasses LookupError so callers treating it as a failed lookup keep
    working, while remaining distinct from a grammar mismatch.

    Attributes:
        name: Registry key that was missing
    """

    def __init__(self, message: str | Diagnostic, name: str) -> None:
        super().__init__(message)
        self.name = name


class RecursionDepthError(CombinatorError):
    """Matching exhausted the interpreter recursion limit.

    Typically caused by left recursion, where a rule reaches itself through
    references without consuming input.
    """
