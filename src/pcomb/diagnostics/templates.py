"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    Misuse errors are created here rather than with f-strings inside
    exception constructors. This gives:
        - Testable error messages
        - Consistent formatting
        - Documentation of all misuse cases in one place
    """

    @staticmethod
    def unbound_reference(name: str, span: SourceSpan | None = None) -> Diagnostic:
        """Reference invoked before its name was bound.

        Args:
            name: Registry key the reference dispatches to
            span: Position where the reference was invoked, if known

        Returns:
            Diagnostic for UNBOUND_REFERENCE
        """
        msg = f"Reference '{name}' is not bound in the registry"
        return Diagnostic(
            code=DiagnosticCode.UNBOUND_REFERENCE,
            message=msg,
            span=span,
            hint=f"Bind '{name}' in the registry before parsing",
            rule_name=name,
        )

    @staticmethod
    def invalid_char_class(pattern: str, reason: str) -> Diagnostic:
        """Character class pattern could not be compiled.

        Args:
            pattern: The class body as given (without brackets)
            reason: Compiler error text

        Returns:
            Diagnostic for INVALID_CHAR_CLASS
        """
        msg = f"Invalid character class '[{pattern}]': {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CHAR_CLASS,
            message=msg,
            hint="Use bracket syntax without the brackets, e.g. 'a-zA-Z0-9_'",
        )

    @staticmethod
    def invalid_minimum(minimum: object) -> Diagnostic:
        """Repetition minimum is not a non-negative integer.

        Args:
            minimum: The rejected value

        Returns:
            Diagnostic for INVALID_MINIMUM
        """
        msg = f"Repetition minimum must be a non-negative integer, got {minimum!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_MINIMUM,
            message=msg,
            hint="Use 0 for zero-or-more and 1 for one-or-more",
        )

    @staticmethod
    def invalid_rule_name(name: object) -> Diagnostic:
        """Grammar rule name is not a non-empty string.

        Args:
            name: The rejected key

        Returns:
            Diagnostic for INVALID_RULE_NAME
        """
        msg = f"Grammar rule names must be non-empty strings, got {name!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_RULE_NAME,
            message=msg,
        )

    @staticmethod
    def recursion_limit_exceeded(limit: int, span: SourceSpan | None = None) -> Diagnostic:
        """Matching exhausted the interpreter recursion limit.

        Args:
            limit: Value of sys.getrecursionlimit() at the time
            span: Start of the parse that failed

        Returns:
            Diagnostic for RECURSION_LIMIT_EXCEEDED
        """
        msg = f"Grammar recursion exceeded the interpreter limit ({limit} frames)"
        return Diagnostic(
            code=DiagnosticCode.RECURSION_LIMIT_EXCEEDED,
            message=msg,
            span=span,
            hint=(
                "Check for left recursion (a rule that reaches itself without "
                "consuming input) or raise sys.setrecursionlimit() for deeply "
                "nested input"
            ),
        )
