"""Diagnostic system for pcomb misuse errors.

Provides structured error diagnostics with codes, spans and hints,
rendered in the style of Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    CombinatorError,
    GrammarError,
    RecursionDepthError,
    UnboundReferenceError,
)
from .templates import ErrorTemplate

__all__ = [
    "CombinatorError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "GrammarError",
    "RecursionDepthError",
    "SourceSpan",
    "UnboundReferenceError",
]
