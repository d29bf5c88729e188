"""Diagnostic system for quoterules errors.

Provides structured error diagnostics with codes, hints, and locations.
Inspired by Rust compiler diagnostics.

Python 3.13+.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CyclicValueError,
    DepthLimitExceededError,
    GrammarWriteError,
    LocaleNotSupportedError,
    QuoteRulesError,
    SerializationError,
    UnsupportedValueError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CyclicValueError",
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "GrammarWriteError",
    "LocaleNotSupportedError",
    "OutputFormat",
    "QuoteRulesError",
    "SerializationError",
    "UnsupportedValueError",
]
