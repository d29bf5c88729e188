"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Serialization errors (value trees outside the writer's domain)
        2000-2999: Output errors (writing generated grammars)
        3000-3999: Environment errors (missing optional tooling)
    """

    # Serialization errors (1000-1999)
    UNSUPPORTED_VALUE = 1001
    CYCLIC_VALUE = 1002
    MAX_DEPTH_EXCEEDED = 1003

    # Output errors (2000-2999)
    WRITE_FAILED = 2001

    # Environment errors (3000-3999)
    LOCALE_UNKNOWN = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        path: Location inside the value tree or on disk, if known
        received_type: Actual type received (serialization errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    path: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[UNSUPPORTED_VALUE]: Unsupported value kind 'set'
              --> strings.patterns[3]
              = received: set
              = help: Convert the value to a mapping, sequence, string, number, boolean or None

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
