"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+.
"""

import json
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)
        color: Enable ANSI color codes (for terminal output)

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.depth_exceeded(100)
        >>> print(formatter.format(diagnostic))
        error[MAX_DEPTH_EXCEEDED]: Maximum nesting depth (100) exceeded
          = help: Flatten the value tree or raise max_depth

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        MAX_DEPTH_EXCEEDED: Maximum nesting depth (100) exceeded
    """

    output_format: OutputFormat = OutputFormat.RUST
    color: bool = False

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        severity = diagnostic.severity
        if self.color:
            color_code = "1;31" if severity == "error" else "1;33"
            severity_str = f"\033[{color_code}m{severity}\033[0m"
        else:
            severity_str = severity

        parts = [f"{severity_str}[{diagnostic.code.name}]: {diagnostic.message}"]

        if diagnostic.path:
            parts.append(f"  --> {diagnostic.path}")

        if diagnostic.received_type:
            parts.append(f"  = received: {diagnostic.received_type}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        return f"{diagnostic.code.name}: {diagnostic.message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        data: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
            "severity": diagnostic.severity,
        }
        if diagnostic.path:
            data["path"] = diagnostic.path
        if diagnostic.received_type:
            data["received_type"] = diagnostic.received_type
        if diagnostic.hint:
            data["hint"] = diagnostic.hint
        return json.dumps(data, ensure_ascii=False)
