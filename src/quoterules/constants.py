"""Shared constants for quoterules.

This module provides centralized configuration constants used across the
grammar and writer packages. Placing constants here avoids circular imports
and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for serialization
- Layout: Indentation of block-rendered values
- Grammar: Defaults and nested-rule references for generated rules

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Layout
    "INDENT_WIDTH",
    # Grammar defaults
    "DEFAULT_SCOPE_SUFFIX",
    "DEFAULT_LOCALE",
    "MARKER_COUNT",
    # Nested rule references
    "STRING_ESCAPES_INCLUDE",
    "EMBEDDED_EXPRESSION_INCLUDE",
    "EMBEDDED_FORMAT_INCLUDE",
    "EMBEDDED_PLACEHOLDER_INCLUDE",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting depth accepted by the block writer.
# Generated grammars nest five levels deep; 100 levels is malformed input.
MAX_DEPTH: int = 100

# ============================================================================
# LAYOUT
# ============================================================================

# Spaces per nesting level in block-rendered output.
INDENT_WIDTH: int = 2

# ============================================================================
# GRAMMAR DEFAULTS
# ============================================================================

# Language suffix appended to every scope name (string.quoted.single.<suffix>).
DEFAULT_SCOPE_SUFFIX: str = "hitori"

# Locale used for natural-language lists in rule descriptions.
DEFAULT_LOCALE: str = "en"

# Number of marker categories. Upper bound for subset sizes.
MARKER_COUNT: int = 4

# ============================================================================
# NESTED RULE REFERENCES
# ============================================================================

STRING_ESCAPES_INCLUDE: str = "#string-escapes"
EMBEDDED_EXPRESSION_INCLUDE: str = "#embedded-expression"
EMBEDDED_FORMAT_INCLUDE: str = "#embedded-format"
EMBEDDED_PLACEHOLDER_INCLUDE: str = "#embedded-placeholder"
