"""Hypothesis strategies for quoterules property-based testing.

Usage:
    from tests.strategies import marker_subsets, value_trees
"""

from .values import (
    BARE_FIRST_CHARS,
    SINGLE_QUOTE_LEAD_CHARS,
    bare_text,
    mapping_keys,
    marker_subsets,
    quote_chars,
    quote_styles,
    scalar_values,
    single_line_text,
    value_trees,
)

__all__ = [
    "BARE_FIRST_CHARS",
    "SINGLE_QUOTE_LEAD_CHARS",
    "bare_text",
    "mapping_keys",
    "marker_subsets",
    "quote_chars",
    "quote_styles",
    "scalar_values",
    "single_line_text",
    "value_trees",
]
