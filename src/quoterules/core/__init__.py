"""Core utilities shared across the grammar and writer layers.

By isolating these utilities here, we maintain a clean dependency graph:

    diagnostics <- core <- grammar, writer

Exports:
    DepthGuard: Context manager for recursion depth limiting
    format_natural_list: Locale-aware conjunction lists via Babel

Python 3.13+.
"""

from .babel_compat import BabelImportError, format_natural_list, resolve_locale
from .depth_guard import DepthGuard, depth_clamp

__all__ = [
    "BabelImportError",
    "DepthGuard",
    "depth_clamp",
    "format_natural_list",
    "resolve_locale",
]
