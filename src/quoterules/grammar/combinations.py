"""Marker subset enumeration and ordering.

Turns the fixed marker set into the ordered list of combinations the rule
generator walks. Longer combinations come first, since grammar rules are
tried in order and a shorter prefix listed earlier would shadow a longer one.

Python 3.13+.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from quoterules.enums import Marker

__all__ = [
    "escape_regex",
    "marker_combinations",
    "order_combinations",
    "power_set",
]

# Characters with special meaning in Oniguruma/PCRE patterns.
_REGEX_SPECIAL = re.compile(r"[-/\\^$*+?.()|[\]{}]")


def escape_regex(text: str) -> str:
    """Backslash-escape every regex metacharacter in text.

    Unlike re.escape(), leaves characters such as '%', '#' and spaces
    alone so generated patterns stay readable.

    Example:
        >>> escape_regex("$$")
        '\\\\$\\\\$'
    """
    return _REGEX_SPECIAL.sub(lambda match: "\\" + match.group(), text)


def power_set[T](symbols: Sequence[T], max_len: int | None = None) -> list[tuple[T, ...]]:
    """Enumerate every subset of symbols via binary masks.

    Subset ``mask`` holds the symbols whose index bit is set, in their
    original relative order. Subsets longer than max_len are dropped.

    Args:
        symbols: Ordered symbols
        max_len: Largest subset to keep (default: len(symbols))

    Returns:
        Subsets in mask order, starting with the empty subset

    Raises:
        ValueError: If max_len is negative
    """
    if max_len is None:
        max_len = len(symbols)
    if max_len < 0:
        msg = f"max_len must be >= 0, got {max_len}"
        raise ValueError(msg)

    subsets: list[tuple[T, ...]] = []
    for mask in range(1 << len(symbols)):
        subset = tuple(symbol for index, symbol in enumerate(symbols) if (mask >> index) & 1)
        if len(subset) <= max_len:
            subsets.append(subset)
    return subsets


def order_combinations[T](subsets: Sequence[tuple[T, ...]]) -> list[tuple[T, ...]]:
    """Sort subsets by length, longest first; ties keep their order."""
    return sorted(subsets, key=len, reverse=True)


def marker_combinations(max_len: int | None = None) -> tuple[tuple[Marker, ...], ...]:
    """Ordered marker subsets the rule set is generated from."""
    return tuple(order_combinations(power_set(Marker.canonical(), max_len)))
