"""Generator configuration.

Provides a single frozen dataclass that encapsulates every knob the rule
generator exposes. The defaults reproduce the stock grammar; constructing
``GeneratorConfig()`` with no arguments produces a usable configuration.

Python 3.13+.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from quoterules.constants import DEFAULT_LOCALE, DEFAULT_SCOPE_SUFFIX, MARKER_COUNT
from quoterules.core.babel_compat import resolve_locale

__all__ = ["GeneratorConfig"]

# Scope names are dot-separated; the suffix is a single segment.
_SCOPE_SEGMENT = re.compile(r"[A-Za-z0-9][A-Za-z0-9_-]*")


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Immutable configuration for rule generation.

    Attributes:
        scope_suffix: Language segment appended to every scope name
            (default: "hitori"), e.g. ``string.quoted.single.hitori``.
        locale: CLDR locale for the natural-language list in rule
            descriptions (default: "en").
        max_markers: Largest marker subset to generate rules for
            (default: 4, i.e. every combination).

    Example:
        >>> from quoterules import GeneratorConfig, build_rule_set
        >>> config = GeneratorConfig(scope_suffix="toy", max_markers=1)
        >>> len(build_rule_set(config))
        20
    """

    scope_suffix: str = DEFAULT_SCOPE_SUFFIX
    locale: str = DEFAULT_LOCALE
    max_markers: int = MARKER_COUNT

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If scope_suffix is not a single scope segment or
                max_markers is outside 0..4.
            LocaleNotSupportedError: If locale is unknown to CLDR
                (a ValueError subclass).
        """
        if not _SCOPE_SEGMENT.fullmatch(self.scope_suffix):
            msg = f"scope_suffix must be a single scope segment, got {self.scope_suffix!r}"
            raise ValueError(msg)
        if not 0 <= self.max_markers <= MARKER_COUNT:
            msg = f"max_markers must be between 0 and {MARKER_COUNT}, got {self.max_markers}"
            raise ValueError(msg)
        resolve_locale(self.locale)
