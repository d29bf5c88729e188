"""Babel access layer.

Provides centralized, lazy import infrastructure for Babel so that every
module reaching for CLDR data gets consistent error messaging and import
behavior. Babel is a declared dependency; the lazy import keeps
``import quoterules`` cheap and turns a broken environment into a clear
BabelImportError instead of an import-time crash.

Usage Pattern:
    from quoterules.core.babel_compat import format_natural_list

    format_natural_list(["verbatim", "format"], "en")  # "verbatim and format"

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache
from typing import TYPE_CHECKING, Literal, Protocol

from quoterules.diagnostics import ErrorTemplate, LocaleNotSupportedError

if TYPE_CHECKING:
    from babel import Locale


# pylint: disable=unnecessary-ellipsis
# Reason: Ellipsis (...) is the standard Protocol method body per PEP 544
class BabelListsProtocol(Protocol):
    """Protocol for Babel lists module interface.

    Defines the subset of babel.lists API actually used by quoterules.
    Provides type safety without requiring full Babel type stubs.
    """

    def format_list(
        self,
        lst: Sequence[str],
        style: Literal["standard", "standard-short", "or", "or-short", "unit"] = "standard",
        locale: Locale | str | None = None,
    ) -> str:
        """Format items as a locale-specific conjunction list."""
        ...
# pylint: enable=unnecessary-ellipsis


__all__ = [
    "BabelImportError",
    "BabelListsProtocol",
    "format_natural_list",
    "get_babel_lists",
    "is_babel_available",
    "require_babel",
    "resolve_locale",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not importable."""

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install Babel"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed and importable."""
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_babel_lists() -> BabelListsProtocol:
    """Get the Babel lists module.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_babel_lists")
    from babel import lists  # noqa: PLC0415

    return lists


@lru_cache(maxsize=32)
def resolve_locale(locale_code: str) -> Locale:
    """Parse a locale identifier into a Babel Locale.

    Accepts both ``en_US`` and ``en-US`` forms.

    Raises:
        LocaleNotSupportedError: If CLDR has no data for the locale
        BabelImportError: If Babel is not installed
    """
    require_babel("resolve_locale")
    from babel import Locale, UnknownLocaleError  # noqa: PLC0415

    try:
        return Locale.parse(locale_code.replace("-", "_"))
    except (UnknownLocaleError, ValueError) as e:
        raise LocaleNotSupportedError(
            ErrorTemplate.locale_unknown(locale_code), locale_code=locale_code
        ) from e


def format_natural_list(items: Sequence[str], locale_code: str) -> str:
    """Join items as a natural-language list ("a, b, and c" in English).

    Args:
        items: Words to join, in order
        locale_code: Locale providing the CLDR list pattern

    Returns:
        Joined list; empty string for no items, the item itself for one
    """
    locale = resolve_locale(locale_code)
    return get_babel_lists().format_list(list(items), locale=locale)
