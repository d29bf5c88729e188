"""Tests for the Babel access layer."""

from __future__ import annotations

import pytest

from quoterules.core.babel_compat import (
    BabelImportError,
    format_natural_list,
    is_babel_available,
    require_babel,
    resolve_locale,
)
from quoterules.diagnostics import LocaleNotSupportedError


class TestFormatNaturalList:
    """CLDR conjunction lists."""

    @pytest.mark.parametrize(
        ("items", "expected"),
        [
            ([], ""),
            (["a"], "a"),
            (["a", "b"], "a and b"),
            (["a", "b", "c"], "a, b, and c"),
        ],
    )
    def test_english(self, items: list[str], expected: str) -> None:
        """English uses the serial comma."""
        assert format_natural_list(items, "en") == expected

    def test_other_locale(self) -> None:
        """Other locales use their own conjunction."""
        assert format_natural_list(["a", "b"], "de") == "a und b"


class TestResolveLocale:
    """Locale parsing."""

    def test_known(self) -> None:
        """Known locales resolve to Babel Locale objects."""
        assert resolve_locale("en_US").language == "en"

    def test_unknown(self) -> None:
        """Unknown locales raise LocaleNotSupportedError."""
        with pytest.raises(LocaleNotSupportedError, match="xx_YY"):
            resolve_locale("xx_YY")

    def test_malformed(self) -> None:
        """Malformed identifiers raise LocaleNotSupportedError."""
        with pytest.raises(LocaleNotSupportedError):
            resolve_locale("not a locale")


class TestAvailability:
    """Babel presence checks."""

    def test_available(self) -> None:
        """Babel is a declared dependency."""
        assert is_babel_available()
        require_babel("test")

    def test_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A missing Babel raises BabelImportError naming the feature."""
        monkeypatch.setattr(
            "quoterules.core.babel_compat._check_babel_available", lambda: False
        )

        with pytest.raises(BabelImportError, match="descriptions"):
            require_babel("descriptions")
