"""Enumerations for quoterules type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from __future__ import annotations

from enum import StrEnum

from quoterules.constants import (
    EMBEDDED_EXPRESSION_INCLUDE,
    EMBEDDED_FORMAT_INCLUDE,
    EMBEDDED_PLACEHOLDER_INCLUDE,
    STRING_ESCAPES_INCLUDE,
)


class QuoteStyle(StrEnum):
    """Quote character delimiting a string literal.

    StrEnum provides automatic string conversion: str(QuoteStyle.SINGLE) == "'"
    """

    SINGLE = "'"
    """Single-quoted literal: 'text'."""

    DOUBLE = '"'
    """Double-quoted literal: "text"."""

    @property
    def label(self) -> str:
        """Word used in descriptions and scope names ("single" or "double")."""
        match self:
            case QuoteStyle.SINGLE:
                return "single"
            case QuoteStyle.DOUBLE:
                return "double"

    @classmethod
    def coerce(cls, quote: QuoteStyle | str) -> QuoteStyle:
        """Return the QuoteStyle for a member or a raw quote character.

        Raises:
            ValueError: If quote is neither ' nor "
        """
        try:
            return cls(quote)
        except ValueError:
            msg = f"Unsupported quote character {quote!r} (expected ' or \")"
            raise ValueError(msg) from None


class Marker(StrEnum):
    """Optional lexical feature a string literal variant may support.

    Declaration order is the canonical processing order. Every iteration
    over a marker subset follows it so generated output is reproducible.

    StrEnum provides automatic string conversion: str(Marker.FORMAT) == "format"
    """

    ESCAPE = "escape"
    """Backslash escape sequences: \\n"""

    INTERPOLATED = "interpolated"
    """Dollar interpolation fields: ${expr}"""

    FORMAT = "format"
    """Percent format fields: %d"""

    TEMPLATE = "template"
    """Hash template fields: #{name}"""

    @property
    def symbol(self) -> str:
        """Prefix character that enables the marker on a literal."""
        match self:
            case Marker.ESCAPE:
                return "\\"
            case Marker.INTERPOLATED:
                return "$"
            case Marker.FORMAT:
                return "%"
            case Marker.TEMPLATE:
                return "#"

    @property
    def display_name(self) -> str:
        """Name used in rule descriptions."""
        match self:
            case Marker.ESCAPE:
                return "verbatim"
            case Marker.INTERPOLATED | Marker.FORMAT | Marker.TEMPLATE:
                return self.value

    @property
    def include(self) -> str:
        """Nested rule reference contributed when the marker is active."""
        match self:
            case Marker.ESCAPE:
                return STRING_ESCAPES_INCLUDE
            case Marker.INTERPOLATED:
                return EMBEDDED_EXPRESSION_INCLUDE
            case Marker.FORMAT:
                return EMBEDDED_FORMAT_INCLUDE
            case Marker.TEMPLATE:
                return EMBEDDED_PLACEHOLDER_INCLUDE

    def doubled_token(self, quote: QuoteStyle) -> str:
        """Token that writes the marker's own character literally.

        The escape marker is escaped by doubling the quote; the others by
        doubling their symbol.
        """
        match self:
            case Marker.ESCAPE:
                return quote.value * 2
            case Marker.INTERPOLATED | Marker.FORMAT | Marker.TEMPLATE:
                return self.symbol * 2

    @classmethod
    def canonical(cls) -> tuple[Marker, ...]:
        """All markers in canonical order."""
        return tuple(cls)

    @classmethod
    def from_symbol(cls, symbol: str) -> Marker:
        """Look up a marker by its prefix character.

        Raises:
            ValueError: If no marker uses the symbol
        """
        for marker in cls:
            if marker.symbol == symbol:
                return marker
        msg = f"Unknown marker symbol {symbol!r}"
        raise ValueError(msg)


__all__ = [
    "Marker",
    "QuoteStyle",
]
