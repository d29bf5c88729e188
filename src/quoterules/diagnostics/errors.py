"""quoterules exception hierarchy with structured diagnostics.

All exceptions can carry Diagnostic objects for rich error information.

Python 3.13+.
"""

from .codes import Diagnostic


class QuoteRulesError(Exception):
    """Base exception for all quoterules errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize QuoteRulesError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class SerializationError(QuoteRulesError):
    """Value tree cannot be rendered as block text."""


class UnsupportedValueError(SerializationError):
    """Value tree contains a value kind the writer does not render.

    Supported kinds: mapping, sequence (list/tuple), str, int, float,
    bool and None.
    """


class CyclicValueError(SerializationError):
    """Value tree contains a container that (indirectly) contains itself.

    Example:
        >>> patterns = []
        >>> patterns.append(patterns)
    """


class DepthLimitExceededError(SerializationError):
    """Value tree is nested deeper than the configured maximum depth."""


class GrammarWriteError(QuoteRulesError):
    """Generated grammar could not be written to its destination.

    Attributes:
        path: Destination that failed
    """

    def __init__(self, message: str | Diagnostic, *, path: str = "") -> None:
        """Initialize GrammarWriteError.

        Args:
            message: Error message string OR Diagnostic object
            path: Destination that failed
        """
        super().__init__(message)
        self.path = path


class LocaleNotSupportedError(QuoteRulesError, ValueError):
    """Description locale is not known to the CLDR data shipped with Babel.

    Attributes:
        locale_code: The locale that failed to resolve
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        """Initialize LocaleNotSupportedError.

        Args:
            message: Error message string OR Diagnostic object
            locale_code: The locale that failed to resolve
        """
        super().__init__(message)
        self.locale_code = locale_code
