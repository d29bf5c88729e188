"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+.
"""

from .codes import Diagnostic, DiagnosticCode

_SUPPORTED_KINDS = "mapping, sequence, string, number, boolean or None"


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def unsupported_value(type_name: str, path: str) -> Diagnostic:
        """Value kind outside the writer's closed value union.

        Args:
            type_name: Name of the offending value's type
            path: Location of the value inside the tree

        Returns:
            Diagnostic for UNSUPPORTED_VALUE
        """
        msg = f"Unsupported value kind '{type_name}'"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_VALUE,
            message=msg,
            hint=f"Convert the value to a {_SUPPORTED_KINDS}",
            path=path,
            received_type=type_name,
        )

    @staticmethod
    def cyclic_value(type_name: str, path: str) -> Diagnostic:
        """Container reached again while it is still being rendered.

        Args:
            type_name: Name of the container's type
            path: Location where the container re-appears

        Returns:
            Diagnostic for CYCLIC_VALUE
        """
        msg = f"Cyclic {type_name} detected"
        return Diagnostic(
            code=DiagnosticCode.CYCLIC_VALUE,
            message=msg,
            hint=(
                "Value trees must be acyclic; copy shared containers "
                "instead of nesting them in themselves"
            ),
            path=path,
            received_type=type_name,
        )

    @staticmethod
    def depth_exceeded(max_depth: int) -> Diagnostic:
        """Value tree nested deeper than the writer accepts.

        Args:
            max_depth: The limit that was exceeded

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Flatten the value tree or raise max_depth",
        )

    @staticmethod
    def write_failed(path: str, reason: str) -> Diagnostic:
        """Grammar text could not be written.

        Args:
            path: Destination path
            reason: Operating system error text

        Returns:
            Diagnostic for WRITE_FAILED
        """
        msg = f"Cannot write grammar to '{path}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.WRITE_FAILED,
            message=msg,
            hint="Check that the destination directory is writable",
            path=path,
        )

    @staticmethod
    def locale_unknown(locale_code: str) -> Diagnostic:
        """Description locale missing from CLDR data.

        Args:
            locale_code: The requested locale

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use a CLDR locale identifier such as 'en' or 'en_GB'",
        )
