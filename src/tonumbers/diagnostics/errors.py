"""Exception hierarchy with structured diagnostics.

All exceptions can carry a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class NumeralError(Exception):
    """Base exception for all tonumbers errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize NumeralError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidInputError(NumeralError):
    """Input handed to convert/parse is not parseable text.

    Raised for non-string values, empty strings, and strings that are blank
    after cleaning. Never recovered internally.
    """


class UnknownLocaleError(NumeralError):
    """Locale identifier has no registered grammar.

    Raised at configuration or first-use time, never during parsing.

    Attributes:
        locale_code: The identifier that failed to resolve
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        super().__init__(message)
        self.locale_code = locale_code


class GrammarError(NumeralError):
    """Grammar description is malformed and cannot be compiled."""


class CurrencyCodeError(NumeralError):
    """ISO 4217 code has no CLDR display name for the grammar's locale."""


class LocaleRegistrationError(NumeralError):
    """Locale identifier is already registered and replace was not requested."""
