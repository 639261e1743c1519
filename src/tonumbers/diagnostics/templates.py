"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable
from difflib import get_close_matches

from tonumbers.constants import LOG_TRUNCATE

from .codes import Diagnostic, DiagnosticCode


def _excerpt(value: object) -> str:
    """Return a bounded repr of an arbitrary value for messages."""
    text = repr(value)
    if len(text) > LOG_TRUNCATE:
        return text[:LOG_TRUNCATE] + "..."
    return text


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def invalid_input(value: object) -> Diagnostic:
        """Input is not a non-blank string.

        Args:
            value: The rejected input (any type)

        Returns:
            Diagnostic for INVALID_INPUT
        """
        shown = _excerpt(value)
        if isinstance(value, str):
            hint = "Pass a non-empty phrase such as 'One Hundred Twenty'"
        else:
            hint = f"Expected str, received {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_INPUT,
            message=f"Invalid input {shown}",
            hint=hint,
            input_value=shown,
        )

    @staticmethod
    def locale_unknown(locale_code: str, available: Iterable[str]) -> Diagnostic:
        """Locale identifier is not in the registry.

        Args:
            locale_code: The requested identifier
            available: Registered identifiers, used for suggestions

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        candidates = sorted(available)
        close = get_close_matches(locale_code, candidates, n=3, cutoff=0.5)
        if close:
            hint = f"Did you mean: {', '.join(close)}?"
        else:
            hint = f"Registered locales: {', '.join(candidates)}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=f'Unknown locale "{locale_code}"',
            hint=hint,
            locale_code=locale_code,
        )

    @staticmethod
    def locale_already_registered(locale_code: str) -> Diagnostic:
        """Registering a grammar over an existing identifier without replace=True.

        Args:
            locale_code: The identifier already present

        Returns:
            Diagnostic for LOCALE_ALREADY_REGISTERED
        """
        return Diagnostic(
            code=DiagnosticCode.LOCALE_ALREADY_REGISTERED,
            message=f'Locale "{locale_code}" is already registered',
            hint="Pass replace=True to overwrite the existing grammar",
            locale_code=locale_code,
        )

    @staticmethod
    def currency_code_unknown(currency_code: str, locale_code: str) -> Diagnostic:
        """ISO 4217 code has no CLDR name for the locale.

        Args:
            currency_code: The requested ISO 4217 code
            locale_code: Locale whose CLDR data was consulted

        Returns:
            Diagnostic for CURRENCY_CODE_UNKNOWN
        """
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_CODE_UNKNOWN,
            message=f"Currency code '{currency_code}' has no name in locale '{locale_code}'",
            hint="Use a 3-letter ISO 4217 code (USD, EUR, INR) or pass unit names directly",
            input_value=currency_code,
            locale_code=locale_code,
        )

    @staticmethod
    def grammar_invalid(reason: str, locale_code: str | None = None) -> Diagnostic:
        """Grammar description failed validation.

        Args:
            reason: What is wrong with the description
            locale_code: Identifier the grammar was registered under, if known

        Returns:
            Diagnostic for GRAMMAR_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.GRAMMAR_INVALID,
            message=f"Invalid grammar description: {reason}",
            hint="Check number_words entries: each needs a non-negative number and a word",
            locale_code=locale_code,
        )

    @staticmethod
    def grammar_file_unreadable(path: str, reason: str) -> Diagnostic:
        """Grammar file could not be read or decoded.

        Args:
            path: File path that was attempted
            reason: Underlying error text

        Returns:
            Diagnostic for GRAMMAR_FILE_UNREADABLE
        """
        return Diagnostic(
            code=DiagnosticCode.GRAMMAR_FILE_UNREADABLE,
            message=f"Cannot load grammar from '{path}': {reason}",
            hint="Grammar files are UTF-8 JSON objects",
            input_value=path,
        )
