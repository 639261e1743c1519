"""Diagnostic codes and the Diagnostic record attached to errors.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Stable numeric identifiers for every surfaced error.

    Ranges:
        1000-1999: Input handed to convert/parse
        2000-2999: Locale lookup, registration and options
        3000-3999: Grammar descriptions and grammar files
    """

    # Input (1000-1999)
    INVALID_INPUT = 1001

    # Configuration (2000-2999)
    LOCALE_UNKNOWN = 2001
    LOCALE_ALREADY_REGISTERED = 2002
    CURRENCY_CODE_UNKNOWN = 2003

    # Grammar (3000-3999)
    GRAMMAR_INVALID = 3001
    GRAMMAR_FILE_UNREADABLE = 3002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """What went wrong, where, and how to fix it.

    Attributes:
        code: Identifier of the failure
        message: One-line description
        hint: Suggested fix, if one is known
        input_value: Bounded repr of the offending input
        locale_code: Locale identifier involved
        severity: "error" or "warning"
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    input_value: str | None = None
    locale_code: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        return self.message

    def format_error(self) -> str:
        """Render with the default (rust-style) DiagnosticFormatter.

        Example output:
            error[LOCALE_UNKNOWN]: Unknown locale "xx-XX"
              = locale: xx-XX
              = help: Registered locales: ar-SA, en-IN, en-US, ...
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
