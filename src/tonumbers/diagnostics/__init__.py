"""Diagnostic system for tonumbers errors.

Provides structured error diagnostics with codes, hints and formatting.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CurrencyCodeError,
    GrammarError,
    InvalidInputError,
    LocaleRegistrationError,
    NumeralError,
    UnknownLocaleError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CurrencyCodeError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "GrammarError",
    "InvalidInputError",
    "LocaleRegistrationError",
    "NumeralError",
    "OutputFormat",
    "UnknownLocaleError",
]
