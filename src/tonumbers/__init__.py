"""tonumbers - natural-language number phrases to numbers.

Converts written-out cardinals, decimals, ordinals and currency amounts
("Fifty Two Rupees And Thirty Paise Only") into int / Decimal values,
driven by declarative per-language grammars.

Public API:
    ToNumbers - Locale-bound converter (convert, parse)
    ConverterOptions - Per-instance and per-call conversion options
    CurrencyOverride - Replacement currency vocabulary / ISO 4217 code
    ParseResult, CurrencyInfo - Parse results with metadata
    register_locale - Add a grammar at runtime
    available_locales - Registered locale identifiers
    load_grammar - Grammar description from a JSON file

Exceptions:
    NumeralError - Base exception class
    InvalidInputError - Non-string or blank input
    UnknownLocaleError - Locale not registered
    LocaleRegistrationError - Duplicate registration
    GrammarError - Malformed grammar description
    CurrencyCodeError - Unknown ISO 4217 code

Submodules:
    tonumbers.grammar - Grammar descriptions, compiler and cache
    tonumbers.parsing - Tokenizer and numeral / currency parsers
    tonumbers.locales - Bundled grammars and the locale registry
    tonumbers.diagnostics - Error types and diagnostic formatting
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from .diagnostics import (
    CurrencyCodeError,
    GrammarError,
    InvalidInputError,
    LocaleRegistrationError,
    NumeralError,
    UnknownLocaleError,
)
from .grammar import GrammarDescription, load_grammar
from .locales import available_locales, register_locale
from .runtime import (
    ConverterOptions,
    CurrencyInfo,
    CurrencyOverride,
    NumericValue,
    ParseResult,
    ToNumbers,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("tonumbers")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    # Converter
    "ToNumbers",
    "ConverterOptions",
    "CurrencyOverride",
    "ParseResult",
    "CurrencyInfo",
    "NumericValue",
    # Locales and grammars
    "GrammarDescription",
    "available_locales",
    "load_grammar",
    "register_locale",
    # Errors
    "NumeralError",
    "InvalidInputError",
    "UnknownLocaleError",
    "LocaleRegistrationError",
    "GrammarError",
    "CurrencyCodeError",
    "__version__",
]
