"""Shared constants for tonumbers.

This module provides centralized configuration constants used across the
grammar, parsing and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Scale magnitudes: Multiplicative words recognized by the integer parser
- Currency defaults: Fractional precision bounds
- Cache limits: Memory bounds for the compiled grammar cache
- Logging: Truncation limits for input excerpts in log records

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Scale magnitudes
    "SCALE_VALUES",
    # Locale defaults
    "DEFAULT_LOCALE",
    # Currency defaults
    "DEFAULT_FRACTIONAL_PRECISION",
    "MAX_FRACTIONAL_PRECISION",
    # Cache limits
    "MAX_GRAMMAR_CACHE_SIZE",
    # Logging
    "LOG_TRUNCATE",
]

# ============================================================================
# SCALE MAGNITUDES
# ============================================================================
#
# Covers short-scale (thousand, million, billion, trillion, quadrillion),
# Indian (lakh, crore, arab, kharab) and East-Asian (wan/man, yi/eok,
# zhao/jo, jing/gyeong) numbering systems. A mapped value in this set, or
# equal to twice a member (dual forms), is treated as a scale word.
SCALE_VALUES: frozenset[int] = frozenset({
    100,  # hundred
    1_000,  # thousand
    10_000,  # wan / man
    100_000,  # lakh
    1_000_000,  # million
    10_000_000,  # crore
    100_000_000,  # yi / eok
    1_000_000_000,  # billion / arab
    100_000_000_000,  # kharab
    1_000_000_000_000,  # trillion / jo
    10_000_000_000_000,  # neel
    1_000_000_000_000_000,  # quadrillion
    10_000_000_000_000_000,  # gyeong
})

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale used by ToNumbers when no identifier is given.
DEFAULT_LOCALE: str = "en-IN"

# ============================================================================
# CURRENCY DEFAULTS
# ============================================================================

# Digits of the fractional unit (cents, paise) relative to the main unit.
DEFAULT_FRACTIONAL_PRECISION: int = 2

# Upper bound accepted by ConverterOptions. Decimal handles any exponent,
# but no real currency subdivides beyond this.
MAX_FRACTIONAL_PRECISION: int = 18

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached compiled grammars.
# The bundled registry plus user-registered grammars stay well below this.
MAX_GRAMMAR_CACHE_SIZE: int = 128

# ============================================================================
# LOGGING
# ============================================================================

# Input excerpts in log records are cut to this many characters.
LOG_TRUNCATE: int = 50
