"""Converter runtime.

Provides the ToNumbers API, its options and result types.
Depends on the grammar, locales and parsing packages.

Python 3.13+.
"""

from .converter import ToNumbers
from .options import ConverterOptions, CurrencyOverride
from .value_types import CurrencyInfo, NumericValue, ParseResult

__all__ = [
    "ConverterOptions",
    "CurrencyInfo",
    "CurrencyOverride",
    "NumericValue",
    "ParseResult",
    "ToNumbers",
]
