"""Result types returned by ToNumbers.parse().

    - ParseResult: numeric value plus currency / sign / ordinal metadata
    - CurrencyInfo: main and fractional amounts of a currency phrase

Whole values are int; values with a fractional part are decimal.Decimal so
"zero point zero six three" is exactly Decimal("0.063"). Currency values
are always Decimal with the configured number of fractional digits.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

__all__ = ["CurrencyInfo", "NumericValue", "ParseResult"]

type NumericValue = int | Decimal


@dataclass(frozen=True, slots=True)
class CurrencyInfo:
    """Currency breakdown of a parsed phrase.

    Attributes:
        main_amount: Whole main units (52 in "52 rupees and 30 paise")
        fractional_amount: Fractional units (30 in the same phrase)
    """

    main_amount: int
    fractional_amount: int


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of parsing one phrase.

    Attributes:
        value: Signed numeric value
        is_currency: Phrase was parsed in currency mode
        is_negative: Phrase carried a minus marker
        is_ordinal: Phrase was an ordinal ("twenty third")
        currency_info: Amount breakdown (currency mode only)

    Example:
        >>> result = ParseResult(Decimal("52.30"), is_currency=True, is_negative=False,
        ...                      currency_info=CurrencyInfo(52, 30))
        >>> result.currency_info.fractional_amount
        30
    """

    value: NumericValue
    is_currency: bool
    is_negative: bool
    is_ordinal: bool = False
    currency_info: CurrencyInfo | None = None
