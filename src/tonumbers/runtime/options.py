"""Conversion options for ToNumbers.

Two frozen dataclasses:
    - ConverterOptions: per-instance defaults and per-call overrides
    - CurrencyOverride: replacement currency vocabulary for one call

Every ConverterOptions field defaults to None, meaning "not set". Merging
instance defaults with per-call options keeps each field the call sets and
inherits the rest. Fields still unset after merging take the documented
defaults.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from tonumbers.constants import DEFAULT_FRACTIONAL_PRECISION, MAX_FRACTIONAL_PRECISION

__all__ = ["ConverterOptions", "CurrencyOverride"]


@dataclass(frozen=True, slots=True)
class CurrencyOverride:
    """Currency vocabulary used in place of (ahead of) the grammar's own.

    The grammar's unit words stay recognized; override words are matched
    first. Giving ``code`` adds the currency's CLDR names in the grammar's
    language.

    Attributes:
        name: Main unit name ("Dollar")
        plural: Main unit plural ("Dollars")
        singular: Main unit singular
        fractional_name: Fractional unit name ("Cent")
        fractional_plural: Fractional unit plural ("Cents")
        fractional_singular: Fractional unit singular
        code: ISO 4217 currency code ("USD"); names resolved through Babel

    Example:
        >>> usd = CurrencyOverride(name="Dollar", plural="Dollars",
        ...                        fractional_name="Cent", fractional_plural="Cents")
        >>> usd.fractional_plural
        'Cents'
    """

    name: str = ""
    plural: str = ""
    singular: str = ""
    fractional_name: str = ""
    fractional_plural: str = ""
    fractional_singular: str = ""
    code: str | None = None

    def __post_init__(self) -> None:
        """Validate the currency code shape.

        Raises:
            ValueError: If code is given but is not three ASCII letters
        """
        if self.code is not None:
            code = self.code.strip()
            if len(code) != 3 or not code.isascii() or not code.isalpha():
                msg = f"code must be a 3-letter ISO 4217 code, got {self.code!r}"
                raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class ConverterOptions:
    """Options controlling one conversion.

    Attributes:
        currency: True forces currency parsing, False forces plain parsing,
            None auto-detects (currency when a unit word occurs)
        currency_options: Replacement currency vocabulary
        fractional_precision: Fractional digits per main unit
            (default: 2, range 0-18)
        ignore_decimal: Drop everything after the decimal point / the
            fractional currency amount (default: False)
        ignore_zero_currency: Report zero currency amounts as non-negative
            zero (default: False)

    Example:
        >>> defaults = ConverterOptions(currency=True)
        >>> call = ConverterOptions(fractional_precision=3)
        >>> merged = defaults.merged_with(call)
        >>> merged.currency, merged.fractional_precision
        (True, 3)
    """

    currency: bool | None = None
    currency_options: CurrencyOverride | None = None
    fractional_precision: int | None = None
    ignore_decimal: bool | None = None
    ignore_zero_currency: bool | None = None

    def __post_init__(self) -> None:
        """Validate option values at construction time.

        Raises:
            ValueError: If fractional_precision is outside 0-18
            TypeError: If currency_options is not a CurrencyOverride
        """
        precision = self.fractional_precision
        if precision is not None and (
            isinstance(precision, bool)
            or not isinstance(precision, int)
            or not 0 <= precision <= MAX_FRACTIONAL_PRECISION
        ):
            msg = f"fractional_precision must be an int in 0..{MAX_FRACTIONAL_PRECISION}"
            raise ValueError(msg)
        if self.currency_options is not None and not isinstance(
            self.currency_options, CurrencyOverride
        ):
            msg = "currency_options must be a CurrencyOverride"
            raise TypeError(msg)

    def merged_with(self, overrides: ConverterOptions | None) -> ConverterOptions:
        """Return these options with every field set in overrides replaced."""
        if overrides is None:
            return self
        return ConverterOptions(**{
            f.name: (
                getattr(overrides, f.name)
                if getattr(overrides, f.name) is not None
                else getattr(self, f.name)
            )
            for f in fields(self)
        })

    @property
    def precision(self) -> int:
        """Effective fractional precision."""
        if self.fractional_precision is None:
            return DEFAULT_FRACTIONAL_PRECISION
        return self.fractional_precision
