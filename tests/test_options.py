"""Tests for tonumbers.runtime.options."""

from dataclasses import FrozenInstanceError

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tonumbers.constants import DEFAULT_FRACTIONAL_PRECISION, MAX_FRACTIONAL_PRECISION
from tonumbers.runtime import ConverterOptions, CurrencyOverride

_OPTIONS = st.builds(
    ConverterOptions,
    currency=st.none() | st.booleans(),
    fractional_precision=st.none() | st.integers(0, MAX_FRACTIONAL_PRECISION),
    ignore_decimal=st.none() | st.booleans(),
    ignore_zero_currency=st.none() | st.booleans(),
)


class TestConverterOptionsValidation:
    """Test construction-time validation."""

    def test_defaults_unset(self) -> None:
        """Every field starts unset."""
        options = ConverterOptions()
        assert options.currency is None
        assert options.fractional_precision is None
        assert options.precision == DEFAULT_FRACTIONAL_PRECISION

    @pytest.mark.parametrize("precision", [-1, MAX_FRACTIONAL_PRECISION + 1, True, 2.0, "2"])
    def test_bad_precision(self, precision: object) -> None:
        """Precision must be an int within range."""
        with pytest.raises(ValueError, match="fractional_precision"):
            ConverterOptions(fractional_precision=precision)  # type: ignore[arg-type]

    @pytest.mark.parametrize("precision", [0, 3, MAX_FRACTIONAL_PRECISION])
    def test_good_precision(self, precision: int) -> None:
        """Boundary precisions are accepted."""
        assert ConverterOptions(fractional_precision=precision).precision == precision

    def test_bad_currency_options(self) -> None:
        """currency_options must be a CurrencyOverride."""
        with pytest.raises(TypeError, match="CurrencyOverride"):
            ConverterOptions(currency_options={"name": "Dollar"})  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        """Options are immutable."""
        options = ConverterOptions()
        with pytest.raises(FrozenInstanceError):
            options.currency = True  # type: ignore[misc]


class TestMergedWith:
    """Test merging per-call options over instance defaults."""

    def test_none_returns_self(self) -> None:
        """Merging nothing is the identity."""
        options = ConverterOptions(currency=True)
        assert options.merged_with(None) is options

    def test_set_fields_win(self) -> None:
        """Fields set in the override replace the defaults."""
        defaults = ConverterOptions(currency=True, fractional_precision=3)
        merged = defaults.merged_with(ConverterOptions(currency=False))
        assert merged.currency is False
        assert merged.fractional_precision == 3

    def test_false_is_a_value(self) -> None:
        """False overrides True; only None means unset."""
        defaults = ConverterOptions(ignore_decimal=True)
        merged = defaults.merged_with(ConverterOptions(ignore_decimal=False))
        assert merged.ignore_decimal is False

    def test_zero_precision_overrides(self) -> None:
        """Precision zero is a set value."""
        defaults = ConverterOptions(fractional_precision=4)
        assert defaults.merged_with(ConverterOptions(fractional_precision=0)).precision == 0

    def test_currency_override_merged(self) -> None:
        """currency_options follows the same rule."""
        usd = CurrencyOverride(name="Dollar")
        merged = ConverterOptions().merged_with(ConverterOptions(currency_options=usd))
        assert merged.currency_options is usd

    @given(defaults=_OPTIONS, overrides=_OPTIONS)
    def test_merge_rule(self, defaults: ConverterOptions, overrides: ConverterOptions) -> None:
        """Each merged field is the override's if set, else the default's."""
        merged = defaults.merged_with(overrides)
        for name in ("currency", "fractional_precision", "ignore_decimal", "ignore_zero_currency"):
            override = getattr(overrides, name)
            expected = override if override is not None else getattr(defaults, name)
            assert getattr(merged, name) == expected

    @given(options=_OPTIONS)
    def test_merge_with_empty(self, options: ConverterOptions) -> None:
        """An all-unset override leaves the options unchanged."""
        assert options.merged_with(ConverterOptions()) == options


class TestCurrencyOverride:
    """Test currency override validation."""

    def test_words_only(self) -> None:
        """Unit words need no code."""
        override = CurrencyOverride(name="Dollar", plural="Dollars")
        assert override.code is None

    @pytest.mark.parametrize("code", ["USD", "eur", " INR "])
    def test_good_code(self, code: str) -> None:
        """Three ASCII letters are accepted, case and padding aside."""
        assert CurrencyOverride(code=code).code == code

    @pytest.mark.parametrize("code", ["", "US", "USDX", "U$D", "ÉUR", "123"])
    def test_bad_code(self, code: str) -> None:
        """Anything but three ASCII letters is rejected."""
        with pytest.raises(ValueError, match="ISO 4217"):
            CurrencyOverride(code=code)
