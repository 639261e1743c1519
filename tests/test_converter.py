"""Tests for tonumbers.runtime.converter.

ToNumbers end to end: mode selection, sign and ordinal metadata, options
merging, grammar injection, error surfaces and concurrent use.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import pytest

from tonumbers import (
    ConverterOptions,
    CurrencyInfo,
    CurrencyOverride,
    InvalidInputError,
    ParseResult,
    ToNumbers,
    UnknownLocaleError,
)
from tonumbers.constants import DEFAULT_LOCALE
from tonumbers.diagnostics import DiagnosticCode
from tonumbers.grammar import GrammarCache, GrammarDescription, NumberWord, TextMarkers

_TOY = GrammarDescription(
    number_words=(NumberWord(100, "Cent"), NumberWord(2, "Du"), NumberWord(1, "Unu")),
    texts=TextMarkers(minus="Minus"),
)


class TestConstruction:
    """Test configuration and lazy compilation."""

    def test_default_locale(self) -> None:
        """Without an identifier the default locale is used."""
        assert ToNumbers().locale_code == DEFAULT_LOCALE

    def test_lazy_compilation(self) -> None:
        """The grammar compiles on first use, not at construction."""
        converter = ToNumbers("en-US", cache=GrammarCache())
        assert "compiled=False" in repr(converter)
        converter.convert("One")
        assert "compiled=True" in repr(converter)

    def test_repr(self) -> None:
        """repr shows identifier, injection and compile state."""
        assert repr(ToNumbers("en-US")) == (
            "ToNumbers(locale_code='en-US', injected=False, compiled=False)"
        )
        assert "injected=True" in repr(ToNumbers("eo", grammar=_TOY))

    def test_unknown_locale_lazy(self) -> None:
        """An unknown locale raises on first use."""
        converter = ToNumbers("xx-XX")
        with pytest.raises(UnknownLocaleError) as exc_info:
            converter.convert("One")
        assert exc_info.value.locale_code == "xx-XX"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.LOCALE_UNKNOWN

    def test_unknown_locale_eager(self) -> None:
        """eager=True surfaces an unknown locale at construction."""
        with pytest.raises(UnknownLocaleError):
            ToNumbers("xx-XX", eager=True)

    def test_locale_identifier_forms(self) -> None:
        """Separator and case variants name the same grammar."""
        assert ToNumbers("en_us").convert("Forty Two") == 42
        assert ToNumbers("EN-us").convert("Forty Two") == 42

    def test_shared_cache(self) -> None:
        """Converters sharing a cache share one compiled grammar."""
        cache = GrammarCache()
        first = ToNumbers("en-US", cache=cache)
        second = ToNumbers("en_US", cache=cache)
        assert first.compiled_grammar is second.compiled_grammar
        assert cache.get("en-US") is first.compiled_grammar
        assert cache.size() == 1


class TestPlainNumbers:
    """Test cardinal, decimal and ordinal conversion."""

    def test_large_cardinal(self) -> None:
        """Ten-digit values spelled out in US English."""
        converter = ToNumbers("en-US")
        text = (
            "Nine Billion Eight Hundred Seventy Six Million Five Hundred Forty Three "
            "Thousand Two Hundred Ten"
        )
        assert converter.convert(text) == 9_876_543_210

    def test_indian_default(self) -> None:
        """The default grammar reads lakh and crore."""
        assert ToNumbers().convert("Two Crore Fifty Lakh") == 25_000_000

    def test_decimal(self) -> None:
        """Fractions come back as exact Decimals."""
        converter = ToNumbers("en-US")
        assert converter.convert("Zero Point Zero Six Three") == Decimal("0.063")
        assert converter.convert("Twelve Point Five") == Decimal("12.5")
        assert converter.convert("One Point Sixty Three") == Decimal("1.63")

    def test_leading_point(self) -> None:
        """A phrase may start at the point with no integer words."""
        converter = ToNumbers("en-US")
        assert converter.convert("Point Sixty Three") == Decimal("0.63")
        assert converter.convert("Point Zero Six Three") == Decimal("0.063")

    def test_whole_number_is_int(self) -> None:
        """Phrases without a fraction return int."""
        value = ToNumbers("en-US").convert("Seven Hundred")
        assert value == 700
        assert isinstance(value, int)

    def test_point_without_fraction(self) -> None:
        """A trailing point adds nothing."""
        assert ToNumbers("en-US").convert("Seven Point") == 7

    def test_ignore_decimal(self) -> None:
        """ignore_decimal keeps only the integer part."""
        converter = ToNumbers("en-US")
        options = ConverterOptions(ignore_decimal=True)
        assert converter.convert("Three Point One Four", options) == 3

    def test_ordinal(self) -> None:
        """Ordinals are flagged in the result."""
        result = ToNumbers("en-US").parse("Twenty Third")
        assert result == ParseResult(23, is_currency=False, is_negative=False, is_ordinal=True)

    def test_negative(self) -> None:
        """A leading minus negates and sets is_negative."""
        result = ToNumbers("en-US").parse("Minus Twenty Third")
        assert result.value == -23
        assert result.is_negative is True
        assert result.is_ordinal is True

    def test_negative_decimal(self) -> None:
        """Negation keeps the Decimal exact."""
        assert ToNumbers("en-US").convert("Minus Two Point Five") == Decimal("-2.5")

    def test_negative_zero_is_not_negative(self) -> None:
        """Minus zero reports a non-negative result."""
        result = ToNumbers("en-US").parse("Minus Zero")
        assert result.value == 0
        assert result.is_negative is False

    def test_case_insensitive(self) -> None:
        """Matching ignores letter case."""
        assert ToNumbers("en-US").convert("nINE hUNDRED") == 900

    def test_punctuation_and_whitespace(self) -> None:
        """Trailing punctuation and whitespace runs are ignored."""
        assert ToNumbers("en-US").convert("  One   Hundred,  Five. ") == 105

    def test_unknown_words_contribute_zero(self) -> None:
        """Words outside the grammar do not raise."""
        assert ToNumbers("en-US").convert("Banana") == 0

    def test_korean(self) -> None:
        """Concatenated Korean numerals parse through the same pipeline."""
        converter = ToNumbers("ko-KR")
        assert converter.convert("구십팔억칠천육백오십사만삼천이백십") == 9_876_543_210
        assert converter.convert("마이너스오십") == -50
        assert converter.convert("삼점일사") == Decimal("3.14")


class TestCurrencyMode:
    """Test currency detection and forcing."""

    def test_auto_detected(self) -> None:
        """A unit word switches to currency parsing."""
        result = ToNumbers("en-IN").parse("Fifty Two Rupees And Thirty Paise Only")
        assert result.is_currency is True
        assert result.value == Decimal("52.30")
        assert result.currency_info == CurrencyInfo(52, 30)

    def test_no_unit_is_plain(self) -> None:
        """Without unit words the phrase is a plain number."""
        result = ToNumbers("en-IN").parse("Fifty Two")
        assert result.is_currency is False
        assert result.currency_info is None
        assert result.value == 52

    def test_forced_currency(self) -> None:
        """currency=True parses a bare number as an amount."""
        options = ConverterOptions(currency=True)
        value = ToNumbers("en-US").convert("Seven", options)
        assert str(value) == "7.00"

    def test_forced_plain(self) -> None:
        """currency=False ignores unit words."""
        options = ConverterOptions(currency=False)
        result = ToNumbers("en-US").parse("Five Dollars", options)
        assert result.is_currency is False
        assert result.value == 5

    def test_precision(self) -> None:
        """fractional_precision sets the fractional places."""
        options = ConverterOptions(fractional_precision=3)
        value = ToNumbers("en-US").convert("One Dollar And Five Cents", options)
        assert value == Decimal("1.005")

    def test_negative_currency(self) -> None:
        """Minus applies to currency values."""
        result = ToNumbers("en-US").parse("Minus Ten Dollars")
        assert result.value == Decimal("-10.00")
        assert result.is_negative is True

    def test_ignore_zero_currency(self) -> None:
        """Zero amounts can be reported as non-negative."""
        converter = ToNumbers("en-IN")
        options = ConverterOptions(ignore_zero_currency=True)
        result = converter.parse("Minus Zero Rupees", options)
        assert result.is_negative is False
        assert str(result.value) == "0.00"

    def test_override_words(self) -> None:
        """Override words are recognized in addition to the grammar's."""
        usd = CurrencyOverride(
            name="Dollar", plural="Dollars", fractional_name="Cent", fractional_plural="Cents"
        )
        converter = ToNumbers("en-IN")
        options = ConverterOptions(currency_options=usd)
        assert converter.convert("Ten Dollars And Five Cents", options) == Decimal("10.05")
        assert converter.convert("Ten Rupees", options) == Decimal("10.00")

    def test_cldr_code(self) -> None:
        """An ISO code adds the CLDR currency names."""
        options = ConverterOptions(currency_options=CurrencyOverride(code="EUR"))
        assert ToNumbers("en-US").convert("Ten Euros", options) == Decimal("10.00")

    def test_korean_override(self) -> None:
        """Override words are matched inside concatenated text."""
        options = ConverterOptions(currency_options=CurrencyOverride(name="달러"))
        result = ToNumbers("ko-KR").parse("오천달러", options)
        assert result.is_currency is True
        assert result.value == Decimal("5000.00")

    def test_korean_won(self) -> None:
        """The grammar's own unit is found without spaces."""
        assert ToNumbers("ko-KR").convert("오만원") == Decimal("50000.00")


class TestOptionsMerge:
    """Test instance defaults merged with per-call options."""

    def test_instance_defaults_apply(self) -> None:
        """Instance options apply when the call sets nothing."""
        converter = ToNumbers("en-US", options=ConverterOptions(currency=True))
        assert converter.convert("Seven") == Decimal("7.00")

    def test_call_overrides_instance(self) -> None:
        """A field set per call wins over the instance default."""
        converter = ToNumbers("en-US", options=ConverterOptions(currency=True))
        assert converter.convert("Seven", ConverterOptions(currency=False)) == 7

    def test_unset_fields_inherit(self) -> None:
        """Fields the call leaves unset keep the instance value."""
        converter = ToNumbers(
            "en-US", options=ConverterOptions(currency=True, fractional_precision=3)
        )
        value = converter.convert("Seven", ConverterOptions(ignore_decimal=True))
        assert str(value) == "7.000"


class TestGrammarInjection:
    """Test converters built from an injected description."""

    def test_injected_grammar(self) -> None:
        """An injected grammar needs no registry entry."""
        converter = ToNumbers("eo", grammar=_TOY)
        assert converter.convert("Du Cent Du") == 202
        assert converter.convert("Minus Unu") == -1

    def test_set_grammar_replaces(self) -> None:
        """set_grammar swaps the grammar for later conversions."""
        converter = ToNumbers("en-US")
        assert converter.convert("Two") == 2
        converter.set_grammar(_TOY)
        assert "compiled=False" in repr(converter)
        assert converter.convert("Du") == 2
        assert converter.convert("Two") == 0

    def test_injected_grammar_not_cached(self) -> None:
        """Injected grammars bypass the shared cache."""
        cache = GrammarCache()
        ToNumbers("eo", grammar=_TOY, cache=cache).convert("Du")
        assert cache.size() == 0


class TestInvalidInput:
    """Test rejected inputs."""

    @pytest.mark.parametrize("text", [None, 42, "", "   ", "...", b"One"])
    def test_rejected(self, text: object) -> None:
        """Non-strings and blank strings raise InvalidInputError."""
        with pytest.raises(InvalidInputError) as exc_info:
            ToNumbers("en-US").convert(text)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_INPUT

    def test_hint_names_type(self) -> None:
        """The diagnostic hint names the received type."""
        with pytest.raises(InvalidInputError) as exc_info:
            ToNumbers("en-US").parse(42)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.hint == "Expected str, received int"


class TestLogging:
    """Test log records emitted by the converter."""

    def test_parse_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Each parse logs its mode and token count."""
        converter = ToNumbers("en-US")
        with caplog.at_level(logging.DEBUG, logger="tonumbers.runtime.converter"):
            converter.convert("Five Dollars")
        messages = [record.getMessage() for record in caplog.records]
        assert "Parsing 'Five Dollars' as currency: 2 tokens" in messages

    def test_long_input_truncated(self, caplog: pytest.LogCaptureFixture) -> None:
        """Long inputs are cut in log records."""
        converter = ToNumbers("en-US")
        text = " ".join(["One"] * 40)
        with caplog.at_level(logging.DEBUG, logger="tonumbers.runtime.converter"):
            converter.convert(text)
        parse_records = [r for r in caplog.records if r.getMessage().startswith("Parsing")]
        assert parse_records
        assert text not in parse_records[0].getMessage()


class TestConcurrency:
    """Test one converter shared across threads."""

    def test_concurrent_conversions(self) -> None:
        """Concurrent first use compiles once and returns consistent values."""
        converter = ToNumbers("en-US", cache=GrammarCache())
        phrases = ["One Hundred", "Twenty Two", "Five Dollars", "Three Point Five"] * 25
        expected = [100, 22, Decimal("5.00"), Decimal("3.5")] * 25

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(converter.convert, phrases))

        assert results == expected
