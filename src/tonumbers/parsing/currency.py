"""Currency phrase parsing.

Splits a token sequence at the main unit ("rupees") and fractional unit
("paise") and parses each amount with the integer algorithm:

    [minus] <main amount> <main unit> [and] <fractional amount> <fractional unit> [only]

Currency vocabulary comes from the compiled grammar and may be extended per
call with CurrencyOverride words or, given an ISO 4217 code, with the CLDR
display names of that currency in the grammar's language (via Babel).

Thread-safe. Babel lookups are cached by tonumbers.locale_utils.

Python 3.13+. Depends on Babel for CLDR currency names.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from tonumbers.diagnostics import CurrencyCodeError, ErrorTemplate
from tonumbers.locale_utils import get_babel_locale
from tonumbers.parsing.tokenizer import normalize_word, unit_phrase

from .numerals import fixed_point, parse_integer

if TYPE_CHECKING:
    from tonumbers.grammar.compiled import CompiledGrammar
    from tonumbers.runtime.options import CurrencyOverride

__all__ = [
    "CurrencyParse",
    "CurrencyVocabulary",
    "contains_currency_unit",
    "find_currency_unit",
    "parse_currency",
    "resolve_currency_vocabulary",
]

logger = logging.getLogger(__name__)

# CLDR names are looked up in English when the grammar has no usable locale
_CLDR_FALLBACK_LOCALE = "en"


@dataclass(frozen=True, slots=True)
class CurrencyVocabulary:
    """Main and fractional unit words used to segment a currency phrase.

    Words are normalized; multi-word names are pre-split for sequence matching.
    """

    main_unit: tuple[str, ...]
    fractional_unit: tuple[str, ...]
    main_unit_set: frozenset[str]
    fractional_unit_set: frozenset[str]
    main_unit_multi_word: tuple[tuple[str, ...], ...]
    fractional_unit_multi_word: tuple[tuple[str, ...], ...]

    @classmethod
    def from_words(
        cls, main_unit: Iterable[str], fractional_unit: Iterable[str]
    ) -> CurrencyVocabulary:
        """Build a vocabulary from normalized words, dropping duplicates.

        Names are split the way the tokenizer splits text, so hyphenated
        names ("dollars des états-unis") match as token sequences.
        """
        main = tuple(dict.fromkeys(p for p in map(unit_phrase, main_unit) if p))
        fractional = tuple(dict.fromkeys(p for p in map(unit_phrase, fractional_unit) if p))
        return cls(
            main_unit=main,
            fractional_unit=fractional,
            main_unit_set=frozenset(w for w in main if " " not in w),
            fractional_unit_set=frozenset(w for w in fractional if " " not in w),
            main_unit_multi_word=tuple(tuple(w.split()) for w in main if " " in w),
            fractional_unit_multi_word=tuple(tuple(w.split()) for w in fractional if " " in w),
        )

    @classmethod
    def from_grammar(cls, grammar: CompiledGrammar) -> CurrencyVocabulary:
        """Reuse the grammar's precompiled currency vocabulary."""
        return cls(
            main_unit=grammar.main_unit,
            fractional_unit=grammar.fractional_unit,
            main_unit_set=grammar.main_unit_set,
            fractional_unit_set=grammar.fractional_unit_set,
            main_unit_multi_word=grammar.main_unit_multi_word,
            fractional_unit_multi_word=grammar.fractional_unit_multi_word,
        )

    @property
    def additional_words(self) -> tuple[str, ...]:
        """All unit words, for concatenated tokenization."""
        return (*self.main_unit, *self.fractional_unit)


@dataclass(frozen=True, slots=True)
class CurrencyParse:
    """Result of parsing a currency phrase.

    Attributes:
        main_amount: Whole units (rupees, dollars)
        fractional_amount: Fractional units (paise, cents)
        value: main + fractional / 10**precision, with exactly precision places, sign applied
        is_negative: Phrase carried a minus marker (False for suppressed zeros)
    """

    main_amount: int
    fractional_amount: int
    value: Decimal
    is_negative: bool


def find_currency_unit(
    tokens: Sequence[str],
    unit_set: frozenset[str],
    multi_word: Sequence[tuple[str, ...]] = (),
    start: int = 0,
    end: int | None = None,
) -> tuple[int, int] | None:
    """Locate the first occurrence of a currency unit.

    At each position multi-word names are tried before single words, so
    "saudi riyals" wins over "riyals".

    Args:
        tokens: Normalized tokens
        unit_set: Single-word unit names
        multi_word: Multi-word unit names as token tuples
        start: First index to scan (inclusive)
        end: Last index (exclusive); defaults to len(tokens)

    Returns:
        (start, end) token span of the unit, or None if absent

    Example:
        >>> find_currency_unit(["ten", "saudi", "riyals"], frozenset({"riyal"}),
        ...                    [("saudi", "riyals")])
        (1, 3)
    """
    stop = len(tokens) if end is None else end
    for i in range(start, stop):
        for parts in multi_word:
            span_end = i + len(parts)
            if span_end <= stop and tuple(tokens[i:span_end]) == parts:
                return i, span_end
        if tokens[i] in unit_set:
            return i, i + 1
    return None


def contains_currency_unit(tokens: Sequence[str], vocabulary: CurrencyVocabulary) -> bool:
    """Check whether any main or fractional unit occurs in the tokens."""
    return (
        find_currency_unit(tokens, vocabulary.main_unit_set, vocabulary.main_unit_multi_word)
        is not None
        or find_currency_unit(
            tokens, vocabulary.fractional_unit_set, vocabulary.fractional_unit_multi_word
        )
        is not None
    )


def _cldr_currency_names(currency_code: str, locale_code: str | None) -> list[str]:
    """Return CLDR display, singular and plural names of a currency."""
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel.core import UnknownLocaleError as BabelUnknownLocaleError  # noqa: PLC0415
    from babel.numbers import get_currency_name  # noqa: PLC0415

    code = currency_code.strip().upper()
    cldr_locale_code = locale_code or _CLDR_FALLBACK_LOCALE
    try:
        locale = get_babel_locale(cldr_locale_code)
    except (BabelUnknownLocaleError, ValueError) as e:
        logger.warning(
            "No CLDR data for locale '%s': %s. Using '%s' currency names",
            cldr_locale_code,
            e,
            _CLDR_FALLBACK_LOCALE,
        )
        cldr_locale_code = _CLDR_FALLBACK_LOCALE
        locale = get_babel_locale(cldr_locale_code)

    if code not in locale.currencies:
        raise CurrencyCodeError(ErrorTemplate.currency_code_unknown(code, cldr_locale_code))

    return [
        locale.currencies[code],
        get_currency_name(code, count=1, locale=locale),
        get_currency_name(code, count=2, locale=locale),
    ]


def resolve_currency_vocabulary(
    grammar: CompiledGrammar,
    overrides: CurrencyOverride | None,
    *,
    locale_code: str | None = None,
) -> CurrencyVocabulary:
    """Merge per-call currency overrides ahead of the grammar's vocabulary.

    Override words come first and are normalized like grammar words, so a
    custom "Dollar" is found before the grammar's "Rupee". The grammar's own
    words stay recognized.

    Args:
        grammar: Compiled grammar supplying the base vocabulary
        overrides: Per-call unit names and/or ISO 4217 code (None: grammar only)
        locale_code: Grammar locale, used for CLDR name lookup

    Returns:
        Effective currency vocabulary

    Raises:
        CurrencyCodeError: If overrides.code has no CLDR name
    """
    if overrides is None:
        return CurrencyVocabulary.from_grammar(grammar)

    cs = grammar.case_sensitive
    main = [overrides.name, overrides.plural, overrides.singular]
    fractional = [
        overrides.fractional_name,
        overrides.fractional_plural,
        overrides.fractional_singular,
    ]
    if overrides.code:
        main.extend(_cldr_currency_names(overrides.code, locale_code))

    main_words = [normalize_word(w, cs) for w in main if w]
    fractional_words = [normalize_word(w, cs) for w in fractional if w]
    return CurrencyVocabulary.from_words(
        [*main_words, *grammar.main_unit],
        [*fractional_words, *grammar.fractional_unit],
    )


def parse_currency(
    tokens: Sequence[str],
    grammar: CompiledGrammar,
    vocabulary: CurrencyVocabulary | None = None,
    *,
    precision: int = 2,
    ignore_decimal: bool = False,
    ignore_zero_currency: bool = False,
) -> CurrencyParse:
    """Parse a currency phrase into main and fractional amounts.

    Segmentation:

    - Leading minus and trailing "only" are stripped.
    - Both units: main amount before the main unit; fractional amount
      between the main unit (plus one optional conjunction) and the
      fractional unit.
    - Main unit only: main amount before it.
    - Fractional unit only: fractional amount before it.
    - No unit: the whole phrase is the main amount.

    Args:
        tokens: Normalized tokens
        grammar: Compiled grammar
        vocabulary: Unit words (defaults to the grammar's own)
        precision: Fractional digits per main unit (2: cents)
        ignore_decimal: Drop the fractional amount entirely
        ignore_zero_currency: Report zero amounts as a non-negative zero

    Returns:
        CurrencyParse with amounts, signed value and sign flag

    Example:
        >>> tokens = ["fifty", "two", "rupees", "and", "thirty", "paise", "only"]
        >>> parse_currency(tokens, en_in_grammar).value  # doctest: +SKIP
        Decimal('52.30')
    """
    vocab = vocabulary or CurrencyVocabulary.from_grammar(grammar)

    start, end = 0, len(tokens)
    is_negative = False
    if start < end and tokens[start] in grammar.minus_words:
        is_negative = True
        start += 1
    if start < end and tokens[end - 1] in grammar.only_words:
        end -= 1

    main_match = find_currency_unit(
        tokens, vocab.main_unit_set, vocab.main_unit_multi_word, start, end
    )
    fractional_match = find_currency_unit(
        tokens, vocab.fractional_unit_set, vocab.fractional_unit_multi_word, start, end
    )

    main_amount = 0
    fractional_amount = 0
    match (main_match, fractional_match):
        case (None, None):
            main_amount = parse_integer(tokens, grammar, start, end)
        case ((main_start, _), None):
            main_amount = parse_integer(tokens, grammar, start, main_start)
        case (None, (fractional_start, _)):
            fractional_amount = parse_integer(tokens, grammar, start, fractional_start)
        case ((main_start, main_end), (fractional_start, _)):
            main_amount = parse_integer(tokens, grammar, start, main_start)
            segment_start = main_end
            if segment_start < end and tokens[segment_start] in grammar.and_words_set:
                segment_start += 1
            fractional_amount = parse_integer(tokens, grammar, segment_start, fractional_start)

    if ignore_zero_currency and main_amount == 0 and fractional_amount == 0:
        return CurrencyParse(0, 0, fixed_point(0, precision), is_negative=False)

    if ignore_decimal:
        fractional_amount = 0

    value = fixed_point(main_amount * 10**precision + fractional_amount, precision)
    if is_negative:
        value = value.copy_negate()

    return CurrencyParse(main_amount, fractional_amount, value, is_negative)
