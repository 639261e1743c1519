"""Declarative grammar descriptions.

A GrammarDescription is inert per-language data: word-to-value entries,
textual markers, currency vocabulary and morphology flags. One shared engine
consumes it; languages differ only in data, never in code.

All records are frozen dataclasses with slots. Collections are stored as
tuples so descriptions are hashable and safe to share across threads.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Vocabulary entries
    "NumberWord",
    "PluralFormVariants",
    # Markers and currency
    "TextMarkers",
    "CurrencyUnit",
    "CurrencyDescription",
    # Root record
    "GrammarDescription",
]


@dataclass(frozen=True, slots=True)
class NumberWord:
    """One word-to-value entry.

    Attributes:
        number: Value the word denotes
        value: Word form, or a tuple of alternate spellings
            (e.g., trailing and non-trailing forms)
        singular_value: Optional singular spelling mapping to the same value

    Example:
        >>> NumberWord(1_000_000, "Miljoni", singular_value="Miljons").forms()
        ('Miljoni', 'Miljons')
    """

    number: int
    value: str | tuple[str, ...]
    singular_value: str | None = None

    def forms(self) -> tuple[str, ...]:
        """Return every non-empty spelling, singular alternate last."""
        spellings = (self.value,) if isinstance(self.value, str) else tuple(self.value)
        if self.singular_value:
            spellings = (*spellings, self.singular_value)
        return tuple(s for s in spellings if s)


@dataclass(frozen=True, slots=True)
class PluralFormVariants:
    """Grammatical-number variants of one scale word.

    Attributes:
        dual: Form for exactly two (maps to 2 x magnitude when distinct)
        paucal: Form used with small counts (maps to the magnitude)
        plural: General plural form (maps to the magnitude)
    """

    dual: str | None = None
    paucal: str | None = None
    plural: str | None = None


@dataclass(frozen=True, slots=True)
class TextMarkers:
    """Textual markers recognized around numerals. Empty means absent.

    Attributes:
        and_: Conjunction dropped between numeral words ("and", "un", "و")
        minus: Negation marker at phrase start
        point: Decimal separator word
        only: Trailing currency qualifier ("only")
    """

    and_: str = ""
    minus: str = ""
    point: str = ""
    only: str = ""


@dataclass(frozen=True, slots=True)
class CurrencyUnit:
    """Names of one currency unit (main or fractional)."""

    name: str = ""
    plural: str = ""
    singular: str = ""
    symbol: str = ""

    def words(self) -> tuple[str, ...]:
        """Return the non-empty names in name, plural, singular order."""
        return tuple(w for w in (self.name, self.plural, self.singular) if w)


@dataclass(frozen=True, slots=True)
class CurrencyDescription:
    """Currency vocabulary of a language.

    Attributes:
        main: Main unit (rupee, dollar, euro)
        fractional: Fractional unit (paisa, cent)
    """

    main: CurrencyUnit = field(default_factory=CurrencyUnit)
    fractional: CurrencyUnit = field(default_factory=CurrencyUnit)


@dataclass(frozen=True, slots=True)
class GrammarDescription:
    """Complete declarative grammar of one language.

    Attributes:
        number_words: Cardinal entries (required, at least one)
        currency: Currency vocabulary
        texts: Conjunction / negation / decimal / "only" markers
        exact_words: Exact-phrase entries (only single-word ones reach the
            general map; multi-word ones signal postfix-one usage)
        ordinal_words: Ordinal entries ("first" -> 1)
        ordinal_exact_words: Exact ordinal phrases
        ordinal_suffix: Suffix turning a cardinal into an ordinal ("th")
        plural_mark: Affix appended to plural_words to form plurals
        plural_words: Words that take plural_mark
        plural_forms: Dual/paucal/plural variants keyed by magnitude; any
            mapping is accepted and stored as sorted (magnitude, variants) pairs
        ignore_one_for_words: Words that suppress a preceding "one"
        split_word: Word joining compound numerals in generated text
        trim: Script concatenates words without spaces
        case_sensitive: Disable case folding
    """

    number_words: tuple[NumberWord, ...]
    currency: CurrencyDescription = field(default_factory=CurrencyDescription)
    texts: TextMarkers = field(default_factory=TextMarkers)
    exact_words: tuple[NumberWord, ...] = ()
    ordinal_words: tuple[NumberWord, ...] = ()
    ordinal_exact_words: tuple[NumberWord, ...] = ()
    ordinal_suffix: str | None = None
    plural_mark: str | None = None
    plural_words: tuple[str, ...] = ()
    plural_forms: (
        tuple[tuple[int, PluralFormVariants], ...] | Mapping[int, PluralFormVariants]
    ) = ()
    ignore_one_for_words: tuple[str, ...] = ()
    split_word: str | None = None
    trim: bool = False
    case_sensitive: bool = False

    def __post_init__(self) -> None:
        """Freeze collection fields into tuples."""
        # object.__setattr__ is the documented escape hatch for frozen dataclasses
        for name in (
            "number_words",
            "exact_words",
            "ordinal_words",
            "ordinal_exact_words",
            "plural_words",
            "ignore_one_for_words",
        ):
            value = getattr(self, name)
            if not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

        forms = self.plural_forms
        pairs = forms.items() if isinstance(forms, Mapping) else forms
        object.__setattr__(
            self,
            "plural_forms",
            tuple(sorted(((int(k), v) for k, v in pairs), key=lambda pair: pair[0])),
        )
