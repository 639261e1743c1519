"""Compiled grammar: every lookup structure the parser needs.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

__all__ = ["CompiledGrammar"]


@dataclass(frozen=True, slots=True)
class CompiledGrammar:
    """Immutable lookup tables derived from a GrammarDescription.

    Built by compile_grammar(); never constructed by hand. All words are
    already normalized (lowercased unless case_sensitive). Mappings are
    read-only proxies and sets are frozensets, so one instance may be shared
    freely between threads.

    Attributes:
        word_to_number: Reverse map word -> value (duplicate forms: last wins)
        scale_values: Mapped values that act as multiplicative scales
        implied_dual_words: Words whose bare appearance means 2 x magnitude
        one_words: Single words mapping to 1
        uses_postfix_one: "<scale> <one>" exact phrases exist, so a trailing
            one after a bare scale qualifies the scale instead of adding 1
        and_words / minus_words / point_words / only_words: Marker words
        main_unit / fractional_unit: Currency words in declaration order
        main_unit_set / fractional_unit_set: Single-word currency lookups
        main_unit_multi_word / fractional_unit_multi_word: Multi-word
            currency names pre-split into token sequences
        ordinal_word_to_number: Ordinal word or phrase -> value
        ordinal_suffix: Normalized ordinal suffix ("th"), if any
        sorted_phrases: Vocabulary ordered for longest-match tokenization
        multi_word_phrases: Multi-word subset of sorted_phrases
        special_words: Markers, currency and ordinal words for
            concatenated tokenization
        sorted_concatenated_words: Vocabulary plus special words, longest first
        and_words_set: Conjunction lookup set
        case_sensitive: Matching is case-sensitive
        trim: Script concatenates words without spaces
        split_word: Normalized compound-joining word, if any
    """

    word_to_number: Mapping[str, int]
    scale_values: frozenset[int]
    implied_dual_words: frozenset[str]
    one_words: frozenset[str]
    uses_postfix_one: bool
    and_words: tuple[str, ...]
    minus_words: tuple[str, ...]
    point_words: tuple[str, ...]
    only_words: tuple[str, ...]
    main_unit: tuple[str, ...]
    fractional_unit: tuple[str, ...]
    main_unit_set: frozenset[str]
    fractional_unit_set: frozenset[str]
    main_unit_multi_word: tuple[tuple[str, ...], ...]
    fractional_unit_multi_word: tuple[tuple[str, ...], ...]
    ordinal_word_to_number: Mapping[str, int]
    ordinal_suffix: str | None
    sorted_phrases: tuple[str, ...]
    multi_word_phrases: tuple[str, ...]
    special_words: tuple[str, ...]
    sorted_concatenated_words: tuple[str, ...]
    and_words_set: frozenset[str]
    case_sensitive: bool
    trim: bool
    split_word: str | None

    def value_of(self, token: str) -> int | None:
        """Return the value of a cardinal word, or None if unknown."""
        return self.word_to_number.get(token)

    def is_scale(self, token: str) -> bool:
        """Check whether a token is a scale word (hundred, lakh, million...)."""
        value = self.word_to_number.get(token)
        return value is not None and value in self.scale_values

    @property
    def point_is_conjunction(self) -> bool:
        """True when the decimal marker is textually the conjunction marker."""
        return bool(self.point_words) and bool(self.and_words) and (
            self.point_words[0] == self.and_words[0]
        )
