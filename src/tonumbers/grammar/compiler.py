"""Grammar compiler: GrammarDescription -> CompiledGrammar.

Precomputes every lookup structure the parser needs in one pass:

1. Flatten numeral entries (all spellings, singular alternates) into the
   reverse word -> value map.
2. Add exact-phrase entries, single-word ones only. Multi-word idioms such as
   "hundred one" would make greedy tokenization mis-segment larger numbers
   containing that substring.
3. Add plural affix variants (base + plural_mark).
4. Apply dual/paucal/plural morphology per magnitude. A dual form distinct
   from paucal/plural maps to 2 x magnitude; a dual identical to one of them
   marks that shared word as implied-dual instead.
5. Derive scale values: mapped values in SCALE_VALUES or equal to twice one.
6. Derive one-words: single words mapping to 1.
7. Detect postfix-one usage from "<scale> <one>" exact phrases.
8. Assemble currency vocabulary (single-word sets, multi-word sequences).
9. Assemble the ordinal reverse map. Concatenated grammars also tokenize
   the bare ordinal suffix.
10. Precompute tokenizer orderings and marker sets.

compile_grammar() is a pure function of its input. Memoization lives in
tonumbers.grammar.cache.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import MappingProxyType

from tonumbers.constants import SCALE_VALUES
from tonumbers.diagnostics import ErrorTemplate, GrammarError
from tonumbers.parsing.tokenizer import normalize_word, sort_phrases, unit_phrase

from .compiled import CompiledGrammar
from .description import CurrencyUnit, GrammarDescription, NumberWord

__all__ = ["compile_grammar"]

logger = logging.getLogger(__name__)


def compile_grammar(
    description: GrammarDescription,
    *,
    locale_code: str | None = None,
) -> CompiledGrammar:
    """Compile a grammar description into parser lookup tables.

    Args:
        description: Declarative grammar of one language
        locale_code: Identifier used only in diagnostics and log records

    Returns:
        Immutable CompiledGrammar

    Raises:
        GrammarError: If the description has no number words, negative values
            or empty word forms

    Example:
        >>> from tonumbers.locales import get_grammar_description
        >>> grammar = compile_grammar(get_grammar_description("en-US"))
        >>> grammar.word_to_number["hundred"]
        100
        >>> 1_000_000 in grammar.scale_values
        True
    """
    _validate(description, locale_code)
    cs = description.case_sensitive

    def norm(word: str) -> str:
        return normalize_word(word, cs)

    # (1)-(4) reverse map and implied-dual words
    word_to_number: dict[str, int] = {}
    for entry in description.number_words:
        for form in entry.forms():
            word_to_number[norm(form)] = entry.number

    for entry in description.exact_words:
        for form in entry.forms():
            normalized = norm(form)
            if len(normalized.split()) == 1:
                word_to_number[normalized] = entry.number

    if description.plural_mark:
        for word in description.plural_words:
            base_value = word_to_number.get(norm(word))
            if base_value is not None:
                word_to_number[norm(word + description.plural_mark)] = base_value

    implied_dual: set[str] = set()
    for magnitude, forms in description.plural_forms:
        shared = {norm(f) for f in (forms.paucal, forms.plural) if f}
        if forms.dual:
            dual = norm(forms.dual)
            if dual in shared:
                implied_dual.add(dual)
            else:
                word_to_number[dual] = magnitude * 2
        for word in shared:
            word_to_number[word] = magnitude

    # (5) scale values
    doubled = {magnitude * 2 for magnitude in SCALE_VALUES}
    scale_values = frozenset(
        value for value in word_to_number.values() if value in SCALE_VALUES or value in doubled
    )

    # (6) one-words
    one_words = frozenset(
        word for word, value in word_to_number.items() if value == 1 and " " not in word
    )

    # (7) postfix-one detection
    uses_postfix_one = _detect_postfix_one(description.exact_words, one_words, norm)

    # (8) currency vocabulary
    main_unit = _unit_words(description.currency.main, norm)
    fractional_unit = _unit_words(description.currency.fractional, norm)

    # (9) ordinals
    ordinal_word_to_number: dict[str, int] = {}
    for entry in (*description.ordinal_words, *description.ordinal_exact_words):
        for form in entry.forms():
            ordinal_word_to_number[norm(form)] = entry.number
    ordinal_suffix = norm(description.ordinal_suffix) if description.ordinal_suffix else None

    # (10) markers and tokenizer orderings
    texts = description.texts
    and_words = _marker(texts.and_, norm)
    minus_words = _marker(texts.minus, norm)
    point_words = _marker(texts.point, norm)
    only_words = _marker(texts.only, norm)

    sorted_phrases = tuple(sort_phrases(word_to_number))
    multi_word_phrases = tuple(p for p in sorted_phrases if " " in p)
    # Concatenated text carries the suffix glued to any cardinal ("삼번째")
    suffix_token = (ordinal_suffix,) if description.trim and ordinal_suffix else ()
    special_words = tuple(
        w
        for w in (
            *minus_words,
            *point_words,
            *and_words,
            *only_words,
            *main_unit,
            *fractional_unit,
            *ordinal_word_to_number,
            *suffix_token,
        )
        if w
    )
    concatenated = {*word_to_number, *special_words}
    sorted_concatenated_words = tuple(sorted(concatenated, key=lambda w: (-len(w), w)))

    compiled = CompiledGrammar(
        word_to_number=MappingProxyType(word_to_number),
        scale_values=scale_values,
        implied_dual_words=frozenset(implied_dual),
        one_words=one_words,
        uses_postfix_one=uses_postfix_one,
        and_words=and_words,
        minus_words=minus_words,
        point_words=point_words,
        only_words=only_words,
        main_unit=main_unit,
        fractional_unit=fractional_unit,
        main_unit_set=frozenset(w for w in main_unit if " " not in w),
        fractional_unit_set=frozenset(w for w in fractional_unit if " " not in w),
        main_unit_multi_word=tuple(tuple(w.split()) for w in main_unit if " " in w),
        fractional_unit_multi_word=tuple(
            tuple(w.split()) for w in fractional_unit if " " in w
        ),
        ordinal_word_to_number=MappingProxyType(ordinal_word_to_number),
        ordinal_suffix=ordinal_suffix,
        sorted_phrases=sorted_phrases,
        multi_word_phrases=multi_word_phrases,
        special_words=special_words,
        sorted_concatenated_words=sorted_concatenated_words,
        and_words_set=frozenset(and_words),
        case_sensitive=cs,
        trim=description.trim,
        split_word=norm(description.split_word) if description.split_word else None,
    )

    logger.debug(
        "Compiled grammar %s: %d words, %d scales, %d ordinals, postfix_one=%s, implied_dual=%d",
        locale_code or "<injected>",
        len(word_to_number),
        len(scale_values),
        len(ordinal_word_to_number),
        uses_postfix_one,
        len(implied_dual),
    )
    return compiled


def _validate(description: GrammarDescription, locale_code: str | None) -> None:
    if not description.number_words:
        raise GrammarError(ErrorTemplate.grammar_invalid("number_words is empty", locale_code))
    for group in (
        description.number_words,
        description.exact_words,
        description.ordinal_words,
        description.ordinal_exact_words,
    ):
        for entry in group:
            if entry.number < 0:
                reason = f"negative number {entry.number} for {entry.value!r}"
                raise GrammarError(ErrorTemplate.grammar_invalid(reason, locale_code))
            if not any(form.strip() for form in entry.forms()):
                reason = f"entry for {entry.number} has no word form"
                raise GrammarError(ErrorTemplate.grammar_invalid(reason, locale_code))


def _detect_postfix_one(
    exact_words: tuple[NumberWord, ...],
    one_words: frozenset[str],
    norm: Callable[[str], str],
) -> bool:
    """Find a two-token exact phrase "<scale> <one>" whose value is a magnitude."""
    for entry in exact_words:
        if entry.number not in SCALE_VALUES:
            continue
        for form in entry.forms():
            parts = norm(form).split()
            if len(parts) == 2 and parts[1] in one_words:
                return True
    return False


def _unit_words(unit: CurrencyUnit, norm: Callable[[str], str]) -> tuple[str, ...]:
    words = [unit_phrase(norm(w)) for w in unit.words()]
    return tuple(dict.fromkeys(w for w in words if w))


def _marker(text: str, norm: Callable[[str], str]) -> tuple[str, ...]:
    normalized = norm(text) if text else ""
    return (normalized,) if normalized else ()
