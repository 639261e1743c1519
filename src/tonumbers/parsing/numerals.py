"""Numeral parsing: cardinal integers, decimal fractions and ordinals.

All functions take a token sequence (see tonumbers.parsing.tokenizer) and a
CompiledGrammar. Integer parsing is a recursive descent on the highest scale
word: the tokens left of it form the coefficient, the tokens right of it the
remainder. Recursion works on explicit [start, end) index ranges over one
token list, so no sub-lists are copied.

Unknown tokens contribute zero. Nothing in this module raises for any token
sequence.

Thread-safe. Pure functions over immutable grammars.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tonumbers.grammar.compiled import CompiledGrammar

__all__ = [
    "combine_decimal",
    "find_point_index",
    "fixed_point",
    "parse_decimal",
    "parse_integer",
    "parse_ordinal",
]


def parse_integer(
    tokens: Sequence[str],
    grammar: CompiledGrammar,
    start: int = 0,
    end: int | None = None,
) -> int:
    """Resolve a cardinal phrase to an integer.

    Args:
        tokens: Normalized tokens
        grammar: Compiled grammar of the tokens' language
        start: First token index (inclusive)
        end: Last token index (exclusive); defaults to len(tokens)

    Returns:
        Integer value (0 for an empty or all-unknown range)

    Example:
        >>> parse_integer(["two", "hundred", "and", "five"], en_grammar)  # doctest: +SKIP
        205
    """
    stop = len(tokens) if end is None else end
    if start >= stop:
        return 0

    conjunctions = grammar.and_words_set
    if conjunctions and any(tokens[i] in conjunctions for i in range(start, stop)):
        # Drop conjunctions once; the descent below never sees them again
        tokens = [tokens[i] for i in range(start, stop) if tokens[i] not in conjunctions]
        start, stop = 0, len(tokens)

    return _descend(tokens, grammar, start, stop)


def _descend(tokens: Sequence[str], grammar: CompiledGrammar, start: int, end: int) -> int:
    if start >= end:
        return 0

    scale_index = _highest_scale_index(tokens, grammar, start, end)
    if scale_index < 0:
        return _sum_simple(tokens, grammar, start, end)

    scale_token = tokens[scale_index]
    magnitude = grammar.word_to_number[scale_token]

    has_left = scale_index > start
    if has_left:
        coefficient = _descend(tokens, grammar, start, scale_index) or 1
    elif scale_token in grammar.implied_dual_words:
        coefficient = 2
    else:
        coefficient = 1

    right_start = scale_index + 1
    remainder = 0
    if right_start < end:
        # "<scale> <one>" with no coefficient qualifies the scale ("Mia Moja" = 100)
        postfix_one = (
            grammar.uses_postfix_one
            and not has_left
            and end - right_start == 1
            and tokens[right_start] in grammar.one_words
        )
        if not postfix_one:
            remainder = _descend(tokens, grammar, right_start, end)

    return coefficient * magnitude + remainder


def _highest_scale_index(
    tokens: Sequence[str], grammar: CompiledGrammar, start: int, end: int
) -> int:
    """Index of the first occurrence of the greatest scale word, or -1."""
    best_index = -1
    best_value = 0
    word_to_number = grammar.word_to_number
    scales = grammar.scale_values
    for i in range(start, end):
        value = word_to_number.get(tokens[i])
        if value is not None and value in scales and value > best_value:
            best_value = value
            best_index = i
    return best_index


def _sum_simple(tokens: Sequence[str], grammar: CompiledGrammar, start: int, end: int) -> int:
    word_to_number = grammar.word_to_number
    return sum(word_to_number.get(tokens[i], 0) for i in range(start, end))


def _is_digit_word(token: str, grammar: CompiledGrammar) -> bool:
    value = grammar.word_to_number.get(token)
    return value is not None and 0 <= value <= 9


def parse_decimal(
    tokens: Sequence[str],
    grammar: CompiledGrammar,
    start: int = 0,
    end: int | None = None,
) -> tuple[int, int]:
    """Resolve the tokens after a decimal point.

    Two policies:

    - Digit-by-digit when the first token is zero or every token is a single
      digit: "zero six three" -> (63, 3), preserving leading zeros.
    - Whole phrase otherwise: "sixty three" -> (63, 2), place count inferred
      from the value's digit count.

    Args:
        tokens: Normalized tokens
        grammar: Compiled grammar
        start: First fractional token index (inclusive)
        end: Last token index (exclusive); defaults to len(tokens)

    Returns:
        Tuple of (digits as integer, number of decimal places)
    """
    stop = len(tokens) if end is None else end
    if start >= stop:
        return 0, 0

    word_to_number = grammar.word_to_number
    digit_by_digit = word_to_number.get(tokens[start]) == 0 or all(
        _is_digit_word(tokens[i], grammar) for i in range(start, stop)
    )

    if digit_by_digit:
        digits = "".join(
            str(word_to_number[tokens[i]])
            for i in range(start, stop)
            if _is_digit_word(tokens[i], grammar)
        )
        return (int(digits) if digits else 0), len(digits)

    value = parse_integer(tokens, grammar, start, stop)
    return value, (len(str(value)) if value else 0)


def combine_decimal(integer_part: int, fraction: int, places: int) -> int | Decimal:
    """Join an integer part and decimal digits into an exact value.

    Returns the integer unchanged when there is no fractional part, otherwise
    a Decimal with exactly ``places`` digits after the point.

    Example:
        >>> combine_decimal(0, 63, 3)
        Decimal('0.063')
        >>> combine_decimal(7, 0, 2)
        7
    """
    if fraction == 0 or places == 0:
        return integer_part
    return fixed_point(integer_part * 10**places + fraction, places)


def fixed_point(units: int, places: int) -> Decimal:
    """Return units x 10**-places as an exact Decimal with that many places.

    Exact at any magnitude: construction from text ignores the context precision.

    Example:
        >>> fixed_point(5230, 2)
        Decimal('52.30')
    """
    return Decimal(f"{units}E-{places}")


def find_point_index(
    tokens: Sequence[str],
    grammar: CompiledGrammar,
    start: int = 0,
    end: int | None = None,
) -> int:
    """Return the index of the first decimal-point token, or -1.

    When a language spells its decimal point and its conjunction the same way,
    the marker is never a decimal point in plain-number context and -1 is
    returned.
    """
    if not grammar.point_words or grammar.point_is_conjunction:
        return -1
    stop = len(tokens) if end is None else end
    points = grammar.point_words
    for i in range(start, stop):
        if tokens[i] in points:
            return i
    return -1


def parse_ordinal(
    tokens: Sequence[str],
    grammar: CompiledGrammar,
    start: int = 0,
    end: int | None = None,
) -> int | None:
    """Resolve an ordinal phrase, or return None if it is not one.

    Resolution order:

    1. The whole phrase is an exact ordinal entry.
    2. The last token is the bare ordinal suffix, as concatenated scripts
       tokenize it ("삼" "번째" = 3): the tokens before it are a cardinal.
    3. The last token is an ordinal word.
    4. The last token is a cardinal word plus the ordinal suffix
       ("millionth" -> "million").
    5. Tokens before the ordinal word are parsed as a cardinal and added
       to it ("twenty third" = 23). Scale ordinals are the exception: they
       are not added but take the preceding tokens as their coefficient,
       so "two hundredth" is 200 rather than 102 and "three thousand
       two hundredth" is 3200.

    Args:
        tokens: Normalized tokens
        grammar: Compiled grammar
        start: First token index (inclusive)
        end: Last token index (exclusive); defaults to len(tokens)

    Returns:
        Ordinal value, or None
    """
    stop = len(tokens) if end is None else end
    if start >= stop:
        return None

    ordinals = grammar.ordinal_word_to_number
    if not ordinals and not grammar.ordinal_suffix:
        return None

    span = tokens[start:stop]
    exact = ordinals.get(" ".join(span))
    if exact is None and grammar.trim:
        exact = ordinals.get("".join(span))
    if exact is not None:
        return exact

    last = tokens[stop - 1]
    if last == grammar.ordinal_suffix:
        if stop - 1 == start:
            return None
        return parse_integer(tokens, grammar, start, stop - 1)

    value = ordinals.get(last)
    if value is None:
        value = _strip_ordinal_suffix(last, grammar)
    if value is None:
        return None

    if stop - 1 == start:
        return value

    if value in grammar.scale_values:
        # Substitute the cardinal scale word and parse the phrase as a whole
        cardinal = _cardinal_word_for(value, grammar)
        if cardinal is not None:
            return parse_integer([*tokens[start : stop - 1], cardinal], grammar)
    return parse_integer(tokens, grammar, start, stop - 1) + value


def _strip_ordinal_suffix(token: str, grammar: CompiledGrammar) -> int | None:
    suffix = grammar.ordinal_suffix
    if not suffix or len(token) <= len(suffix) or not token.endswith(suffix):
        return None
    return grammar.word_to_number.get(token[: -len(suffix)])


def _cardinal_word_for(value: int, grammar: CompiledGrammar) -> str | None:
    """Return a plain cardinal word spelling value (implied-dual words excluded)."""
    for word, number in grammar.word_to_number.items():
        if number == value and " " not in word and word not in grammar.implied_dual_words:
            return word
    return None
