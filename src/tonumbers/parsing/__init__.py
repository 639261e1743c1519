"""Tokenization and numeral parsing.

Functions:
    tokenize / tokenize_concatenated - Text to normalized tokens
    parse_integer - Cardinal phrase to int (recursive descent on scale words)
    parse_decimal - Tokens after a decimal point to (digits, places)
    parse_ordinal - Ordinal phrase to int, or None
    parse_currency - Currency phrase to main/fractional amounts

Thread Safety:
    All functions are pure and operate on immutable compiled grammars.

Python 3.13+. Babel is used only for CLDR currency names.
"""

from .currency import (
    CurrencyParse,
    CurrencyVocabulary,
    contains_currency_unit,
    find_currency_unit,
    parse_currency,
    resolve_currency_vocabulary,
)
from .numerals import (
    combine_decimal,
    find_point_index,
    fixed_point,
    parse_decimal,
    parse_integer,
    parse_ordinal,
)
from .tokenizer import (
    clean_input,
    is_number_word,
    normalize_word,
    sort_phrases,
    tokenize,
    tokenize_concatenated,
    unit_phrase,
)

__all__ = [
    "CurrencyParse",
    "CurrencyVocabulary",
    "clean_input",
    "combine_decimal",
    "contains_currency_unit",
    "find_currency_unit",
    "find_point_index",
    "fixed_point",
    "is_number_word",
    "normalize_word",
    "parse_currency",
    "parse_decimal",
    "parse_integer",
    "parse_ordinal",
    "resolve_currency_vocabulary",
    "sort_phrases",
    "tokenize",
    "tokenize_concatenated",
    "unit_phrase",
]
