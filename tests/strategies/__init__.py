"""Hypothesis strategies for tonumbers property-based testing.

Strategies are organized by domain:

- numerals: Spelled-out cardinals paired with expected values (en-US,
  en-IN, ko-KR), digit sequences and case transforms

Usage:
    from tests.strategies import english_cardinals, casings
    from tests.strategies.numerals import spell_english
"""

from .numerals import (
    casings,
    digit_word,
    english_cardinals,
    english_digit_words,
    indian_cardinals,
    korean_cardinals,
    spell_english,
    spell_indian,
    spell_korean,
)

__all__ = [
    "casings",
    "digit_word",
    "english_cardinals",
    "english_digit_words",
    "indian_cardinals",
    "korean_cardinals",
    "spell_english",
    "spell_indian",
    "spell_korean",
]
