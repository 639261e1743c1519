"""English (India): lakh/crore grouping, rupees and paise."""

from tonumbers.grammar.description import (
    CurrencyDescription,
    CurrencyUnit,
    GrammarDescription,
    NumberWord,
    TextMarkers,
)

from .en_us import BELOW_HUNDRED, ORDINAL_WORDS

__all__ = ["GRAMMAR"]

GRAMMAR = GrammarDescription(
    currency=CurrencyDescription(
        main=CurrencyUnit(name="Rupee", plural="Rupees", singular="Rupee", symbol="₹"),
        fractional=CurrencyUnit(name="Paisa", plural="Paise", singular="Paisa"),
    ),
    texts=TextMarkers(and_="And", minus="Minus", point="Point", only="Only"),
    number_words=(
        NumberWord(10_000_000, "Crore"),
        NumberWord(100_000, "Lakh"),
        NumberWord(1_000, "Thousand"),
        NumberWord(100, "Hundred"),
        *BELOW_HUNDRED,
    ),
    ordinal_suffix="th",
    ordinal_words=ORDINAL_WORDS,
)
