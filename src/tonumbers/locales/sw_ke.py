"""Swahili (Kenya).

"Mia Moja" and "Elfu Moja" are idioms for exactly one hundred / one
thousand: a trailing "Moja" after a bare scale word qualifies the scale
instead of adding one ("Moja Mia Moja" is still 101).
"""

from tonumbers.grammar.description import (
    CurrencyDescription,
    CurrencyUnit,
    GrammarDescription,
    NumberWord,
    TextMarkers,
)

__all__ = ["GRAMMAR"]

GRAMMAR = GrammarDescription(
    currency=CurrencyDescription(
        main=CurrencyUnit(name="Shilingi", plural="Shilingi", singular="Shilingi", symbol="KSh"),
        fractional=CurrencyUnit(name="Senti", plural="Senti", singular="Senti"),
    ),
    texts=TextMarkers(and_="Na", minus="Hasi", point="Nukta", only="Tu"),
    number_words=(
        NumberWord(1_000_000_000, "Bilioni"),
        NumberWord(1_000_000, "Milioni"),
        NumberWord(100_000, "Laki"),
        NumberWord(1_000, "Elfu"),
        NumberWord(100, "Mia"),
        NumberWord(90, "Tisini"),
        NumberWord(80, "Themanini"),
        NumberWord(70, "Sabini"),
        NumberWord(60, "Sitini"),
        NumberWord(50, "Hamsini"),
        NumberWord(40, "Arobaini"),
        NumberWord(30, "Thelathini"),
        NumberWord(20, "Ishirini"),
        NumberWord(10, "Kumi"),
        NumberWord(9, "Tisa"),
        NumberWord(8, "Nane"),
        NumberWord(7, "Saba"),
        NumberWord(6, "Sita"),
        NumberWord(5, "Tano"),
        NumberWord(4, "Nne"),
        NumberWord(3, "Tatu"),
        NumberWord(2, "Mbili"),
        NumberWord(1, "Moja"),
        NumberWord(0, "Sifuri"),
    ),
    exact_words=(
        NumberWord(100, "Mia Moja"),
        NumberWord(1_000, "Elfu Moja"),
    ),
)
