"""Italian (Italy), space-separated word forms.

"Milioni" and "Miliardi" are both the dual and the plural form, so a bare
"Milioni" means two million while "Dieci Milioni" is ten million.
"""

from tonumbers.grammar.description import (
    CurrencyDescription,
    CurrencyUnit,
    GrammarDescription,
    NumberWord,
    PluralFormVariants,
    TextMarkers,
)

__all__ = ["GRAMMAR"]

GRAMMAR = GrammarDescription(
    currency=CurrencyDescription(
        main=CurrencyUnit(name="Euro", plural="Euro", singular="Euro", symbol="€"),
        fractional=CurrencyUnit(name="Centesimo", plural="Centesimi", singular="Centesimo"),
    ),
    texts=TextMarkers(and_="E", minus="Meno", point="Virgola"),
    number_words=(
        NumberWord(1_000_000_000, "Miliardo"),
        NumberWord(1_000_000, "Milione"),
        NumberWord(1_000, "Mille"),
        NumberWord(100, "Cento"),
        NumberWord(90, "Novanta"),
        NumberWord(80, "Ottanta"),
        NumberWord(70, "Settanta"),
        NumberWord(60, "Sessanta"),
        NumberWord(50, "Cinquanta"),
        NumberWord(40, "Quaranta"),
        NumberWord(30, "Trenta"),
        NumberWord(20, "Venti"),
        NumberWord(19, "Diciannove"),
        NumberWord(18, "Diciotto"),
        NumberWord(17, "Diciassette"),
        NumberWord(16, "Sedici"),
        NumberWord(15, "Quindici"),
        NumberWord(14, "Quattordici"),
        NumberWord(13, "Tredici"),
        NumberWord(12, "Dodici"),
        NumberWord(11, "Undici"),
        NumberWord(10, "Dieci"),
        NumberWord(9, "Nove"),
        NumberWord(8, "Otto"),
        NumberWord(7, "Sette"),
        NumberWord(6, "Sei"),
        NumberWord(5, "Cinque"),
        NumberWord(4, "Quattro"),
        NumberWord(3, "Tre"),
        NumberWord(2, "Due"),
        NumberWord(1, ("Uno", "Un")),
        NumberWord(0, "Zero"),
    ),
    plural_forms={
        1_000: PluralFormVariants(plural="Mila"),
        1_000_000: PluralFormVariants(dual="Milioni", plural="Milioni"),
        1_000_000_000: PluralFormVariants(dual="Miliardi", plural="Miliardi"),
    },
    ordinal_words=(
        NumberWord(10, "Decimo"),
        NumberWord(9, "Nono"),
        NumberWord(8, "Ottavo"),
        NumberWord(7, "Settimo"),
        NumberWord(6, "Sesto"),
        NumberWord(5, "Quinto"),
        NumberWord(4, "Quarto"),
        NumberWord(3, "Terzo"),
        NumberWord(2, "Secondo"),
        NumberWord(1, "Primo"),
    ),
)
