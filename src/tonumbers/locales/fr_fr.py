"""French (France).

Regular hyphenated compounds ("Vingt-Deux", "Soixante-Douze") decompose
additively, so only the vigesimal eighties and nineties, whose parts do not
add up ("Quatre-Vingt-Six" is not 4 + 20 + 6), are listed whole.
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
        main=CurrencyUnit(name="Euro", plural="Euros", singular="Euro", symbol="€"),
        fractional=CurrencyUnit(name="Centime", plural="Centimes", singular="Centime"),
    ),
    texts=TextMarkers(and_="Et", minus="Moins", point="Virgule"),
    number_words=(
        NumberWord(1_000_000_000_000, "Billions", singular_value="Billion"),
        NumberWord(1_000_000_000, "Milliards", singular_value="Milliard"),
        NumberWord(1_000_000, "Millions", singular_value="Million"),
        NumberWord(1_000, "Mille"),
        NumberWord(100, "Cents", singular_value="Cent"),
        NumberWord(99, "Quatre-Vingt-Dix-Neuf"),
        NumberWord(98, "Quatre-Vingt-Dix-Huit"),
        NumberWord(97, "Quatre-Vingt-Dix-Sept"),
        NumberWord(96, "Quatre-Vingt-Seize"),
        NumberWord(95, "Quatre-Vingt-Quinze"),
        NumberWord(94, "Quatre-Vingt-Quatorze"),
        NumberWord(93, "Quatre-Vingt-Treize"),
        NumberWord(92, "Quatre-Vingt-Douze"),
        NumberWord(91, "Quatre-Vingt-Onze"),
        NumberWord(90, "Quatre-Vingt-Dix"),
        NumberWord(89, "Quatre-Vingt-Neuf"),
        NumberWord(88, "Quatre-Vingt-Huit"),
        NumberWord(87, "Quatre-Vingt-Sept"),
        NumberWord(86, "Quatre-Vingt-Six"),
        NumberWord(85, "Quatre-Vingt-Cinq"),
        NumberWord(84, "Quatre-Vingt-Quatre"),
        NumberWord(83, "Quatre-Vingt-Trois"),
        NumberWord(82, "Quatre-Vingt-Deux"),
        NumberWord(81, "Quatre-Vingt-Un"),
        NumberWord(80, ("Quatre-Vingts", "Quatre-Vingt")),
        NumberWord(60, "Soixante"),
        NumberWord(50, "Cinquante"),
        NumberWord(40, "Quarante"),
        NumberWord(30, "Trente"),
        NumberWord(20, "Vingt"),
        NumberWord(19, "Dix-Neuf"),
        NumberWord(18, "Dix-Huit"),
        NumberWord(17, "Dix-Sept"),
        NumberWord(16, "Seize"),
        NumberWord(15, "Quinze"),
        NumberWord(14, "Quatorze"),
        NumberWord(13, "Treize"),
        NumberWord(12, "Douze"),
        NumberWord(11, "Onze"),
        NumberWord(10, "Dix"),
        NumberWord(9, "Neuf"),
        NumberWord(8, "Huit"),
        NumberWord(7, "Sept"),
        NumberWord(6, "Six"),
        NumberWord(5, "Cinq"),
        NumberWord(4, "Quatre"),
        NumberWord(3, "Trois"),
        NumberWord(2, "Deux"),
        NumberWord(1, ("Un", "Une")),
        NumberWord(0, "Zéro"),
    ),
    # "Troisième", "Centième" etc. resolve through the suffix
    ordinal_suffix="ième",
    ordinal_words=(
        NumberWord(1_000_000, "Millionième"),
        NumberWord(1_000, "Millième"),
        NumberWord(60, "Soixantième"),
        NumberWord(50, "Cinquantième"),
        NumberWord(40, "Quarantième"),
        NumberWord(30, "Trentième"),
        NumberWord(16, "Seizième"),
        NumberWord(15, "Quinzième"),
        NumberWord(14, "Quatorzième"),
        NumberWord(13, "Treizième"),
        NumberWord(12, "Douzième"),
        NumberWord(11, "Onzième"),
        NumberWord(10, "Dixième"),
        NumberWord(9, "Neuvième"),
        NumberWord(5, "Cinquième"),
        NumberWord(4, "Quatrième"),
        NumberWord(1, ("Premier", "Première")),
    ),
)
