"""Latvian (Latvia).

Hundreds above one are two-word numerals ("divi simti"); billions and up take
the plural affix "i" ("miljardi"). Conjunction "un", decimal "komats".
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
        main=CurrencyUnit(name="eiro", plural="eiro", symbol="€"),
        fractional=CurrencyUnit(name="cents", plural="centi"),
    ),
    texts=TextMarkers(and_="un", minus="mīnus", point="komats"),
    number_words=(
        NumberWord(1_000_000_000_000_000, "kvadriljon"),
        NumberWord(1_000_000_000_000, "triljon"),
        NumberWord(1_000_000_000, "miljard"),
        NumberWord(1_000_000, "miljoni", singular_value="miljons"),
        NumberWord(1_000, "tūkstoši", singular_value="tūkstotis"),
        NumberWord(900, "deviņi simti"),
        NumberWord(800, "astoņi simti"),
        NumberWord(700, "septiņi simti"),
        NumberWord(600, "seši simti"),
        NumberWord(500, "pieci simti"),
        NumberWord(400, "četri simti"),
        NumberWord(300, "trīs simti"),
        NumberWord(200, "divi simti"),
        NumberWord(100, "simtu"),
        NumberWord(90, "deviņdesmit"),
        NumberWord(80, "astoņdesmit"),
        NumberWord(70, "septiņdesmit"),
        NumberWord(60, "sešdesmit"),
        NumberWord(50, "piecdesmit"),
        NumberWord(40, "četrdesmit"),
        NumberWord(30, "trīsdesmit"),
        NumberWord(20, "divdesmit"),
        NumberWord(19, "deviņpadsmit"),
        NumberWord(18, "astoņpadsmit"),
        NumberWord(17, "septiņpadsmit"),
        NumberWord(16, "sešpadsmit"),
        NumberWord(15, "piecpadsmit"),
        NumberWord(14, "četrdpadsmit"),
        NumberWord(13, "trīspadsmit"),
        NumberWord(12, "divpadsmit"),
        NumberWord(11, "vienpadsmit"),
        NumberWord(10, "desmit"),
        NumberWord(9, "deviņi"),
        NumberWord(8, "astoņi"),
        NumberWord(7, "septiņi"),
        NumberWord(6, "seši"),
        NumberWord(5, "pieci"),
        NumberWord(4, "četri"),
        NumberWord(3, "trīs"),
        NumberWord(2, "divi"),
        NumberWord(1, "viens"),
        NumberWord(0, "nulle"),
    ),
    ignore_one_for_words=(
        "simtu",
        "divi simti",
        "trīs simti",
        "četri simti",
        "pieci simti",
        "seši simti",
        "septiņi simti",
        "astoņi simti",
        "deviņi simti",
    ),
    exact_words=(NumberWord(100, "Simtu"),),
    plural_mark="i",
    plural_words=("kvadriljon", "triljon", "miljard"),
    ordinal_words=(
        NumberWord(1_000_000, "Miljontais"),
        NumberWord(1_000, "Tūkstošais"),
        NumberWord(100, "Simtais"),
        NumberWord(90, "Deviņdesmitais"),
        NumberWord(80, "Astoņdesmitais"),
        NumberWord(70, "Septiņdesmitais"),
        NumberWord(60, "Sešdesmitais"),
        NumberWord(50, "Piecdesmitais"),
        NumberWord(40, "Četrdesmitais"),
        NumberWord(30, "Trīsdesmitais"),
        NumberWord(20, "Divdesmitais"),
        NumberWord(19, "Deviņpadsmitais"),
        NumberWord(18, "Astoņpadsmitais"),
        NumberWord(17, "Septiņpadsmitais"),
        NumberWord(16, "Sešpadsmitais"),
        NumberWord(15, "Piecpadsmitais"),
        NumberWord(14, "Četrpadsmitais"),
        NumberWord(13, "Trīspadsmitais"),
        NumberWord(12, "Divpadsmitais"),
        NumberWord(11, "Vienpadsmitais"),
        NumberWord(10, "Desmitais"),
        NumberWord(9, "Devītais"),
        NumberWord(8, "Astotais"),
        NumberWord(7, "Septītais"),
        NumberWord(6, "Sestais"),
        NumberWord(5, "Piektais"),
        NumberWord(4, "Ceturtais"),
        NumberWord(3, "Trešais"),
        NumberWord(2, "Otrais"),
        NumberWord(1, "Pirmais"),
    ),
)
