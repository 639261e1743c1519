"""English (United States): short scale, dollars and cents."""

from tonumbers.grammar.description import (
    CurrencyDescription,
    CurrencyUnit,
    GrammarDescription,
    NumberWord,
    TextMarkers,
)

__all__ = ["BELOW_HUNDRED", "GRAMMAR", "ORDINAL_WORDS"]

# Shared with other English grammars
BELOW_HUNDRED: tuple[NumberWord, ...] = (
    NumberWord(90, "Ninety"),
    NumberWord(80, "Eighty"),
    NumberWord(70, "Seventy"),
    NumberWord(60, "Sixty"),
    NumberWord(50, "Fifty"),
    NumberWord(40, "Forty"),
    NumberWord(30, "Thirty"),
    NumberWord(20, "Twenty"),
    NumberWord(19, "Nineteen"),
    NumberWord(18, "Eighteen"),
    NumberWord(17, "Seventeen"),
    NumberWord(16, "Sixteen"),
    NumberWord(15, "Fifteen"),
    NumberWord(14, "Fourteen"),
    NumberWord(13, "Thirteen"),
    NumberWord(12, "Twelve"),
    NumberWord(11, "Eleven"),
    NumberWord(10, "Ten"),
    NumberWord(9, "Nine"),
    NumberWord(8, "Eight"),
    NumberWord(7, "Seven"),
    NumberWord(6, "Six"),
    NumberWord(5, "Five"),
    NumberWord(4, "Four"),
    NumberWord(3, "Three"),
    NumberWord(2, "Two"),
    NumberWord(1, "One"),
    NumberWord(0, "Zero"),
)

ORDINAL_WORDS: tuple[NumberWord, ...] = (
    NumberWord(1_000, "Thousandth"),
    NumberWord(100, "Hundredth"),
    NumberWord(90, "Ninetieth"),
    NumberWord(80, "Eightieth"),
    NumberWord(70, "Seventieth"),
    NumberWord(60, "Sixtieth"),
    NumberWord(50, "Fiftieth"),
    NumberWord(40, "Fortieth"),
    NumberWord(30, "Thirtieth"),
    NumberWord(20, "Twentieth"),
    NumberWord(19, "Nineteenth"),
    NumberWord(18, "Eighteenth"),
    NumberWord(17, "Seventeenth"),
    NumberWord(16, "Sixteenth"),
    NumberWord(15, "Fifteenth"),
    NumberWord(14, "Fourteenth"),
    NumberWord(13, "Thirteenth"),
    NumberWord(12, "Twelfth"),
    NumberWord(11, "Eleventh"),
    NumberWord(10, "Tenth"),
    NumberWord(9, "Ninth"),
    NumberWord(8, "Eighth"),
    NumberWord(7, "Seventh"),
    NumberWord(6, "Sixth"),
    NumberWord(5, "Fifth"),
    NumberWord(4, "Fourth"),
    NumberWord(3, "Third"),
    NumberWord(2, "Second"),
    NumberWord(1, "First"),
)

GRAMMAR = GrammarDescription(
    currency=CurrencyDescription(
        main=CurrencyUnit(name="Dollar", plural="Dollars", singular="Dollar", symbol="$"),
        fractional=CurrencyUnit(name="Cent", plural="Cents", singular="Cent", symbol="¢"),
    ),
    texts=TextMarkers(and_="And", minus="Minus", point="Point", only="Only"),
    number_words=(
        NumberWord(1_000_000_000_000_000, "Quadrillion"),
        NumberWord(1_000_000_000_000, "Trillion"),
        NumberWord(1_000_000_000, "Billion"),
        NumberWord(1_000_000, "Million"),
        NumberWord(1_000, "Thousand"),
        NumberWord(100, "Hundred"),
        *BELOW_HUNDRED,
    ),
    # "Millionth", "Billionth" etc. resolve through the suffix
    ordinal_suffix="th",
    ordinal_words=ORDINAL_WORDS,
)
