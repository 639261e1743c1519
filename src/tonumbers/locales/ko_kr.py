"""Korean (South Korea): Sino-Korean numerals written without spaces.

Myriad grouping (만 10^4, 억 10^8, 조 10^12). trim=True selects concatenated
tokenization.
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
        main=CurrencyUnit(name="원", plural="원", symbol="₩"),
    ),
    texts=TextMarkers(and_="하고", minus="마이너스", point="점"),
    trim=True,
    number_words=(
        NumberWord(1_000_000_000_000, "조"),
        NumberWord(100_000_000, "억"),
        NumberWord(10_000, "만"),
        NumberWord(1_000, "천"),
        NumberWord(100, "백"),
        NumberWord(90, "구십"),
        NumberWord(80, "팔십"),
        NumberWord(70, "칠십"),
        NumberWord(60, "육십"),
        NumberWord(50, "오십"),
        NumberWord(40, "사십"),
        NumberWord(30, "삼십"),
        NumberWord(20, "이십"),
        NumberWord(19, "십구"),
        NumberWord(18, "십팔"),
        NumberWord(17, "십칠"),
        NumberWord(16, "십육"),
        NumberWord(15, "십오"),
        NumberWord(14, "십사"),
        NumberWord(13, "십삼"),
        NumberWord(12, "십이"),
        NumberWord(11, "십일"),
        NumberWord(10, "십"),
        NumberWord(9, "구"),
        NumberWord(8, "팔"),
        NumberWord(7, "칠"),
        NumberWord(6, "육"),
        NumberWord(5, "오"),
        NumberWord(4, "사"),
        NumberWord(3, "삼"),
        NumberWord(2, "이"),
        NumberWord(1, "일"),
        NumberWord(0, "영"),
    ),
    ordinal_suffix="번째",
    ordinal_words=(
        NumberWord(100, "백번째"),
        NumberWord(90, "구십번째"),
        NumberWord(80, "팔십번째"),
        NumberWord(70, "칠십번째"),
        NumberWord(60, "육십번째"),
        NumberWord(50, "오십번째"),
        NumberWord(40, "사십번째"),
        NumberWord(30, "삼십번째"),
        NumberWord(20, "이십번째"),
        NumberWord(10, "열번째"),
        NumberWord(9, "아홉번째"),
        NumberWord(8, "여덟번째"),
        NumberWord(7, "일곱번째"),
        NumberWord(6, "여섯번째"),
        NumberWord(5, "다섯번째"),
        NumberWord(4, "네번째"),
        NumberWord(3, "세번째"),
        NumberWord(2, "두번째"),
        NumberWord(1, "첫번째"),
    ),
)
