"""Arabic (Saudi Arabia).

Teens are two-word numerals ("أحد عشر"). Scale words carry distinct dual
("ألفان" = 2000) and paucal ("آلاف", used after 3-10) forms.
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
        main=CurrencyUnit(name="ريال", plural="ريالات", singular="ريال", symbol="﷼"),
        fractional=CurrencyUnit(name="هللة", plural="هللات", singular="هللة"),
    ),
    texts=TextMarkers(and_="و", minus="سالب", point="فاصلة", only="فقط"),
    number_words=(
        NumberWord(1_000_000_000, "مليار"),
        NumberWord(1_000_000, "مليون"),
        NumberWord(1_000, "ألف"),
        NumberWord(900, "تسعمائة"),
        NumberWord(800, "ثمانمائة"),
        NumberWord(700, "سبعمائة"),
        NumberWord(600, "ستمائة"),
        NumberWord(500, "خمسمائة"),
        NumberWord(400, "أربعمائة"),
        NumberWord(300, "ثلاثمائة"),
        NumberWord(100, "مائة"),
        NumberWord(90, "تسعون"),
        NumberWord(80, "ثمانون"),
        NumberWord(70, "سبعون"),
        NumberWord(60, "ستون"),
        NumberWord(50, "خمسون"),
        NumberWord(40, "أربعون"),
        NumberWord(30, "ثلاثون"),
        NumberWord(20, "عشرون"),
        NumberWord(19, "تسعة عشر"),
        NumberWord(18, "ثمانية عشر"),
        NumberWord(17, "سبعة عشر"),
        NumberWord(16, "ستة عشر"),
        NumberWord(15, "خمسة عشر"),
        NumberWord(14, "أربعة عشر"),
        NumberWord(13, "ثلاثة عشر"),
        NumberWord(12, "اثنا عشر"),
        NumberWord(11, "أحد عشر"),
        NumberWord(10, "عشرة"),
        NumberWord(9, "تسعة"),
        NumberWord(8, "ثمانية"),
        NumberWord(7, "سبعة"),
        NumberWord(6, "ستة"),
        NumberWord(5, "خمسة"),
        NumberWord(4, "أربعة"),
        NumberWord(3, "ثلاثة"),
        NumberWord(2, "اثنان"),
        NumberWord(1, "واحد"),
        NumberWord(0, "صفر"),
    ),
    plural_forms={
        100: PluralFormVariants(dual="مائتان"),
        1_000: PluralFormVariants(dual="ألفان", paucal="آلاف"),
        1_000_000: PluralFormVariants(dual="مليونان", paucal="ملايين"),
        1_000_000_000: PluralFormVariants(dual="ملياران", paucal="مليارات"),
    },
)
