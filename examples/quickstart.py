"""Quickstart example for tonumbers.

Converts spelled-out numbers, decimals, ordinals and currency amounts in
several bundled languages, then registers a grammar at runtime.

Note: Unknown words never raise; they count as zero. Only non-text or blank
input raises InvalidInputError.
"""

import tempfile
from pathlib import Path

from tonumbers import (
    ConverterOptions,
    CurrencyOverride,
    InvalidInputError,
    ToNumbers,
    UnknownLocaleError,
    available_locales,
    load_grammar,
    register_locale,
)

# Example 1: Cardinals
print("=" * 50)
print("Example 1: Cardinals")
print("=" * 50)

en_us = ToNumbers("en-US")
print(en_us.convert("Nine Billion Eight Hundred Seventy Six Million Five Hundred "
                    "Forty Three Thousand Two Hundred Ten"))
# Output: 9876543210

print(ToNumbers("en-IN").convert("Two Crore Fifty Lakh"))
# Output: 25000000

# Example 2: Decimals and ordinals
print("\n" + "=" * 50)
print("Example 2: Decimals and Ordinals")
print("=" * 50)

print(repr(en_us.convert("Zero Point Zero Six Three")))
# Output: Decimal('0.063')

result = en_us.parse("Minus Twenty Third")
print(result.value, result.is_negative, result.is_ordinal)
# Output: -23 True True

# Example 3: Currency
print("\n" + "=" * 50)
print("Example 3: Currency")
print("=" * 50)

result = ToNumbers("en-IN").parse("Fifty Two Rupees And Thirty Paise Only")
print(result.value, result.currency_info)
# Output: 52.30 CurrencyInfo(main_amount=52, fractional_amount=30)

euros = ConverterOptions(currency_options=CurrencyOverride(code="EUR"))
print(en_us.convert("Ten Euros And Five Cents", euros))
# Output: 10.05

print(en_us.convert("Seven", ConverterOptions(currency=True, fractional_precision=3)))
# Output: 7.000

# Example 4: Other languages
print("\n" + "=" * 50)
print("Example 4: Other Languages")
print("=" * 50)

for locale_code, text in [
    ("lv-LV", "divi simti divdesmit trīs"),
    ("ko-KR", "삼천오백"),
    ("ar-SA", "ألفان"),
    ("it-IT", "Dieci Milioni"),
    ("sw-KE", "Mia Moja"),
    ("fr-FR", "Quatre-Vingt-Dix-Sept"),
]:
    print(f"{locale_code}: {text} -> {ToNumbers(locale_code).convert(text)}")

# Example 5: Runtime grammars
print("\n" + "=" * 50)
print("Example 5: Runtime Grammars")
print("=" * 50)

grammar_json = """
{
  "number_words": [
    {"number": 1000, "value": "Mil"},
    {"number": 100, "value": "Cien"},
    {"number": 20, "value": "Veinte"},
    {"number": 2, "value": "Dos"},
    {"number": 1, "value": ["Uno", "Un"]}
  ],
  "texts": {"and": "Y", "minus": "Menos", "point": "Punto"},
  "currency": {"main": {"name": "Peso", "plural": "Pesos"}}
}
"""
with tempfile.TemporaryDirectory() as tmp:
    path = Path(tmp) / "es.json"
    path.write_text(grammar_json, encoding="utf-8")
    register_locale("es-XX", load_grammar(path), replace=True)

spanish = ToNumbers("es-XX")
print(spanish.convert("Dos Mil Veinte Y Uno"))
# Output: 2021
print(spanish.convert("Veinte Pesos"))
# Output: 20.00
print(", ".join(available_locales()))

# Example 6: Errors
print("\n" + "=" * 50)
print("Example 6: Errors")
print("=" * 50)

try:
    en_us.convert("   ")
except InvalidInputError as e:
    if e.diagnostic is not None:
        print(e.diagnostic.format_error())

try:
    ToNumbers("en-UK", eager=True)
except UnknownLocaleError as e:
    if e.diagnostic is not None:
        print(e.diagnostic.format_error())

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
