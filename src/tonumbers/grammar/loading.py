"""Grammar loading from plain data.

Builds GrammarDescription records from JSON-compatible mappings so grammar
tables can live outside the code base as inert data files.

Mapping layout (snake_case keys mirror the dataclass fields)::

    {
      "number_words": [{"number": 1, "value": "One"}, ...],
      "exact_words": [{"number": 100, "value": "Mia Moja"}],
      "texts": {"and": "And", "minus": "Minus", "point": "Point", "only": "Only"},
      "currency": {
        "main": {"name": "Rupee", "plural": "Rupees", "singular": "Rupee"},
        "fractional": {"name": "Paisa", "plural": "Paise"}
      },
      "plural_forms": {"1000000": {"dual": "Milioni", "plural": "Milioni"}},
      "ordinal_suffix": "th",
      "trim": false
    }

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from tonumbers.diagnostics import ErrorTemplate, GrammarError

from .description import (
    CurrencyDescription,
    CurrencyUnit,
    GrammarDescription,
    NumberWord,
    PluralFormVariants,
    TextMarkers,
)

__all__ = ["grammar_from_mapping", "load_grammar"]


def _number_words(entries: Sequence[Mapping[str, Any]] | None) -> tuple[NumberWord, ...]:
    words: list[NumberWord] = []
    for entry in entries or ():
        value = entry["value"]
        if not isinstance(value, str):
            value = tuple(value)
        words.append(
            NumberWord(
                number=int(entry["number"]),
                value=value,
                singular_value=entry.get("singular_value"),
            )
        )
    return tuple(words)


def _currency_unit(data: Mapping[str, Any] | None) -> CurrencyUnit:
    data = data or {}
    return CurrencyUnit(
        name=data.get("name", ""),
        plural=data.get("plural", ""),
        singular=data.get("singular", ""),
        symbol=data.get("symbol", ""),
    )


def grammar_from_mapping(data: Mapping[str, Any]) -> GrammarDescription:
    """Build a GrammarDescription from a JSON-compatible mapping.

    Args:
        data: Mapping in the layout documented at module level

    Returns:
        Equivalent GrammarDescription

    Raises:
        GrammarError: If required keys are missing or values have the wrong shape

    Example:
        >>> grammar = grammar_from_mapping({"number_words": [{"number": 1, "value": "One"}]})
        >>> grammar.number_words[0].number
        1
    """
    try:
        texts = data.get("texts", {})
        currency = data.get("currency", {})
        return GrammarDescription(
            number_words=_number_words(data["number_words"]),
            currency=CurrencyDescription(
                main=_currency_unit(currency.get("main")),
                fractional=_currency_unit(currency.get("fractional")),
            ),
            texts=TextMarkers(
                and_=texts.get("and", ""),
                minus=texts.get("minus", ""),
                point=texts.get("point", ""),
                only=texts.get("only", ""),
            ),
            exact_words=_number_words(data.get("exact_words")),
            ordinal_words=_number_words(data.get("ordinal_words")),
            ordinal_exact_words=_number_words(data.get("ordinal_exact_words")),
            ordinal_suffix=data.get("ordinal_suffix"),
            plural_mark=data.get("plural_mark"),
            plural_words=tuple(data.get("plural_words", ())),
            plural_forms={
                int(magnitude): PluralFormVariants(
                    dual=forms.get("dual"),
                    paucal=forms.get("paucal"),
                    plural=forms.get("plural"),
                )
                for magnitude, forms in data.get("plural_forms", {}).items()
            },
            ignore_one_for_words=tuple(data.get("ignore_one_for_words", ())),
            split_word=data.get("split_word"),
            trim=bool(data.get("trim", False)),
            case_sensitive=bool(data.get("case_sensitive", False)),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        diagnostic = ErrorTemplate.grammar_invalid(f"{type(e).__name__}: {e}")
        raise GrammarError(diagnostic) from e


def load_grammar(path: str | Path) -> GrammarDescription:
    """Load a GrammarDescription from a UTF-8 JSON file.

    Args:
        path: Path to the JSON grammar file

    Returns:
        Parsed GrammarDescription

    Raises:
        GrammarError: If the file cannot be read, is not valid JSON, or does
            not describe a grammar
    """
    file_path = Path(path)
    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        diagnostic = ErrorTemplate.grammar_file_unreadable(str(file_path), str(e))
        raise GrammarError(diagnostic) from e

    if not isinstance(data, Mapping):
        diagnostic = ErrorTemplate.grammar_file_unreadable(
            str(file_path), f"expected a JSON object, got {type(data).__name__}"
        )
        raise GrammarError(diagnostic)

    return grammar_from_mapping(data)
