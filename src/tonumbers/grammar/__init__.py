"""Grammar descriptions, compilation and the compiled-grammar cache.

Public API:
    GrammarDescription - Declarative per-language grammar (inert data)
    compile_grammar - GrammarDescription -> CompiledGrammar
    CompiledGrammar - Immutable parser lookup tables
    GrammarCache - Thread-safe memo of compiled grammars
    grammar_from_mapping / load_grammar - Grammars from JSON data

Python 3.13+. Zero external dependencies.
"""

from .cache import GrammarCache, default_cache
from .compiled import CompiledGrammar
from .compiler import compile_grammar
from .description import (
    CurrencyDescription,
    CurrencyUnit,
    GrammarDescription,
    NumberWord,
    PluralFormVariants,
    TextMarkers,
)
from .loading import grammar_from_mapping, load_grammar

__all__ = [
    "CompiledGrammar",
    "CurrencyDescription",
    "CurrencyUnit",
    "GrammarCache",
    "GrammarDescription",
    "NumberWord",
    "PluralFormVariants",
    "TextMarkers",
    "compile_grammar",
    "default_cache",
    "grammar_from_mapping",
    "load_grammar",
]
