"""ToNumbers - main API for converting number phrases to numbers.

Composes tokenizer, compiled grammar and numeral parser:

    text -> validate -> clean -> tokenize(grammar) -> parse(grammar) -> ParseResult

Python 3.13+. External dependency: Babel (CLDR currency names, on demand).
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from decimal import Decimal

from tonumbers.constants import DEFAULT_LOCALE, LOG_TRUNCATE
from tonumbers.diagnostics import ErrorTemplate, InvalidInputError
from tonumbers.grammar import (
    CompiledGrammar,
    GrammarCache,
    GrammarDescription,
    compile_grammar,
    default_cache,
)
from tonumbers.locales import get_grammar_description
from tonumbers.parsing import (
    CurrencyVocabulary,
    clean_input,
    combine_decimal,
    contains_currency_unit,
    find_point_index,
    parse_currency,
    parse_decimal,
    parse_integer,
    parse_ordinal,
    resolve_currency_vocabulary,
    tokenize,
    tokenize_concatenated,
)

from .options import ConverterOptions
from .value_types import CurrencyInfo, NumericValue, ParseResult

__all__ = ["ToNumbers"]

logger = logging.getLogger(__name__)


class ToNumbers:
    """Converter from natural-language number phrases to numbers.

    Configured either by locale identifier (looked up in the locale registry
    on first use) or by injecting a GrammarDescription directly.

    Thread Safety:
        The compiled grammar is built once under a lock (shared through
        GrammarCache for registry locales). After that every call only reads
        immutable data, so one instance may serve many threads.

    Example:
        >>> tn = ToNumbers("en-US")
        >>> tn.convert("Nine Billion Eight Hundred Seventy Six Million Five Hundred "
        ...            "Forty Three Thousand Two Hundred Ten")
        9876543210
        >>> tn.convert("Zero Point Zero Six Three")
        Decimal('0.063')
        >>> result = ToNumbers("en-IN").parse("Fifty Two Rupees And Thirty Paise Only")
        >>> result.value, result.currency_info.main_amount
        (Decimal('52.30'), 52)
    """

    __slots__ = ("_cache", "_compiled", "_description", "_locale_code", "_lock", "_options")

    def __init__(
        self,
        locale_code: str = DEFAULT_LOCALE,
        /,
        *,
        grammar: GrammarDescription | None = None,
        options: ConverterOptions | None = None,
        cache: GrammarCache | None = None,
        eager: bool = False,
    ) -> None:
        """Initialize converter.

        Args:
            locale_code: Locale identifier ("en-US", "lv_LV") [positional-only].
                With an injected grammar it only names the grammar in
                diagnostics and selects the CLDR locale for currency codes.
            grammar: Grammar description to use instead of a registry lookup
            options: Instance-wide default options, merged under per-call ones
            cache: Compiled-grammar cache (default: shared module cache)
            eager: Compile now instead of on first use; an unknown locale then
                raises here

        Raises:
            UnknownLocaleError: If eager and the locale is not registered
            GrammarError: If eager and the grammar is malformed
        """
        self._locale_code = locale_code
        self._description = grammar
        self._options = options if options is not None else ConverterOptions()
        self._cache = cache if cache is not None else default_cache
        self._compiled: CompiledGrammar | None = None
        self._lock = threading.RLock()

        logger.debug(
            "ToNumbers configured for locale: %s (injected=%s, eager=%s)",
            locale_code,
            grammar is not None,
            eager,
        )
        if eager:
            _ = self.compiled_grammar

    @property
    def locale_code(self) -> str:
        """Locale identifier this converter was configured with."""
        return self._locale_code

    @property
    def options(self) -> ConverterOptions:
        """Instance-wide default options."""
        return self._options

    @property
    def compiled_grammar(self) -> CompiledGrammar:
        """Compiled grammar, built on first access.

        Raises:
            UnknownLocaleError: If no grammar is injected and the locale is
                not registered
            GrammarError: If the grammar description is malformed
        """
        compiled = self._compiled
        if compiled is not None:
            return compiled

        with self._lock:
            if self._compiled is None:
                self._compiled = self._build_grammar()
            return self._compiled

    def _build_grammar(self) -> CompiledGrammar:
        description = self._description
        if description is not None:
            return compile_grammar(description, locale_code=self._locale_code)

        registered = get_grammar_description(self._locale_code)
        return self._cache.get_or_compile(
            self._locale_code,
            lambda: compile_grammar(registered, locale_code=self._locale_code),
        )

    def set_grammar(self, description: GrammarDescription) -> None:
        """Inject a grammar description, replacing the current one.

        The next conversion compiles the new grammar.
        """
        with self._lock:
            self._description = description
            self._compiled = None
        logger.debug("Grammar injected for locale: %s", self._locale_code)

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> ToNumbers("en-US")
            ToNumbers(locale_code='en-US', injected=False, compiled=False)
        """
        return (
            f"ToNumbers(locale_code={self._locale_code!r}, "
            f"injected={self._description is not None}, "
            f"compiled={self._compiled is not None})"
        )

    def convert(self, text: object, options: ConverterOptions | None = None) -> NumericValue:
        """Convert a number phrase to its value.

        Args:
            text: Number phrase
            options: Per-call options, overriding instance defaults

        Returns:
            int for whole numbers; Decimal for fractional and currency values

        Raises:
            InvalidInputError: If text is not a string or is blank after cleaning
            UnknownLocaleError: If the configured locale is not registered
            CurrencyCodeError: If options name an unknown ISO 4217 code
        """
        return self.parse(text, options).value

    def parse(self, text: object, options: ConverterOptions | None = None) -> ParseResult:
        """Parse a number phrase into a value with metadata.

        Mode selection: options.currency True forces currency parsing, False
        forces plain parsing, None picks currency parsing when a main or
        fractional unit word occurs in the phrase.

        Args:
            text: Number phrase
            options: Per-call options, overriding instance defaults

        Returns:
            ParseResult

        Raises:
            InvalidInputError: If text is not a string or is blank after cleaning
            UnknownLocaleError: If the configured locale is not registered
            CurrencyCodeError: If options name an unknown ISO 4217 code

        Example:
            >>> ToNumbers("en-US").parse("Minus Twenty Third")
            ParseResult(value=-23, is_currency=False, is_negative=True, is_ordinal=True, currency_info=None)
        """
        cleaned = clean_input(text)
        if not cleaned:
            raise InvalidInputError(ErrorTemplate.invalid_input(text))

        grammar = self.compiled_grammar
        opts = self._options.merged_with(options)
        vocabulary = resolve_currency_vocabulary(
            grammar, opts.currency_options, locale_code=self._locale_code
        )
        tokens = self._tokenize(cleaned, grammar, vocabulary, custom=opts.currency_options is not None)

        currency_mode = opts.currency
        if currency_mode is None:
            currency_mode = contains_currency_unit(tokens, vocabulary)

        logger.debug(
            "Parsing %r as %s: %d tokens",
            cleaned[:LOG_TRUNCATE],
            "currency" if currency_mode else "number",
            len(tokens),
        )

        if currency_mode:
            return self._parse_currency(tokens, grammar, vocabulary, opts)
        return self._parse_number(tokens, grammar, opts)

    @staticmethod
    def _tokenize(
        cleaned: str,
        grammar: CompiledGrammar,
        vocabulary: CurrencyVocabulary,
        *,
        custom: bool,
    ) -> list[str]:
        if grammar.trim:
            if custom:
                # Custom unit words are not in the precomputed ordering
                return tokenize_concatenated(
                    cleaned,
                    grammar.word_to_number,
                    case_sensitive=grammar.case_sensitive,
                    additional_words=(*grammar.special_words, *vocabulary.additional_words),
                )
            return tokenize_concatenated(
                cleaned,
                grammar.word_to_number,
                case_sensitive=grammar.case_sensitive,
                sorted_words=grammar.sorted_concatenated_words,
            )
        return tokenize(
            cleaned,
            case_sensitive=grammar.case_sensitive,
            word_map=grammar.word_to_number,
            sorted_phrases=grammar.multi_word_phrases,
        )

    @staticmethod
    def _parse_number(
        tokens: Sequence[str],
        grammar: CompiledGrammar,
        opts: ConverterOptions,
    ) -> ParseResult:
        start, end = 0, len(tokens)
        has_minus = start < end and tokens[start] in grammar.minus_words
        if has_minus:
            start += 1

        is_ordinal = False
        value: NumericValue
        point = find_point_index(tokens, grammar, start, end)
        if point < 0:
            ordinal = parse_ordinal(tokens, grammar, start, end)
            if ordinal is not None:
                value = ordinal
                is_ordinal = True
            else:
                value = parse_integer(tokens, grammar, start, end)
        elif opts.ignore_decimal:
            value = parse_integer(tokens, grammar, start, point)
        else:
            integer_part = parse_integer(tokens, grammar, start, point)
            fraction, places = parse_decimal(tokens, grammar, point + 1, end)
            value = combine_decimal(integer_part, fraction, places)

        if has_minus:
            value = value.copy_negate() if isinstance(value, Decimal) else -value

        return ParseResult(
            value=value,
            is_currency=False,
            is_negative=has_minus and value != 0,
            is_ordinal=is_ordinal,
        )

    @staticmethod
    def _parse_currency(
        tokens: Sequence[str],
        grammar: CompiledGrammar,
        vocabulary: CurrencyVocabulary,
        opts: ConverterOptions,
    ) -> ParseResult:
        parsed = parse_currency(
            tokens,
            grammar,
            vocabulary,
            precision=opts.precision,
            ignore_decimal=bool(opts.ignore_decimal),
            ignore_zero_currency=bool(opts.ignore_zero_currency),
        )
        return ParseResult(
            value=parsed.value,
            is_currency=True,
            is_negative=parsed.is_negative,
            currency_info=CurrencyInfo(parsed.main_amount, parsed.fractional_amount),
        )
