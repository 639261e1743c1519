"""Locale registry: identifier -> GrammarDescription.

Ships a small set of bundled grammars and accepts more at runtime, either as
in-code GrammarDescription values or loaded from JSON (see
tonumbers.grammar.load_grammar).

Identifiers are matched case- and separator-insensitively: "en-US", "en_US"
and "EN-us" name the same entry. available_locales() reports identifiers in
the form they were registered.

Thread Safety:
    Registration and lookup are guarded by an RLock. Descriptions are frozen
    dataclasses and may be shared freely.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from threading import RLock

from tonumbers.diagnostics import (
    ErrorTemplate,
    LocaleRegistrationError,
    UnknownLocaleError,
)
from tonumbers.grammar.cache import GrammarCache, default_cache
from tonumbers.grammar.description import GrammarDescription
from tonumbers.locale_utils import normalize_locale

from . import ar_sa, en_in, en_us, fr_fr, it_it, ko_kr, lv_lv, sw_ke

__all__ = [
    "BUNDLED",
    "LocaleRegistry",
    "available_locales",
    "get_grammar_description",
    "is_registered",
    "register_locale",
    "registry",
]

logger = logging.getLogger(__name__)

# Grammars available without registration
BUNDLED: Mapping[str, GrammarDescription] = {
    "ar-SA": ar_sa.GRAMMAR,
    "en-IN": en_in.GRAMMAR,
    "en-US": en_us.GRAMMAR,
    "fr-FR": fr_fr.GRAMMAR,
    "it-IT": it_it.GRAMMAR,
    "ko-KR": ko_kr.GRAMMAR,
    "lv-LV": lv_lv.GRAMMAR,
    "sw-KE": sw_ke.GRAMMAR,
}


class LocaleRegistry:
    """Thread-safe mapping of locale identifiers to grammar descriptions.

    Supports dict-like introspection:
        - __contains__: Check if a locale is registered (supports 'in')
        - __iter__: Iterate over registered identifiers
        - __len__: Count registered locales

    Example:
        >>> reg = LocaleRegistry()
        >>> reg.register("en-US", en_us.GRAMMAR)
        >>> "en_us" in reg
        True
        >>> reg.get("EN-US") is en_us.GRAMMAR
        True
    """

    __slots__ = ("_entries", "_lock")

    def __init__(self, initial: Mapping[str, GrammarDescription] | None = None) -> None:
        """Initialize registry.

        Args:
            initial: Grammars to register up front, keyed by identifier
        """
        # normalized key -> (identifier as registered, description)
        self._entries: dict[str, tuple[str, GrammarDescription]] = {
            normalize_locale(code): (code, description)
            for code, description in (initial or {}).items()
        }
        self._lock = RLock()

    def register(
        self,
        locale_code: str,
        description: GrammarDescription,
        *,
        replace: bool = False,
        cache: GrammarCache | None = None,
    ) -> None:
        """Register a grammar under a locale identifier.

        Replacing an entry also drops its compiled grammar from the shared
        cache so later lookups see the new description. Converters built
        with their own GrammarCache keep the old grammar unless that cache
        is passed as well.

        Args:
            locale_code: Locale identifier ("en-US", "pt_BR")
            description: Grammar description
            replace: Overwrite an existing registration
            cache: Additional cache to invalidate on replace

        Raises:
            LocaleRegistrationError: If already registered and replace is False
            TypeError: If description is not a GrammarDescription
        """
        if not isinstance(description, GrammarDescription):
            msg = f"Expected GrammarDescription, got {type(description).__name__}"
            raise TypeError(msg)

        key = normalize_locale(locale_code)
        with self._lock:
            if key in self._entries:
                if not replace:
                    raise LocaleRegistrationError(
                        ErrorTemplate.locale_already_registered(locale_code)
                    )
                logger.warning("Replacing registered grammar for locale '%s'", locale_code)
                default_cache.discard(key)
                if cache is not None:
                    cache.discard(key)
            self._entries[key] = (locale_code.strip(), description)
        logger.info("Registered grammar for locale '%s'", locale_code)

    def get(self, locale_code: str) -> GrammarDescription:
        """Look up the grammar for a locale identifier.

        Raises:
            UnknownLocaleError: If the identifier is not registered
        """
        key = normalize_locale(locale_code)
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None:
                return entry[1]
            available = [code for code, _ in self._entries.values()]
        raise UnknownLocaleError(
            ErrorTemplate.locale_unknown(locale_code, available),
            locale_code=locale_code,
        )

    def canonical_code(self, locale_code: str) -> str | None:
        """Return the identifier as registered, or None if unknown."""
        with self._lock:
            entry = self._entries.get(normalize_locale(locale_code))
        return None if entry is None else entry[0]

    def locales(self) -> tuple[str, ...]:
        """Return registered identifiers, sorted."""
        with self._lock:
            return tuple(sorted(code for code, _ in self._entries.values()))

    def __contains__(self, locale_code: object) -> bool:
        if not isinstance(locale_code, str):
            return False
        with self._lock:
            return normalize_locale(locale_code) in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.locales())

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


registry = LocaleRegistry(BUNDLED)


def register_locale(
    locale_code: str,
    description: GrammarDescription,
    *,
    replace: bool = False,
    cache: GrammarCache | None = None,
) -> None:
    """Register a grammar in the shared registry (see LocaleRegistry.register)."""
    registry.register(locale_code, description, replace=replace, cache=cache)


def get_grammar_description(locale_code: str) -> GrammarDescription:
    """Return the registered grammar for a locale identifier.

    Raises:
        UnknownLocaleError: If the identifier is not registered

    Example:
        >>> get_grammar_description("en-us").texts.point
        'Point'
    """
    return registry.get(locale_code)


def is_registered(locale_code: str) -> bool:
    """Check whether a locale identifier has a registered grammar."""
    return locale_code in registry


def available_locales() -> tuple[str, ...]:
    """Return every registered locale identifier, sorted.

    Example:
        >>> "en-IN" in available_locales()
        True
    """
    return registry.locales()
