"""Locale identifier normalization and cached Babel lookups.

Registry keys, grammar cache keys and CLDR lookups all go through this
module so that "en-US", "en_US" and "EN-us" resolve to the same entry.

Python 3.13+. Babel is imported on first CLDR lookup.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Return the lowercase POSIX key for a locale identifier.

    Hyphens become underscores, case is folded and surrounding whitespace
    dropped. Territory and script subtags are kept: grammars differ per
    region (en-US counts in millions, en-IN in lakhs).

    Args:
        locale_code: BCP-47 ("en-US") or POSIX ("en_US") identifier

    Returns:
        Normalized key

    Example:
        >>> normalize_locale("en-US")
        'en_us'
        >>> normalize_locale(" KO_kr ")
        'ko_kr'
    """
    return locale_code.strip().replace("-", "_").lower()


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Parse a locale identifier into a Babel Locale, memoized.

    Used to read CLDR currency display names in a grammar's language.

    Args:
        locale_code: BCP-47 or POSIX identifier

    Returns:
        Babel Locale

    Raises:
        babel.core.UnknownLocaleError: If CLDR has no data for the identifier
        ValueError: If the identifier is malformed

    Example:
        >>> get_babel_locale("lv-LV").currencies["EUR"]
        'eiro'
    """
    # Deferred: importing babel loads CLDR metadata
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(locale_code.strip().replace("-", "_"))


def clear_locale_cache() -> None:
    """Forget every memoized Babel Locale."""
    get_babel_locale.cache_clear()
