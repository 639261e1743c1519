"""Tokenizer for word-based number phrases.

Turns raw text into canonical word tokens for a grammar. Two modes:

- Space-delimited: longest multi-word phrase first (must end at a whitespace
  boundary), otherwise one whitespace-delimited word; unknown hyphenated
  compounds split on hyphens, known hyphenated idioms ("vingt-et-un") stay whole.
- Concatenated: greedy longest vocabulary match for scripts written without
  spaces (Korean); unmatched characters are skipped as noise.

Never raises for string input. Unmatched text is dropped or passed through
as an unknown token, which the parser treats as zero.

Thread-safe. Pure functions, no shared state.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Collection, Iterable, Mapping, Sequence

__all__ = [
    "clean_input",
    "is_number_word",
    "normalize_word",
    "sort_phrases",
    "tokenize",
    "tokenize_concatenated",
    "unit_phrase",
]

_WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")

# Pre-compiled patterns for clean_input
_TRAILING_PUNCT = re.compile(r"[.,]+(?=\s|$)")
_MULTI_SPACE = re.compile(r"\s+")


def normalize_word(word: str, case_sensitive: bool = False) -> str:
    """Normalize a word for consistent matching.

    Args:
        word: Raw word or phrase
        case_sensitive: Keep original case when True

    Returns:
        Stripped word, lowercased unless case_sensitive

    Example:
        >>> normalize_word("  Hundred ")
        'hundred'
        >>> normalize_word("ONE", True)
        'ONE'
    """
    normalized = word.strip()
    if not case_sensitive:
        normalized = normalized.lower()
    return normalized


def clean_input(text: object) -> str:
    """Clean and normalize an input string.

    Strips sentence punctuation (``.`` / ``,``) adjacent to whitespace or the
    end of text, collapses whitespace runs to one space and trims. Idempotent:
    ``clean_input(clean_input(s)) == clean_input(s)``.

    Args:
        text: Raw input; non-string values yield ""

    Returns:
        Cleaned text

    Example:
        >>> clean_input("  One   Hundred. ")
        'One Hundred'
    """
    if not isinstance(text, str) or not text:
        return ""
    without_punct = _TRAILING_PUNCT.sub("", text)
    return _MULTI_SPACE.sub(" ", without_punct).strip()


def is_number_word(token: str, word_map: Mapping[str, int]) -> bool:
    """Check if a token is a known number word."""
    return token in word_map


def unit_phrase(name: str) -> str:
    """Re-space a normalized unit name into the tokens text would yield.

    Hyphens separate words, as in unknown compounds during tokenization.

    Example:
        >>> unit_phrase("dollars des états-unis")
        'dollars des états unis'
    """
    return " ".join(tokenize(name, case_sensitive=True))


def sort_phrases(phrases: Iterable[str]) -> list[str]:
    """Order phrases for longest-match tokenization.

    Sorted by descending word count, then descending length, then
    alphabetically so the order is deterministic.
    """
    return sorted(set(phrases), key=lambda p: (-len(p.split()), -len(p), p))


def tokenize(
    text: object,
    *,
    case_sensitive: bool = False,
    word_map: Mapping[str, int] | None = None,
    sorted_phrases: Sequence[str] | None = None,
) -> list[str]:
    """Tokenize space-delimited text into word tokens.

    Args:
        text: Input text; non-string values yield []
        case_sensitive: Keep original case when True
        word_map: Known vocabulary. When given, multi-word phrases are matched
            first and known hyphenated words are kept whole.
        sorted_phrases: Multi-word phrases in match order (see sort_phrases).
            Derived from word_map when omitted.

    Returns:
        List of tokens

    Example:
        >>> tokenize("One Hundred Twenty-One")
        ['one', 'hundred', 'twenty', 'one']
        >>> tokenize("cent vingt-et-un", word_map={"cent": 100, "vingt-et-un": 21})
        ['cent', 'vingt-et-un']
    """
    if not isinstance(text, str) or not text:
        return []

    normalized = text.strip()
    if not case_sensitive:
        normalized = normalized.lower()

    if word_map is not None:
        if sorted_phrases is None:
            sorted_phrases = sort_phrases(w for w in word_map if " " in w)
        return _tokenize_with_phrases(normalized, word_map, sorted_phrases)

    tokens: list[str] = []
    for word in normalized.split():
        if "-" in word:
            tokens.extend(part for part in word.split("-") if part)
        else:
            tokens.append(word)
    return tokens


def _tokenize_with_phrases(
    text: str,
    word_map: Mapping[str, int],
    phrases: Sequence[str],
) -> list[str]:
    tokens: list[str] = []
    pos = 0
    length = len(text)

    while pos < length:
        while pos < length and text[pos] in _WHITESPACE:
            pos += 1
        if pos >= length:
            break

        matched = False
        for phrase in phrases:
            end = pos + len(phrase)
            if not text.startswith(phrase, pos):
                continue
            # Phrase must end on a word boundary
            if end >= length or text[end] in _WHITESPACE:
                tokens.append(phrase)
                pos = end
                matched = True
                break
        if matched:
            continue

        word_end = pos
        while word_end < length and text[word_end] not in _WHITESPACE:
            word_end += 1
        word = text[pos:word_end]
        pos = word_end

        if word in word_map:
            tokens.append(word)
        elif "-" in word:
            tokens.extend(part for part in word.split("-") if part)
        else:
            tokens.append(word)

    return tokens


def tokenize_concatenated(
    text: object,
    word_map: Mapping[str, int],
    *,
    case_sensitive: bool = False,
    additional_words: Collection[str] = (),
    sorted_words: Sequence[str] | None = None,
) -> list[str]:
    """Tokenize text written without inter-word spaces.

    Greedy longest match against the vocabulary; on no match one character
    is skipped as noise. Every iteration advances, so work is bounded by
    the input length.

    Args:
        text: Input text; non-string values yield []
        word_map: Known number words
        case_sensitive: Keep original case when True
        additional_words: Marker and currency words to recognize as well
        sorted_words: Pre-sorted vocabulary (longest first); derived when omitted

    Returns:
        List of tokens

    Example:
        >>> tokenize_concatenated("onextwo", {"one": 1, "two": 2})
        ['one', 'two']
    """
    if not isinstance(text, str) or not text:
        return []

    normalized = text.strip()
    if not case_sensitive:
        normalized = normalized.lower()

    if sorted_words is None:
        vocabulary = {w for w in (*word_map, *additional_words) if w}
        sorted_words = sorted(vocabulary, key=lambda w: (-len(w), w))

    tokens: list[str] = []
    pos = 0
    length = len(normalized)
    while pos < length:
        for word in sorted_words:
            if word and normalized.startswith(word, pos):
                tokens.append(word)
                pos += len(word)
                break
        else:
            pos += 1

    return tokens
