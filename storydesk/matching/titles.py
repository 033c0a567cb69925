"""
Story title normalization and comparison.

Titles in the planning and metrics sheets are typed by different people.
Both sides of every comparison go through normalize_title first.
"""

import re

from ..config.defaults import MatcherParams
from ..errors import UnparseableTitleError

_QUOTES = re.compile(r"[\"'`‘’‚‛“”„‟′″]")
_SEPARATORS = re.compile(r"[:\-‐‑‒–—―]")
_PUNCTUATION = re.compile(r"[.,!?;]")
_WHITESPACE = re.compile(r"\s+")


def normalize_title(title: object) -> str:
    """
    Normalize a story title for matching.

    Lowercases, strips quotes and apostrophes (straight and smart), turns
    colons and dashes into spaces, strips .,!?; and collapses whitespace.
    Applying it twice gives the same result as applying it once.

    Args:
        title: Raw title cell, None is treated as empty

    Returns:
        Normalized title, "" when nothing is left
    """
    if title is None:
        return ""

    text = str(title).lower()
    text = _QUOTES.sub("", text)
    text = _SEPARATORS.sub(" ", text)
    text = _PUNCTUATION.sub("", text)
    return _WHITESPACE.sub(" ", text).strip()


def require_title(title: object) -> str:
    """
    Normalize a title that must be usable for matching.

    Raises:
        UnparseableTitleError: If nothing is left after normalization
    """
    normalized = normalize_title(title)
    if not normalized:
        raise UnparseableTitleError("Title is empty after normalization", raw_value=title)
    return normalized


def significant_words(normalized: str, min_length: int) -> set[str]:
    """Words of at least min_length characters in a normalized title."""
    return {word for word in normalized.split(" ") if len(word) >= min_length}


def titles_fuzzy_match(a: str, b: str, params: MatcherParams) -> bool:
    """
    Fuzzy comparison of two normalized titles.

    Matches when both are long enough and one contains the other, or when
    they share enough significant words regardless of order.
    """
    if not a or not b:
        return False

    min_length = params.fuzzy_min_substring_length
    if len(a) >= min_length and len(b) >= min_length and (a in b or b in a):
        return True

    shared = significant_words(a, params.fuzzy_min_word_length) & significant_words(
        b, params.fuzzy_min_word_length
    )
    return len(shared) >= params.fuzzy_min_shared_words
