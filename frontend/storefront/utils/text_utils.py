"""
Text helpers for search
"""
import re
import unicodedata
from typing import Callable, Optional

_NON_ALPHANUMERIC = re.compile(r'[^a-z0-9\s]')
_WHITESPACE = re.compile(r'\s+')


def normalize_text(text: str) -> str:
    """
    Normalize text for accent- and punctuation-insensitive comparison

    Lowercases, decomposes (NFD), drops combining marks, drops anything that
    is not a-z, 0-9 or whitespace, then trims.

    >>> normalize_text("  Lápiz-HB! ")
    'lapizhb'
    """
    decomposed = unicodedata.normalize('NFD', text.lower())
    without_marks = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _NON_ALPHANUMERIC.sub('', without_marks).strip()


def _mark(word: str) -> str:
    return f"<mark>{word}</mark>"


def highlight_search_term(
    text: str,
    search_term: str,
    wrap: Optional[Callable[[str], str]] = None
) -> str:
    """
    Wrap every word of text whose normalized form contains the search term

    Words are split on whitespace and re-joined with single spaces.

    Args:
        text: Text to highlight
        search_term: Raw search input
        wrap: Decorates a matching word (default: <mark>word</mark>)
    """
    normalized_search = normalize_text(search_term)
    if not normalized_search:
        return text

    wrap = wrap or _mark

    return ' '.join(
        wrap(word) if normalized_search in normalize_text(word) else word
        for word in _WHITESPACE.split(text.strip())
    )
