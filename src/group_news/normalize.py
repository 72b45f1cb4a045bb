"""Title normalization for near-duplicate detection."""

from __future__ import annotations

import re
import unicodedata
from typing import Any

STOPWORDS = frozenset(
    {
        "le", "la", "les", "un", "une", "à", "de", "en", "au", "aux",
        "est", "sur", "dans", "alors", "quand", "et", "par", "avec",
        "du", "des", "ce", "cet", "cette", "qui", "pour", "se", "sa", "son", "leur",
        "l", "d", "s", "ne", "pas", "plus", "moins", "comme", "ici", "selon", "dit",
    }
)

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")


# Tokens are compared after accent stripping, so "à" must also match as "a".
_FOLDED_STOPWORDS = STOPWORDS | {_strip_accents(word) for word in STOPWORDS}


def normalize_title(text: Any) -> str:
    """
    Normalize a headline for comparison.

    - Lowercase
    - Strip accents (NFD, drop combining marks)
    - Drop anything that is not an ASCII letter, digit or whitespace
    - Drop French stopwords

    Non-string or empty input gives an empty string.
    """
    if not isinstance(text, str) or not text:
        return ""

    text = _strip_accents(text.lower())
    text = _NON_ALNUM.sub("", text)
    return " ".join(word for word in text.split() if word not in _FOLDED_STOPWORDS)


def title_tokens(normalized: str) -> frozenset[str]:
    """Unique tokens of a normalized title."""
    return frozenset(normalized.split())
