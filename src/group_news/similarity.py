"""Title similarity scoring."""

from __future__ import annotations

from collections.abc import Set

from group_news.normalize import title_tokens


def token_overlap(tokens_a: Set[str], tokens_b: Set[str]) -> float:
    """
    Overlap coefficient of two token sets: |A ∩ B| / min(|A|, |B|).

    Unlike Jaccard it does not penalize a short headline that is a subset of
    a longer one. Empty sets score 0, so two empty titles are dissimilar.
    """
    smallest = min(len(tokens_a), len(tokens_b))
    if smallest == 0:
        return 0.0
    return len(tokens_a & tokens_b) / smallest


def overlap_similarity(normalized_a: str, normalized_b: str) -> float:
    """Overlap coefficient of two normalized titles."""
    return token_overlap(title_tokens(normalized_a), title_tokens(normalized_b))
