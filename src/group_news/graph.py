"""Build the title similarity graph."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ProcessPoolExecutor

from group_news.config import validate_threshold
from group_news.errors import ConfigurationError
from group_news.models import Article, NormalizedArticle
from group_news.normalize import normalize_title, title_tokens
from group_news.similarity import token_overlap

logger = logging.getLogger(__name__)

Adjacency = dict[int, set[int]]


def normalize_articles(articles: Sequence[Article]) -> list[NormalizedArticle]:
    """Normalize every title once for the current run."""
    return [
        NormalizedArticle(index=index, tokens=title_tokens(normalize_title(article.title)))
        for index, article in enumerate(articles)
    ]


def _score_rows(
    token_sets: Sequence[frozenset[str]],
    rows: range,
    threshold: float,
) -> list[tuple[int, int]]:
    """Return (i, j) edges with i in rows and j > i."""
    edges = []
    count = len(token_sets)
    for i in rows:
        tokens_i = token_sets[i]
        for j in range(i + 1, count):
            if token_overlap(tokens_i, token_sets[j]) >= threshold:
                edges.append((i, j))
    return edges


def _shard_rows(count: int, workers: int) -> list[range]:
    # Contiguous equal-width row ranges; later rows have fewer pairs.
    size = -(-count // workers)
    return [range(start, min(start + size, count)) for start in range(0, count, size)]


def build_graph(
    articles: Sequence[Article],
    threshold: float,
    workers: int = 1,
    normalized: Sequence[NormalizedArticle] | None = None,
) -> Adjacency:
    """
    Connect every pair of articles whose title similarity reaches threshold.

    Scores all i < j pairs, so cost is O(n^2) in the batch size. With
    workers > 1 the rows are split into shards scored in separate
    processes; edges are merged in shard order, so the graph is the same
    as a single-process run.

    Args:
        articles: Input articles, identified by position.
        threshold: Minimum overlap coefficient for an edge, in [0, 1].
        workers: Number of processes for the pair loop.
        normalized: Precomputed title tokens for this run, if already built.

    Returns:
        Symmetric adjacency with an entry for every article index.

    Raises:
        ConfigurationError: If threshold or workers is invalid.
    """
    threshold = validate_threshold(threshold)
    if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
        raise ConfigurationError(f"workers must be a positive integer, got {workers!r}")

    if normalized is None:
        normalized = normalize_articles(articles)
    token_sets = [item.tokens for item in normalized]
    count = len(token_sets)

    if workers == 1 or count < 2:
        edges = _score_rows(token_sets, range(count), threshold)
    else:
        shards = _shard_rows(count, min(workers, count))
        logger.info("Scoring %d pairs across %d shards", count * (count - 1) // 2, len(shards))
        with ProcessPoolExecutor(max_workers=len(shards)) as executor:
            futures = [
                executor.submit(_score_rows, token_sets, rows, threshold) for rows in shards
            ]
            edges = [edge for future in futures for edge in future.result()]

    adjacency: Adjacency = {index: set() for index in range(count)}
    for i, j in edges:
        adjacency[i].add(j)
        adjacency[j].add(i)

    logger.info("Built similarity graph: %d articles, %d edges (threshold=%s)", count, len(edges), threshold)
    return adjacency


def edge_count(adjacency: Adjacency) -> int:
    """Number of undirected edges."""
    return sum(len(neighbours) for neighbours in adjacency.values()) // 2
