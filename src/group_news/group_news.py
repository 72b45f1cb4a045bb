"""Group near-duplicate articles into stories."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from group_news.clusters import extract_clusters
from group_news.config import DEFAULT_THRESHOLD, validate_threshold
from group_news.errors import MalformedInputError
from group_news.graph import build_graph, edge_count, normalize_articles
from group_news.models import Article, Group
from group_news.summarize import summarize

logger = logging.getLogger(__name__)


def coerce_articles(records: Any) -> list[Article]:
    """Turn input records into Articles, rejecting anything that is not a record sequence."""
    if isinstance(records, (str, bytes, bytearray, Mapping)) or not isinstance(records, Sequence):
        raise MalformedInputError(
            f"Expected a sequence of article records, got {type(records).__name__}"
        )

    articles = []
    for position, record in enumerate(records):
        if isinstance(record, Article):
            articles.append(record)
        elif isinstance(record, Mapping):
            articles.append(Article.from_record(dict(record)))
        else:
            raise MalformedInputError(
                f"Article at position {position} is not a record: {type(record).__name__}"
            )
    return articles


def group_news(
    records: Sequence[Article | Mapping[str, Any]],
    threshold: float = DEFAULT_THRESHOLD,
    workers: int = 1,
) -> list[Group]:
    """
    Merge near-duplicate coverage into story groups.

    Args:
        records: Articles or article records, identified by position.
        threshold: Minimum title overlap for two articles to be linked.
        workers: Processes used for pairwise scoring.

    Returns:
        Groups ordered by size (largest first). Every input article appears
        in exactly one group.

    Raises:
        ConfigurationError: If threshold or workers is invalid.
        MalformedInputError: If records is not a sequence of records.
    """
    threshold = validate_threshold(threshold)
    articles = coerce_articles(records)

    if not articles:
        logger.warning("No articles to group")
        return []

    logger.info("Grouping %d articles (threshold=%s)", len(articles), threshold)

    normalized = normalize_articles(articles)
    adjacency = build_graph(articles, threshold, workers=workers, normalized=normalized)
    clusters = extract_clusters(len(articles), adjacency)
    groups = summarize(clusters, articles)

    logger.info(
        "Grouped %d articles into %d stories (%d edges, largest story has %d articles)",
        len(articles),
        len(groups),
        edge_count(adjacency),
        len(groups[0].articles),
    )
    return groups
