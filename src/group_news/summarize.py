"""Reduce clusters to displayable story groups."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime
from functools import cmp_to_key

from common.datetime import parse_pub_date
from group_news.models import Article, Cluster, Group

logger = logging.getLogger(__name__)


def compare_pub_dates(
    a: datetime | None,
    b: datetime | None,
    newest_first: bool = True,
) -> int:
    """
    Three-way comparison of parsed publish dates.

    Missing or unparsable dates (None) always sort after valid ones,
    whichever direction is requested; two of them compare equal.
    """
    if a is None or b is None:
        return (a is None) - (b is None)
    if a == b:
        return 0
    before = -1 if a < b else 1
    return -before if newest_first else before


def order_by_pub_date(
    indices: Sequence[int],
    dates: Sequence[datetime | None],
    newest_first: bool = True,
) -> list[int]:
    """Stable sort of article indices by publish date."""
    return sorted(
        indices,
        key=cmp_to_key(lambda i, j: compare_pub_dates(dates[i], dates[j], newest_first)),
    )


def select_representative(members: Sequence[Article]) -> Article:
    """Article with the longest title; the first one wins ties."""
    representative = members[0]
    for article in members[1:]:
        if len(article.title) > len(representative.title):
            representative = article
    return representative


def select_image(representative: Article, ordered: Sequence[Article]) -> Article | None:
    """Article supplying the group image: the representative, else the first with one."""
    if representative.image:
        return representative
    for article in ordered:
        if article.image:
            return article
    return None


def _summarize_cluster(
    cluster: Cluster,
    articles: Sequence[Article],
    dates: Sequence[datetime | None],
) -> Group:
    # Ties go to the first article in discovery order
    representative = select_representative([articles[i] for i in cluster.indices])

    ordered_indices = order_by_pub_date(sorted(cluster.indices), dates)
    ordered = tuple(articles[i] for i in ordered_indices)

    image_article = select_image(representative, ordered)

    earliest_index = order_by_pub_date(ordered_indices, dates, newest_first=False)[0]
    earliest = articles[earliest_index] if dates[earliest_index] is not None else None

    return Group(
        title=representative.title,
        summary=representative.description,
        image=image_article.image if image_article else None,
        image_source_hint=image_article.source if image_article else None,
        articles=ordered,
        earliest_date=earliest.pub_date if earliest else None,
        main_source=earliest.source if earliest else None,
        main_source_link=earliest.link if earliest else None,
    )


def summarize(clusters: Sequence[Cluster], articles: Sequence[Article]) -> list[Group]:
    """
    Build one group per cluster, largest first.

    Members are listed newest first; groups of equal size keep the order of
    their clusters' first-visited index.
    """
    dates = [parse_pub_date(article.pub_date) for article in articles]
    unparsable = sum(
        1 for article, date in zip(articles, dates, strict=True) if article.pub_date and date is None
    )
    if unparsable:
        logger.warning("%d articles have an unparsable publish date; sorting them last", unparsable)

    ranked = sorted(clusters, key=lambda cluster: (-len(cluster), cluster.root))
    return [_summarize_cluster(cluster, articles, dates) for cluster in ranked]
