"""Connected components of the similarity graph."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Set

from group_news.models import Cluster

logger = logging.getLogger(__name__)


def extract_clusters(article_count: int, adjacency: Mapping[int, Set[int]]) -> list[Cluster]:
    """
    Split article indices into connected components.

    Iterative DFS: roots are tried in index order and neighbours are pushed
    in ascending order, so the output (and each cluster's root) only depends
    on the input. Articles without edges become singleton clusters.
    """
    for node, neighbours in adjacency.items():
        for neighbour in (node, *neighbours):
            if not 0 <= neighbour < article_count:
                raise ValueError(
                    f"Adjacency references index {neighbour} outside 0..{article_count - 1}"
                )

    clusters = []
    visited: set[int] = set()

    for root in range(article_count):
        if root in visited:
            continue

        members = []
        stack = [root]
        visited.add(root)
        while stack:
            node = stack.pop()
            members.append(node)
            for neighbour in sorted(adjacency.get(node, ())):
                if neighbour not in visited:
                    visited.add(neighbour)
                    stack.append(neighbour)

        clusters.append(Cluster(indices=tuple(members)))

    logger.info("Found %d clusters among %d articles", len(clusters), article_count)
    return clusters
