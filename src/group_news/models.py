"""Data models for group_news pipeline stage."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from common.utils import get_value


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class Article:
    """Article metadata as produced by the feed fetcher."""

    title: str
    description: str | None = None
    pub_date: str | None = None
    link: str | None = None
    source: str = ""
    image: str | None = None
    author: str | None = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any] | Any) -> Article:
        """Build an article from a persisted record (camelCase keys) or an object."""
        title = get_value(record, "title")
        return cls(
            title=title if isinstance(title, str) else "",
            description=_optional_str(get_value(record, "description")),
            pub_date=_optional_str(get_value(record, "pubDate", "pub_date")),
            link=_optional_str(get_value(record, "link")),
            source=_optional_str(get_value(record, "source")) or "",
            image=_optional_str(get_value(record, "image")),
            author=_optional_str(get_value(record, "author")),
        )

    def to_record(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "link": self.link,
            "pubDate": self.pub_date,
            "description": self.description,
            "source": self.source,
            "image": self.image,
            "author": self.author,
        }


@dataclass(frozen=True)
class NormalizedArticle:
    """Title tokens of one input article, owned by a single run."""

    index: int
    tokens: frozenset[str]


@dataclass(frozen=True)
class Cluster:
    """Connected component of the similarity graph, in discovery order."""

    indices: tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.indices:
            raise ValueError("Cluster must contain at least one article index")

    @property
    def root(self) -> int:
        """First-visited index, used to break ties between equally sized groups."""
        return self.indices[0]

    def __len__(self) -> int:
        return len(self.indices)


@dataclass(frozen=True)
class Group:
    """One story: near-duplicate articles merged under a representative title."""

    title: str
    summary: str | None
    image: str | None
    articles: tuple[Article, ...]
    image_source_hint: str | None = None
    earliest_date: str | None = None
    main_source: str | None = None
    main_source_link: str | None = None

    def __post_init__(self) -> None:
        if not self.articles:
            raise ValueError("Group must contain at least one article")

    def to_record(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "summary": self.summary,
            "image": self.image,
            "imageSourceHint": self.image_source_hint,
            "earliestDate": self.earliest_date,
            "mainSource": self.main_source,
            "mainSourceLink": self.main_source_link,
            "articles": [article.to_record() for article in self.articles],
        }
