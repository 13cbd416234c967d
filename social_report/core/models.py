from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any


@dataclass(frozen=True)
class FollowerSample:
    date: datetime
    count: int


@dataclass(frozen=True)
class PostSample:
    title: str
    likes: int = 0
    comments: int = 0


@dataclass(frozen=True)
class ReportOptions:
    """Date range shown in the report header. Does not filter the metrics."""

    since: date | None = None
    until: date | None = None


@dataclass
class MetricsBundle:
    """Follower history and top posts handed from a provider to the renderer.

    ``follower_history`` is chronological; its order is the x-axis of the
    growth chart and the row order of the history table. ``top_posts`` keeps
    the provider's order. Either list may be empty.
    """

    follower_history: list[FollowerSample] = field(default_factory=list)
    top_posts: list[PostSample] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MetricsBundle:
        """Build a bundle from the JSON shape providers and clients exchange.

        Accepts ``followerHistory``/``topPosts`` as well as the snake_case
        keys. Dates are ISO-8601 strings. Missing likes/comments count as 0;
        a missing title is kept as ``None`` and fails later at render time.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"metrics must be a JSON object, got {type(data).__name__}")
        history_raw = data.get("followerHistory", data.get("follower_history")) or []
        posts_raw = data.get("topPosts", data.get("top_posts")) or []
        for item in [*history_raw, *posts_raw]:
            if not isinstance(item, Mapping):
                raise TypeError(f"metrics entries must be JSON objects, got {type(item).__name__}")

        history = [
            FollowerSample(date=_parse_datetime(item["date"]), count=int(item["count"]))
            for item in history_raw
        ]
        posts = [
            PostSample(
                title=item.get("title"),  # type: ignore[arg-type]
                likes=int(item.get("likes") or 0),
                comments=int(item.get("comments") or 0),
            )
            for item in posts_raw
        ]
        return cls(follower_history=history, top_posts=posts)

    def to_dict(self) -> dict[str, Any]:
        return {
            "followerHistory": [
                {"date": s.date.isoformat(), "count": s.count}
                for s in self.follower_history
            ],
            "topPosts": [
                {"title": p.title, "likes": p.likes, "comments": p.comments}
                for p in self.top_posts
            ],
        }


def _parse_datetime(value: str | datetime | date) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return datetime.fromisoformat(value)
