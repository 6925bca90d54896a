"""
Post record shared by the remote client, the fallback store and the views.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Iterable, Optional

import pandas as pd


# Columns of the `posts` table, in display order.
POST_COLUMNS = ["id", "title", "content", "created_at", "user_id"]

# Fields a caller may change after creation.
EDITABLE_FIELDS = frozenset({"title", "content", "user_id"})
IMMUTABLE_FIELDS = frozenset({"id", "created_at"})


@dataclass(frozen=True)
class Post:
    id: str
    title: str
    content: str
    created_at: str  # ISO-8601
    user_id: str

    @classmethod
    def from_row(cls, row: dict) -> "Post":
        return cls(**{col: "" if row.get(col) is None else str(row[col]) for col in POST_COLUMNS})

    def as_dict(self) -> dict:
        return asdict(self)


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def parse_timestamp(value: str) -> Optional[pd.Timestamp]:
    ts = pd.to_datetime(value, utc=True, errors="coerce")
    return None if pd.isna(ts) else ts


_OLDEST = pd.Timestamp.min.tz_localize("UTC")


def sort_newest_first(posts: Iterable[Post]) -> list[Post]:
    def _key(p: Post) -> pd.Timestamp:
        ts = parse_timestamp(p.created_at)
        # Unparseable timestamps sink to the bottom.
        return ts if ts is not None else _OLDEST

    return sorted(posts, key=_key, reverse=True)


def posts_to_frame(posts: Iterable[Post]) -> pd.DataFrame:
    df = pd.DataFrame([p.as_dict() for p in posts], columns=POST_COLUMNS)
    df["created_at"] = pd.to_datetime(df["created_at"], utc=True, errors="coerce", format="ISO8601")
    return df


def validate_post_fields(title: str, content: str) -> list[str]:
    problems = []
    if not (title or "").strip():
        problems.append("Title is required.")
    if not (content or "").strip():
        problems.append("Content is required.")
    return problems
