from __future__ import annotations

import threading
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from faker import Faker

from config import AppConfig
from data.models import EDITABLE_FIELDS, Post, sort_newest_first, utc_now_iso


FIXTURE_USER_ID = "user-1"


def fixture_posts(now: datetime | None = None) -> list[Post]:
    now = now or datetime.now(timezone.utc)
    return [
        Post(
            id="1",
            title="My first post",
            content="This is the very first blog post. The body of the post goes here.",
            created_at=now.isoformat(),
            user_id=FIXTURE_USER_ID,
        ),
        Post(
            id="2",
            title="About Streamlit",
            content=(
                "Streamlit is a great Python framework for data apps. "
                "It gives you widgets, layout primitives, session state and a lot more out of the box."
            ),
            created_at=(now - timedelta(days=1)).isoformat(),
            user_id=FIXTURE_USER_ID,
        ),
    ]


def demo_posts(n: int, start_id: int, now: datetime | None = None) -> list[Post]:
    fake = Faker()
    fake.seed_instance(17)
    now = now or datetime.now(timezone.utc)
    rows = []
    for i in range(n):
        # Keep demo posts older than the fixtures so the fixtures stay on top.
        created = now - timedelta(days=2 + i, hours=fake.random_int(0, 23))
        rows.append(
            Post(
                id=str(start_id + i),
                title=fake.sentence(nb_words=5).rstrip("."),
                content="\n\n".join(fake.paragraphs(nb=3)),
                created_at=created.isoformat(),
                user_id=f"user-{fake.random_int(1, 3)}",
            )
        )
    return rows


class FallbackStore:
    """
    Process-lifetime stand-in for the posts table.

    Never reconciled with the hosted table: once a write lands here the two
    stores diverge.
    """

    def __init__(self, extra_posts: int = 0):
        self._extra_posts = extra_posts
        self._lock = threading.Lock()
        self._posts: list[Post] = []
        self.reset()

    def reset(self) -> None:
        """Restore the fixture posts (useful in tests)."""
        seed = fixture_posts()
        seed += demo_posts(self._extra_posts, start_id=len(seed) + 1)
        with self._lock:
            self._posts = seed

    def _next_id(self) -> str:
        numeric = [int(p.id) for p in self._posts if p.id.isdigit()]
        return str(max(numeric, default=0) + 1)

    def list_posts(self) -> list[Post]:
        with self._lock:
            return sort_newest_first(self._posts)

    def get_post(self, post_id: str) -> Optional[Post]:
        with self._lock:
            return next((p for p in self._posts if p.id == post_id), None)

    def create_post(self, title: str, content: str, user_id: str) -> Post:
        with self._lock:
            post = Post(
                id=self._next_id(),
                title=title,
                content=content,
                created_at=utc_now_iso(),
                user_id=user_id,
            )
            self._posts.insert(0, post)
            return post

    def update_post(self, post_id: str, fields: dict[str, Any]) -> Optional[Post]:
        changes = {k: v for k, v in fields.items() if k in EDITABLE_FIELDS}
        with self._lock:
            for i, p in enumerate(self._posts):
                if p.id == post_id:
                    self._posts[i] = replace(p, **changes)
                    return self._posts[i]
        return None

    def delete_post(self, post_id: str) -> bool:
        with self._lock:
            before = len(self._posts)
            self._posts = [p for p in self._posts if p.id != post_id]
            return len(self._posts) < before


_fallback_store: FallbackStore | None = None
_fallback_store_lock = threading.Lock()


def get_fallback_store(cfg: AppConfig | None = None) -> FallbackStore:
    """
    Return a singleton store so fallback writes persist across reruns and sessions.
    """
    global _fallback_store
    if _fallback_store is not None:
        return _fallback_store
    with _fallback_store_lock:
        # Another session thread may have built it while we waited.
        if _fallback_store is None:
            _fallback_store = FallbackStore(extra_posts=cfg.mock_extra_posts if cfg else 0)
    return _fallback_store
