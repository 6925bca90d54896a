from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Optional

from supabase import Client, create_client

from config import AppConfig
from data.models import Post


logger = logging.getLogger(__name__)


class SupabaseConfigError(RuntimeError):
    pass


@lru_cache(maxsize=4)
def _supabase_client(url: str, key: str) -> Client:
    logger.info("Creating Supabase client for %s", url)
    return create_client(url, key)


@dataclass(frozen=True)
class PostsTableClient:
    cfg: AppConfig

    def _table(self):
        """
        Returns a fresh query builder for the posts table.
        Raises SupabaseConfigError when credentials are missing.
        """
        if not self.cfg.has_supabase:
            raise SupabaseConfigError(
                "Missing SUPABASE_URL / SUPABASE_KEY for the hosted posts table. "
                "Set both (e.g. in .env) or enable fallback data."
            )
        client = _supabase_client(self.cfg.supabase_url, self.cfg.supabase_key)
        return client.table(self.cfg.posts_table)

    def list_posts(self) -> list[Post]:
        resp = self._table().select("*").order("created_at", desc=True).execute()
        return [Post.from_row(row) for row in resp.data or []]

    def get_post(self, post_id: str) -> Optional[Post]:
        # limit(1) instead of single(): a missing row is an answer, not an API error.
        resp = self._table().select("*").eq("id", post_id).limit(1).execute()
        rows = resp.data or []
        return Post.from_row(rows[0]) if rows else None

    def insert_post(self, fields: dict[str, Any]) -> Post:
        resp = self._table().insert(fields).execute()
        rows = resp.data or []
        if not rows:
            raise RuntimeError("Insert into posts returned no row")
        return Post.from_row(rows[0])

    def update_post(self, post_id: str, fields: dict[str, Any]) -> Optional[Post]:
        resp = self._table().update(fields).eq("id", post_id).execute()
        rows = resp.data or []
        return Post.from_row(rows[0]) if rows else None

    def delete_post(self, post_id: str) -> bool:
        resp = self._table().delete().eq("id", post_id).execute()
        return bool(resp.data)


def get_posts_client(cfg: AppConfig) -> PostsTableClient:
    return PostsTableClient(cfg=cfg)
