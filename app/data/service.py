from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from config import AppConfig
from data.connection import get_posts_client
from data.mock_data import get_fallback_store
from data.models import EDITABLE_FIELDS, IMMUTABLE_FIELDS, Post


logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class DataResult(Generic[T]):
    value: T
    source: str  # "mock" | "supabase"
    warning: str | None = None


def _fallback(op: str, use_mock: bool, fn_live: Callable[[], T], fn_mock: Callable[[], T]) -> DataResult[T]:
    if use_mock:
        return DataResult(value=fn_mock(), source="mock")
    try:
        return DataResult(value=fn_live(), source="supabase")
    except Exception as e:
        logger.warning("%s failed against Supabase, using fallback data: %s: %s", op, type(e).__name__, e)
        return DataResult(value=fn_mock(), source="mock", warning=f"Fell back to local data: {type(e).__name__}")


def get_posts(cfg: AppConfig, use_mock: bool) -> DataResult[list[Post]]:
    client = get_posts_client(cfg)
    store = get_fallback_store(cfg)
    return _fallback(
        "get_posts",
        use_mock,
        fn_live=client.list_posts,
        fn_mock=store.list_posts,
    )


def get_post_by_id(cfg: AppConfig, use_mock: bool, post_id: str) -> DataResult[Optional[Post]]:
    client = get_posts_client(cfg)
    store = get_fallback_store(cfg)
    return _fallback(
        "get_post_by_id",
        use_mock,
        fn_live=lambda: client.get_post(post_id),
        fn_mock=lambda: store.get_post(post_id),
    )


def create_post(
    cfg: AppConfig,
    use_mock: bool,
    title: str,
    content: str,
    user_id: str | None = None,
) -> DataResult[Post]:
    client = get_posts_client(cfg)
    store = get_fallback_store(cfg)
    user_id = user_id or cfg.default_user_id
    res = _fallback(
        "create_post",
        use_mock,
        fn_live=lambda: client.insert_post({"title": title, "content": content, "user_id": user_id}),
        fn_mock=lambda: store.create_post(title=title, content=content, user_id=user_id),
    )
    logger.info("Created post %s (%s)", res.value.id, res.source)
    return res


def update_post(cfg: AppConfig, use_mock: bool, post_id: str, fields: dict[str, Any]) -> DataResult[Optional[Post]]:
    """
    Partial update: only title, content and user_id may change.
    Unknown keys are dropped; id / created_at raise ValueError before any call is made.
    """
    frozen = sorted(IMMUTABLE_FIELDS.intersection(fields))
    if frozen:
        raise ValueError(f"Cannot update immutable post fields: {', '.join(frozen)}")
    changes = {k: v for k, v in fields.items() if k in EDITABLE_FIELDS}
    if not changes:
        return get_post_by_id(cfg, use_mock, post_id)

    client = get_posts_client(cfg)
    store = get_fallback_store(cfg)
    res = _fallback(
        "update_post",
        use_mock,
        fn_live=lambda: client.update_post(post_id, changes),
        fn_mock=lambda: store.update_post(post_id, changes),
    )
    if res.value is None:
        logger.info("Update skipped, post %s not found (%s)", post_id, res.source)
    return res


def delete_post(cfg: AppConfig, use_mock: bool, post_id: str) -> DataResult[bool]:
    client = get_posts_client(cfg)
    store = get_fallback_store(cfg)
    res = _fallback(
        "delete_post",
        use_mock,
        fn_live=lambda: client.delete_post(post_id),
        fn_mock=lambda: store.delete_post(post_id),
    )
    logger.info("Delete post %s -> %s (%s)", post_id, res.value, res.source)
    return res
