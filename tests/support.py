from __future__ import annotations

from config import AppConfig


def make_config(**overrides) -> AppConfig:
    values = dict(
        supabase_url=None,
        supabase_key=None,
        posts_table="posts",
        default_user_id="user-1",
        default_use_mock=False,
        mock_extra_posts=0,
        log_level="INFO",
    )
    values.update(overrides)
    return AppConfig(**values)
