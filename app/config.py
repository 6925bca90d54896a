from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


#
# Shared theme tokens
# - Centralized here so components/styles.py stays a pure token -> CSS mapping.
#
THEME = {
    # Backgrounds (paper)
    "bg_primary": "#F7F6F2",     # page background
    "bg_secondary": "#FFFFFF",   # sidebar / top surfaces
    "bg_card": "#FFFFFF",       # card surface
    # Accents (ink + navy)
    "accent_primary": "#1F4FD1",
    "accent_secondary": "#3A68E8",  # hover
    "navy_900": "#0B1220",
    "navy_800": "#111C33",
    # Text + borders
    "text_primary": "#111827",
    "text_secondary": "rgba(17, 24, 39, 0.68)",
    "border_color": "#E6E4E0",
    "grid": "rgba(17, 24, 39, 0.10)",
    "shadow": "0 1px 3px rgba(16,24,40,0.08)",
    "radius_px": 10,
}


@dataclass(frozen=True)
class AppConfig:
    # Required for "live" mode (hosted Supabase table)
    supabase_url: Optional[str]
    supabase_key: Optional[str]
    posts_table: str

    # Stamped on new posts until login exists
    default_user_id: str

    # Defaults
    default_use_mock: bool
    mock_extra_posts: int
    log_level: str

    @property
    def has_supabase(self) -> bool:
        # Without both values every live call fails and fallback kicks in.
        return bool(self.supabase_url and self.supabase_key)


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def _getint(name: str, default: int) -> int:
    raw = _getenv(name)
    if raw is None:
        return default
    try:
        return max(0, int(raw))
    except ValueError:
        return default


def get_config() -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    - Real environment variables win over `.env`
    """
    load_dotenv(override=False)

    return AppConfig(
        supabase_url=_getenv("SUPABASE_URL"),
        supabase_key=_getenv("SUPABASE_KEY"),
        posts_table=_getenv("POSTS_TABLE", "posts") or "posts",
        default_user_id=_getenv("DEFAULT_USER_ID", "user-1") or "user-1",
        default_use_mock=(_getenv("USE_MOCK_DATA", "false") or "false").lower() == "true",
        mock_extra_posts=_getint("MOCK_EXTRA_POSTS", 0),
        log_level=(_getenv("LOG_LEVEL", "INFO") or "INFO").upper(),
    )


def configure_logging(cfg: AppConfig) -> None:
    # basicConfig is a no-op once the root logger has handlers, so Streamlit reruns are safe.
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
