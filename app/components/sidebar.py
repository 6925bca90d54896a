from __future__ import annotations

from dataclasses import dataclass

import streamlit as st

from components.navigation import LIST, PENDING_VIEW_KEY, set_route
from config import AppConfig


@dataclass(frozen=True)
class SidebarState:
    view: str
    use_mock: bool


NAV_ITEMS = [
    ("🏠 Home", "landing"),
    ("📰 Blog", "blog"),
    ("✍️ Dashboard", "dashboard"),
]


def _leave_section() -> None:
    # Leaving a section always lands on its list page.
    set_route(LIST)


def render_sidebar(cfg: AppConfig) -> SidebarState:
    labels = {v: l for l, v in NAV_ITEMS}
    views = list(labels)

    # Widget-backed keys may only be written before their widget is created.
    pending = st.session_state.pop(PENDING_VIEW_KEY, None)
    if pending in views:
        st.session_state["nav_view"] = pending
    if st.session_state.get("nav_view") not in views:
        st.session_state["nav_view"] = views[0]
    if "use_mock" not in st.session_state:
        st.session_state["use_mock"] = cfg.default_use_mock

    with st.sidebar:
        st.markdown("### ✍️ Post Writer")
        st.caption("Write, edit and publish short posts")

        view = st.radio(
            "Nav",
            views,
            key="nav_view",
            format_func=labels.get,
            on_change=_leave_section,
            label_visibility="collapsed",
        )

        with st.expander("⚙️ Settings", expanded=False):
            use_mock = st.toggle(
                "Use fallback data",
                key="use_mock",
                help="When off, the app talks to the hosted Supabase table. Any failure falls back to local data.",
            )

            st.markdown("**Posts table**")
            st.code(cfg.posts_table if cfg.has_supabase else f"{cfg.posts_table} (Supabase not configured)", language="text")

    return SidebarState(view=view, use_mock=use_mock)
