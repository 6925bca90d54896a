from __future__ import annotations

import streamlit as st

from components.metrics import Kpi, bar_chart, posts_per_day, render_kpi_row
from components.narrative import render_page_intro, render_source_caption
from components.navigation import DETAIL, EDIT, NEW, current_route, go_to
from components.post_list import format_post_date, render_post_list
from config import AppConfig
from data.models import posts_to_frame
from data.service import get_posts
from views import post_detail, post_editor


def render(cfg: AppConfig, use_mock: bool) -> None:
    """
    Dashboard section: routes between the post list, detail and editor pages.
    """
    route = current_route()
    if route.page == DETAIL:
        post_detail.render(cfg, use_mock, route.post_id)
    elif route.page == NEW:
        post_editor.render(cfg, use_mock)
    elif route.page == EDIT:
        post_editor.render(cfg, use_mock, route.post_id)
    else:
        render_list(cfg, use_mock)


def render_list(cfg: AppConfig, use_mock: bool) -> None:
    left, right = st.columns([4, 1])
    with left:
        render_page_intro("Posts", "Open a post to read, edit or delete it.")
    with right:
        if st.button("New post", type="primary", use_container_width=True):
            go_to(NEW)

    # --- load data (graceful fallback inside service) ---
    res = get_posts(cfg, use_mock)
    posts = res.value
    df = posts_to_frame(posts)

    # --- KPI snapshot ---
    render_kpi_row(
        [
            Kpi("Posts", f"{len(posts):,}"),
            Kpi("Latest post", format_post_date(posts[0].created_at) if posts else "—"),
            Kpi("Authors", f"{df['user_id'].nunique():,}" if len(df) else "0", help="Distinct user ids on stored posts"),
        ]
    )

    st.divider()
    render_post_list(posts)

    # --- activity ---
    activity = posts_per_day(df)
    if len(activity) > 1:
        with st.expander("Activity", expanded=False):
            bar_chart(activity, x="day", y="posts", title="Posts per day")

    render_source_caption(res.source, res.warning)
