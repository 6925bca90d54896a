from __future__ import annotations

import streamlit as st

from components.narrative import render_empty_state, render_page_intro, render_source_caption
from components.post_list import render_post_card
from config import AppConfig
from data.service import get_posts


def render(cfg: AppConfig, use_mock: bool, n_cols: int = 3) -> None:
    render_page_intro("Blog", "Everything published so far, newest first.")

    res = get_posts(cfg, use_mock)
    posts = res.value

    if not posts:
        render_empty_state("No posts yet")
    else:
        for start in range(0, len(posts), n_cols):
            cols = st.columns(n_cols)
            for c, post in zip(cols, posts[start : start + n_cols]):
                with c:
                    render_post_card(post, body="excerpt")

    render_source_caption(res.source, res.warning)
