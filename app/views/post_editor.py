from __future__ import annotations

from typing import Optional

import streamlit as st

from components.narrative import render_callout
from components.navigation import LIST, go_to
from components.post_form import render_post_form
from config import AppConfig
from data.service import get_post_by_id


def render(cfg: AppConfig, use_mock: bool, post_id: Optional[str] = None) -> None:
    if post_id is None:
        render_post_form(cfg, use_mock)
        return

    post = get_post_by_id(cfg, use_mock, post_id).value
    if post is None:
        render_callout("Post not found", f"There is no post with id {post_id}.")
        if st.button("Back to dashboard", type="primary"):
            go_to(LIST)
        return
    render_post_form(cfg, use_mock, post)
