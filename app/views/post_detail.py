from __future__ import annotations

import streamlit as st

from components.narrative import render_callout, render_source_caption
from components.navigation import EDIT, LIST, go_to
from components.post_list import render_post_card
from config import AppConfig
from data.service import delete_post, get_post_by_id


def render(cfg: AppConfig, use_mock: bool, post_id: str) -> None:
    res = get_post_by_id(cfg, use_mock, post_id)
    post = res.value

    if post is None:
        render_callout("Post not found", f"There is no post with id {post_id}.")
        if st.button("Back to dashboard", type="primary"):
            go_to(LIST)
        render_source_caption(res.source, res.warning)
        return

    left, right = st.columns([4, 1])
    left.markdown("### Post details")
    if right.button("Back", use_container_width=True):
        go_to(LIST)

    render_post_card(post, body="full")

    c1, c2, _ = st.columns([1, 1, 4])
    if c1.button("Edit", type="primary", use_container_width=True):
        go_to(EDIT, post.id)
    # Anyone can delete any post: there is no ownership check behind user_id.
    if c2.button("Delete", use_container_width=True):
        delete_post(cfg, use_mock, post.id)
        go_to(LIST)

    render_source_caption(res.source, res.warning)
