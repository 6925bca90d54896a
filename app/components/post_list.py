from __future__ import annotations

from html import escape

import streamlit as st

from components.narrative import render_empty_state
from components.navigation import DETAIL, go_to
from data.models import Post, parse_timestamp


def format_post_date(created_at: str) -> str:
    ts = parse_timestamp(created_at)
    return ts.strftime("%Y-%m-%d") if ts is not None else "—"


def render_post_card(post: Post, body: str = "none") -> None:
    """
    body: "none" (title + date), "excerpt" (first lines) or "full" (whole content).
    """
    body_html = ""
    if body == "excerpt":
        body_html = f'<div class="post-card-body post-card-excerpt">{escape(post.content)}</div>'
    elif body == "full":
        body_html = f'<div class="post-card-body">{escape(post.content)}</div>'

    st.markdown(
        f"""
<div class="post-card">
  <div class="post-card-title">{escape(post.title)}</div>
  <div class="post-card-date">{format_post_date(post.created_at)}</div>
  {body_html}
</div>
        """,
        unsafe_allow_html=True,
    )


def render_post_list(posts: list[Post], n_cols: int = 3) -> None:
    if not posts:
        render_empty_state("No posts yet")
        return

    for start in range(0, len(posts), n_cols):
        cols = st.columns(n_cols)
        for c, post in zip(cols, posts[start : start + n_cols]):
            with c:
                render_post_card(post)
                if st.button("Open", key=f"open_{post.id}", use_container_width=True):
                    go_to(DETAIL, post.id)
