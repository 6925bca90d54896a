from __future__ import annotations

from typing import Optional

import streamlit as st

from components.navigation import DETAIL, LIST, go_to
from config import AppConfig
from data.models import Post, validate_post_fields
from data.service import create_post, update_post


def render_post_form(cfg: AppConfig, use_mock: bool, post: Optional[Post] = None) -> None:
    """
    Shared create/edit form. Passing `post` switches it to edit mode.
    """
    is_editing = post is not None
    form_key = f"post_form_{post.id}" if is_editing else "post_form_new"

    with st.form(form_key, clear_on_submit=False):
        st.markdown(f"#### {'Edit post' if is_editing else 'New post'}")
        title = st.text_input(
            "Title",
            value=post.title if post else "",
            placeholder="Enter a title for the post",
        )
        content = st.text_area(
            "Content",
            value=post.content if post else "",
            placeholder="Write the body of the post",
            height=240,
        )
        c1, c2 = st.columns(2)
        cancelled = c1.form_submit_button("Cancel", use_container_width=True)
        submitted = c2.form_submit_button(
            "Update" if is_editing else "Publish",
            type="primary",
            use_container_width=True,
        )

    if cancelled:
        if is_editing:
            go_to(DETAIL, post.id)
        else:
            go_to(LIST)

    if not submitted:
        return

    problems = validate_post_fields(title, content)
    if problems:
        for p in problems:
            st.error(p)
        return

    with st.spinner("Saving..."):
        if is_editing:
            update_post(cfg, use_mock, post.id, {"title": title, "content": content})
        else:
            # No login yet: every new post belongs to the configured default user.
            create_post(cfg, use_mock, title=title, content=content, user_id=cfg.default_user_id)
    go_to(LIST)
