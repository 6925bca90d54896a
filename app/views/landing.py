from __future__ import annotations

import streamlit as st

from components.navigation import LIST, go_to
from config import AppConfig


def render(cfg: AppConfig, use_mock: bool) -> None:
    st.markdown(
        """
<div class="hero">
  <div class="hero-title">Post Writer</div>
  <p class="hero-narrative">Write short posts, keep them tidy, publish them to the blog.</p>
</div>
        """,
        unsafe_allow_html=True,
    )

    _, mid, _ = st.columns([2, 1, 2])
    with mid:
        if st.button("Get started", type="primary", use_container_width=True):
            go_to(LIST, view="dashboard")
