from __future__ import annotations

from html import escape

import streamlit as st

from components.styles import APP_TITLE


def render_header(subtitle: str, data_source: str, app_name: str = APP_TITLE) -> None:
    """
    Top bar: app name, which store answers the reads, and the login entry.
    Login is a placeholder; there is no auth flow behind it.
    """
    st.markdown(
        f"""
<div class="app-header">
  <div>
    <div class="app-title">✍️ {escape(app_name)}</div>
    <div class="app-subtitle">{escape(subtitle)}</div>
  </div>
  <div class="app-header-right">
    <div class="pill"><span class="dot"></span>Data: {escape(data_source)}</div>
    <span class="login-link" title="Login is not available yet">Log in</span>
  </div>
</div>
        """,
        unsafe_allow_html=True,
    )
