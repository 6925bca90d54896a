from __future__ import annotations

from html import escape

import streamlit as st


def render_page_intro(title: str, context: str | None = None) -> None:
    st.markdown(
        f"""
<div class="page-intro">
  <div class="page-intro-title">{escape(title)}</div>
  {f'<div class="page-intro-context">{escape(context)}</div>' if context else ''}
</div>
        """,
        unsafe_allow_html=True,
    )


def render_callout(title: str, body: str) -> None:
    st.markdown(
        f"""
<div class="callout">
  <div class="callout-title">{escape(title)}</div>
  <div class="callout-body">{escape(body)}</div>
</div>
        """,
        unsafe_allow_html=True,
    )


def render_empty_state(message: str) -> None:
    st.markdown(f'<div class="empty-state">{escape(message)}</div>', unsafe_allow_html=True)


def render_source_caption(source: str, warning: str | None) -> None:
    """
    Data source note under a page. Fallbacks are reported here, never as an error.
    """
    label = "Supabase" if source == "supabase" else "local fallback data"
    text = f"Data source: **{label}**"
    if warning:
        text += f" · {warning}"
    st.caption(text)
