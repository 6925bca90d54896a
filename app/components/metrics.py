from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from config import THEME


@dataclass(frozen=True)
class Kpi:
    label: str
    value: str
    help: Optional[str] = None


def render_kpi_row(kpis: list[Kpi]) -> None:
    cols = st.columns(len(kpis))
    for c, k in zip(cols, kpis):
        with c:
            title_attr = f' title="{k.help}"' if k.help else ""
            st.markdown(
                f"""
<div class="metric-card"{title_attr}>
  <div class="metric-label">{k.label}</div>
  <div class="metric-value">{k.value}</div>
</div>
                """,
                unsafe_allow_html=True,
            )


def apply_plotly_theme(fig: go.Figure, x_title: str, y_title: str) -> go.Figure:
    fig.update_layout(
        margin=dict(l=10, r=10, t=44, b=10),
        font=dict(
            family="DM Sans, system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif",
            color=THEME["text_primary"],
        ),
        paper_bgcolor=THEME["bg_card"],
        plot_bgcolor=THEME["bg_card"],
        colorway=[THEME["accent_primary"], THEME["navy_800"], "#6B7280"],
        title_font={"color": THEME["navy_900"], "size": 16},
        showlegend=False,
    )
    fig.update_xaxes(title_text=x_title, gridcolor=THEME["grid"], linecolor=THEME["border_color"], zeroline=False)
    fig.update_yaxes(title_text=y_title, gridcolor=THEME["grid"], linecolor=THEME["border_color"], zeroline=False)
    return fig


def posts_per_day(df: pd.DataFrame) -> pd.DataFrame:
    """
    Count posts per calendar day (UTC). Rows with an unparseable created_at are dropped.
    """
    if len(df) == 0 or "created_at" not in df.columns:
        return pd.DataFrame(columns=["day", "posts"])
    dated = df.dropna(subset=["created_at"])
    days = dated["created_at"].dt.strftime("%Y-%m-%d")
    return (
        days.value_counts()
        .rename_axis("day")
        .reset_index(name="posts")
        .sort_values("day")
        .reset_index(drop=True)
    )


def bar_chart(df: pd.DataFrame, x: str, y: str, title: str = "") -> None:
    fig = px.bar(df, x=x, y=y, title=title)
    fig = apply_plotly_theme(fig, x_title=x, y_title=y)
    fig.update_yaxes(dtick=1)
    st.plotly_chart(fig, use_container_width=True)
