from __future__ import annotations

import streamlit as st

from config import THEME


APP_TITLE = "Post Writer"


def apply_theme() -> None:
    st.set_page_config(
        page_title=APP_TITLE,
        page_icon="✍️",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    # Centralized theme tokens (config.py) -> CSS variables
    radius = int(THEME["radius_px"])
    css = """
<style>
@import url('https://fonts.googleapis.com/css2?family=DM+Sans:wght@400;500;600;700&display=swap');

:root{
  --accent-600: __ACCENT_600__;
  --accent-500: __ACCENT_500__;
  --navy-900: __NAVY_900__;
  --navy-800: __NAVY_800__;

  --bg-primary: __BG_PRIMARY__;
  --bg-secondary: __BG_SECONDARY__;
  --card-bg: __CARD_BG__;
  --card-border: __CARD_BORDER__;

  --text-primary: __TEXT_PRIMARY__;
  --text-secondary: __TEXT_SECONDARY__;
  --grid: __GRID__;
  --shadow: __SHADOW__;
  --radius: __RADIUS_PX__px;
}

/* Hide default Streamlit chrome */
#MainMenu { visibility: hidden; }
footer { visibility: hidden; }

html, body, [data-testid="stAppViewContainer"]{
  background: var(--bg-primary) !important;
  font-family: "DM Sans", system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif !important;
  color: var(--text-primary) !important;
}

[data-testid="stSidebar"]{
  background: var(--bg-secondary) !important;
  border-right: 1px solid var(--card-border) !important;
}

/* Sidebar nav as stacked buttons */
[data-testid="stSidebar"] div[role="radiogroup"] > label{
  background: var(--card-bg) !important;
  border: 1px solid var(--card-border) !important;
  border-radius: 12px !important;
  padding: 10px 12px !important;
  margin: 0 0 10px 0 !important;
}
[data-testid="stSidebar"] div[role="radiogroup"] > label:has(input:checked){
  border-color: var(--accent-600) !important;
}

.block-container{
  padding-top: 0.75rem !important;
  padding-bottom: 2rem !important;
}

/* Header */
.app-header{
  display:flex;
  align-items:center;
  justify-content:space-between;
  gap: 12px;
  background: var(--bg-secondary);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  padding: 10px 14px;
  margin: 0 0 14px 0;
}
.app-header-right{
  display:flex;
  align-items:center;
  gap: 10px;
}
.app-title{
  font-size: 20px;
  font-weight: 700;
  color: var(--navy-900);
  line-height: 1.1;
}
.app-subtitle{
  font-size: 14px;
  font-weight: 500;
  color: var(--text-secondary);
}
.pill{
  display:inline-flex;
  align-items:center;
  gap:6px;
  background: white;
  border: 1px solid var(--card-border);
  border-radius: 999px;
  padding: 6px 10px;
  font-size: 13px;
  font-weight: 600;
  color: var(--navy-800);
}
.pill .dot{
  width:8px;
  height:8px;
  border-radius:999px;
  background: var(--accent-600);
  display:inline-block;
}
.login-link{
  border: 1px solid var(--card-border);
  border-radius: 10px;
  padding: 6px 12px;
  font-size: 13px;
  font-weight: 600;
  color: var(--text-secondary);
  cursor: not-allowed;
}

/* Landing hero */
.hero{
  display:flex;
  flex-direction:column;
  align-items:center;
  justify-content:center;
  text-align:center;
  min-height: 45vh;
}
.hero-title{
  font-size: 44px;
  font-weight: 700;
  color: var(--navy-900);
  margin: 0 0 10px 0;
}
.hero-narrative{
  font-size: 16px;
  color: var(--text-secondary);
  margin: 0;
}

/* Page intro */
.page-intro{
  margin: 0 0 14px 0;
}
.page-intro-title{
  font-size: 26px;
  font-weight: 700;
  color: var(--navy-900);
}
.page-intro-context{
  font-size: 14px;
  color: var(--text-secondary);
}

/* Post cards */
.post-card{
  background: var(--card-bg);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  padding: 14px 14px;
  margin-bottom: 8px;
  height: 100%;
}
.post-card-title{
  font-size: 18px;
  font-weight: 700;
  color: var(--navy-900);
  margin-bottom: 6px;
}
.post-card-date{
  font-size: 13px;
  color: var(--text-secondary);
  margin-bottom: 8px;
}
.post-card-body{
  font-size: 15px;
  color: var(--text-primary);
  line-height: 1.5;
  white-space: pre-wrap;
}
.post-card-excerpt{
  display: -webkit-box;
  -webkit-line-clamp: 3;
  -webkit-box-orient: vertical;
  overflow: hidden;
}
.empty-state{
  text-align:center;
  padding: 40px 0;
  color: var(--text-secondary);
}

/* Metric cards */
.metric-card{
  background: var(--card-bg);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  padding: 12px 14px;
}
.metric-label{
  font-size: 14px;
  font-weight: 500;
  color: var(--text-secondary);
  margin-bottom: 6px;
}
.metric-value{
  font-size: 24px;
  font-weight: 700;
  color: var(--text-primary);
  line-height: 1.2;
}

/* Buttons */
div.stButton > button, div.stFormSubmitButton > button{
  border-radius: 10px !important;
  font-weight: 600 !important;
}
div.stButton > button[kind="primary"], div.stFormSubmitButton > button[kind="primary"]{
  background: var(--accent-600) !important;
  border-color: var(--accent-600) !important;
}
div.stButton > button[kind="primary"]:hover{
  background: var(--accent-500) !important;
}

div[data-baseweb="input"] input, textarea{
  border-radius: 10px !important;
}

div[data-testid="stPlotlyChart"]{
  background: var(--card-bg);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  padding: 8px 10px;
}

.callout{
  background: #FFFFFF;
  border: 1px solid var(--card-border);
  border-left: 4px solid var(--accent-600);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  padding: 12px 14px;
  margin: 10px 0;
}
.callout-title{
  font-size: 14px;
  font-weight: 700;
  color: var(--navy-900);
  margin-bottom: 6px;
}
.callout-body{
  font-size: 14px;
  color: var(--text-secondary);
  line-height: 1.5;
}
</style>
"""

    tokens = {
        "__ACCENT_600__": str(THEME["accent_primary"]),
        "__ACCENT_500__": str(THEME["accent_secondary"]),
        "__NAVY_900__": str(THEME["navy_900"]),
        "__NAVY_800__": str(THEME["navy_800"]),
        "__BG_PRIMARY__": str(THEME["bg_primary"]),
        "__BG_SECONDARY__": str(THEME["bg_secondary"]),
        "__CARD_BG__": str(THEME["bg_card"]),
        "__CARD_BORDER__": str(THEME["border_color"]),
        "__TEXT_PRIMARY__": str(THEME["text_primary"]),
        "__TEXT_SECONDARY__": str(THEME["text_secondary"]),
        "__GRID__": str(THEME["grid"]),
        "__SHADOW__": str(THEME["shadow"]),
        "__RADIUS_PX__": str(radius),
    }
    for k, v in tokens.items():
        css = css.replace(k, v)

    st.markdown(css, unsafe_allow_html=True)
