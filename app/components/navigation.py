from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import streamlit as st


# Dashboard sub-pages
LIST = "list"
DETAIL = "detail"
NEW = "new"
EDIT = "edit"
PAGES = (LIST, DETAIL, NEW, EDIT)

PENDING_VIEW_KEY = "nav_view_pending"


@dataclass(frozen=True)
class Route:
    page: str = LIST
    post_id: Optional[str] = None


def current_route() -> Route:
    page = st.session_state.get("route_page", LIST)
    post_id = st.session_state.get("route_post_id")
    if page not in PAGES or (page in (DETAIL, EDIT) and not post_id):
        return Route()
    return Route(page=page, post_id=post_id)


def set_route(page: str, post_id: Optional[str] = None) -> None:
    st.session_state["route_page"] = page
    st.session_state["route_post_id"] = post_id


def go_to(page: str, post_id: Optional[str] = None, view: str = "dashboard") -> None:
    """
    Switch to a dashboard sub-page (or another top-level view) and rerun.
    st.rerun() raises a control-flow exception, so call this outside try blocks.
    """
    set_route(page, post_id)
    # "nav_view" belongs to the sidebar radio; the sidebar applies this on the next run.
    st.session_state[PENDING_VIEW_KEY] = view
    st.rerun()
