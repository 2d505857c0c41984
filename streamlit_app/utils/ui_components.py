"""
Reusable UI Components Module.

Streamlit-side rendering for the browser: the presenter in mealbrowser.presenter
produces escaped HTML, and the functions here place it on the page and add the
interactive pieces HTML alone cannot provide inside Streamlit (a "View recipe"
button per card, the back button, the retry button).

Design principles:
- Cards in a responsive column grid, each with a keyboard-focusable button
- All text goes through the presenter, which escapes it
"""

from typing import List, Optional

import streamlit as st

from mealbrowser.models import DetailOutcome, Failed, ListOutcome, MealList, MealSummary
from mealbrowser.presenter import BACK_LABEL, card_html, render_detail, render_list
from mealbrowser.selection import BrowserSession
from utils.session import request_meal

GRID_COLUMNS = 4


def render_backend_status(status: Optional[dict]) -> None:
    """
    Display backend connection status as a status pill.

    Args:
        status: Dictionary from get_health_status() or None if backend unreachable.
    """
    if status and status.get("status") == "ok":
        st.success("🟢 Backend online")
    else:
        st.error("🔴 Backend offline / unreachable")


def render_meal_grid(meals: List[MealSummary]) -> None:
    """
    Render result cards in provider order, left to right, top to bottom.

    Each card gets a "View recipe" button keyed by meal id; buttons are
    reachable with Tab and activate with Enter/Space as well as the pointer.
    """
    columns = st.columns(GRID_COLUMNS)
    for index, meal in enumerate(meals):
        with columns[index % GRID_COLUMNS]:
            st.markdown(card_html(meal), unsafe_allow_html=True)
            st.button(
                "View recipe",
                key=f"view_meal_{meal.id}",
                on_click=request_meal,
                args=(meal.id,),
                use_container_width=True,
            )


def render_list_view(outcome: ListOutcome) -> None:
    """Render the results region: card grid for results, presenter markup otherwise."""
    if isinstance(outcome, MealList):
        st.caption(f"{len(outcome.meals)} meals")
        render_meal_grid(outcome.meals)
        return
    st.markdown(render_list(outcome), unsafe_allow_html=True)
    if isinstance(outcome, Failed):
        # The tracker forgot the failed selection, so a plain rerun retries it
        st.button("Retry", key="retry_results")


def render_detail_view(outcome: DetailOutcome, session: BrowserSession) -> None:
    """Render the detail region with its back button above the markup."""
    st.button(BACK_LABEL, key="back_to_results", on_click=session.close_detail)
    st.markdown(render_detail(outcome), unsafe_allow_html=True)
