"""
Session management utilities for the Streamlit app.

Each browser tab gets its own BrowserSession stored in st.session_state. It
survives Streamlit reruns (every widget interaction) but not a page refresh,
which starts a new session with fresh controls and an empty selection history.
"""

import streamlit as st

from mealbrowser.selection import BrowserSession

BROWSER_SESSION_KEY = "browser_session"
PENDING_MEAL_KEY = "pending_meal"


def get_browser_session() -> BrowserSession:
    """
    Get or create the BrowserSession stored in st.session_state.

    Returns:
        The session object for this browser tab

    Example:
        >>> session = get_browser_session()
        >>> token = session.begin_cycle(selection)
    """
    if BROWSER_SESSION_KEY not in st.session_state:
        st.session_state[BROWSER_SESSION_KEY] = BrowserSession()
    return st.session_state[BROWSER_SESSION_KEY]


def request_meal(meal_id: str) -> None:
    """
    Button callback: mark a meal's detail as requested.

    The detail loading state is shown right away; the actual fetch happens in
    the page body on the rerun that follows, so the loading message is visible.
    """
    session = get_browser_session()
    token = session.open_detail(meal_id)
    st.session_state[PENDING_MEAL_KEY] = (token, meal_id)


def pop_pending_meal():
    """Return and clear the (token, meal_id) pair set by request_meal, or None."""
    return st.session_state.pop(PENDING_MEAL_KEY, None)
