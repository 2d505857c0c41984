"""
Standardized feedback utilities for loading states and page-level scrolling.
"""

from contextlib import contextmanager

import streamlit as st
import streamlit.components.v1 as components

_SCROLL_TO_TOP_SCRIPT = """
<script>
    const main = window.parent.document.querySelector('section.main');
    if (main) { main.scrollTo({top: 0, behavior: 'smooth'}); }
    window.parent.scrollTo({top: 0, behavior: 'smooth'});
</script>
"""


@contextmanager
def working_spinner(label: str = "Working…"):
    """
    Context manager wrapper for standardized loading spinners.

    Usage:
        with working_spinner("Loading filters…"):
            controls = get_controls()
    """
    with st.spinner(label):
        yield


def scroll_to_top() -> None:
    """Scroll the page back to the top (used after closing the detail view)."""
    components.html(_SCROLL_TO_TOP_SCRIPT, height=0)
