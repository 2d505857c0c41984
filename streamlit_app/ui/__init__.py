"""
UI Styling and Components Module.

This module provides global CSS styling and feedback helpers
for the MealDB Browser Streamlit app.
"""

from ui.styles import load_global_styles
from ui.feedback import working_spinner, scroll_to_top

__all__ = [
    "load_global_styles",
    "working_spinner",
    "scroll_to_top",
]
