"""
MealDB Browser - Streamlit Frontend Main Entry Point.

Browse TheMealDB recipes by cuisine area and category. The page:
1. Loads the area and category options once per browser session
2. Resolves the current selection through the backend (skipping repeats)
3. Shows result cards, or the detail view of a chosen meal

Run with:
    streamlit run streamlit_app/app.py

The backend must be running (uvicorn api.main:app) at BACKEND_URL.
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import api.config and mealbrowser
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
import api.config  # noqa: F401

import streamlit as st

from mealbrowser.models import FilterSelection
from mealbrowser.presenter import category_label, render_detail, render_list, render_controls_unavailable
from utils.api_client import get_controls, get_health_status, get_meal_detail, resolve_meals
from utils.session import get_browser_session, pop_pending_meal
from utils.ui_components import render_backend_status, render_detail_view, render_list_view
from ui.styles import load_global_styles
from ui.feedback import scroll_to_top, working_spinner

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="MealDB Browser",
    page_icon="🍲",
    layout="wide",
    initial_sidebar_state="expanded",
)

load_global_styles()

session = get_browser_session()

with st.sidebar:
    st.markdown("### 🍲 **MealDB Browser**")
    st.caption("Recipes from TheMealDB, filtered by cuisine and category.")
    st.divider()
    render_backend_status(get_health_status())

st.title("Find a recipe")

# Controls are loaded once per session; without both lists there is nothing to filter
if session.controls is None:
    with working_spinner("Loading filters…"):
        controls = get_controls()
    if controls is None:
        st.markdown(render_controls_unavailable(), unsafe_allow_html=True)
        st.stop()
    session.controls = controls

controls = session.controls

col_area, col_category = st.columns(2)
with col_area:
    area = st.selectbox("Area", options=controls.areas, index=0, key="area_select")
with col_category:
    category = st.selectbox(
        "Category",
        options=controls.categories,
        index=0,
        format_func=category_label,
        key="category_select",
    )

selection = FilterSelection(area=area or "", category=category or "")

results_region = st.empty()

token = session.begin_cycle(selection)
if token is not None:
    # Loading placeholder until the backend answers
    results_region.markdown(render_list(session.list_view), unsafe_allow_html=True)
    outcome = resolve_meals(selection)
    session.finish_cycle(token, outcome)

pending = pop_pending_meal()
# A filter change in this same run closes the detail view, dropping the request
if pending is not None and session.detail_view is not None:
    detail_token, meal_id = pending
    results_region.markdown(render_detail(session.detail_view), unsafe_allow_html=True)
    session.finish_detail(detail_token, get_meal_detail(meal_id))

results_region.empty()

if session.detail_view is not None:
    render_detail_view(session.detail_view, session)
else:
    if session.consume_scroll_request():
        scroll_to_top()
    render_list_view(session.list_view)
