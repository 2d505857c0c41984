"""
Utility modules for the Streamlit frontend.

This package contains:
- api_client: Backend API communication
- session: BrowserSession storage in st.session_state
- ui_components: Reusable page components (backend status, meal grid, detail view)
"""
