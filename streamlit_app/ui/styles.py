"""
Global CSS Styling for the MealDB Browser.

This module provides load_global_styles() to inject consistent styling for
the filter bar, result cards, skeleton placeholders and the detail view.
The class names match the markup produced by mealbrowser.presenter.
"""

import streamlit as st


def load_global_styles() -> None:
    """
    Inject global CSS styles for the MealDB Browser app.

    This function:
    - Imports Google Fonts (Nunito) for friendly typography
    - Styles result cards (mb-card) with rounded corners and a focus ring
    - Styles grey skeleton cards shown while results load
    - Limits the detail image width
    """
    css = """
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Nunito:wght@400;600;700&display=swap');

        html, body, [class*="css"] {
            font-family: 'Nunito', 'sans serif' !important;
        }

        h1, h2, h3 {
            font-weight: 600 !important;
            letter-spacing: 0.02em !important;
        }

        .main .block-container {
            max-width: 1200px !important;
            padding-top: 1.5rem !important;
            padding-bottom: 2.5rem !important;
        }

        .stButton > button {
            border-radius: 50px !important;
            font-weight: 600 !important;
        }

        /* Result cards */
        .mb-grid {
            display: grid;
            grid-template-columns: repeat(auto-fill, minmax(200px, 1fr));
            gap: 1rem;
        }

        .mb-card {
            border-radius: 12px;
            overflow: hidden;
            background-color: #ffffff;
            border: 1px solid rgba(12, 138, 123, 0.1);
            margin-bottom: 0.5rem;
        }

        .mb-card:focus {
            outline: 3px solid rgba(12, 138, 123, 0.5);
        }

        .mb-card img {
            width: 100%;
            height: 160px;
            object-fit: cover;
            display: block;
        }

        .mb-card-body {
            padding: 0.5rem 0.75rem;
        }

        .mb-card-body h3 {
            font-size: 1rem !important;
            margin: 0 !important;
        }

        /* Loading placeholders */
        .mb-skeleton-img {
            width: 100%;
            height: 160px;
            background: #f2f2f2;
        }

        .mb-skeleton-line {
            height: 18px;
            width: 60%;
            background: #eee;
        }

        /* Messages */
        .mb-error {
            color: #b3261e;
        }

        .mb-prompt, .mb-empty {
            color: #555;
        }

        /* Detail view */
        .mb-detail-img {
            max-width: 480px;
            width: 100%;
            height: auto;
            border-radius: 12px;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
