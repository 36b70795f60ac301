"""
Global CSS Styling for the Pantry Recipe Generator.

This module provides load_global_styles() to inject consistent styling
for the recipe page: typography, difficulty badges and tag pills.
"""

import streamlit as st

from recipegen.models import Difficulty

# Difficulty badge colours; anything unrecognised uses the muted default
DIFFICULTY_COLORS = {
    Difficulty.EASY: "#16a34a",    # success green
    Difficulty.MEDIUM: "#f97316",  # food orange
    Difficulty.HARD: "#dc2626",    # food red
}
DEFAULT_DIFFICULTY_COLOR = "#9ca3af"  # muted grey


def load_global_styles() -> None:
    """
    Inject global CSS styles for the recipe page.

    This function:
    - Imports Google Fonts (Nunito) for friendly typography
    - Styles buttons as rounded pills
    - Defines the difficulty badge, tag pill and nutrition box classes
    """
    css = """
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Nunito:wght@400;600;700&display=swap');

        html, body, [class*="css"] {
            font-family: 'Nunito', 'sans serif' !important;
        }

        h1, h2, h3, h4, h5, h6 {
            font-weight: 600 !important;
            letter-spacing: 0.02em !important;
        }

        .stButton > button {
            border-radius: 50px !important;
            box-shadow: 0 2px 6px rgba(249, 115, 22, 0.15) !important;
            font-weight: 600 !important;
            padding: 0.5rem 1.25rem !important;
        }

        .main .block-container {
            max-width: 1200px !important;
            padding-top: 1.5rem !important;
            padding-bottom: 2.5rem !important;
        }

        .recipe-meta {
            color: #6b7280;
            font-size: 0.85rem;
        }

        .difficulty-badge {
            display: inline-block;
            color: white;
            border-radius: 999px;
            padding: 2px 10px;
            font-size: 0.75rem;
            font-weight: 600;
            float: right;
        }

        .recipe-tag {
            display: inline-block;
            background-color: #fff7ed;
            border: 1px solid #fed7aa;
            border-radius: 999px;
            padding: 2px 8px;
            margin: 0 4px 4px 0;
            font-size: 0.75rem;
            color: #1f2933;
            white-space: nowrap;
        }

        .nutrition-box {
            background: linear-gradient(135deg, #fff7ed 0%, #fefce8 100%);
            border-radius: 10px;
            padding: 0.75rem;
            margin-bottom: 0.75rem;
            text-align: center;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
