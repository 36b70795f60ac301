"""
UI Styling and Components Module.

This module provides global CSS styling, layout primitives and recipe card
rendering for the Pantry Recipe Generator Streamlit app.
"""
