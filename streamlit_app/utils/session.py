"""
Session state utilities for the recipe page.

Holds the transient UI state owned by the page: a per-browser session ID used
for event logging and the current recipe batch. The batch lives only in
st.session_state and is replaced on the next successful generation.
"""

import uuid
from typing import List

import streamlit as st

from recipegen.models import Recipe

SESSION_ID_KEY = "session_id"
RECIPES_KEY = "recipes"


def get_or_create_session_id() -> str:
    """
    Get or create a persistent session ID stored in st.session_state.

    A new ID is generated when the user refreshes or opens a new tab.

    Returns:
        Session ID string (UUID format)
    """
    if SESSION_ID_KEY not in st.session_state:
        st.session_state[SESSION_ID_KEY] = str(uuid.uuid4())
    return st.session_state[SESSION_ID_KEY]


def get_current_recipes() -> List[Recipe]:
    """Return the recipe batch currently shown (empty before the first success)."""
    return st.session_state.get(RECIPES_KEY, [])


def set_current_recipes(recipes: List[Recipe]) -> None:
    """Replace the current recipe batch."""
    st.session_state[RECIPES_KEY] = list(recipes)
