"""
Dietary Profile Module.

This module defines the diet types a user can pick and provides helpers for
reading and writing the current user's profile. The profile is stored in
st.session_state and persists across reruns within one browser session.

The profile is used to:
- Seed the ingredient text area with the user's pantry items
- Tell the backend which diet to filter generated recipes for
"""

from typing import Dict

import streamlit as st

from recipegen.models import DietType, UserProfile

SESSION_KEY_PROFILE = "user_profile"

DIET_TYPE_LABELS: Dict[str, str] = {
    DietType.OMNIVORE.value: "Omnivore (no restrictions)",
    DietType.VEGETARIAN.value: "Vegetarian",
    DietType.VEGAN.value: "Vegan",
    DietType.PESCATARIAN.value: "Pescatarian",
}

DEFAULT_DIET_TYPE = DietType.OMNIVORE.value


def get_diet_label(diet_type: str) -> str:
    """
    Get a human-readable label for a diet type.

    Unknown diet types are shown as their capitalized raw value.
    """
    return DIET_TYPE_LABELS.get(diet_type, (diet_type or DEFAULT_DIET_TYPE).capitalize())


def get_profile_from_session() -> UserProfile:
    """
    Get the current profile from session state, creating a default one if needed.

    Returns:
        UserProfile stored under SESSION_KEY_PROFILE
    """
    if SESSION_KEY_PROFILE not in st.session_state:
        st.session_state[SESSION_KEY_PROFILE] = UserProfile(diet_type=DEFAULT_DIET_TYPE)
    return st.session_state[SESSION_KEY_PROFILE]


def save_profile_to_session(profile: UserProfile) -> None:
    """
    Store a profile in session state.

    Diet types outside DIET_TYPE_LABELS are reset to the default.
    """
    if profile.diet_type not in DIET_TYPE_LABELS:
        profile.diet_type = DEFAULT_DIET_TYPE
    st.session_state[SESSION_KEY_PROFILE] = profile
