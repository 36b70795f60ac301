"""
Pantry Recipe Generator - Streamlit Frontend Entry Point.

Single page: the user lists the ingredients they have, asks for AI-generated
recipes, and gets cards filtered for their diet type. The page owns the
transient UI state (current batch, is-generating flag); all model work
happens in the FastAPI backend.

Run with:
    streamlit run streamlit_app/app.py
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import api.config and recipegen
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
import api.config  # noqa: F401

import streamlit as st

from utils.api_client import (
    generate_recipes,
    get_health_status,
    missing_required_settings,
    preview_prompt,
)
from utils.profile import (
    DIET_TYPE_LABELS,
    get_diet_label,
    get_profile_from_session,
    save_profile_to_session,
)
from utils.session import get_current_recipes, get_or_create_session_id, set_current_recipes
from ui.feedback import notify_error, notify_success, show_empty_state, show_error, working_spinner
from ui.layout import page_header, section
from ui.recipe_cards import render_nutrition_table, render_recipe_grid
from ui.styles import load_global_styles

IS_GENERATING_KEY = "is_generating"
PENDING_NOTICE_KEY = "pending_notice"

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Recipe Generator",
    page_icon="👨‍🍳",
    layout="wide",
    initial_sidebar_state="expanded",
)

load_global_styles()

session_id = get_or_create_session_id()
profile = get_profile_from_session()

if IS_GENERATING_KEY not in st.session_state:
    st.session_state[IS_GENERATING_KEY] = False


def _start_generation() -> None:
    st.session_state[IS_GENERATING_KEY] = True


# Notification queued by the previous run (toasts are lost across st.rerun)
pending_notice = st.session_state.pop(PENDING_NOTICE_KEY, None)
if pending_notice:
    kind, title, message = pending_notice
    if kind == "success":
        notify_success(title, message)
    else:
        notify_error(message, title=title)


# Sidebar: dietary profile and backend status
with st.sidebar:
    st.markdown("### 👨‍🍳 **Recipe Generator**")
    st.divider()

    st.markdown("#### Your profile")
    diet_keys = list(DIET_TYPE_LABELS.keys())
    try:
        diet_index = diet_keys.index(profile.diet_type)
    except ValueError:
        diet_index = 0

    profile.diet_type = st.selectbox(
        "Diet type",
        options=diet_keys,
        index=diet_index,
        format_func=get_diet_label,
        help="Vegetarian and vegan profiles only see recipes the AI tagged accordingly.",
    )
    profile.pantry_items = st.text_area(
        "Pantry staples",
        value=profile.pantry_items,
        placeholder="e.g. rice, pasta, olive oil, garlic",
        help="Used to pre-fill the ingredient list.",
    )
    save_profile_to_session(profile)

    st.divider()

    backend_status = get_health_status()
    with st.expander("System status", expanded=False):
        if backend_status is None:
            st.markdown("**Backend:** 🔴 offline")
        else:
            model_ok = backend_status.get("model_configured", False)
            st.markdown("**Backend:** 🟢 online")
            st.markdown(f"**Model:** {'🟢 ' + str(backend_status.get('model_name')) if model_ok else '🔴 not configured'}")


page_header(
    "Recipe Generator",
    subtitle="Get personalized recipes based on your pantry and preferences",
)

missing_settings = missing_required_settings(backend_status)
if missing_settings:
    show_error(
        "Recipe generation is not configured on the backend.",
        hint=f"Set {', '.join(missing_settings)} in the project .env file and restart the backend.",
    )

# Input section
section("🧑‍🍳 Available Ingredients")
available_ingredients = st.text_area(
    "Available ingredients",
    value=profile.pantry_items,
    placeholder="Enter ingredients you have: chicken, rice, onions, tomatoes...",
    height=110,
    label_visibility="collapsed",
)

is_generating = st.session_state[IS_GENERATING_KEY]
button_col, prompt_col = st.columns([1, 3])
with button_col:
    st.button(
        "Generating..." if is_generating else "Generate Recipes",
        type="primary",
        disabled=is_generating,
        on_click=_start_generation,
        use_container_width=True,
    )
with prompt_col:
    # Preview calls the backend; only while the toggle is on
    if st.toggle("Show prompt", value=False):
        prompt_text = preview_prompt(available_ingredients)
        if prompt_text:
            st.code(prompt_text, language="text")
        else:
            st.caption("Prompt preview unavailable (backend offline).")

if is_generating:
    try:
        with working_spinner("Generating..."):
            result = generate_recipes(
                ingredients=available_ingredients,
                diet_type=profile.diet_type,
                session_id=session_id,
            )
    finally:
        st.session_state[IS_GENERATING_KEY] = False

    if result.ok:
        set_current_recipes(result.recipes)
        st.session_state[PENDING_NOTICE_KEY] = ("success", "Recipes Generated!", result.message)
    else:
        # Keep the previous batch on failure
        st.session_state[PENDING_NOTICE_KEY] = ("error", "Error", result.message)
    st.rerun()

# Recipe results
recipes = get_current_recipes()
if recipes:
    st.markdown(f"**{len(recipes)} recipe(s)** for a {get_diet_label(profile.diet_type).lower()} profile")
    render_recipe_grid(recipes)

    with st.expander("Compare nutrition", expanded=False):
        render_nutrition_table(recipes)
elif not is_generating:
    show_empty_state(
        title="Ready to Cook?",
        subtitle="Add your available ingredients and let our AI generate personalized recipes for you.",
    )
