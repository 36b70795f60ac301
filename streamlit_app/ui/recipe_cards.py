"""
Recipe card rendering.

Renders one generated Recipe as a card (difficulty badge, cook time, servings,
pantry match, nutrition, tags, ingredients and steps) and the batch as a
nutrition comparison table. Formatting helpers are plain functions so they
can be tested without a running Streamlit session.
"""

import html
from typing import List, Optional

import pandas as pd
import streamlit as st

from recipegen.models import Difficulty, Recipe

from .layout import card
from .styles import DEFAULT_DIFFICULTY_COLOR, DIFFICULTY_COLORS


def difficulty_color(level: Optional[Difficulty]) -> str:
    """
    Badge colour for a difficulty level (see Recipe.difficulty_level).

    Labels the model invented map to None and get DEFAULT_DIFFICULTY_COLOR.
    """
    if level is None:
        return DEFAULT_DIFFICULTY_COLOR
    return DIFFICULTY_COLORS.get(level, DEFAULT_DIFFICULTY_COLOR)


def servings_label(servings: int) -> str:
    """
    Examples:
        >>> servings_label(1)
        '1 serving'
        >>> servings_label(4)
        '4 servings'
    """
    return f"{servings} serving{'s' if servings > 1 else ''}"


def _format_number(value: float) -> str:
    return f"{value:g}"


def recipe_meta_line(recipe: Recipe) -> str:
    """One-line summary: cook time, servings and pantry match."""
    return (
        f"⏱ {recipe.cook_time}m · 👥 {servings_label(recipe.servings)} · "
        f"⭐ {_format_number(recipe.pantry_match)}% match"
    )


def recipes_to_dataframe(recipes: List[Recipe]) -> pd.DataFrame:
    """
    Build a nutrition comparison table for a recipe batch.

    Returns:
        DataFrame with one row per recipe and columns Recipe, Difficulty,
        Cook time (min), Servings, Calories, Protein (g), Carbs (g), Fats (g),
        Pantry match (%). Empty (with those columns) for an empty batch.
    """
    columns = [
        "Recipe", "Difficulty", "Cook time (min)", "Servings",
        "Calories", "Protein (g)", "Carbs (g)", "Fats (g)", "Pantry match (%)",
    ]
    rows = [
        [
            r.name, r.difficulty, r.cook_time, r.servings,
            r.calories, r.protein, r.carbs, r.fats, r.pantry_match,
        ]
        for r in recipes
    ]
    return pd.DataFrame(rows, columns=columns)


def render_recipe_card(recipe: Recipe) -> None:
    """
    Render a single recipe card.

    Args:
        recipe: Recipe to display
    """
    with card():
        badge = (
            f"<span class='difficulty-badge' style='background-color:{difficulty_color(recipe.difficulty_level)}'>"
            f"{html.escape(recipe.difficulty)}</span>"
        )
        st.markdown(f"{badge}**{html.escape(recipe.name)}**", unsafe_allow_html=True)
        st.markdown(f"<div class='recipe-meta'>{recipe_meta_line(recipe)}</div>", unsafe_allow_html=True)

        # Nutrition
        st.markdown(
            f"<div class='nutrition-box'><b>{_format_number(recipe.calories)} kcal</b></div>",
            unsafe_allow_html=True,
        )
        protein_col, carbs_col, fats_col = st.columns(3)
        protein_col.metric("Protein", f"{_format_number(recipe.protein)}g")
        carbs_col.metric("Carbs", f"{_format_number(recipe.carbs)}g")
        fats_col.metric("Fats", f"{_format_number(recipe.fats)}g")

        if recipe.tags:
            tags_html = " ".join(f"<span class='recipe-tag'>{html.escape(tag)}</span>" for tag in recipe.tags)
            st.markdown(tags_html, unsafe_allow_html=True)

        st.markdown("**🍴 Ingredients**")
        for ingredient in recipe.ingredients:
            st.markdown(f"- {ingredient}")

        with st.expander("Steps", expanded=False):
            if recipe.instructions:
                for i, step in enumerate(recipe.instructions, start=1):
                    st.markdown(f"{i}. {step}")
            else:
                st.caption("Instructions not available.")


def render_recipe_grid(recipes: List[Recipe], columns: int = 3) -> None:
    """Render recipes in a grid, `columns` cards per row."""
    cols = st.columns(columns, gap="large")
    for idx, recipe in enumerate(recipes):
        with cols[idx % columns]:
            render_recipe_card(recipe)


def render_nutrition_table(recipes: List[Recipe]) -> None:
    """Render the batch's nutrition comparison table."""
    df = recipes_to_dataframe(recipes)
    st.dataframe(df, hide_index=True, use_container_width=True)
