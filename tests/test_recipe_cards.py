"""
Tests for the recipe card formatting helpers.
"""

import pytest

from recipegen.models import Difficulty, Recipe
from streamlit_app.ui.recipe_cards import (
    difficulty_color,
    recipe_meta_line,
    recipes_to_dataframe,
    servings_label,
)
from streamlit_app.ui.styles import DEFAULT_DIFFICULTY_COLOR, DIFFICULTY_COLORS


def _recipe(**overrides):
    data = {
        "id": "1",
        "name": "Lentil Soup",
        "calories": 310,
        "protein": 17.5,
        "carbs": 45,
        "fats": 6,
        "servings": 4,
        "cookTime": 40,
        "difficulty": "Easy",
        "ingredients": ["lentils", "carrot"],
        "instructions": ["Simmer."],
        "tags": ["Vegan"],
        "pantryMatch": 60,
    }
    data.update(overrides)
    return Recipe.model_validate(data)


class TestDifficultyColor:
    """Test cases for difficulty badge colours."""

    @pytest.mark.parametrize("label,level", [
        ("Easy", Difficulty.EASY),
        ("MEDIUM", Difficulty.MEDIUM),
        ("hard", Difficulty.HARD),
    ])
    def test_known_levels(self, label, level):
        assert difficulty_color(_recipe(difficulty=label).difficulty_level) == DIFFICULTY_COLORS[level]

    @pytest.mark.parametrize("label", ["Expert", ""])
    def test_unknown_levels_use_default(self, label):
        assert difficulty_color(_recipe(difficulty=label).difficulty_level) == DEFAULT_DIFFICULTY_COLOR

    def test_none_uses_default(self):
        assert difficulty_color(None) == DEFAULT_DIFFICULTY_COLOR


class TestFormatting:
    """Test cases for text helpers."""

    def test_servings_label(self):
        assert servings_label(1) == "1 serving"
        assert servings_label(3) == "3 servings"

    def test_meta_line(self):
        assert recipe_meta_line(_recipe()) == "⏱ 40m · 👥 4 servings · ⭐ 60% match"

    def test_meta_line_fractional_match(self):
        assert "72.5% match" in recipe_meta_line(_recipe(pantryMatch=72.5))


class TestRecipesToDataframe:
    """Test cases for the nutrition comparison table."""

    def test_one_row_per_recipe(self):
        df = recipes_to_dataframe([_recipe(), _recipe(id="2", name="Pasta", calories=650)])
        assert list(df["Recipe"]) == ["Lentil Soup", "Pasta"]
        assert list(df["Calories"]) == [310, 650]
        assert df.loc[0, "Protein (g)"] == 17.5
        assert df.loc[0, "Cook time (min)"] == 40

    def test_empty_batch_keeps_columns(self):
        df = recipes_to_dataframe([])
        assert df.empty
        assert "Pantry match (%)" in df.columns
