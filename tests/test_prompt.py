"""
Tests for the prompt builder.

This module tests build_prompt, which turns a free-text ingredient list into
the instruction string sent to the model service.
"""

import pytest

from recipegen.prompt import (
    NO_INGREDIENTS_MARKER,
    RECIPE_COUNT,
    build_prompt,
    split_ingredients,
)


class TestBuildPrompt:
    """Test cases for build_prompt."""

    def test_empty_ingredients_use_marker(self):
        """Test that an empty ingredient list is replaced by 'no ingredients'."""
        prompt = build_prompt("")
        assert "no ingredients" in prompt
        assert NO_INGREDIENTS_MARKER == "no ingredients"

    def test_whitespace_only_ingredients_use_marker(self):
        """Test that whitespace-only input is treated as empty."""
        assert "no ingredients" in build_prompt("   \n ")

    @pytest.mark.parametrize("ingredients", [
        "chicken, rice, onions, tomatoes",
        "eggs",
        "2 cups of flour; 1 tsp salt\nbutter",
        "tofu {extra firm}",
    ])
    def test_ingredients_included_verbatim(self, ingredients):
        """Test that non-empty input appears verbatim in the prompt."""
        prompt = build_prompt(ingredients)
        assert ingredients in prompt
        assert NO_INGREDIENTS_MARKER not in prompt

    def test_requests_exactly_three_recipes(self):
        """Test that the prompt asks for exactly 3 recipes."""
        assert RECIPE_COUNT == 3
        assert "Generate 3 recipes" in build_prompt("rice")

    def test_lists_every_recipe_field(self):
        """Test that the prompt enumerates the full recipe field set."""
        prompt = build_prompt("rice")
        for field in (
            "id", "name", "calories", "protein", "carbs", "fats", "servings",
            "cookTime", "difficulty", "ingredients", "instructions", "tags", "pantryMatch",
        ):
            assert f'"{field}"' in prompt

    def test_enumerates_difficulty_levels(self):
        """Test that the closed difficulty set is spelled out."""
        assert '"Easy" | "Medium" | "Hard"' in build_prompt("rice")

    def test_asks_for_raw_json_only(self):
        """Test that the model is told not to add prose or markdown."""
        prompt = build_prompt("rice")
        assert "only pure JSON" in prompt
        assert "no markdown" in prompt

    def test_is_pure(self):
        """Test that the same input always yields the same prompt."""
        assert build_prompt("beans, corn") == build_prompt("beans, corn")


class TestSplitIngredients:
    """Test cases for split_ingredients."""

    def test_splits_on_commas_semicolons_and_newlines(self):
        assert split_ingredients("chicken, rice;\nonions") == ["chicken", "rice", "onions"]

    def test_drops_blank_entries(self):
        assert split_ingredients(" , ,eggs,, ") == ["eggs"]

    def test_empty_input(self):
        assert split_ingredients("") == []
        assert split_ingredients(None) == []
