"""
Recipe and profile models for the recipe generator.

This module defines the canonical recipe schema used throughout the generator.
The model service is asked to return recipes in exactly this shape; the
interpreter validates every record against Recipe before it reaches the API
or the Streamlit frontend.

# NOTE: Recipe uses camelCase aliases (cookTime, pantryMatch) because that is
    the wire format the prompt asks the model for and the frontend renders.
    Always serialise with model_dump(by_alias=True) when sending to clients.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Difficulty(str, Enum):
    """Closed set of difficulty levels the model is asked to use."""
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class DietType(str, Enum):
    """Diet classifications a user profile can carry."""
    OMNIVORE = "omnivore"
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    PESCATARIAN = "pescatarian"


class Recipe(BaseModel):
    """
    A single generated recipe.

    Recipes are plain values: received once from the model, validated, and
    rendered read-only. Extra fields the model adds are kept as-is.
    """
    id: str = Field(..., description="Opaque identifier, unique within one generated batch")
    name: str = Field(..., description="Recipe name")

    # Nutrition (per serving, as estimated by the model)
    calories: float = Field(..., ge=0, description="Calories (kcal)")
    protein: float = Field(..., ge=0, description="Protein in grams")
    carbs: float = Field(..., ge=0, description="Carbohydrates in grams")
    fats: float = Field(..., ge=0, description="Fats in grams")

    servings: int = Field(..., ge=1, description="Number of servings")
    cook_time: int = Field(..., ge=0, alias="cookTime", description="Cooking time in minutes")
    difficulty: str = Field(..., description="Difficulty label, expected 'Easy', 'Medium' or 'Hard'")

    ingredients: List[str] = Field(default_factory=list, description="Ingredient lines")
    instructions: List[str] = Field(default_factory=list, description="Ordered cooking steps")
    tags: List[str] = Field(default_factory=list, description="Tags such as 'Vegetarian' or 'Quick'")

    pantry_match: float = Field(..., alias="pantryMatch", description="Percentage of ingredients already in the pantry")

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        allow_inf_nan=False,
        json_schema_extra={
            "example": {
                "id": "1",
                "name": "Tomato Rice Bowl",
                "calories": 420,
                "protein": 12,
                "carbs": 70,
                "fats": 9,
                "servings": 2,
                "cookTime": 25,
                "difficulty": "Easy",
                "ingredients": ["1 cup rice", "2 tomatoes", "1 onion"],
                "instructions": ["Cook the rice.", "Fry onion and tomatoes.", "Combine."],
                "tags": ["Vegetarian", "Quick"],
                "pantryMatch": 90,
            }
        },
    )

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        # Models frequently emit numeric ids despite being asked for strings
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def difficulty_level(self) -> Optional[Difficulty]:
        """
        Difficulty as an enum member, or None if the model used another label.

        Matching is case-insensitive so "easy" and "EASY" both map to Difficulty.EASY.
        """
        label = (self.difficulty or "").strip().lower()
        for level in Difficulty:
            if level.value.lower() == label:
                return level
        return None


@dataclass
class UserProfile:
    """
    Dietary profile of the current user.

    Attributes:
        diet_type: Diet classification (e.g., "omnivore", "vegetarian", "vegan")
        pantry_items: Free-text pantry list used to seed the ingredient input
    """
    diet_type: str = DietType.OMNIVORE.value
    pantry_items: str = ""
