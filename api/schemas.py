"""
Pydantic schemas for FastAPI request and response models.

This module defines the Pydantic models used for API request validation and
response serialization. These schemas ensure type safety and automatic API
documentation generation.

The schemas include:
- GenerateRecipesRequest: Input for POST /recipes/generate
- GenerateRecipesResponse: Filtered recipe batch plus a summary message
- PromptPreviewRequest / PromptPreviewResponse: Prompt preview for debugging
- HealthResponse: Output of GET /health

# NOTE: Recipes are returned with camelCase field names (cookTime, pantryMatch),
    matching the shape the model is asked to produce and the Streamlit cards read.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from recipegen.models import DietType, Recipe


class GenerateRecipesRequest(BaseModel):
    """Request body for recipe generation."""
    ingredients: str = Field("", description="Free-text list of available ingredients (may be empty)")
    diet_type: str = Field(
        DietType.OMNIVORE.value,
        description="Diet type of the user profile, e.g. 'omnivore', 'vegetarian', 'vegan'",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "ingredients": "chicken, rice, onions, tomatoes",
                "diet_type": "omnivore",
            }
        }
    )


class GenerateRecipesResponse(BaseModel):
    """
    Response model for recipe generation.

    Contains the diet-filtered recipe batch. An empty list is a valid result
    (e.g., when every generated recipe was filtered out by the diet type).
    """
    recipes: List[Recipe] = Field(default_factory=list, description="Generated recipes after diet filtering")
    count: int = Field(..., ge=0, description="Number of recipes returned")
    diet_type: str = Field(..., description="Diet type the batch was filtered for")
    model: Optional[str] = Field(None, description="Model that produced the batch")
    message: str = Field(..., description="Human-readable summary for toast notifications")


class PromptPreviewRequest(BaseModel):
    """Request body for prompt preview."""
    ingredients: str = Field("", description="Free-text list of available ingredients")


class PromptPreviewResponse(BaseModel):
    """Prompt that would be sent to the model for the given ingredients."""
    prompt: str


class HealthResponse(BaseModel):
    """Health check payload."""
    status: str
    name: str
    version: str
    uptime_seconds: int
    model_configured: bool
    model_name: Optional[str] = None
    generating: bool = False
    config: Dict[str, bool] = Field(default_factory=dict, description="Required environment variables and whether each is set")

    model_config = ConfigDict(protected_namespaces=())
