"""
Prompt construction for recipe generation.

build_prompt() turns the user's free-text ingredient list into a single
instruction string for the model service. The prompt pins down the exact JSON
shape of a Recipe so the interpreter can validate the answer strictly.
"""

import re
from typing import List

# Number of recipes requested per generation
RECIPE_COUNT = 3

# Substituted for an empty ingredient list so the model never sees a blank field
NO_INGREDIENTS_MARKER = "no ingredients"

RECIPE_JSON_SHAPE = """[
  {
    "id": "string",
    "name": "string",
    "calories": number,
    "protein": number,
    "carbs": number,
    "fats": number,
    "servings": number,
    "cookTime": number,
    "difficulty": "Easy" | "Medium" | "Hard",
    "ingredients": ["string"],
    "instructions": ["string"],
    "tags": ["string"],
    "pantryMatch": number
  }
]"""

PROMPT_TEMPLATE = """Generate {count} recipes in valid JSON format based on these available ingredients:
{ingredients}.

Each recipe must follow this exact structure:
{shape}

Field rules:
- "id" is a string that is unique within this answer.
- "calories", "protein", "carbs" and "fats" are non-negative numbers (protein, carbs and fats in grams).
- "servings" is a positive whole number and "cookTime" is a whole number of minutes.
- "difficulty" must be exactly one of "Easy", "Medium" or "Hard".
- "instructions" are the cooking steps in order.
- "tags" describe the recipe, e.g. "Vegetarian", "Vegan", "Quick".
- "pantryMatch" is the percentage (0-100) of ingredients that come from the list above.

Output *only pure JSON* (no markdown, code fences, explanations, or extra text)."""


def build_prompt(ingredients: str) -> str:
    """
    Build the model instruction for a list of available ingredients.

    Args:
        ingredients: Comma-separated or free-form ingredient names. An empty or
                     whitespace-only string is replaced by "no ingredients".

    Returns:
        Prompt string requesting exactly RECIPE_COUNT recipes as raw JSON.

    Examples:
        >>> "chicken, rice" in build_prompt("chicken, rice")
        True
        >>> "no ingredients" in build_prompt("")
        True
    """
    if not ingredients or not ingredients.strip():
        ingredients_text = NO_INGREDIENTS_MARKER
    else:
        ingredients_text = ingredients

    return PROMPT_TEMPLATE.format(
        count=RECIPE_COUNT,
        ingredients=ingredients_text,
        shape=RECIPE_JSON_SHAPE,
    )


def split_ingredients(ingredients: str) -> List[str]:
    """
    Split a free-text ingredient list into individual names.

    Commas, semicolons and newlines are treated as separators; blank entries
    are dropped. Used for event metadata only; the prompt always receives the
    user's text verbatim.

    Examples:
        >>> split_ingredients("chicken, rice;\\nonions")
        ['chicken', 'rice', 'onions']
    """
    return [part.strip() for part in re.split(r"[,;\n]", ingredients or "") if part.strip()]
