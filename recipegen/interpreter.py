"""
Interpretation of raw model output into filtered recipe batches.

The interpreter is a linear pipeline with one decision point and one failure exit:

1. strip_code_fences(): remove markdown fences the model may add around JSON
2. parse_recipes(): strict JSON decode (no NaN/Infinity) + Recipe schema
   validation + unique ids within the batch
3. filter_by_diet(): keep only recipes tagged for a restricted diet

Any failure in step 2 raises RecipeParseError; no partial batch is ever returned.
An empty JSON array is a valid result and yields an empty list.
"""

import json
import logging
import re
from typing import Any, Dict, FrozenSet, List, Optional, Set, Union

from pydantic import ValidationError

from recipegen.errors import RecipeParseError
from recipegen.models import DietType, Recipe

logger = logging.getLogger(__name__)

# Leading ``` or ```json (any language tag) and trailing ```
_LEADING_FENCE = re.compile(r"^```[A-Za-z0-9_-]*[ \t]*\r?\n?")
_TRAILING_FENCE = re.compile(r"\r?\n?```$")

# Diet type -> tags of which a recipe must carry at least one.
# Matching is exact and case-sensitive on the tag strings the model returns.
DIET_TAG_REQUIREMENTS: Dict[str, FrozenSet[str]] = {
    DietType.VEGETARIAN.value: frozenset({"Vegetarian", "Vegan"}),
    DietType.VEGAN.value: frozenset({"Vegan"}),
}


def strip_code_fences(text: str) -> str:
    """
    Remove leading/trailing markdown code-fence markers from model output.

    Text without fences passes through unchanged apart from surrounding whitespace.

    Examples:
        >>> strip_code_fences('```json\\n[]\\n```')
        '[]'
        >>> strip_code_fences('[]')
        '[]'
    """
    cleaned = (text or "").strip()
    cleaned = _LEADING_FENCE.sub("", cleaned, count=1)
    cleaned = _TRAILING_FENCE.sub("", cleaned, count=1)
    return cleaned.strip()


def _format_validation_error(index: int, exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"Recipe #{index} is invalid at '{location}': {first.get('msg')}"


def _reject_constant(name: str) -> Any:
    # json.loads accepts NaN/Infinity/-Infinity by default; strict JSON does not
    raise ValueError(f"non-standard JSON constant {name!r}")


def parse_recipes(text: str) -> List[Recipe]:
    """
    Decode sanitized model output into validated Recipe objects.

    Args:
        text: Model output with code fences already stripped

    Returns:
        List of Recipe objects in the order the model returned them

    Raises:
        RecipeParseError: If the text is not strict JSON, not a JSON array,
                          any element does not match the Recipe schema, or
                          two recipes share an id
    """
    try:
        data: Any = json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        raise RecipeParseError(f"Model response is not valid JSON: {e}", raw_text=text) from e

    if not isinstance(data, list):
        raise RecipeParseError(
            f"Expected a JSON array of recipes, got {type(data).__name__}",
            raw_text=text,
        )

    recipes: List[Recipe] = []
    seen_ids: Set[str] = set()
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise RecipeParseError(
                f"Recipe #{index} is not a JSON object (got {type(item).__name__})",
                raw_text=text,
            )
        try:
            recipe = Recipe.model_validate(item)
        except ValidationError as e:
            raise RecipeParseError(_format_validation_error(index, e), raw_text=text) from e

        if recipe.id in seen_ids:
            raise RecipeParseError(f"Recipe #{index} repeats id {recipe.id!r}", raw_text=text)
        seen_ids.add(recipe.id)
        recipes.append(recipe)

    return recipes


def filter_by_diet(
    recipes: List[Recipe],
    diet_type: Optional[Union[DietType, str]],
) -> List[Recipe]:
    """
    Keep only recipes compatible with a restricted diet.

    Vegetarian profiles keep recipes tagged "Vegetarian" or "Vegan"; vegan
    profiles keep recipes tagged "Vegan". Every other diet type (including
    None) keeps all recipes. The returned list holds the same Recipe objects
    as the input; nothing is copied or modified.
    """
    diet_key = diet_type.value if isinstance(diet_type, DietType) else diet_type
    required_tags = DIET_TAG_REQUIREMENTS.get(diet_key or "")
    if required_tags is None:
        return list(recipes)

    return [r for r in recipes if any(tag in required_tags for tag in r.tags)]


def interpret(
    raw_text: str,
    diet_type: Optional[Union[DietType, str]] = None,
) -> List[Recipe]:
    """
    Turn raw model output into the recipe batch shown to the user.

    Args:
        raw_text: Text returned by the model service, optionally wrapped in
                  ```json ... ``` fences
        diet_type: Diet type of the current profile (e.g., "vegetarian")

    Returns:
        Filtered list of recipes. May be empty; an empty list is not an error.

    Raises:
        RecipeParseError: If the output cannot be parsed into recipes. The
                          original raw_text is attached to the exception.
    """
    cleaned = strip_code_fences(raw_text)
    try:
        parsed = parse_recipes(cleaned)
    except RecipeParseError as e:
        logger.warning("Could not parse model output: %s", e)
        e.raw_text = raw_text
        raise

    filtered = filter_by_diet(parsed, diet_type)
    logger.debug(
        "Interpreted %d recipe(s), %d kept for diet_type=%r",
        len(parsed), len(filtered), diet_type,
    )
    return filtered
