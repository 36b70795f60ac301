"""
Recipe generation service.

RecipeGenerator ties the pipeline together:

    build_prompt() -> connector.generate_text() -> interpret()

It owns the only suspending step (the model call), so it is also where the
timeout and the single-flight gate are applied. The connector is passed in
explicitly; the generator never constructs a model client itself.

Generation flow: Streamlit -> POST /recipes/generate -> RecipeGenerator.generate()
-> GeminiConnector.generate_text() -> interpret() -> List[Recipe]
"""

import asyncio
import logging
from typing import List, Optional, Union

from recipegen.connectors.base import BaseModelConnector
from recipegen.errors import ModelTransportError
from recipegen.interpreter import interpret
from recipegen.models import DietType, Recipe
from recipegen.prompt import build_prompt
from recipegen.utils.single_flight import SingleFlight

logger = logging.getLogger(__name__)

GENERATE_OPERATION = "generate_recipes"
DEFAULT_TIMEOUT_SECONDS = 60.0


class RecipeGenerator:
    """
    Generates diet-filtered recipe batches from a list of ingredients.

    Args:
        connector: Model connector used for the text completion
        timeout_seconds: Upper bound for one model call
        gate: Single-flight gate (a private one is created if not given)
    """

    def __init__(
        self,
        connector: BaseModelConnector,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        gate: Optional[SingleFlight] = None,
    ) -> None:
        self.connector = connector
        self.timeout_seconds = timeout_seconds
        self.gate = gate or SingleFlight()

    @property
    def is_generating(self) -> bool:
        """True while a generation is in flight."""
        return self.gate.is_in_flight(GENERATE_OPERATION)

    async def generate(
        self,
        ingredients: str,
        diet_type: Optional[Union[DietType, str]] = None,
    ) -> List[Recipe]:
        """
        Generate recipes for the given ingredients and diet type.

        Args:
            ingredients: Free-text ingredient list (may be empty)
            diet_type: Diet type of the requesting profile

        Returns:
            Filtered list of recipes (possibly empty)

        Raises:
            GenerationInProgressError: If another generation is still running
            ModelTransportError: If the model call fails or times out
            RecipeParseError: If the model output is not a valid recipe array
        """
        async with self.gate.acquire(GENERATE_OPERATION):
            prompt = build_prompt(ingredients)
            logger.info(
                "Generating recipes: model=%s diet_type=%r ingredients=%r",
                self.connector.model_name, diet_type, ingredients,
            )

            try:
                raw_text = await asyncio.wait_for(
                    self.connector.generate_text(prompt),
                    timeout=self.timeout_seconds,
                )
            except asyncio.TimeoutError as e:
                logger.warning("Model call timed out after %.1fs", self.timeout_seconds)
                raise ModelTransportError(
                    f"Model call timed out after {self.timeout_seconds:.0f} seconds"
                ) from e

            recipes = interpret(raw_text, diet_type)
            logger.info("Generated %d recipe(s) for diet_type=%r", len(recipes), diet_type)
            return recipes
