"""
Exceptions raised by the recipe generation pipeline.

The API layer catches these at the boundary of the generation endpoint and
converts them into a single user-facing message each.
"""

from typing import Optional

PARSE_ERROR_MESSAGE = "AI returned invalid JSON. Please try again."
TRANSPORT_ERROR_MESSAGE = "Failed to generate recipes. Please try again later."
IN_PROGRESS_MESSAGE = "Recipes are already being generated. Please wait for the current request to finish."


class RecipeGenerationError(Exception):
    """Base class for all recipe generation failures."""

    user_message: str = TRANSPORT_ERROR_MESSAGE


class RecipeParseError(RecipeGenerationError):
    """
    Exception raised when the model response cannot be turned into recipes.

    This exception is raised when:
    - The response text is not valid JSON
    - The JSON is not an array
    - An element does not match the Recipe schema

    The offending text is kept on raw_text for diagnostics.
    """

    user_message = PARSE_ERROR_MESSAGE

    def __init__(self, message: str, raw_text: Optional[str] = None) -> None:
        super().__init__(message)
        self.raw_text = raw_text


class ModelTransportError(RecipeGenerationError):
    """
    Exception raised when the call to the model service itself fails.

    Covers network failures, authentication errors, exhausted quota and timeouts.
    No distinction is made between transient and permanent causes.
    """


class GenerationInProgressError(RecipeGenerationError):
    """Exception raised when a generation is requested while another one is still running."""

    user_message = IN_PROGRESS_MESSAGE
