"""
Google Gemini connector using the google-genai SDK.

This connector sends the recipe prompt to a Gemini model and returns the raw
completion text. It does not parse or validate the answer; that is the
interpreter's job.

The connector:
- Receives an already-constructed google.genai.Client (no hidden globals)
- Calls client.aio.models.generate_content so the request can be awaited
- Returns response.text, or an empty string if the SDK returns no text
- Wraps API and network errors in ModelTransportError

The client itself is built once at application startup by create_gemini_client(),
using GEMINI_API_KEY from the environment (see api.config).
"""

import logging
from typing import Optional

from google import genai
from google.genai import errors as genai_errors

from recipegen.errors import ModelTransportError

from .base import BaseModelConnector

logger = logging.getLogger(__name__)

# gemini-2.5-flash is faster and cheaper if latency matters more than quality
DEFAULT_MODEL = "gemini-2.5-pro"


def create_gemini_client(api_key: Optional[str]) -> genai.Client:
    """
    Create the google-genai client used for all generations.

    Args:
        api_key: Gemini API key (from GEMINI_API_KEY)

    Returns:
        Configured genai.Client instance

    Raises:
        RuntimeError: If the key is missing or client initialization fails.
    """
    if not api_key:
        raise RuntimeError(
            "GEMINI_API_KEY is not set. Please add it to your .env file at the project root:\n"
            "GEMINI_API_KEY=your_gemini_api_key_here\n\n"
            "For production, set GEMINI_API_KEY in your deployment environment."
        )

    try:
        return genai.Client(api_key=api_key)
    except Exception as e:
        raise RuntimeError(f"Failed to initialize Gemini client: {e}") from e


class GeminiConnector(BaseModelConnector):
    """
    Connector for Google Gemini text generation.

    Args:
        client: google.genai.Client created by create_gemini_client()
        model_name: Gemini model identifier (default: DEFAULT_MODEL)
    """

    def __init__(self, client: genai.Client, model_name: Optional[str] = None) -> None:
        self.client = client
        self.model_name = model_name or DEFAULT_MODEL

    async def generate_text(self, prompt: str) -> str:
        """
        Ask Gemini for a completion of `prompt`.

        Returns:
            Completion text (possibly wrapped in ```json fences).

        Raises:
            ModelTransportError: On API errors (auth, quota, invalid request)
                                 or any network failure.
        """
        logger.info("Requesting completion from %s (%d prompt chars)", self.model_name, len(prompt))
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model_name,
                contents=prompt,
            )
        except genai_errors.APIError as e:
            logger.warning("Gemini API error (code=%s): %s", getattr(e, "code", None), e)
            raise ModelTransportError(f"Gemini API error: {e}") from e
        except Exception as e:
            logger.warning("Gemini request failed: %s", e)
            raise ModelTransportError(f"Gemini request failed: {e}") from e

        text = response.text or ""
        logger.info("Received %d chars from %s", len(text), self.model_name)
        return text
