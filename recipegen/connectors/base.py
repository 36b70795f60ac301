"""
Base connector abstract class for model service integrations.

This module defines the abstract base class that all text-generation connectors
must implement. The generator only ever talks to a BaseModelConnector, so the
concrete model service can be swapped (or mocked in tests) without touching
prompt building or response interpretation.

All connectors must:
- Expose the model_name attribute used for logging and /health
- Provide an async generate_text method that returns the raw completion text
- Wrap every service failure in ModelTransportError
"""

from abc import ABC, abstractmethod


class BaseModelConnector(ABC):
    """
    Abstract base class for all model service connectors.

    Attributes:
        model_name: Identifier of the model the connector talks to (e.g., "gemini-2.5-pro")
    """
    model_name: str

    @abstractmethod
    async def generate_text(self, prompt: str) -> str:
        """
        Send a single text completion request to the model service.

        Args:
            prompt: Instruction string built by recipegen.prompt.build_prompt

        Returns:
            Raw text produced by the model (may contain markdown fences).

        Raises:
            ModelTransportError: If the request fails for any reason.
        """
        pass
