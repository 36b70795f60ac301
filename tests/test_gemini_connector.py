"""
Tests for the Gemini connector using a mocked google-genai client.

These tests mock the genai client to avoid making real API calls during testing.
The tests verify that:
- The client is created from the API key and a missing key is rejected
- generate_text calls the async models API with the configured model
- SDK and network errors are wrapped in ModelTransportError
"""

import asyncio
from unittest.mock import AsyncMock, Mock, patch

import pytest

from recipegen.connectors import gemini_connector
from recipegen.connectors.base import BaseModelConnector
from recipegen.connectors.gemini_connector import (
    DEFAULT_MODEL,
    GeminiConnector,
    create_gemini_client,
)
from recipegen.errors import ModelTransportError


def make_client(text="[]"):
    client = Mock()
    client.aio.models.generate_content = AsyncMock(return_value=Mock(text=text))
    return client


class FakeAPIError(Exception):
    """Stand-in for google.genai.errors.APIError with the attributes we log."""

    def __init__(self, code, message):
        super().__init__(message)
        self.code = code


class TestCreateGeminiClient:
    """Tests for client construction."""

    @patch("recipegen.connectors.gemini_connector.genai")
    def test_creates_client_with_api_key(self, mock_genai):
        client = create_gemini_client("test-key")
        mock_genai.Client.assert_called_once_with(api_key="test-key")
        assert client is mock_genai.Client.return_value

    @pytest.mark.parametrize("api_key", [None, ""])
    def test_missing_key_raises(self, api_key):
        with pytest.raises(RuntimeError, match="GEMINI_API_KEY is not set"):
            create_gemini_client(api_key)

    @patch("recipegen.connectors.gemini_connector.genai")
    def test_client_failure_raises_runtime_error(self, mock_genai):
        mock_genai.Client.side_effect = ValueError("bad key format")
        with pytest.raises(RuntimeError, match="Failed to initialize Gemini client"):
            create_gemini_client("test-key")


class TestGeminiConnector:
    """Tests for GeminiConnector.generate_text."""

    def test_is_a_model_connector(self):
        assert isinstance(GeminiConnector(make_client()), BaseModelConnector)

    def test_default_model(self):
        assert GeminiConnector(make_client()).model_name == DEFAULT_MODEL == "gemini-2.5-pro"

    def test_custom_model(self):
        assert GeminiConnector(make_client(), model_name="gemini-2.5-flash").model_name == "gemini-2.5-flash"

    def test_generate_text_returns_response_text(self):
        client = make_client('```json\n[]\n```')
        connector = GeminiConnector(client, model_name="gemini-2.5-flash")

        text = asyncio.run(connector.generate_text("make recipes"))

        assert text == '```json\n[]\n```'
        client.aio.models.generate_content.assert_awaited_once_with(
            model="gemini-2.5-flash",
            contents="make recipes",
        )

    def test_none_text_becomes_empty_string(self):
        connector = GeminiConnector(make_client(text=None))
        assert asyncio.run(connector.generate_text("prompt")) == ""

    def test_api_error_is_wrapped(self):
        client = make_client()
        client.aio.models.generate_content.side_effect = FakeAPIError(429, "Resource exhausted")
        connector = GeminiConnector(client)

        with patch.object(gemini_connector.genai_errors, "APIError", FakeAPIError):
            with pytest.raises(ModelTransportError, match="Gemini API error"):
                asyncio.run(connector.generate_text("prompt"))

    def test_network_error_is_wrapped(self):
        client = make_client()
        client.aio.models.generate_content.side_effect = ConnectionError("connection reset")
        connector = GeminiConnector(client)

        with pytest.raises(ModelTransportError, match="connection reset") as exc_info:
            asyncio.run(connector.generate_text("prompt"))
        assert isinstance(exc_info.value.__cause__, ConnectionError)
