"""
Tests for environment configuration and generator wiring.
"""

import os
from unittest.mock import patch

import pytest

from api.config import GeminiConfig, get_required_env_vars
from api.main import build_recipe_generator
from recipegen.generator import DEFAULT_TIMEOUT_SECONDS, RecipeGenerator


class TestGeminiConfig:
    """Test cases for GeminiConfig accessors."""

    @patch.dict(os.environ, {"GEMINI_API_KEY": "abc123"})
    def test_api_key_from_env(self):
        assert GeminiConfig.get_api_key() == "abc123"

    @patch.dict(os.environ, {}, clear=True)
    def test_api_key_missing(self):
        assert GeminiConfig.get_api_key() is None

    @patch.dict(os.environ, {"GEMINI_API_KEY": "your_gemini_api_key_here"})
    def test_placeholder_key_is_treated_as_missing(self):
        assert GeminiConfig.get_api_key() is None

    @patch.dict(os.environ, {}, clear=True)
    def test_default_model(self):
        assert GeminiConfig.get_model_name() == "gemini-2.5-pro"

    @patch.dict(os.environ, {"GEMINI_MODEL": "gemini-2.5-flash"})
    def test_custom_model(self):
        assert GeminiConfig.get_model_name() == "gemini-2.5-flash"

    @pytest.mark.parametrize("raw,expected", [
        (None, DEFAULT_TIMEOUT_SECONDS),
        ("15", 15.0),
        ("2.5", 2.5),
        ("abc", DEFAULT_TIMEOUT_SECONDS),
        ("0", DEFAULT_TIMEOUT_SECONDS),
        ("-3", DEFAULT_TIMEOUT_SECONDS),
    ])
    def test_timeout_seconds(self, raw, expected):
        env = {} if raw is None else {"GEMINI_TIMEOUT_SECONDS": raw}
        with patch.dict(os.environ, env, clear=True):
            assert GeminiConfig.get_timeout_seconds() == expected


class TestRequiredConfig:
    """Test cases for required-variable reporting."""

    @patch.dict(os.environ, {"GEMINI_API_KEY": "abc123"})
    def test_all_present(self):
        assert get_required_env_vars() == {"gemini_api_key": True}

    @patch.dict(os.environ, {}, clear=True)
    def test_missing_key_reported(self):
        assert get_required_env_vars() == {"gemini_api_key": False}

    @patch.dict(os.environ, {"GEMINI_API_KEY": "your_gemini_api_key_here"})
    def test_placeholder_key_reported_as_missing(self):
        assert get_required_env_vars() == {"gemini_api_key": False}


class TestBuildRecipeGenerator:
    """Test cases for startup wiring of the generator."""

    @patch.dict(os.environ, {}, clear=True)
    def test_returns_none_without_key(self):
        assert build_recipe_generator() is None

    @patch.dict(os.environ, {"GEMINI_API_KEY": "abc123", "GEMINI_MODEL": "gemini-2.5-flash", "GEMINI_TIMEOUT_SECONDS": "20"})
    @patch("api.main.create_gemini_client")
    def test_wires_client_into_connector(self, mock_create_client):
        generator = build_recipe_generator()

        mock_create_client.assert_called_once_with("abc123")
        assert isinstance(generator, RecipeGenerator)
        assert generator.connector.client is mock_create_client.return_value
        assert generator.connector.model_name == "gemini-2.5-flash"
        assert generator.timeout_seconds == 20.0

    @patch.dict(os.environ, {"GEMINI_API_KEY": "abc123"})
    @patch("api.main.create_gemini_client", side_effect=RuntimeError("boom"))
    def test_returns_none_when_client_fails(self, mock_create_client):
        assert build_recipe_generator() is None
