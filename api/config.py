"""
Configuration management for the Pantry Recipe Generator.

This module centralizes environment variable loading from .env file at project root.
It should be imported early in both backend (api/main.py) and frontend (streamlit_app/app.py)
to ensure .env is loaded before any other code accesses environment variables.

In production, .env will not exist, but load_dotenv() is safe to call and will no-op.
Environment variables from the deployment platform will be used instead.

Environment Variables:
- GEMINI_API_KEY: Required for recipe generation (Google Gemini API key)
- GEMINI_MODEL: Optional, defaults to "gemini-2.5-pro"
- GEMINI_TIMEOUT_SECONDS: Optional, defaults to 60
- BACKEND_URL: Optional, backend URL (defaults to http://localhost:8000 for local dev)
"""

import logging
import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv

from recipegen.connectors.gemini_connector import DEFAULT_MODEL
from recipegen.generator import DEFAULT_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)

# Placeholder value shipped in example .env files
_PLACEHOLDER_API_KEY = "your_gemini_api_key_here"


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    This function locates the project root by going up from this file's location
    (api/config.py -> project root) and loads .env if it exists.

    Safe to call multiple times. Where .env doesn't exist this is a no-op and
    platform environment variables will be used.
    """
    project_root = Path(__file__).resolve().parent.parent
    env_path = project_root / ".env"

    # override=False means existing env vars take precedence
    load_dotenv(env_path, override=False)


# Load .env file on module import
load_env_file()


class GeminiConfig:
    """Configuration for the Gemini model connector."""

    @staticmethod
    def get_api_key() -> Optional[str]:
        """
        Get Gemini API key from environment.

        Returns:
            API key string, or None if not set or still the placeholder value

        Note:
            This does not raise an error - the app starts without a key and
            reports generation as not configured.
        """
        key = os.getenv("GEMINI_API_KEY")
        if not key or key == _PLACEHOLDER_API_KEY:
            return None
        return key

    @staticmethod
    def get_model_name() -> str:
        """
        Get Gemini model identifier.

        Returns:
            Model name string (default: DEFAULT_MODEL)
        """
        return os.getenv("GEMINI_MODEL") or DEFAULT_MODEL

    @staticmethod
    def get_timeout_seconds() -> float:
        """
        Get the timeout for a single model call.

        Returns:
            Timeout in seconds (default: DEFAULT_TIMEOUT_SECONDS). Invalid or
            non-positive values fall back to the default.
        """
        raw = os.getenv("GEMINI_TIMEOUT_SECONDS")
        if not raw:
            return DEFAULT_TIMEOUT_SECONDS
        try:
            value = float(raw)
        except ValueError:
            logger.warning("Invalid GEMINI_TIMEOUT_SECONDS=%r, using default %s", raw, DEFAULT_TIMEOUT_SECONDS)
            return DEFAULT_TIMEOUT_SECONDS
        return value if value > 0 else DEFAULT_TIMEOUT_SECONDS


def get_required_env_vars() -> Dict[str, bool]:
    """
    Get a dictionary of all required environment variables and their status.

    Reported by GET /health so the frontend can tell which setting is missing.

    Returns:
        Dictionary with keys:
        - gemini_api_key: bool (True if set)
    """
    return {
        "gemini_api_key": GeminiConfig.get_api_key() is not None,
    }
