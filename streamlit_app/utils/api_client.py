"""
Backend API Client Module.

This module is the **single source of truth** for all backend API communication.
All HTTP calls to the FastAPI backend should go through functions in this module.

Key principles:
- Centralized error handling for network issues
- Consistent timeouts
- Graceful degradation when backend is unavailable
- Never let exceptions bubble up to crash the Streamlit app

# NOTE: generate_recipes() never raises. Every failure (network, HTTP status,
    malformed payload) is turned into GenerationResult(ok=False, message=...),
    so the page can show one notification and keep the previous batch.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests
import streamlit as st
from pydantic import ValidationError

from recipegen.errors import TRANSPORT_ERROR_MESSAGE
from recipegen.models import Recipe

logger = logging.getLogger(__name__)

# Generation waits on the model; keep this above GEMINI_TIMEOUT_SECONDS
GENERATE_TIMEOUT_SECONDS = 90


@dataclass
class GenerationResult:
    """
    Outcome of a generation request as seen by the page.

    Attributes:
        ok: True if the backend returned a recipe batch
        recipes: Filtered recipes (empty on failure, possibly empty on success)
        message: Human-readable text for the toast notification
    """
    ok: bool
    recipes: List[Recipe] = field(default_factory=list)
    message: str = ""


def get_backend_url() -> str:
    """
    Get the backend API base URL from environment variable or use default.

    Returns:
        Backend URL string with trailing slash removed. Defaults to http://localhost:8000
        for local development.
    """
    url = os.getenv("BACKEND_URL", "http://localhost:8000")
    return url.rstrip("/")


@st.cache_data(ttl=60)  # Cache for 60 seconds to avoid hitting backend too frequently
def get_health_status() -> Optional[Dict[str, Any]]:
    """
    Check backend health status by calling /health endpoint.

    Returns:
        Health payload dictionary (status, model_configured, model_name, ...),
        or None if backend is unreachable or unhealthy.
    """
    try:
        response = requests.get(f"{get_backend_url()}/health", timeout=5)
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.RequestException:
        return None
    except ValueError:
        return None

    return data if data.get("status") == "ok" else None


def missing_required_settings(health: Optional[Dict[str, Any]]) -> List[str]:
    """
    Names of required backend settings reported as unset by GET /health.

    Args:
        health: Payload from get_health_status(), or None if the backend is offline

    Returns:
        Environment variable names (e.g. ["GEMINI_API_KEY"]); empty when the
        backend is offline or fully configured.
    """
    if not health:
        return []
    config = health.get("config") or {}
    return [name.upper() for name, is_set in config.items() if not is_set]


def _error_detail(response: requests.Response) -> Optional[str]:
    """Extract FastAPI's "detail" message from an error response, if any."""
    try:
        detail = response.json().get("detail")
    except ValueError:
        return None
    return detail if isinstance(detail, str) else None


def generate_recipes(
    ingredients: str,
    diet_type: str,
    session_id: Optional[str] = None,
) -> GenerationResult:
    """
    Ask the backend to generate recipes for the given ingredients.

    Args:
        ingredients: Free-text ingredient list (may be empty)
        diet_type: Diet type of the current profile
        session_id: Optional session ID, forwarded as X-Session-ID for event logging

    Returns:
        GenerationResult. On success `recipes` holds the filtered batch and
        `message` the backend's summary; on failure `ok` is False and
        `message` is the user-facing error.
    """
    headers = {"X-Session-ID": session_id} if session_id else {}
    payload = {"ingredients": ingredients, "diet_type": diet_type}

    try:
        response = requests.post(
            f"{get_backend_url()}/recipes/generate",
            json=payload,
            headers=headers,
            timeout=GENERATE_TIMEOUT_SECONDS,
        )
    except requests.exceptions.Timeout:
        logger.warning("Recipe generation request timed out")
        return GenerationResult(ok=False, message="Request timed out. Please try again later.")
    except requests.exceptions.ConnectionError:
        logger.warning("Could not connect to backend at %s", get_backend_url())
        return GenerationResult(
            ok=False,
            message="Could not connect to backend. Please check that the backend is running.",
        )
    except requests.exceptions.RequestException as e:
        logger.warning("Recipe generation request failed: %s", e)
        return GenerationResult(ok=False, message=TRANSPORT_ERROR_MESSAGE)

    if not response.ok:
        detail = _error_detail(response)
        logger.warning("Backend returned %s for /recipes/generate: %s", response.status_code, detail)
        return GenerationResult(ok=False, message=detail or TRANSPORT_ERROR_MESSAGE)

    try:
        data = response.json()
        recipes = [Recipe.model_validate(item) for item in data.get("recipes", [])]
    except (ValueError, ValidationError, AttributeError) as e:
        logger.warning("Malformed /recipes/generate payload: %s", e)
        return GenerationResult(ok=False, message=TRANSPORT_ERROR_MESSAGE)

    message = data.get("message") or f"Found {len(recipes)} new recipes matching your preferences."
    return GenerationResult(ok=True, recipes=recipes, message=message)


def preview_prompt(ingredients: str) -> Optional[str]:
    """
    Fetch the prompt the backend would send to the model.

    Returns:
        Prompt string, or None on error (preview is a nice-to-have).
    """
    try:
        response = requests.post(
            f"{get_backend_url()}/recipes/prompt",
            json={"ingredients": ingredients},
            timeout=5,
        )
        response.raise_for_status()
        return response.json().get("prompt")
    except (requests.exceptions.RequestException, ValueError):
        return None
