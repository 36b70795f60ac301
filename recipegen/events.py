# recipegen/events.py
"""
Event logging for the recipe generator.

Responsibilities:
- Provide a single log_event(...) function that:
  - Appends a JSONL record to events.log.
  - Never raises exceptions (analytics are strictly non-blocking).

- Provide small helper functions for the generation events:
  - log_recipes_generated(...)
  - log_recipe_generation_failed(...)

Only counts and metadata are recorded; generated recipes are never persisted.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# JSONL file with one event per line.
EVENT_LOG_FILE = Path("events.log")


def _write_to_file(record: Dict[str, Any]) -> None:
    """
    Append a single JSON record to events.log as JSONL.
    Never raise exceptions.
    """
    try:
        path = Path(EVENT_LOG_FILE)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=False) + "\n")
    except Exception as exc:
        logger.debug("Failed to write event to %s: %s", EVENT_LOG_FILE, exc)


def log_event(
    event: str,
    session_id: Optional[str],
    payload: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Core event logger.

    Builds a record with keys ts, event, session_id, payload and appends it to
    EVENT_LOG_FILE. Never raises.
    """
    record = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "event": event,
        "session_id": session_id,
        "payload": payload or {},
    }
    _write_to_file(record)


# ---------------------------------------------------------------------------
# Helper functions for generation events
# ---------------------------------------------------------------------------

def log_recipes_generated(
    session_id: Optional[str],
    diet_type: Optional[str],
    ingredient_count: int,
    result_count: int,
    model_name: Optional[str] = None,
) -> None:
    """
    Log a recipes_generated event.

    payload:
    {
        "diet_type": "vegetarian",
        "ingredient_count": 4,
        "result_count": 2,
        "model": "gemini-2.5-pro"   # optional
    }
    """
    payload: Dict[str, Any] = {
        "diet_type": diet_type,
        "ingredient_count": ingredient_count,
        "result_count": result_count,
    }
    if model_name is not None:
        payload["model"] = model_name

    log_event("recipes_generated", session_id, payload)


def log_recipe_generation_failed(
    session_id: Optional[str],
    diet_type: Optional[str],
    error_kind: str,
) -> None:
    """
    Log a recipe_generation_failed event.

    payload:
    {
        "diet_type": "vegan",
        "error_kind": "parse_error" | "transport_error" | "in_progress"
    }
    """
    log_event(
        "recipe_generation_failed",
        session_id,
        {"diet_type": diet_type, "error_kind": error_kind},
    )
