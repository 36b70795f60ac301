"""
FastAPI application for the Pantry Recipe Generator API.

This module defines the REST API endpoints for the recipe generator backend:
- POST /recipes/generate: Generate diet-filtered recipes from pantry ingredients
- POST /recipes/prompt: Preview the prompt sent to the model
- GET /health: Health check and configuration status

The Gemini client is created once in the application lifespan from GEMINI_API_KEY
and injected into the RecipeGenerator stored on app.state. Endpoints obtain the
generator through the get_recipe_generator dependency, which tests override.

Run the API with:
    uvicorn api.main:app --reload

Access API documentation at:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)
"""

# Import config early to load .env file before any other code accesses environment variables
from api.config import GeminiConfig, get_required_env_vars

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Header, HTTPException, Request, status

from recipegen.connectors.gemini_connector import GeminiConnector, create_gemini_client
from recipegen.errors import (
    GenerationInProgressError,
    ModelTransportError,
    RecipeParseError,
)
from recipegen.events import log_recipe_generation_failed, log_recipes_generated
from recipegen.generator import RecipeGenerator
from recipegen.prompt import build_prompt, split_ingredients
from api.schemas import (
    GenerateRecipesRequest,
    GenerateRecipesResponse,
    HealthResponse,
    PromptPreviewRequest,
    PromptPreviewResponse,
)

logger = logging.getLogger(__name__)

API_NAME = "Pantry Recipe Generator API"
API_VERSION = "1.0.0"
API_DESCRIPTION = "Backend API that turns pantry ingredients into AI-generated recipe suggestions"

# Track app start time for uptime calculation
_APP_START_TIME = time.time()


def build_recipe_generator() -> Optional[RecipeGenerator]:
    """
    Build the RecipeGenerator from environment configuration.

    Returns:
        RecipeGenerator wired to a Gemini client, or None if GEMINI_API_KEY is
        not configured or the client cannot be created.
    """
    api_key = GeminiConfig.get_api_key()
    if not api_key:
        logger.warning("GEMINI_API_KEY not set. Recipe generation is disabled.")
        return None

    try:
        client = create_gemini_client(api_key)
    except RuntimeError as e:
        logger.error("Could not create Gemini client, recipe generation is disabled: %s", e)
        return None

    connector = GeminiConnector(client, model_name=GeminiConfig.get_model_name())
    return RecipeGenerator(connector, timeout_seconds=GeminiConfig.get_timeout_seconds())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the model client on startup and release it on shutdown."""
    app.state.recipe_generator = build_recipe_generator()
    yield
    app.state.recipe_generator = None


app = FastAPI(
    title=API_NAME,
    description=API_DESCRIPTION,
    version=API_VERSION,
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "recipes",
            "description": "Generate recipe suggestions from available ingredients.",
        },
        {
            "name": "health",
            "description": "Health check and monitoring endpoints.",
        },
    ],
)


def get_recipe_generator(request: Request) -> RecipeGenerator:
    """
    Resolve the RecipeGenerator created during application startup.

    Raises:
        HTTPException 503: If recipe generation is not configured
    """
    generator = getattr(request.app.state, "recipe_generator", None)
    if generator is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Recipe generation is not configured. Set GEMINI_API_KEY and restart the backend.",
        )
    return generator


@app.post(
    "/recipes/generate",
    response_model=GenerateRecipesResponse,
    tags=["recipes"],
    summary="Generate recipes from pantry ingredients",
    description="Builds a prompt from the ingredient list, asks the model for 3 recipes, "
                "validates the JSON answer and filters it by diet type.",
)
async def generate_recipes(
    body: GenerateRecipesRequest,
    generator: RecipeGenerator = Depends(get_recipe_generator),
    x_session_id: Optional[str] = Header(None, alias="X-Session-ID", description="Session identifier (optional, used for event logging)"),
) -> GenerateRecipesResponse:
    """
    Generate a diet-filtered recipe batch.

    Errors are converted into a single user-facing message each:
    - 422: the model answer was not a valid recipe array
    - 502: the model service call failed or timed out
    - 409: another generation is still running

    Example:
        POST /recipes/generate {"ingredients": "rice, beans", "diet_type": "vegan"}
    """
    try:
        recipes = await generator.generate(body.ingredients, body.diet_type)
    except RecipeParseError as e:
        logger.warning("Recipe generation returned unparseable output: %s (raw=%r)", e, e.raw_text)
        log_recipe_generation_failed(x_session_id, body.diet_type, "parse_error")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=e.user_message,
        ) from e
    except ModelTransportError as e:
        logger.exception("Recipe generation failed: %s", e)
        log_recipe_generation_failed(x_session_id, body.diet_type, "transport_error")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=e.user_message,
        ) from e
    except GenerationInProgressError as e:
        log_recipe_generation_failed(x_session_id, body.diet_type, "in_progress")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=e.user_message,
        ) from e

    model_name = getattr(generator.connector, "model_name", None)
    log_recipes_generated(
        session_id=x_session_id,
        diet_type=body.diet_type,
        ingredient_count=len(split_ingredients(body.ingredients)),
        result_count=len(recipes),
        model_name=model_name,
    )

    return GenerateRecipesResponse(
        recipes=recipes,
        count=len(recipes),
        diet_type=body.diet_type,
        model=model_name,
        message=f"Found {len(recipes)} new recipes matching your preferences.",
    )


@app.post("/recipes/prompt", response_model=PromptPreviewResponse, tags=["recipes"])
def preview_prompt(body: PromptPreviewRequest) -> PromptPreviewResponse:
    """Return the exact prompt that would be sent to the model (no model call)."""
    return PromptPreviewResponse(prompt=build_prompt(body.ingredients))


@app.get("/health", response_model=HealthResponse, tags=["health"])
def health(request: Request) -> HealthResponse:
    """
    Health check endpoint for monitoring and status checks.

    Returns:
        Status, API metadata, uptime, whether the model is configured and
        which required environment variables are set.
        Always returns 200 OK if the endpoint is reachable.
    """
    generator = getattr(request.app.state, "recipe_generator", None)

    return HealthResponse(
        status="ok",
        name=API_NAME,
        version=API_VERSION,
        uptime_seconds=int(time.time() - _APP_START_TIME),
        model_configured=generator is not None,
        model_name=generator.connector.model_name if generator is not None else None,
        generating=generator.is_generating if generator is not None else False,
        config=get_required_env_vars(),
    )


@app.get("/")
def root():
    """
    Root endpoint providing API information.

    Returns:
        Dictionary with API name and version
    """
    return {
        "name": API_NAME,
        "version": API_VERSION,
        "description": API_DESCRIPTION,
        "docs": "/docs",
    }
