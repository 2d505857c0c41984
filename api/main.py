"""
FastAPI application for the MealDB Browser API.

This module defines the REST API endpoints the Streamlit frontend uses:
- GET /controls: Available cuisine areas and meal categories
- GET /meals: Meals matching an area and/or category selection
- GET /meals/{meal_id}: Full detail of one meal
- GET /health: Health check

The API is stateless. Duplicate suppression and stale-response handling are
per browser tab and live in the frontend's BrowserSession.

Run the API with:
    uvicorn api.main:app --reload

Access API documentation at:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)
"""

# Import config early to load .env file before any other code accesses environment variables
import api.config  # noqa: F401

import logging
import time
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query, status

from api.config import MealDBConfig, get_log_level
from api.dependencies import get_connector
from api.schemas import ErrorResponse, HealthResponse
from mealbrowser.connectors.base import BaseConnector
from mealbrowser.controls import load_controls
from mealbrowser.detail import lookup_meal
from mealbrowser.errors import ControlsLoadError, NotFoundError, QueryError
from mealbrowser.models import Controls, FilterSelection, ListOutcome, MealDetail
from mealbrowser.reconcile import resolve

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Track app start time for uptime calculation
_APP_START_TIME = time.time()

APP_NAME = "MealDB Browser API"
APP_VERSION = "1.0.0"
APP_DESCRIPTION = "Browse TheMealDB recipes by cuisine area and category"

app = FastAPI(
    title=APP_NAME,
    description=APP_DESCRIPTION,
    version=APP_VERSION,
    tags_metadata=[
        {
            "name": "controls",
            "description": "Filter options (areas and categories) for the browser's select boxes.",
        },
        {
            "name": "meals",
            "description": "Meal lists for a filter selection, and single meal details.",
        },
        {
            "name": "health",
            "description": "Health check and monitoring endpoints.",
        },
    ],
)


@app.get(
    "/controls",
    response_model=Controls,
    tags=["controls"],
    summary="List available areas and categories",
    responses={status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse}},
)
def get_controls(connector: BaseConnector = Depends(get_connector)) -> Controls:
    """
    Load the filter options.

    Areas are sorted alphabetically. Categories are sorted alphabetically with an
    empty "All" entry first.

    Raises:
        HTTPException 502: If either list could not be loaded from TheMealDB
    """
    try:
        return load_controls(connector)
    except ControlsLoadError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        ) from e


@app.get(
    "/meals",
    response_model=ListOutcome,
    tags=["meals"],
    summary="List meals for an area and/or category",
    description="With one filter the provider's list is returned as-is. With both, the area and category "
                "lists are fetched concurrently and intersected by meal id, keeping the area list's order.",
    responses={status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse}},
)
def get_meals(
    area: Optional[str] = Query(None, description="Cuisine area, e.g. 'Italian' (empty = inactive)"),
    category: Optional[str] = Query(None, description="Meal category, e.g. 'Seafood' (empty = inactive)"),
    connector: BaseConnector = Depends(get_connector),
):
    """
    Resolve a filter selection.

    Returns one of:
    - {"kind": "no_selection"} when neither filter is given
    - {"kind": "no_results", "selection": ...} when the selection matched nothing
    - {"kind": "results", "selection": ..., "meals": [...]}

    Raises:
        HTTPException 502: If a TheMealDB request failed

    Example:
        ```bash
        GET /meals?area=Italian&category=Seafood
        ```
    """
    selection = FilterSelection(area=area or "", category=category or "")
    try:
        return resolve(selection, connector)
    except QueryError as e:
        logger.error("Failed to resolve %r: %s", selection, e, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        ) from e


@app.get(
    "/meals/{meal_id}",
    response_model=MealDetail,
    tags=["meals"],
    summary="Get one meal's full detail",
    responses={
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse},
    },
)
def get_meal(meal_id: str, connector: BaseConnector = Depends(get_connector)) -> MealDetail:
    """
    Look up a meal by id, with its ingredient list normalized.

    Raises:
        HTTPException 404: If TheMealDB has no meal with this id
        HTTPException 502: If the TheMealDB request failed
    """
    try:
        return lookup_meal(meal_id, connector)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    except QueryError as e:
        logger.error("Failed to look up meal %s: %s", meal_id, e, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        ) from e


@app.get("/health", response_model=HealthResponse, tags=["health"])
def health() -> HealthResponse:
    """
    Health check endpoint for monitoring and status checks.

    Always returns 200 OK if the endpoint is reachable. TheMealDB itself is not
    probed.
    """
    return HealthResponse(
        status="ok",
        name=APP_NAME,
        version=APP_VERSION,
        uptime_seconds=int(time.time() - _APP_START_TIME),
        provider_base_url=MealDBConfig.get_base_url(),
    )


@app.get("/")
def root():
    """
    Root endpoint providing API information.

    Returns:
        Dictionary with API name and version
    """
    return {
        "name": APP_NAME,
        "version": APP_VERSION,
        "description": APP_DESCRIPTION,
        "docs": "/docs",
    }
