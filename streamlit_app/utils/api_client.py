"""
Backend API Client Module.

This module is the **single source of truth** for all backend API communication.
All HTTP calls to the FastAPI backend should go through functions in this module.

Key principles:
- Centralized error handling for network issues
- Consistent timeout handling (BACKEND_TIMEOUT_SECONDS)
- Graceful degradation when backend is unavailable
- Never let exceptions bubble up to crash the Streamlit app

# NOTE: Meal and detail calls return tagged outcomes from mealbrowser.models, never None.
    A transport failure becomes Failed(message=...), a 404 on a meal becomes
    MealNotFound, so the page can hand whatever comes back straight to the
    presenter. Full error detail goes to the log, not to the user.
"""

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests
import streamlit as st

from api.config import FrontendConfig
from mealbrowser.models import (
    Controls,
    DetailOutcome,
    Failed,
    FilterSelection,
    ListOutcome,
    MealDetail,
    MealFound,
    MealNotFound,
    list_outcome_adapter,
)

logger = logging.getLogger(__name__)

TIMEOUT_MESSAGE = "Request timed out. The backend may be slow or unreachable."
CONNECTION_MESSAGE = "Could not connect to backend. Please check that the backend is running."
BAD_RESPONSE_MESSAGE = "The backend returned an unexpected response."


def get_backend_url() -> str:
    """
    Get the backend API base URL from environment variable or use default.

    Returns:
        Backend URL string with trailing slash removed. Defaults to http://localhost:8000.
    """
    return FrontendConfig.get_backend_url()


def _error_detail(response: Optional[requests.Response]) -> str:
    """Pull FastAPI's {"detail": ...} message out of an error response."""
    if response is None:
        return "Unknown backend error"
    try:
        detail = response.json().get("detail")
    except (ValueError, AttributeError):
        detail = None
    return str(detail) if detail else f"Backend returned {response.status_code}"


def _get(path: str, params: Optional[Dict[str, Any]] = None, timeout: Optional[float] = None) -> requests.Response:
    response = requests.get(
        f"{get_backend_url()}{path}",
        params=params,
        timeout=timeout if timeout is not None else FrontendConfig.get_timeout(),
    )
    response.raise_for_status()
    return response


@st.cache_data(ttl=60)  # Cache for 60 seconds to avoid hitting backend too frequently
def get_health_status() -> Optional[Dict[str, Any]]:
    """
    Check backend health status by calling /health endpoint.

    Returns:
        The /health payload when the backend answers with status "ok", None otherwise.
    """
    try:
        data = _get("/health", timeout=5).json()
    except (requests.exceptions.RequestException, ValueError):
        return None
    return data if data.get("status") == "ok" else None


def get_controls() -> Optional[Controls]:
    """
    Load area and category options via GET /controls.

    Returns:
        Controls, or None if the backend is unreachable or could not load
        either list (the page then shows the controls-unavailable message).
    """
    try:
        return Controls.model_validate(_get("/controls").json())
    except requests.exceptions.RequestException as e:
        logger.error("Failed to load controls from backend: %s", e, exc_info=True)
        return None
    except ValueError as e:
        logger.error("Malformed /controls response: %s", e, exc_info=True)
        return None


def resolve_meals(selection: FilterSelection) -> ListOutcome:
    """
    Resolve a filter selection via GET /meals.

    Args:
        selection: Current area/category selection; empty values are not sent

    Returns:
        The backend's outcome (no_selection / no_results / results), or Failed
        with a user-facing message if the request did not succeed.
    """
    params = {"area": selection.area, "category": selection.category}
    params = {key: value for key, value in params.items() if value}

    try:
        return list_outcome_adapter.validate_python(_get("/meals", params=params).json())
    except requests.exceptions.Timeout:
        logger.error("Timed out resolving %r", selection)
        return Failed(message=TIMEOUT_MESSAGE)
    except requests.exceptions.ConnectionError as e:
        logger.error("Backend unreachable resolving %r: %s", selection, e)
        return Failed(message=CONNECTION_MESSAGE)
    except requests.exceptions.HTTPError as e:
        logger.error("Backend error resolving %r: %s", selection, e)
        return Failed(message=_error_detail(e.response))
    except requests.exceptions.RequestException as e:
        logger.error("Request error resolving %r: %s", selection, e, exc_info=True)
        return Failed(message=str(e))
    except ValueError as e:
        logger.error("Malformed /meals response for %r: %s", selection, e, exc_info=True)
        return Failed(message=BAD_RESPONSE_MESSAGE)


def get_meal_detail(meal_id: str) -> DetailOutcome:
    """
    Fetch one meal via GET /meals/{meal_id}.

    Returns:
        MealFound, MealNotFound on a 404, or Failed for any other problem.
    """
    try:
        meal = MealDetail.model_validate(_get(f"/meals/{quote(str(meal_id), safe='')}").json())
    except requests.exceptions.HTTPError as e:
        if e.response is not None and e.response.status_code == 404:
            return MealNotFound(meal_id=str(meal_id))
        logger.error("Backend error loading meal %s: %s", meal_id, e)
        return Failed(message=_error_detail(e.response))
    except requests.exceptions.RequestException as e:
        logger.error("Request error loading meal %s: %s", meal_id, e, exc_info=True)
        return Failed(message=str(e))
    except ValueError as e:
        logger.error("Malformed meal response for %s: %s", meal_id, e, exc_info=True)
        return Failed(message=BAD_RESPONSE_MESSAGE)
    logger.info("Meal detail %s loaded: %s", meal.id, meal.name)
    return MealFound(meal=meal)
