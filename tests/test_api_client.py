"""
Tests for the Streamlit backend client.

The client must never raise into the page: every failure becomes a Failed or
MealNotFound outcome. requests.get is mocked, no backend is needed.
"""

import os
from unittest.mock import Mock, patch

import requests

from mealbrowser.models import (
    Failed,
    FilterSelection,
    MealFound,
    MealList,
    MealNotFound,
    NoSelection,
)
from streamlit_app.utils import api_client


def _response(payload=None, status_code=200):
    response = Mock()
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Error", response=response
        )
    return response


@patch.dict(os.environ, {"BACKEND_URL": "http://backend.test/", "BACKEND_TIMEOUT_SECONDS": "7"})
@patch("streamlit_app.utils.api_client.requests.get")
class TestResolveMeals:
    """Test cases for resolve_meals()."""

    def test_only_active_filters_are_sent(self, mock_get):
        mock_get.return_value = _response({"kind": "no_selection"})

        outcome = api_client.resolve_meals(FilterSelection(area="Italian"))

        assert isinstance(outcome, NoSelection)
        mock_get.assert_called_once_with("http://backend.test/meals", params={"area": "Italian"}, timeout=7.0)

    def test_results_are_parsed(self, mock_get):
        mock_get.return_value = _response({
            "kind": "results",
            "selection": {"area": "Italian", "category": "Seafood"},
            "meals": [{"id": "52802", "name": "Fish pie", "thumbnail_url": ""}],
        })

        outcome = api_client.resolve_meals(FilterSelection(area="Italian", category="Seafood"))

        assert isinstance(outcome, MealList)
        assert outcome.meals[0].name == "Fish pie"

    def test_backend_error_detail_is_passed_on(self, mock_get):
        mock_get.return_value = _response({"detail": "HTTP 500 for filter.php"}, status_code=502)

        outcome = api_client.resolve_meals(FilterSelection(area="Italian"))

        assert outcome == Failed(message="HTTP 500 for filter.php")

    def test_timeout(self, mock_get):
        mock_get.side_effect = requests.exceptions.Timeout()

        outcome = api_client.resolve_meals(FilterSelection(area="Italian"))

        assert outcome == Failed(message=api_client.TIMEOUT_MESSAGE)

    def test_backend_down(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError()

        outcome = api_client.resolve_meals(FilterSelection(category="Beef"))

        assert outcome == Failed(message=api_client.CONNECTION_MESSAGE)

    def test_unexpected_payload(self, mock_get):
        mock_get.return_value = _response({"kind": "mystery"})

        outcome = api_client.resolve_meals(FilterSelection(area="Italian"))

        assert outcome == Failed(message=api_client.BAD_RESPONSE_MESSAGE)


@patch.dict(os.environ, {"BACKEND_URL": "http://backend.test"})
@patch("streamlit_app.utils.api_client.requests.get")
class TestGetMealDetail:
    """Test cases for get_meal_detail()."""

    def test_found(self, mock_get):
        mock_get.return_value = _response({"id": "52772", "name": "Teriyaki Chicken Casserole"})

        outcome = api_client.get_meal_detail("52772")

        assert isinstance(outcome, MealFound)
        assert outcome.meal.name == "Teriyaki Chicken Casserole"
        assert mock_get.call_args[0][0] == "http://backend.test/meals/52772"

    def test_meal_id_is_url_encoded(self, mock_get):
        mock_get.return_value = _response({"id": "a/b c", "name": "Odd"})

        api_client.get_meal_detail("a/b c?x=1")

        assert mock_get.call_args[0][0] == "http://backend.test/meals/a%2Fb%20c%3Fx%3D1"

    def test_404_is_not_found(self, mock_get):
        mock_get.return_value = _response({"detail": "Meal 0 not found"}, status_code=404)

        assert api_client.get_meal_detail("0") == MealNotFound(meal_id="0")

    def test_502_is_failed(self, mock_get):
        mock_get.return_value = _response({"detail": "Request timed out"}, status_code=502)

        assert api_client.get_meal_detail("1") == Failed(message="Request timed out")


@patch.dict(os.environ, {"BACKEND_URL": "http://backend.test"})
@patch("streamlit_app.utils.api_client.requests.get")
class TestGetControls:
    def test_controls(self, mock_get):
        mock_get.return_value = _response({"areas": ["Italian"], "categories": ["", "Beef"]})

        controls = api_client.get_controls()

        assert controls.areas == ["Italian"]
        assert controls.categories == ["", "Beef"]

    def test_failure_returns_none(self, mock_get):
        mock_get.return_value = _response({"detail": "Failed to load controls"}, status_code=502)

        assert api_client.get_controls() is None
