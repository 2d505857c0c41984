"""
Shared fixtures: a mocked catalog connector and an API test client wired to it.
"""

from typing import List
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_connector
from api.main import app
from mealbrowser.connectors.base import BaseConnector
from mealbrowser.models import MealSummary


def meals(*ids) -> List[MealSummary]:
    """Build MealSummary objects with predictable names for the given ids."""
    return [
        MealSummary(id=meal_id, name=f"Meal {meal_id}", thumbnail_url=f"https://img.example/{meal_id}.jpg")
        for meal_id in ids
    ]


@pytest.fixture
def connector():
    """A connector mock; tests set return values / side effects per method."""
    mock_connector = Mock(spec=BaseConnector)
    mock_connector.provider = "mock"
    return mock_connector


@pytest.fixture
def client(connector):
    """Create a test client for the FastAPI app using the mocked connector."""
    app.dependency_overrides[get_connector] = lambda: connector
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
