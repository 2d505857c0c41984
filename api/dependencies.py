"""
API dependencies for dependency injection
"""

from mealbrowser.connectors.base import BaseConnector
from mealbrowser.connectors.mealdb_connector import MealDBConnector


def get_connector() -> BaseConnector:
    """
    Catalog connector dependency for FastAPI routes.

    Tests replace it through app.dependency_overrides[get_connector].

    Usage:
        @app.get("/example")
        def example(connector: BaseConnector = Depends(get_connector)):
            meals = connector.meals_by_area("Italian")
    """
    return MealDBConnector()
