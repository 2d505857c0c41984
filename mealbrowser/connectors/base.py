"""
Base connector abstract class for recipe catalog integrations.

This module defines the interface every catalog connector must implement. The
rest of the browser (reconciler, controls loader, detail lookup) only talks to
this interface, which keeps the provider's response shape behind one boundary
and makes the core easy to exercise with a mocked connector.

All connectors must:
- Set the provider attribute (e.g., "mealdb")
- Return filter option names as plain strings (null names may be passed through)
- Map list rows into MealSummary and lookup records into MealDetail
- Raise QueryError for any failed request
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from mealbrowser.models import MealDetail, MealSummary


class BaseConnector(ABC):
    """
    Abstract base class for all recipe catalog connectors.

    Attributes:
        provider: String identifier for the catalog (e.g., "mealdb")
    """
    provider: str

    @abstractmethod
    def list_areas(self) -> List[Optional[str]]:
        """
        List the cuisine area names known to the catalog.

        Returns:
            Area names in provider order. Entries may be None or empty; the
            controls loader filters them out.

        Raises:
            QueryError: If the request fails.
        """

    @abstractmethod
    def list_categories(self) -> List[Optional[str]]:
        """
        List the meal category names known to the catalog.

        Raises:
            QueryError: If the request fails.
        """

    @abstractmethod
    def meals_by_area(self, area: str) -> List[MealSummary]:
        """
        List meals of one cuisine area.

        Returns:
            Meals in provider order, or an empty list when the area has none.

        Raises:
            QueryError: If the request fails.
        """

    @abstractmethod
    def meals_by_category(self, category: str) -> List[MealSummary]:
        """
        List meals of one category.

        Raises:
            QueryError: If the request fails.
        """

    @abstractmethod
    def lookup_meal(self, meal_id: str) -> Optional[MealDetail]:
        """
        Fetch the full record of one meal.

        Returns:
            The normalized meal, or None if the catalog has no such meal.

        Raises:
            QueryError: If the request fails.
        """
