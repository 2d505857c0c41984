"""
TheMealDB connector.

This connector interfaces with TheMealDB's public JSON API over HTTP to list
filter options, filter meals by area or category, and look up full meal
records, normalizing every response into the browser's models.

The connector:
- Builds URLs as {base_url}/{api_key}/{endpoint} (free key "1" by default)
- Issues GET requests with requests and a per-request timeout
- Treats a non-2xx status, connection error, timeout or non-JSON body as a QueryError
- Treats a null item list ({"meals": null}) as "no results", not as a failure
- Drops filter rows with no id, and repeats of an id already seen

Configuration comes from MEALDB_BASE_URL, MEALDB_API_KEY and MEALDB_TIMEOUT_SECONDS
(see api.config), but every value can also be passed to the constructor.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from api.config import MealDBConfig
from mealbrowser.errors import QueryError
from mealbrowser.models import MealDetail, MealSummary

from .base import BaseConnector

logger = logging.getLogger(__name__)


class MealDBConnector(BaseConnector):
    """
    Connector for TheMealDB (https://www.themealdb.com).

    Each public method maps to one provider endpoint:
    - list_areas: list.php?a=list
    - list_categories: categories.php
    - meals_by_area: filter.php?a=<area>
    - meals_by_category: filter.php?c=<category>
    - lookup_meal: lookup.php?i=<id>
    """
    provider = "mealdb"

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Initialize the connector.

        Args:
            base_url: API root without the key segment (defaults to MEALDB_BASE_URL)
            api_key: Access key path segment (defaults to MEALDB_API_KEY, "1")
            timeout: Request timeout in seconds (defaults to MEALDB_TIMEOUT_SECONDS)
        """
        self.base_url = (base_url or MealDBConfig.get_base_url()).rstrip("/")
        self.api_key = api_key or MealDBConfig.get_api_key()
        self.timeout = timeout if timeout is not None else MealDBConfig.get_timeout()

    def _url(self, endpoint: str) -> str:
        return f"{self.base_url}/{self.api_key}/{endpoint}"

    def _get_json(self, endpoint: str, params: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        """
        GET one endpoint and return its decoded JSON object.

        Raises:
            QueryError: On timeout, connection failure, non-2xx status or a body
                that is not a JSON object.
        """
        url = self._url(endpoint)
        logger.info("MealDB request: %s params=%r", endpoint, params)
        try:
            response = requests.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise QueryError(f"Request timed out for {url}", url=url) from e
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            raise QueryError(f"HTTP {status_code} for {url}", url=url, status_code=status_code) from e
        except requests.exceptions.RequestException as e:
            raise QueryError(f"Could not reach {url}: {e}", url=url) from e

        try:
            data = response.json()
        except ValueError as e:
            raise QueryError(f"Malformed JSON from {url}", url=url) from e

        if not isinstance(data, dict):
            raise QueryError(f"Unexpected response format from {url}", url=url)
        return data

    def _items(self, endpoint: str, data: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
        # {"meals": null} is how the provider says "nothing found"
        items = data.get(key) or []
        if not isinstance(items, list):
            url = self._url(endpoint)
            raise QueryError(f"Unexpected response format from {url}: '{key}' is not a list", url=url)
        return [item for item in items if isinstance(item, dict)]

    def _summaries(self, endpoint: str, data: Dict[str, Any]) -> List[MealSummary]:
        """Normalize filter rows, dropping rows without an id and repeated ids (first one wins)."""
        meals: List[MealSummary] = []
        seen = set()
        for row in self._items(endpoint, data, "meals"):
            meal = MealSummary.from_provider(row)
            if not meal.id or meal.id in seen:
                logger.debug("Skipping meal row without id or repeated: %r", row)
                continue
            seen.add(meal.id)
            meals.append(meal)
        return meals

    def list_areas(self) -> List[Optional[str]]:
        data = self._get_json("list.php", {"a": "list"})
        return [item.get("strArea") for item in self._items("list.php", data, "meals")]

    def list_categories(self) -> List[Optional[str]]:
        data = self._get_json("categories.php")
        return [item.get("strCategory") for item in self._items("categories.php", data, "categories")]

    def meals_by_area(self, area: str) -> List[MealSummary]:
        return self._summaries("filter.php", self._get_json("filter.php", {"a": area}))

    def meals_by_category(self, category: str) -> List[MealSummary]:
        return self._summaries("filter.php", self._get_json("filter.php", {"c": category}))

    def lookup_meal(self, meal_id: str) -> Optional[MealDetail]:
        data = self._get_json("lookup.php", {"i": str(meal_id)})
        meals = self._items("lookup.php", data, "meals")
        if not meals:
            return None
        logger.debug("Meal detail %s: %r", meal_id, meals[0])
        return MealDetail.from_provider(meals[0])
