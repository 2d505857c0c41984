"""Single meal lookup for the detail view."""

import logging

from mealbrowser.connectors.base import BaseConnector
from mealbrowser.errors import NotFoundError
from mealbrowser.models import MealDetail

logger = logging.getLogger(__name__)


def lookup_meal(meal_id: str, connector: BaseConnector) -> MealDetail:
    """
    Fetch one meal's full record.

    Raises:
        NotFoundError: If the catalog has no meal with this id.
        QueryError: If the request fails.
    """
    meal = connector.lookup_meal(str(meal_id))
    if meal is None:
        logger.warning("Meal %s not found", meal_id)
        raise NotFoundError(str(meal_id))
    logger.info("Loaded meal %s (%s) with %d ingredients", meal.id, meal.name, len(meal.ingredients))
    return meal
