"""
Filter reconciliation: turn an area/category selection into one meal list.

This module provides the core lookup logic of the browser:
- Decides which catalog queries a selection needs (none, one, or both)
- Runs the area and category queries concurrently when both filters are active
- Intersects the two result sets by meal id, keeping the area list's order
- Reports the result as a tagged outcome (NoSelection / NoResults / MealList)

Resolution flow: Streamlit -> GET /meals -> resolve() -> connector.meals_by_area()
and/or connector.meals_by_category() -> MealSummary -> ListOutcome
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Union

from mealbrowser.connectors.base import BaseConnector
from mealbrowser.models import FilterSelection, MealList, MealSummary, NoResults, NoSelection

logger = logging.getLogger(__name__)


def intersect_meals_by_id(area_meals: List[MealSummary], category_meals: List[MealSummary]) -> List[MealSummary]:
    """
    Keep the meals of the first list whose id also appears in the second.

    Ids are compared as strings so "52772" and 52772 match. The relative order
    of the first list is preserved; the second list's order is irrelevant.
    Meals without an id never match.

    Args:
        area_meals: Meals from the area query (defines the output order)
        category_meals: Meals from the category query

    Returns:
        New list with the shared meals, in area_meals order

    Examples:
        >>> a = [MealSummary(id=1), MealSummary(id=2), MealSummary(id=3)]
        >>> c = [MealSummary(id=3), MealSummary(id=1)]
        >>> [m.id for m in intersect_meals_by_id(a, c)]
        ['1', '3']
    """
    category_ids = {str(meal.id) for meal in category_meals or [] if meal.id}
    return [meal for meal in area_meals or [] if str(meal.id) in category_ids]


def _fetch_both(selection: FilterSelection, connector: BaseConnector) -> List[MealSummary]:
    """
    Run the area and category queries together and intersect their results.

    Both queries are awaited before anything is returned, so a partial result is
    never produced. If either query fails its QueryError propagates; when both
    fail the area query's error is the one raised.
    """
    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="mealdb-filter") as pool:
        area_future = pool.submit(connector.meals_by_area, selection.area)
        category_future = pool.submit(connector.meals_by_category, selection.category)
        # Leaving the with-block waits for both requests to settle
    area_meals = area_future.result()
    category_meals = category_future.result()
    merged = intersect_meals_by_id(area_meals, category_meals)
    logger.debug(
        "Intersected area=%r (%d meals) with category=%r (%d meals): %d shared",
        selection.area, len(area_meals), selection.category, len(category_meals), len(merged),
    )
    return merged


def resolve(selection: FilterSelection, connector: BaseConnector) -> Union[NoSelection, NoResults, MealList]:
    """
    Resolve a filter selection into the meals to display.

    - Neither filter active: NoSelection, no query is issued.
    - One filter active: exactly one query for that filter, provider order kept.
    - Both active: both queries run concurrently and are intersected by id.

    Args:
        selection: Current area/category selection
        connector: Catalog connector to query

    Returns:
        NoSelection, NoResults (valid selection, zero meals) or MealList

    Raises:
        QueryError: If any required query fails. Nothing is partially returned.
    """
    if selection.is_empty:
        logger.info("Resolve: no filter selected")
        return NoSelection()

    if selection.area and selection.category:
        meals = _fetch_both(selection, connector)
    elif selection.area:
        meals = connector.meals_by_area(selection.area)
    else:
        meals = connector.meals_by_category(selection.category)

    logger.info("Resolve: area=%r category=%r -> %d meals", selection.area, selection.category, len(meals))

    if not meals:
        return NoResults(selection=selection)
    return MealList(selection=selection, meals=meals)
