"""
Filter option loading for the browser's two select boxes.

Both lists are fetched concurrently once at startup. Areas come back sorted;
categories come back sorted with a synthetic "All" entry (empty value) first.
If either list fails the whole load fails, since filtering on half the
controls is not supported.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional

from mealbrowser.connectors.base import BaseConnector
from mealbrowser.errors import ControlsLoadError, QueryError
from mealbrowser.models import Controls

logger = logging.getLogger(__name__)

ALL_CATEGORIES = ""


def clean_names(names: Iterable[Optional[str]]) -> List[str]:
    """Drop null, blank and non-string names and duplicates, then sort ascending."""
    return sorted({name for name in names if isinstance(name, str) and name.strip()})


def load_controls(connector: BaseConnector) -> Controls:
    """
    Load the available areas and categories.

    Args:
        connector: Catalog connector to query

    Returns:
        Controls with sorted areas and ["", *sorted categories]

    Raises:
        ControlsLoadError: If either list could not be loaded. The underlying
            QueryError is chained as __cause__.
    """
    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="mealdb-controls") as pool:
        areas_future = pool.submit(connector.list_areas)
        categories_future = pool.submit(connector.list_categories)

    try:
        areas = clean_names(areas_future.result())
        categories = clean_names(categories_future.result())
    except QueryError as e:
        logger.error("Failed to load filter controls: %s", e, exc_info=True)
        raise ControlsLoadError(f"Failed to load controls: {e}") from e

    logger.info("Loaded controls: %d areas, %d categories", len(areas), len(categories))
    return Controls(areas=areas, categories=[ALL_CATEGORIES] + categories)
