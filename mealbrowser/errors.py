"""
Error types for the meal browser.

Every failure the browser can run into maps onto one of these exceptions:

- QueryError: a list or lookup request against the recipe catalog failed
  (connection error, timeout, non-2xx status, malformed body). Recoverable;
  the UI shows it inline and the user can retry.
- ControlsLoadError: the area or category list could not be loaded at startup.
  Without both lists no filtering is possible.
- NotFoundError: a detail lookup returned no record for the requested id.

Errors are caught at the boundary of the operation that triggered them
(startup, filter change, card activation, API endpoint) and turned into a
rendered message or an HTTP error response.
"""

from typing import Optional


class MealBrowserError(Exception):
    """Base class for all meal browser errors."""


class QueryError(MealBrowserError):
    """A request against the recipe catalog failed."""

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ControlsLoadError(MealBrowserError):
    """The area or category filter options could not be loaded."""


class NotFoundError(MealBrowserError):
    """A meal lookup returned no record."""

    def __init__(self, meal_id: str) -> None:
        super().__init__(f"Meal {meal_id} not found")
        self.meal_id = meal_id
