"""
Selection tracking and per-browser session state.

This module holds everything the browser needs to remember between user
actions, without any module-level globals:

- make_query_key: deterministic key for a FilterSelection
- SelectionTracker: single-slot duplicate suppression of repeated selections
- BrowserSession: the context object one browser tab works against. It owns a
  tracker, the list and detail views currently on screen, the loaded controls,
  and sequence tokens that make sure only the newest request's result is shown.

# NOTE: A resolution cycle is begin_cycle() -> (fetch) -> finish_cycle(token, outcome).
    Every begin_cycle() issues a fresh token; finish_cycle() only applies an
    outcome whose token is still the latest, so a slow response for an older
    selection can never overwrite the view of a newer one. The same applies
    to open_detail() / finish_detail().
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

from mealbrowser.models import (
    Controls,
    DetailLoading,
    DetailOutcome,
    Failed,
    FilterSelection,
    ListOutcome,
    Loading,
    NoSelection,
)

logger = logging.getLogger(__name__)

QueryKey = Tuple[str, str]


def make_query_key(selection: FilterSelection) -> QueryKey:
    """
    Create a deterministic key for a filter selection.

    Equal selections give equal keys and different selections give different
    keys; a tuple is used so values containing separators cannot collide.

    Examples:
        >>> make_query_key(FilterSelection(area="Italian"))
        ('Italian', '')
    """
    return (selection.area or "", selection.category or "")


class SelectionTracker:
    """
    Remembers the last resolved selection to skip redundant fetch-and-render cycles.

    Not safe for overlapping use from several threads; each browser session
    owns its own tracker.
    """

    def __init__(self) -> None:
        self.last_key: Optional[QueryKey] = None

    def should_proceed(self, selection: FilterSelection) -> bool:
        """
        Return False if the selection equals the last resolved one, else store it and return True.

        The very first call always proceeds, including for the empty selection.
        """
        key = make_query_key(selection)
        if key == self.last_key:
            logger.debug("Selection %r unchanged, skipping", key)
            return False
        self.last_key = key
        return True

    def forget(self) -> None:
        """Clear the stored key so the next call proceeds whatever the selection."""
        self.last_key = None


@dataclass
class BrowserSession:
    """State of one browser tab: views on screen plus the bookkeeping behind them."""
    tracker: SelectionTracker = field(default_factory=SelectionTracker)
    controls: Optional[Controls] = None
    list_view: ListOutcome = field(default_factory=NoSelection)
    detail_view: Optional[DetailOutcome] = None
    scroll_to_top: bool = False
    _list_seq: int = 0
    _detail_seq: int = 0

    def begin_cycle(self, selection: FilterSelection) -> Optional[int]:
        """
        Start a resolution cycle for a selection.

        Returns:
            A token to pass to finish_cycle(), or None when the selection is a
            repeat of the last one and nothing should be fetched.
        """
        if not self.tracker.should_proceed(selection):
            return None
        self._list_seq += 1
        self.list_view = Loading()
        self.detail_view = None
        logger.debug("Cycle %d started for %r", self._list_seq, make_query_key(selection))
        return self._list_seq

    def finish_cycle(self, token: int, outcome: ListOutcome) -> bool:
        """
        Apply a cycle's outcome if the cycle is still the newest one.

        A Failed outcome also clears the tracker so the same selection can be
        retried.

        Returns:
            True if the outcome was applied, False if it was superseded and dropped.
        """
        if token != self._list_seq:
            logger.debug("Discarding outcome of superseded cycle %d (latest %d)", token, self._list_seq)
            return False
        self.list_view = outcome
        if isinstance(outcome, Failed):
            self.tracker.forget()
        return True

    def open_detail(self, meal_id: str) -> int:
        """Show the detail loading state for a meal and return its token."""
        self._detail_seq += 1
        self.detail_view = DetailLoading()
        logger.debug("Detail request %d for meal %s", self._detail_seq, meal_id)
        return self._detail_seq

    def finish_detail(self, token: int, outcome: DetailOutcome) -> bool:
        """Apply a detail outcome unless a newer detail request (or a dismiss) happened since."""
        if token != self._detail_seq or self.detail_view is None:
            logger.debug("Discarding detail outcome %d (latest %d)", token, self._detail_seq)
            return False
        self.detail_view = outcome
        return True

    def close_detail(self) -> None:
        """Return to the list view without re-querying and request a scroll to top."""
        self.detail_view = None
        self._detail_seq += 1
        self.scroll_to_top = True

    def consume_scroll_request(self) -> bool:
        """Return whether a scroll to top is pending, and clear it."""
        pending = self.scroll_to_top
        self.scroll_to_top = False
        return pending
