"""
In-memory report store.

Holds the result of the most recent report load for a presentation layer.
"""

import logging
from typing import Callable, List, Optional

from .models import ReportResult

logger = logging.getLogger(__name__)

Listener = Callable[[ReportResult], None]


class ReportStore:
    """Container for the current report result.

    The store is created by the caller and passed to the pipeline, so
    the pipeline never depends on how results are displayed. A new load
    replaces the previous result as a whole; nothing is merged.
    """

    def __init__(self, initial: Optional[ReportResult] = None):
        self._current = initial
        self._listeners: List[Listener] = []

    @property
    def current(self) -> Optional[ReportResult]:
        """The most recently loaded result, or None."""
        return self._current

    def replace(self, result: ReportResult) -> Optional[ReportResult]:
        """Swap in a new result and notify listeners.

        Args:
            result: Result of a completed load

        Returns:
            The result that was replaced, or None
        """
        previous = self._current
        self._current = result
        logger.debug("Report store replaced result (%d days)", len(result.daily_totals))
        for listener in list(self._listeners):
            listener(result)
        return previous

    def clear(self) -> None:
        self._current = None

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a callback invoked after every replace.

        Returns:
            Function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
