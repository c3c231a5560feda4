"""In-memory schedule store."""

import copy
import logging
from collections import defaultdict
from typing import Any, Optional

from musholahelper.domain.errors import StoreError
from musholahelper.store.base import ScheduleCallback, ScheduleStore, Unsubscribe

logger = logging.getLogger(__name__)


class InMemoryScheduleStore(ScheduleStore):
    """Store that keeps deep copies of schedules in a dict.

    Saved snapshots are delivered synchronously to the year's subscribers,
    each receiving its own copy.

    Example:
        >>> store = InMemoryScheduleStore(name="tarawih")
        >>> unsubscribe = store.subscribe(2025, print)
        >>> store.save(schedule)
        >>> unsubscribe()
    """

    def __init__(self, name: str = "schedules", fail_on_save: bool = False):
        """Initialize an empty store.

        Args:
            name: Collection name used in log messages.
            fail_on_save: Make every save raise StoreError.
        """
        self.name = name
        self.fail_on_save = fail_on_save
        self._schedules: dict[int, Any] = {}
        self._subscribers: dict[int, list[ScheduleCallback]] = defaultdict(list)

    def fetch(self, year: int) -> Optional[Any]:
        schedule = self._schedules.get(year)
        return copy.deepcopy(schedule) if schedule is not None else None

    def save(self, schedule: Any) -> None:
        if self.fail_on_save:
            raise StoreError(f"{self.name}/{schedule.year}: save rejected")

        self._schedules[schedule.year] = copy.deepcopy(schedule)
        logger.debug("Saved %s/%s", self.name, schedule.year)

        for callback in list(self._subscribers[schedule.year]):
            callback(copy.deepcopy(schedule))

    def subscribe(self, year: int, on_change: ScheduleCallback) -> Unsubscribe:
        self._subscribers[year].append(on_change)

        def unsubscribe() -> None:
            if on_change in self._subscribers[year]:
                self._subscribers[year].remove(on_change)

        return unsubscribe

    @property
    def years(self) -> list[int]:
        """Years with a stored schedule."""
        return sorted(self._schedules)

    def subscriber_count(self, year: int) -> int:
        return len(self._subscribers[year])
