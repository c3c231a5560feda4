"""Schedule store contract.

The scheduling core never performs I/O. A store persists yearly schedule
snapshots for one domain and broadcasts saved snapshots to subscribers.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

Unsubscribe = Callable[[], None]
ScheduleCallback = Callable[[Any], None]


class ScheduleStore(ABC):
    """Abstract per-domain store of yearly schedules.

    Schedules are any snapshot object carrying a ``year`` attribute.
    """

    @abstractmethod
    def fetch(self, year: int) -> Optional[Any]:
        """Get the stored schedule for a year, or None when absent.

        Raises:
            StoreError: If the store cannot be read.
        """
        pass

    @abstractmethod
    def save(self, schedule: Any) -> None:
        """Persist a schedule, replacing the stored one for its year.

        Raises:
            StoreError: If the schedule could not be saved.
        """
        pass

    @abstractmethod
    def subscribe(self, year: int, on_change: ScheduleCallback) -> Unsubscribe:
        """Register a callback invoked with each newly saved schedule.

        Returns:
            A callable that removes the subscription.
        """
        pass
