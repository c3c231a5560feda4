"""Per-domain aggregate roots holding one schedule per Ramadan year.

A book owns the ``year -> schedule`` map for one domain. All changes go
through ``apply``, which runs a pure scheduling function on the current
snapshot, keeps the returned snapshot and hands it to the store. Snapshots
arriving from the store's subscription replace the local entry.
"""

import logging
from datetime import date
from functools import partial
from typing import Any, Callable, Iterable, Optional

from musholahelper.domain.models import (
    PersonRole,
    SnackProvider,
    SnackProviderYearlySchedule,
    TadarusYearlySchedule,
    TarawihPerson,
    TarawihYearlySchedule,
)
from musholahelper.scheduling import snack, tadarus, tarawih
from musholahelper.store.base import ScheduleStore, Unsubscribe

logger = logging.getLogger(__name__)


class ScheduleBook:
    """Map of yearly schedules for one domain.

    Example:
        >>> book = TarawihBook(store=InMemoryScheduleStore("tarawih"))
        >>> book.add_person(2025, imam)
        >>> book.generate_schedule(2025)
    """

    name = "schedules"

    def __init__(
        self,
        factory: Callable[[int], Any],
        store: Optional[ScheduleStore] = None,
    ):
        """Initialize an empty book.

        Args:
            factory: Builds the empty schedule for a year.
            store: Optional store that receives every new snapshot.
        """
        self.factory = factory
        self.store = store
        self._schedules: dict[int, Any] = {}
        self._subscriptions: dict[int, Unsubscribe] = {}

    @property
    def available_years(self) -> list[int]:
        return sorted(self._schedules)

    def get_schedule_for_year(self, year: int) -> Any:
        """Get the schedule for a year, creating an empty one on first access."""
        if year not in self._schedules:
            self._schedules[year] = self.factory(year)
        return self._schedules[year]

    def apply(self, year: int, operation: Callable[..., Any], *args, **kwargs) -> Any:
        """Run a scheduling operation against a year and keep the result.

        The new snapshot is kept locally before it is saved, so a failed
        save leaves the book ahead of the store.

        Args:
            year: Ramadan year key.
            operation: Pure function ``(schedule, *args, **kwargs) -> schedule``.

        Returns:
            The new schedule snapshot.

        Raises:
            StoreError: If the store rejects the save.
        """
        current = self.get_schedule_for_year(year)
        updated = operation(current, *args, **kwargs)
        if updated is current:
            return current

        self._schedules[year] = updated
        self._persist(updated)
        return updated

    def _persist(self, schedule: Any) -> None:
        if self.store is None:
            return
        try:
            self.store.save(schedule)
        except Exception:
            logger.exception("Failed to save %s for %s", self.name, schedule.year)
            raise

    def load(self, years: Iterable[int]) -> None:
        """Load years from the store.

        Years missing from the store are created empty and saved. A year that
        fails to load falls back to an empty schedule.
        """
        if self.store is None:
            for year in years:
                self.get_schedule_for_year(year)
            return

        for year in years:
            try:
                schedule = self.store.fetch(year)
                if schedule is None:
                    schedule = self.factory(year)
                    self.store.save(schedule)
                self._schedules[year] = schedule
            except Exception:
                logger.exception("Error loading %s for year %s", self.name, year)
                self._schedules[year] = self.factory(year)

    def watch(self, year: int) -> Unsubscribe:
        """Follow store updates for a year.

        Returns:
            Callable stopping the subscription.
        """
        if self.store is None:
            raise RuntimeError(f"{self.name} book has no store to watch")
        if year in self._subscriptions:
            return self._subscriptions[year]

        def on_change(schedule: Any) -> None:
            if schedule is not None:
                self._schedules[year] = schedule

        store_unsubscribe = self.store.subscribe(year, on_change)

        def unsubscribe() -> None:
            store_unsubscribe()
            self._subscriptions.pop(year, None)

        self._subscriptions[year] = unsubscribe
        return unsubscribe

    def close(self) -> None:
        """Drop every store subscription."""
        for unsubscribe in list(self._subscriptions.values()):
            unsubscribe()


class TadarusBook(ScheduleBook):
    """Tadarus reading logs by year."""

    name = "tadarus"

    def __init__(
        self,
        store: Optional[ScheduleStore] = None,
        start_dates: Optional[dict[int, date]] = None,
    ):
        super().__init__(partial(tadarus.empty_tadarus_schedule, start_dates=start_dates), store)

    def add_daily_entry(
        self, year: int, ramadan_day: int, male_juz: float, female_juz: float, entered_by: str
    ) -> TadarusYearlySchedule:
        return self.apply(
            year, tadarus.add_daily_entry, ramadan_day, male_juz, female_juz, entered_by
        )

    def update_daily_entry(
        self, year: int, ramadan_day: int, male_juz: float, female_juz: float
    ) -> TadarusYearlySchedule:
        return self.apply(year, tadarus.update_daily_entry, ramadan_day, male_juz, female_juz)

    def reset(self, year: int) -> TadarusYearlySchedule:
        return self.apply(year, tadarus.reset_tadarus_schedule)

    def get_daily_entry(self, year: int, ramadan_day: int):
        return tadarus.get_daily_entry(self.get_schedule_for_year(year), ramadan_day)

    def get_chart_data(self, year: int):
        return tadarus.chart_data(self.get_schedule_for_year(year))


class TarawihBook(ScheduleBook):
    """Tarawih rosters and nightly assignments by year."""

    name = "tarawih"

    def __init__(
        self,
        store: Optional[ScheduleStore] = None,
        start_dates: Optional[dict[int, date]] = None,
    ):
        super().__init__(partial(tarawih.empty_tarawih_schedule, start_dates=start_dates), store)

    def add_person(self, year: int, person: TarawihPerson) -> TarawihYearlySchedule:
        return self.apply(year, tarawih.add_person, person)

    def remove_person(self, year: int, person_id: str, role: PersonRole) -> TarawihYearlySchedule:
        return self.apply(year, tarawih.remove_person, person_id, role)

    def update_daily_schedule(
        self, year: int, ramadan_day: int, imam_id: str, bilal_id: str
    ) -> TarawihYearlySchedule:
        return self.apply(year, tarawih.update_daily_schedule, ramadan_day, imam_id, bilal_id)

    def generate_schedule(self, year: int, strict: bool = False) -> TarawihYearlySchedule:
        return self.apply(year, tarawih.generate_schedule, strict=strict)


class SnackProviderBook(ScheduleBook):
    """Snack provider rotas by year."""

    name = "snack_providers"

    def __init__(
        self,
        store: Optional[ScheduleStore] = None,
        start_dates: Optional[dict[int, date]] = None,
    ):
        super().__init__(partial(snack.empty_snack_schedule, start_dates=start_dates), store)

    def add_provider(self, year: int, provider: SnackProvider) -> SnackProviderYearlySchedule:
        return self.apply(year, snack.add_provider, provider)

    def remove_provider(self, year: int, provider_id: str) -> SnackProviderYearlySchedule:
        return self.apply(year, snack.remove_provider, provider_id)

    def assign_provider(
        self, year: int, week: int, day: str, slot: int, provider: SnackProvider
    ) -> SnackProviderYearlySchedule:
        return self.apply(year, snack.assign_provider, week, day, slot, provider)

    def remove_assignment(
        self, year: int, week: int, day: str, slot: int
    ) -> SnackProviderYearlySchedule:
        return self.apply(year, snack.remove_assignment, week, day, slot)

    def reset_week(self, year: int, week: int) -> SnackProviderYearlySchedule:
        return self.apply(year, snack.reset_week, week)
