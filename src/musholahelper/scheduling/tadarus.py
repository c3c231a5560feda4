"""Tadarus (Quran reading) progress aggregation.

Every function takes a schedule snapshot and returns a new one. Two write
contracts exist for a day's entry:

- ``add_daily_entry`` is cumulative: quantities are added onto what is
  already stored, so several admins can report the same day.
- ``update_daily_entry`` is absolute: quantities overwrite the stored values
  and is used to correct mistakes.

Progress is a property of the schedule and is recomputed from all 30 entries
on every access.
"""

from dataclasses import replace
from datetime import date, datetime
from typing import Optional

from musholahelper.domain.calendar import (
    RAMADAN_DAYS,
    date_for_day,
    is_valid_ramadan_day,
    ramadan_start_date,
)
from musholahelper.domain.errors import InvalidAddressError, InvalidEntryError
from musholahelper.domain.models import (
    ChartPoint,
    TadarusDailyEntry,
    TadarusProgress,
    TadarusYearlySchedule,
)


def generate_initial_entries(year: int, start_date: date) -> list[TadarusDailyEntry]:
    """Create 30 empty daily entries for a season."""
    return [
        TadarusDailyEntry(
            id=f"{year}-{day}",
            ramadan_day=day,
            date=date_for_day(start_date, day),
        )
        for day in range(1, RAMADAN_DAYS + 1)
    ]


def empty_tadarus_schedule(
    year: int,
    start_dates: Optional[dict[int, date]] = None,
) -> TadarusYearlySchedule:
    """Create an empty tadarus schedule for a year.

    Args:
        year: Ramadan year key.
        start_dates: Optional overrides for the Ramadan start-date table.
    """
    start = ramadan_start_date(year, start_dates)
    return TadarusYearlySchedule(
        year=year,
        ramadan_start_date=start,
        daily_entries=generate_initial_entries(year, start),
    )


def _check_day(ramadan_day: int) -> None:
    if not is_valid_ramadan_day(ramadan_day):
        raise InvalidAddressError(
            f"Ramadan day must be between 1 and {RAMADAN_DAYS}, got {ramadan_day}"
        )


def _check_quantities(male_juz: float, female_juz: float) -> None:
    if male_juz < 0 or female_juz < 0:
        raise InvalidEntryError(
            f"Juz counts cannot be negative (male={male_juz}, female={female_juz})"
        )


def add_daily_entry(
    schedule: TadarusYearlySchedule,
    ramadan_day: int,
    male_juz: float,
    female_juz: float,
    entered_by: str,
    now: Optional[datetime] = None,
) -> TadarusYearlySchedule:
    """Add juz read onto a day's running totals.

    Args:
        schedule: Current snapshot.
        ramadan_day: Day to report (1..30).
        male_juz: Juz read by the male congregation in this submission.
        female_juz: Juz read by the female congregation in this submission.
        entered_by: Name of the reporting admin/takmir.
        now: Submission time (defaults to the current time).

    Returns:
        New snapshot with the accumulated entry.

    Raises:
        InvalidAddressError: If the day is outside 1..30.
        InvalidEntryError: If either quantity is negative.
    """
    _check_day(ramadan_day)
    _check_quantities(male_juz, female_juz)
    stamp = now or datetime.now()

    entries = [
        replace(
            entry,
            male_juz_read=entry.male_juz_read + male_juz,
            female_juz_read=entry.female_juz_read + female_juz,
            entered_by=entered_by,
            created_at=stamp,
        )
        if entry.ramadan_day == ramadan_day
        else entry
        for entry in schedule.daily_entries
    ]
    return replace(schedule, daily_entries=entries)


def update_daily_entry(
    schedule: TadarusYearlySchedule,
    ramadan_day: int,
    male_juz: float,
    female_juz: float,
) -> TadarusYearlySchedule:
    """Overwrite a day's juz counts with absolute values.

    ``entered_by`` and ``created_at`` are left as they were.

    Raises:
        InvalidAddressError: If the day is outside 1..30.
        InvalidEntryError: If either quantity is negative.
    """
    _check_day(ramadan_day)
    _check_quantities(male_juz, female_juz)

    entries = [
        replace(entry, male_juz_read=male_juz, female_juz_read=female_juz)
        if entry.ramadan_day == ramadan_day
        else entry
        for entry in schedule.daily_entries
    ]
    return replace(schedule, daily_entries=entries)


def reset_tadarus_schedule(schedule: TadarusYearlySchedule) -> TadarusYearlySchedule:
    """Zero every entry of the season, keeping its year and start date."""
    return replace(
        schedule,
        daily_entries=generate_initial_entries(schedule.year, schedule.ramadan_start_date),
    )


def get_daily_entry(
    schedule: TadarusYearlySchedule,
    ramadan_day: int,
) -> Optional[TadarusDailyEntry]:
    for entry in schedule.daily_entries:
        if entry.ramadan_day == ramadan_day:
            return entry
    return None


def calculate_progress(schedule: TadarusYearlySchedule) -> TadarusProgress:
    return TadarusProgress.calculate(
        schedule.daily_entries, schedule.year, schedule.ramadan_start_date
    )


def chart_data(schedule: TadarusYearlySchedule) -> list[ChartPoint]:
    """Per-day male/female/total series in ascending day order."""
    entries = sorted(schedule.daily_entries, key=lambda e: e.ramadan_day)
    return [
        ChartPoint(
            day=entry.ramadan_day,
            male=entry.male_juz_read,
            female=entry.female_juz_read,
            total=entry.total_juz_read,
        )
        for entry in entries
    ]
