"""Ramadan calendar mapping.

Maps a Ramadan season (keyed by its Gregorian year) to the Gregorian date of
the first day of Ramadan and expands it into day and week date records.

The start dates are a static, approximate table. Years missing from the table
fall back to March 1 of that year; this is not a Hijri conversion.
"""

from datetime import date, timedelta
from typing import Optional

RAMADAN_DAYS = 30
RAMADAN_WEEKS = 4
DAYS_PER_WEEK = 7

# Index matches date.weekday() (Monday == 0)
WEEKDAY_NAMES = ["Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu", "Ahad"]

RAMADAN_START_DATES: dict[int, date] = {
    2024: date(2024, 3, 11),
    2025: date(2025, 3, 1),
    2026: date(2026, 2, 18),
    2027: date(2027, 2, 8),
    2028: date(2028, 1, 28),
    2029: date(2029, 1, 17),
    2030: date(2030, 1, 6),
}


def ramadan_start_date(
    year: int,
    overrides: Optional[dict[int, date]] = None,
) -> date:
    """Get the Gregorian date of day 1 of Ramadan for a year.

    Args:
        year: Ramadan year key (e.g. 2025).
        overrides: Optional extra table consulted before the built-in one.

    Returns:
        The start date, or March 1 of the year when the year is unknown.
    """
    if overrides and year in overrides:
        return overrides[year]
    return RAMADAN_START_DATES.get(year, date(year, 3, 1))


def date_for_day(start_date: date, ramadan_day: int) -> date:
    """Date of a 1-based Ramadan day given the season start date."""
    return start_date + timedelta(days=ramadan_day - 1)


def ramadan_dates(
    year: int,
    overrides: Optional[dict[int, date]] = None,
) -> list[date]:
    """All 30 Ramadan dates for a year, in order."""
    start = ramadan_start_date(year, overrides)
    return [date_for_day(start, day) for day in range(1, RAMADAN_DAYS + 1)]


def week_dates(start_date: date, week: int) -> list[date]:
    """Seven sequential dates for a Ramadan week.

    Week ``w`` covers Ramadan days ``7 * (w - 1) + 1`` through ``7 * w``.
    """
    first_day = (week - 1) * DAYS_PER_WEEK + 1
    return [date_for_day(start_date, first_day + i) for i in range(DAYS_PER_WEEK)]


def weekday_name(d: date) -> str:
    """Indonesian weekday name for a date."""
    return WEEKDAY_NAMES[d.weekday()]


def is_valid_ramadan_day(ramadan_day: int) -> bool:
    return 1 <= ramadan_day <= RAMADAN_DAYS


def is_valid_week(week: int) -> bool:
    return 1 <= week <= RAMADAN_WEEKS
