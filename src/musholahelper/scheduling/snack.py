"""Iftar snack provider rota.

Ramadan is approximated as four weeks of seven days. Each day has two
provider slots. Days are addressed by ``(week, weekday name, slot)``; the
weekday names are those of the real dates the week covers, so the first
record of a week is not necessarily "Senin".
"""

import re
from dataclasses import replace
from datetime import date
from typing import Optional

from musholahelper.domain.calendar import (
    RAMADAN_WEEKS,
    WEEKDAY_NAMES,
    is_valid_week,
    ramadan_start_date,
    week_dates,
    weekday_name,
)
from musholahelper.domain.errors import (
    DuplicateMemberError,
    InvalidAddressError,
    InvalidEntryError,
)
from musholahelper.domain.models import (
    DailySnackProvider,
    SnackProvider,
    SnackProviderYearlySchedule,
)

SLOTS = (1, 2)

CONTACT_PATTERN = re.compile(r"^[0-9+\-\s()]+$")


def generate_empty_week(start_date: date, week: int) -> list[DailySnackProvider]:
    """Seven empty day records for a Ramadan week."""
    return [
        DailySnackProvider(day=weekday_name(d), date=d)
        for d in week_dates(start_date, week)
    ]


def empty_snack_schedule(
    year: int,
    start_dates: Optional[dict[int, date]] = None,
) -> SnackProviderYearlySchedule:
    """Create a snack schedule with no providers and four empty weeks."""
    start = ramadan_start_date(year, start_dates)
    return SnackProviderYearlySchedule(
        year=year,
        ramadan_start_date=start,
        weekly_schedules={
            week: generate_empty_week(start, week)
            for week in range(1, RAMADAN_WEEKS + 1)
        },
    )


def _check_address(
    schedule: SnackProviderYearlySchedule,
    week: int,
    day: Optional[str] = None,
    slot: Optional[int] = None,
) -> None:
    if not is_valid_week(week) or week not in schedule.weekly_schedules:
        raise InvalidAddressError(f"Week must be between 1 and {RAMADAN_WEEKS}, got {week}")
    if day is not None and day not in WEEKDAY_NAMES:
        raise InvalidAddressError(f"Unknown weekday {day!r}")
    if slot is not None and slot not in SLOTS:
        raise InvalidAddressError(f"Slot must be 1 or 2, got {slot}")


def _slot_field(slot: int) -> str:
    return "provider1" if slot == 1 else "provider2"


# ---------------------------------------------------------------------------
# Roster
# ---------------------------------------------------------------------------


def add_provider(
    schedule: SnackProviderYearlySchedule,
    provider: SnackProvider,
) -> SnackProviderYearlySchedule:
    """Append a provider to the roster.

    Raises:
        InvalidEntryError: If the name or contact is blank, or the contact
                           contains characters other than digits, spaces,
                           ``+``, ``-`` and parentheses.
        DuplicateMemberError: If the id is already on the roster.
    """
    if not provider.name.strip():
        raise InvalidEntryError("Provider name is required")
    if not provider.contact.strip():
        raise InvalidEntryError("Provider contact is required")
    if not CONTACT_PATTERN.match(provider.contact.strip()):
        raise InvalidEntryError(f"Invalid contact number {provider.contact!r}")
    if schedule.find_provider(provider.id) is not None:
        raise DuplicateMemberError(provider.id, "snack providers")

    return replace(schedule, providers=schedule.providers + [provider])


def remove_provider(
    schedule: SnackProviderYearlySchedule,
    provider_id: str,
) -> SnackProviderYearlySchedule:
    """Remove a provider and clear every slot they hold in every week."""

    def clear(day: DailySnackProvider) -> DailySnackProvider:
        p1 = day.provider1
        p2 = day.provider2
        return replace(
            day,
            provider1=None if p1 is not None and p1.id == provider_id else p1,
            provider2=None if p2 is not None and p2.id == provider_id else p2,
        )

    return replace(
        schedule,
        providers=[p for p in schedule.providers if p.id != provider_id],
        weekly_schedules={
            week: [clear(d) for d in days]
            for week, days in schedule.weekly_schedules.items()
        },
    )


# ---------------------------------------------------------------------------
# Assignment
# ---------------------------------------------------------------------------


def _set_slot(
    schedule: SnackProviderYearlySchedule,
    week: int,
    day: str,
    slot: int,
    provider: Optional[SnackProvider],
) -> SnackProviderYearlySchedule:
    weeks = dict(schedule.weekly_schedules)
    weeks[week] = [
        replace(d, **{_slot_field(slot): provider}) if d.day == day else d
        for d in weeks[week]
    ]
    return replace(schedule, weekly_schedules=weeks)


def assign_provider(
    schedule: SnackProviderYearlySchedule,
    week: int,
    day: str,
    slot: int,
    provider: SnackProvider,
) -> SnackProviderYearlySchedule:
    """Put a provider in one slot, replacing whoever held it.

    Roster membership is not checked.

    Raises:
        InvalidAddressError: For an unknown week, weekday or slot.
    """
    _check_address(schedule, week, day, slot)
    return _set_slot(schedule, week, day, slot, provider)


def remove_assignment(
    schedule: SnackProviderYearlySchedule,
    week: int,
    day: str,
    slot: int,
) -> SnackProviderYearlySchedule:
    """Empty one slot; the other slot and the roster are untouched."""
    _check_address(schedule, week, day, slot)
    return _set_slot(schedule, week, day, slot, None)


def reset_week(
    schedule: SnackProviderYearlySchedule,
    week: int,
) -> SnackProviderYearlySchedule:
    """Replace a week's seven days with fresh empty records."""
    _check_address(schedule, week)
    weeks = dict(schedule.weekly_schedules)
    weeks[week] = generate_empty_week(schedule.ramadan_start_date, week)
    return replace(schedule, weekly_schedules=weeks)


def assigned_count(schedule: SnackProviderYearlySchedule, week: int) -> int:
    """Number of filled slots in a week (at most 14)."""
    _check_address(schedule, week)
    return sum(d.filled_slots for d in schedule.weekly_schedules[week])


def default_providers() -> list[SnackProvider]:
    """Sample providers used by the demo commands."""
    return [
        SnackProvider("1", "Ibu Siti", "0812-3456-7890", "Kurma dan air"),
        SnackProvider("2", "Pak Ahmad", "0813-9876-5432", "Kolak"),
        SnackProvider("3", "Ibu Fatimah", "0815-1234-5678", "Gorengan"),
        SnackProvider("4", "Pak Umar", "0816-2345-6789", "Es buah"),
        SnackProvider("5", "Ibu Khadijah", "0817-3456-7890", "Kue basah"),
        SnackProvider("6", "Pak Ali", "0818-4567-8901", "Takjil campur"),
    ]
