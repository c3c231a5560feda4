"""Tarawih imam/bilal rostering.

Covers the roster (imams and bilals per season), manual assignment of a
person to a night, and round-robin generation of the whole month.

Round-robin generation hands out contiguous blocks of nights. With ``n``
active imams each imam leads ``ceil(30 / n)`` consecutive nights; the index
for night ``i`` (0-based) is ``(i // days_per_imam) % n``. Bilals follow the
same rule independently. Regenerating overwrites every night, including
manual edits.
"""

import logging
import math
from dataclasses import replace
from datetime import date
from typing import Optional

from musholahelper.domain.calendar import (
    RAMADAN_DAYS,
    date_for_day,
    is_valid_ramadan_day,
    ramadan_start_date,
)
from musholahelper.domain.errors import (
    DuplicateMemberError,
    EmptyRosterError,
    InvalidAddressError,
)
from musholahelper.domain.models import (
    DailyTarawihSchedule,
    PersonRole,
    TarawihPerson,
    TarawihYearlySchedule,
)

logger = logging.getLogger(__name__)


def empty_tarawih_schedule(
    year: int,
    start_dates: Optional[dict[int, date]] = None,
) -> TarawihYearlySchedule:
    """Create a tarawih schedule with an empty roster and 30 open nights."""
    start = ramadan_start_date(year, start_dates)
    daily = [
        DailyTarawihSchedule(
            id=f"{year}-{day}",
            ramadan_day=day,
            date=date_for_day(start, day),
        )
        for day in range(1, RAMADAN_DAYS + 1)
    ]
    return TarawihYearlySchedule(
        year=year,
        ramadan_start_date=start,
        daily_schedules=daily,
    )


def _check_day(ramadan_day: int) -> None:
    if not is_valid_ramadan_day(ramadan_day):
        raise InvalidAddressError(
            f"Ramadan day must be between 1 and {RAMADAN_DAYS}, got {ramadan_day}"
        )


def _with_roster(
    schedule: TarawihYearlySchedule,
    role: PersonRole,
    members: list[TarawihPerson],
) -> TarawihYearlySchedule:
    if role == PersonRole.IMAM:
        return replace(schedule, imams=members)
    return replace(schedule, bilals=members)


# ---------------------------------------------------------------------------
# Roster
# ---------------------------------------------------------------------------


def add_person(
    schedule: TarawihYearlySchedule,
    person: TarawihPerson,
) -> TarawihYearlySchedule:
    """Append a person to the roster matching their role.

    Raises:
        DuplicateMemberError: If the id is already used by an imam or bilal.
    """
    if schedule.find_person(person.id) is not None:
        raise DuplicateMemberError(person.id, "tarawih roster")
    members = schedule.roster(person.role) + [person]
    return _with_roster(schedule, person.role, members)


def remove_person(
    schedule: TarawihYearlySchedule,
    person_id: str,
    role: PersonRole,
) -> TarawihYearlySchedule:
    """Remove a person and clear every night they were assigned to.

    Only the slot matching ``role`` is cleared; other slots are untouched.
    """
    members = [p for p in schedule.roster(role) if p.id != person_id]

    if role == PersonRole.IMAM:
        daily = [
            replace(d, imam_id="", imam_name="") if d.imam_id == person_id else d
            for d in schedule.daily_schedules
        ]
    else:
        daily = [
            replace(d, bilal_id="", bilal_name="") if d.bilal_id == person_id else d
            for d in schedule.daily_schedules
        ]

    return replace(_with_roster(schedule, role, members), daily_schedules=daily)


def set_person_active(
    schedule: TarawihYearlySchedule,
    person_id: str,
    is_active: bool,
) -> TarawihYearlySchedule:
    """Mark a roster member as (in)active for future generation.

    Existing night assignments are kept.
    """
    return replace(
        schedule,
        imams=[
            replace(p, is_active=is_active) if p.id == person_id else p
            for p in schedule.imams
        ],
        bilals=[
            replace(p, is_active=is_active) if p.id == person_id else p
            for p in schedule.bilals
        ],
    )


# ---------------------------------------------------------------------------
# Assignment
# ---------------------------------------------------------------------------


def assign_person(
    schedule: TarawihYearlySchedule,
    ramadan_day: int,
    person: TarawihPerson,
) -> TarawihYearlySchedule:
    """Put a person on a night in the slot matching their role.

    The person's current name is copied into the night. Roster membership
    is not checked.

    Raises:
        InvalidAddressError: If the day is outside 1..30.
    """
    _check_day(ramadan_day)

    if person.role == PersonRole.IMAM:
        changes = {"imam_id": person.id, "imam_name": person.name}
    else:
        changes = {"bilal_id": person.id, "bilal_name": person.name}

    daily = [
        replace(d, **changes) if d.ramadan_day == ramadan_day else d
        for d in schedule.daily_schedules
    ]
    return replace(schedule, daily_schedules=daily)


def unassign(
    schedule: TarawihYearlySchedule,
    ramadan_day: int,
    role: PersonRole,
) -> TarawihYearlySchedule:
    """Clear one slot of a night; the roster is left unchanged."""
    _check_day(ramadan_day)

    if role == PersonRole.IMAM:
        changes = {"imam_id": "", "imam_name": ""}
    else:
        changes = {"bilal_id": "", "bilal_name": ""}

    daily = [
        replace(d, **changes) if d.ramadan_day == ramadan_day else d
        for d in schedule.daily_schedules
    ]
    return replace(schedule, daily_schedules=daily)


def update_daily_schedule(
    schedule: TarawihYearlySchedule,
    ramadan_day: int,
    imam_id: str,
    bilal_id: str,
) -> TarawihYearlySchedule:
    """Set both slots of a night from roster ids.

    Names are looked up in the current roster; an id with no matching
    roster member is stored with an empty name. An empty id clears the slot.
    """
    _check_day(ramadan_day)
    imam = next((p for p in schedule.imams if p.id == imam_id), None)
    bilal = next((p for p in schedule.bilals if p.id == bilal_id), None)

    daily = [
        replace(
            d,
            imam_id=imam_id,
            imam_name=imam.name if imam else "",
            bilal_id=bilal_id,
            bilal_name=bilal.name if bilal else "",
        )
        if d.ramadan_day == ramadan_day
        else d
        for d in schedule.daily_schedules
    ]
    return replace(schedule, daily_schedules=daily)


# ---------------------------------------------------------------------------
# Round-robin generation
# ---------------------------------------------------------------------------


def block_index(day_index: int, member_count: int, total_days: int = RAMADAN_DAYS) -> int:
    """Roster index serving a 0-based night under contiguous-block rotation."""
    days_per_member = math.ceil(total_days / member_count)
    return (day_index // days_per_member) % member_count


def generate_schedule(
    schedule: TarawihYearlySchedule,
    strict: bool = False,
) -> TarawihYearlySchedule:
    """Regenerate all 30 nights from the active roster.

    Args:
        schedule: Current snapshot.
        strict: Raise instead of returning the input unchanged when there
                are no active imams or no active bilals.

    Returns:
        New snapshot with every night overwritten, or the input itself when
        the roster is empty and ``strict`` is False.

    Raises:
        EmptyRosterError: If ``strict`` and a roster has no active member.
    """
    imams = [p for p in schedule.imams if p.is_active]
    bilals = [p for p in schedule.bilals if p.is_active]

    if not imams or not bilals:
        message = (
            f"Cannot generate tarawih schedule for {schedule.year}: "
            f"{len(imams)} active imams, {len(bilals)} active bilals"
        )
        if strict:
            raise EmptyRosterError(message)
        logger.warning(message)
        return schedule

    daily = []
    for index, day in enumerate(schedule.daily_schedules):
        imam = imams[block_index(index, len(imams))]
        bilal = bilals[block_index(index, len(bilals))]
        daily.append(
            replace(
                day,
                imam_id=imam.id,
                imam_name=imam.name,
                bilal_id=bilal.id,
                bilal_name=bilal.name,
            )
        )

    logger.debug(
        "Generated tarawih schedule for %s: %d imams x %d nights, %d bilals x %d nights",
        schedule.year,
        len(imams),
        math.ceil(RAMADAN_DAYS / len(imams)),
        len(bilals),
        math.ceil(RAMADAN_DAYS / len(bilals)),
    )
    return replace(schedule, daily_schedules=daily)


def nights_per_person(schedule: TarawihYearlySchedule) -> dict[str, int]:
    """Count assigned nights for each person id (imam and bilal slots)."""
    counts: dict[str, int] = {}
    for day in schedule.daily_schedules:
        for person_id in (day.imam_id, day.bilal_id):
            if person_id:
                counts[person_id] = counts.get(person_id, 0) + 1
    return counts


def default_roster() -> list[TarawihPerson]:
    """Sample roster used by the demo commands."""
    return [
        TarawihPerson("imam-1", "Ustadz Ahmad", PersonRole.IMAM, "0812-1111-1111"),
        TarawihPerson("imam-2", "Ustadz Budi", PersonRole.IMAM, "0812-2222-2222"),
        TarawihPerson("bilal-1", "Pak Hasan", PersonRole.BILAL, "0813-1111-1111"),
        TarawihPerson("bilal-2", "Pak Umar", PersonRole.BILAL, "0813-2222-2222"),
        TarawihPerson("bilal-3", "Pak Ali", PersonRole.BILAL, "0813-3333-3333"),
        TarawihPerson("bilal-4", "Pak Zaid", PersonRole.BILAL, "0813-4444-4444"),
    ]
