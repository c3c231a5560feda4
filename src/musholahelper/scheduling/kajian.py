"""Kajian (lecture) schedule list operations."""

from musholahelper.domain.calendar import WEEKDAY_NAMES
from musholahelper.domain.errors import DuplicateMemberError, InvalidEntryError
from musholahelper.domain.models import KajianSchedule

REQUIRED_FIELDS = ("title", "ustad_name", "time", "topic")


def add_kajian(
    kajian_list: list[KajianSchedule],
    kajian: KajianSchedule,
) -> list[KajianSchedule]:
    """Return a new list with the kajian appended.

    Raises:
        InvalidEntryError: If a required field is blank or a recurring
                           kajian names an unknown weekday.
        DuplicateMemberError: If the id is already in the list.
    """
    missing = [name for name in REQUIRED_FIELDS if not getattr(kajian, name).strip()]
    if missing:
        raise InvalidEntryError(f"Missing required kajian fields: {', '.join(missing)}")
    if kajian.is_recurring and kajian.recurring_day and kajian.recurring_day not in WEEKDAY_NAMES:
        raise InvalidEntryError(f"Unknown recurring day {kajian.recurring_day!r}")
    if any(k.id == kajian.id for k in kajian_list):
        raise DuplicateMemberError(kajian.id, "kajian schedule")
    return kajian_list + [kajian]


def remove_kajian(
    kajian_list: list[KajianSchedule],
    kajian_id: str,
) -> list[KajianSchedule]:
    return [k for k in kajian_list if k.id != kajian_id]


def kajian_for_year(
    kajian_list: list[KajianSchedule],
    year: int,
) -> list[KajianSchedule]:
    """Kajian held in a year, ordered by date then start time."""
    return sorted(
        (k for k in kajian_list if k.year == year),
        key=lambda k: (k.date, k.time),
    )
