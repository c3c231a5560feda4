"""Domain models for the Ramadan scheduling system.

This module contains the records held by the three yearly schedules
(tadarus reading progress, tarawih imam/bilal roster, iftar snack providers)
and the kajian lecture list. Schedules are treated as snapshots: the
scheduling functions never mutate a schedule in place, they return a new one.
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional

from musholahelper.domain.calendar import RAMADAN_DAYS

JUZ_PER_KHATAM = 30

# Progress target: one khatam each for the male and female congregations
TARGET_TOTAL_JUZ = 60


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up (not to even)."""
    return int(math.floor(value + 0.5))


# ---------------------------------------------------------------------------
# Tadarus
# ---------------------------------------------------------------------------


@dataclass
class TadarusDailyEntry:
    """Juz read on one Ramadan day.

    Attributes:
        id: Entry id, ``"{year}-{ramadan_day}"``.
        ramadan_day: 1-based Ramadan day (1..30).
        date: Gregorian date of the day.
        male_juz_read: Juz read by the male congregation.
        female_juz_read: Juz read by the female congregation.
        entered_by: Name of the admin/takmir who last submitted.
        created_at: Time of the last submission.
    """

    id: str
    ramadan_day: int
    date: date
    male_juz_read: float = 0
    female_juz_read: float = 0
    entered_by: str = ""
    created_at: Optional[datetime] = None

    @property
    def total_juz_read(self) -> float:
        return self.male_juz_read + self.female_juz_read

    @property
    def has_reading(self) -> bool:
        return self.total_juz_read > 0


@dataclass
class TadarusProgress:
    """Aggregated reading progress for a season.

    Always derived from the complete set of daily entries; never edited.
    """

    year: int
    ramadan_start_date: date
    total_male_juz: float = 0
    total_female_juz: float = 0
    total_juz: float = 0
    male_khatam_count: int = 0
    female_khatam_count: int = 0
    total_khatam_count: int = 0
    completion_percentage: int = 0
    days_completed: int = 0
    days_remaining: int = RAMADAN_DAYS

    @classmethod
    def calculate(
        cls,
        daily_entries: list[TadarusDailyEntry],
        year: int,
        ramadan_start_date: date,
    ) -> "TadarusProgress":
        """Calculate progress by scanning every daily entry."""
        total_male = sum(e.male_juz_read for e in daily_entries)
        total_female = sum(e.female_juz_read for e in daily_entries)
        total = total_male + total_female
        male_khatam = int(math.floor(total_male / JUZ_PER_KHATAM))
        female_khatam = int(math.floor(total_female / JUZ_PER_KHATAM))
        days_completed = sum(1 for e in daily_entries if e.has_reading)

        return cls(
            year=year,
            ramadan_start_date=ramadan_start_date,
            total_male_juz=total_male,
            total_female_juz=total_female,
            total_juz=total,
            male_khatam_count=male_khatam,
            female_khatam_count=female_khatam,
            total_khatam_count=male_khatam + female_khatam,
            completion_percentage=round_half_up(total / TARGET_TOTAL_JUZ * 100),
            days_completed=days_completed,
            days_remaining=RAMADAN_DAYS - days_completed,
        )


@dataclass
class ChartPoint:
    """One row of the per-day reading series."""

    day: int
    male: float
    female: float
    total: float


@dataclass
class TadarusYearlySchedule:
    """Tadarus reading log for one Ramadan season."""

    year: int
    ramadan_start_date: date
    daily_entries: list[TadarusDailyEntry] = field(default_factory=list)

    @property
    def progress(self) -> TadarusProgress:
        return TadarusProgress.calculate(
            self.daily_entries, self.year, self.ramadan_start_date
        )


# ---------------------------------------------------------------------------
# Tarawih
# ---------------------------------------------------------------------------


class PersonRole(Enum):
    """Role a person fills at tarawih prayer."""

    IMAM = "imam"  # Prayer leader
    BILAL = "bilal"  # Caller / assistant


@dataclass
class TarawihPerson:
    """A roster member who can be assigned to tarawih nights."""

    id: str
    name: str
    role: PersonRole
    contact: str = ""
    is_active: bool = True


@dataclass
class DailyTarawihSchedule:
    """Imam and bilal assigned to one Ramadan night.

    The name fields are a snapshot copied at assignment time, not a live
    reference: renaming a roster member later does not update them. An empty
    id means the slot is unassigned.
    """

    id: str
    ramadan_day: int
    date: date
    imam_id: str = ""
    imam_name: str = ""
    bilal_id: str = ""
    bilal_name: str = ""

    @property
    def has_imam(self) -> bool:
        return bool(self.imam_id)

    @property
    def has_bilal(self) -> bool:
        return bool(self.bilal_id)


@dataclass
class TarawihYearlySchedule:
    """Tarawih roster and nightly assignments for one Ramadan season."""

    year: int
    ramadan_start_date: date
    imams: list[TarawihPerson] = field(default_factory=list)
    bilals: list[TarawihPerson] = field(default_factory=list)
    daily_schedules: list[DailyTarawihSchedule] = field(default_factory=list)

    def roster(self, role: PersonRole) -> list[TarawihPerson]:
        """Roster list for a role."""
        return self.imams if role == PersonRole.IMAM else self.bilals

    def find_person(self, person_id: str) -> Optional[TarawihPerson]:
        for person in self.imams + self.bilals:
            if person.id == person_id:
                return person
        return None

    def get_day(self, ramadan_day: int) -> Optional[DailyTarawihSchedule]:
        for day in self.daily_schedules:
            if day.ramadan_day == ramadan_day:
                return day
        return None


# ---------------------------------------------------------------------------
# Snack providers
# ---------------------------------------------------------------------------


@dataclass
class SnackProvider:
    """A household or donor providing iftar snacks (takjil)."""

    id: str
    name: str
    contact: str
    notes: Optional[str] = None


@dataclass
class DailySnackProvider:
    """Two provider slots for one day of a Ramadan week."""

    day: str
    date: date
    provider1: Optional[SnackProvider] = None
    provider2: Optional[SnackProvider] = None

    def get_slot(self, slot: int) -> Optional[SnackProvider]:
        return self.provider1 if slot == 1 else self.provider2

    @property
    def filled_slots(self) -> int:
        return (self.provider1 is not None) + (self.provider2 is not None)


@dataclass
class SnackProviderYearlySchedule:
    """Snack provider roster and weekly rota for one Ramadan season.

    Attributes:
        year: Ramadan year key.
        ramadan_start_date: Date of Ramadan day 1.
        providers: Provider roster.
        weekly_schedules: Week number (1..4) to its seven day records.
    """

    year: int
    ramadan_start_date: date
    providers: list[SnackProvider] = field(default_factory=list)
    weekly_schedules: dict[int, list[DailySnackProvider]] = field(default_factory=dict)

    def find_provider(self, provider_id: str) -> Optional[SnackProvider]:
        for provider in self.providers:
            if provider.id == provider_id:
                return provider
        return None


# ---------------------------------------------------------------------------
# Kajian
# ---------------------------------------------------------------------------


@dataclass
class KajianSchedule:
    """A lecture (kajian) session.

    Attributes:
        id: Caller-supplied id.
        title: Lecture title.
        ustad_name: Name of the ustad giving the lecture.
        date: Date of the (first) session.
        time: Start time as entered, e.g. ``"19:30"``.
        topic: Topic or book being studied.
        youtube_link: Optional recording/live-stream link.
        is_recurring: Whether the lecture repeats weekly.
        recurring_day: Weekday name for recurring lectures.
    """

    id: str
    title: str
    ustad_name: str
    date: date
    time: str
    topic: str
    youtube_link: str = ""
    is_recurring: bool = False
    recurring_day: Optional[str] = None

    @property
    def year(self) -> int:
        return self.date.year
