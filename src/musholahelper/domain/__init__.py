"""Domain models, calendar mapping and errors for Ramadan scheduling."""

from musholahelper.domain.calendar import (
    RAMADAN_DAYS,
    RAMADAN_START_DATES,
    RAMADAN_WEEKS,
    WEEKDAY_NAMES,
    ramadan_dates,
    ramadan_start_date,
)
from musholahelper.domain.errors import (
    DuplicateMemberError,
    EmptyRosterError,
    InvalidAddressError,
    InvalidEntryError,
    MusholaError,
    StoreError,
)
from musholahelper.domain.models import (
    ChartPoint,
    DailySnackProvider,
    DailyTarawihSchedule,
    KajianSchedule,
    PersonRole,
    SnackProvider,
    SnackProviderYearlySchedule,
    TadarusDailyEntry,
    TadarusProgress,
    TadarusYearlySchedule,
    TarawihPerson,
    TarawihYearlySchedule,
)

__all__ = [
    # Calendar
    "RAMADAN_DAYS",
    "RAMADAN_START_DATES",
    "RAMADAN_WEEKS",
    "WEEKDAY_NAMES",
    "ramadan_dates",
    "ramadan_start_date",
    # Errors
    "DuplicateMemberError",
    "EmptyRosterError",
    "InvalidAddressError",
    "InvalidEntryError",
    "MusholaError",
    "StoreError",
    # Models
    "ChartPoint",
    "DailySnackProvider",
    "DailyTarawihSchedule",
    "KajianSchedule",
    "PersonRole",
    "SnackProvider",
    "SnackProviderYearlySchedule",
    "TadarusDailyEntry",
    "TadarusProgress",
    "TadarusYearlySchedule",
    "TarawihPerson",
    "TarawihYearlySchedule",
]
