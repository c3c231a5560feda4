"""Scheduling operations for tadarus, tarawih, snack providers and kajian."""

from musholahelper.scheduling.book import (
    ScheduleBook,
    SnackProviderBook,
    TadarusBook,
    TarawihBook,
)
from musholahelper.scheduling.kajian import add_kajian, kajian_for_year, remove_kajian
from musholahelper.scheduling.snack import empty_snack_schedule
from musholahelper.scheduling.tadarus import empty_tadarus_schedule
from musholahelper.scheduling.tarawih import empty_tarawih_schedule, generate_schedule

__all__ = [
    # Aggregate roots
    "ScheduleBook",
    "SnackProviderBook",
    "TadarusBook",
    "TarawihBook",
    # Empty schedules
    "empty_snack_schedule",
    "empty_tadarus_schedule",
    "empty_tarawih_schedule",
    # Kajian
    "add_kajian",
    "kajian_for_year",
    "remove_kajian",
    # Generation
    "generate_schedule",
]
