"""Validation module for verifying schedule structure."""

from musholahelper.validation.validator import ScheduleValidator, ValidationError

__all__ = [
    "ScheduleValidator",
    "ValidationError",
]
