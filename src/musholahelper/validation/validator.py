"""Structural validation of yearly schedules.

The scheduling functions keep schedules well-formed, but snapshots also
arrive from the store and from manual edits. The validator reports what is
wrong with a snapshot without changing it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from musholahelper.domain.calendar import (
    DAYS_PER_WEEK,
    RAMADAN_DAYS,
    RAMADAN_WEEKS,
    date_for_day,
)
from musholahelper.domain.models import (
    PersonRole,
    SnackProviderYearlySchedule,
    TadarusYearlySchedule,
    TarawihYearlySchedule,
)


class ValidationErrorType(Enum):
    """Types of validation errors."""

    WRONG_DAY_COUNT = "wrong_day_count"
    DAY_OUT_OF_RANGE = "day_out_of_range"
    DUPLICATE_DAY = "duplicate_day"
    DATE_MISMATCH = "date_mismatch"
    DUPLICATE_MEMBER_ID = "duplicate_member_id"
    ROLE_MISMATCH = "role_mismatch"
    UNKNOWN_MEMBER = "unknown_member"
    NEGATIVE_JUZ = "negative_juz"
    MISSING_WEEK = "missing_week"
    WRONG_WEEK_LENGTH = "wrong_week_length"


@dataclass
class ValidationError:
    """A single validation error."""

    error_type: ValidationErrorType
    message: str
    ramadan_day: Optional[int] = None
    member_id: Optional[str] = None
    details: dict = field(default_factory=dict)

    def __str__(self) -> str:
        parts = [f"[{self.error_type.value}]"]
        if self.ramadan_day is not None:
            parts.append(f"Day {self.ramadan_day}:")
        parts.append(self.message)
        if self.member_id:
            parts.append(f"(id {self.member_id})")
        return " ".join(parts)


@dataclass
class ValidationResult:
    """Result of validating a schedule."""

    is_valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add_error(self, error: ValidationError) -> None:
        """Add an error and mark as invalid."""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str) -> None:
        """Add a warning (doesn't affect validity)."""
        self.warnings.append(warning)


class ScheduleValidator:
    """Validates yearly schedules of every domain.

    Example:
        >>> validator = ScheduleValidator()
        >>> result = validator.validate_tarawih(schedule)
        >>> if not result.is_valid:
        ...     for error in result.errors:
        ...         print(error)
    """

    def validate_tadarus(self, schedule: TadarusYearlySchedule) -> ValidationResult:
        result = ValidationResult(is_valid=True)
        self._validate_days(
            [(e.ramadan_day, e.date) for e in schedule.daily_entries],
            schedule.ramadan_start_date,
            result,
        )

        for entry in schedule.daily_entries:
            if entry.male_juz_read < 0 or entry.female_juz_read < 0:
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.NEGATIVE_JUZ,
                        message=(
                            f"Negative juz count (male={entry.male_juz_read}, "
                            f"female={entry.female_juz_read})"
                        ),
                        ramadan_day=entry.ramadan_day,
                    )
                )

        return result

    def validate_tarawih(self, schedule: TarawihYearlySchedule) -> ValidationResult:
        """Validate roster and nights of a tarawih schedule.

        Stale name snapshots, inactive people on a night and open nights
        are reported as warnings.
        """
        result = ValidationResult(is_valid=True)
        self._validate_days(
            [(d.ramadan_day, d.date) for d in schedule.daily_schedules],
            schedule.ramadan_start_date,
            result,
        )

        seen: set[str] = set()
        for role in PersonRole:
            for person in schedule.roster(role):
                if person.id in seen:
                    result.add_error(
                        ValidationError(
                            error_type=ValidationErrorType.DUPLICATE_MEMBER_ID,
                            message=f"{person.name} shares an id with another member",
                            member_id=person.id,
                        )
                    )
                seen.add(person.id)
                if person.role != role:
                    result.add_error(
                        ValidationError(
                            error_type=ValidationErrorType.ROLE_MISMATCH,
                            message=f"{person.name} has role {person.role.value} in the {role.value} list",
                            member_id=person.id,
                        )
                    )

        imams = {p.id: p for p in schedule.imams}
        bilals = {p.id: p for p in schedule.bilals}
        open_nights = 0

        for day in schedule.daily_schedules:
            slots = [
                (PersonRole.IMAM, day.imam_id, day.imam_name, imams),
                (PersonRole.BILAL, day.bilal_id, day.bilal_name, bilals),
            ]
            for role, person_id, snapshot_name, roster in slots:
                if not person_id:
                    open_nights += 1
                    continue
                person = roster.get(person_id)
                if person is None:
                    result.add_error(
                        ValidationError(
                            error_type=ValidationErrorType.UNKNOWN_MEMBER,
                            message=f"Assigned {role.value} is not on the roster",
                            ramadan_day=day.ramadan_day,
                            member_id=person_id,
                        )
                    )
                    continue
                if person.name != snapshot_name:
                    result.add_warning(
                        f"Day {day.ramadan_day}: {role.value} name {snapshot_name!r} "
                        f"differs from roster name {person.name!r}"
                    )
                if not person.is_active:
                    result.add_warning(
                        f"Day {day.ramadan_day}: inactive {role.value} {person.name} is assigned"
                    )

        if open_nights:
            result.add_warning(f"{open_nights} imam/bilal slots are unassigned")

        return result

    def validate_snack(self, schedule: SnackProviderYearlySchedule) -> ValidationResult:
        result = ValidationResult(is_valid=True)

        seen: set[str] = set()
        for provider in schedule.providers:
            if provider.id in seen:
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.DUPLICATE_MEMBER_ID,
                        message=f"{provider.name} shares an id with another provider",
                        member_id=provider.id,
                    )
                )
            seen.add(provider.id)

        for week in range(1, RAMADAN_WEEKS + 1):
            days = schedule.weekly_schedules.get(week)
            if days is None:
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.MISSING_WEEK,
                        message=f"Week {week} is missing",
                    )
                )
                continue
            if len(days) != DAYS_PER_WEEK:
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.WRONG_WEEK_LENGTH,
                        message=f"Week {week} has {len(days)} days",
                    )
                )

            for day in days:
                for slot, provider in ((1, day.provider1), (2, day.provider2)):
                    if provider is not None and provider.id not in seen:
                        result.add_error(
                            ValidationError(
                                error_type=ValidationErrorType.UNKNOWN_MEMBER,
                                message=(
                                    f"Week {week} {day.day} slot {slot}: "
                                    f"{provider.name} is not on the roster"
                                ),
                                member_id=provider.id,
                            )
                        )
                if (
                    day.provider1 is not None
                    and day.provider2 is not None
                    and day.provider1.id == day.provider2.id
                ):
                    result.add_warning(
                        f"Week {week} {day.day}: {day.provider1.name} fills both slots"
                    )

        return result

    def _validate_days(
        self,
        days: list,
        start_date,
        result: ValidationResult,
    ) -> None:
        """Check day numbering and dates of a 30-day schedule."""
        if len(days) != RAMADAN_DAYS:
            result.add_error(
                ValidationError(
                    error_type=ValidationErrorType.WRONG_DAY_COUNT,
                    message=f"Expected {RAMADAN_DAYS} days, found {len(days)}",
                )
            )

        seen: set[int] = set()
        for ramadan_day, day_date in days:
            if not 1 <= ramadan_day <= RAMADAN_DAYS:
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.DAY_OUT_OF_RANGE,
                        message="Ramadan day outside 1..30",
                        ramadan_day=ramadan_day,
                    )
                )
                continue
            if ramadan_day in seen:
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.DUPLICATE_DAY,
                        message="Ramadan day appears more than once",
                        ramadan_day=ramadan_day,
                    )
                )
            seen.add(ramadan_day)
            expected = date_for_day(start_date, ramadan_day)
            if day_date != expected:
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.DATE_MISMATCH,
                        message=f"Date {day_date} should be {expected}",
                        ramadan_day=ramadan_day,
                    )
                )
