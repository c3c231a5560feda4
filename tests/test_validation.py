"""Tests for schedule validation."""

from dataclasses import replace
from datetime import date

import pytest

from musholahelper.domain.models import PersonRole, SnackProvider, TarawihPerson
from musholahelper.scheduling.snack import (
    add_provider,
    assign_provider,
    empty_snack_schedule,
)
from musholahelper.scheduling.tadarus import add_daily_entry, empty_tadarus_schedule
from musholahelper.scheduling.tarawih import (
    add_person,
    assign_person,
    default_roster,
    empty_tarawih_schedule,
    generate_schedule,
    set_person_active,
)
from musholahelper.validation.validator import ScheduleValidator, ValidationErrorType


@pytest.fixture
def validator():
    return ScheduleValidator()


@pytest.fixture
def tarawih_schedule():
    schedule = empty_tarawih_schedule(2025)
    for person in default_roster():
        schedule = add_person(schedule, person)
    return generate_schedule(schedule)


def error_types(result):
    return {e.error_type for e in result.errors}


class TestTadarusValidation:
    """Tests for tadarus schedule checks."""

    def test_valid(self, validator):
        schedule = add_daily_entry(empty_tadarus_schedule(2025), 1, 2, 1, "Admin")
        result = validator.validate_tadarus(schedule)
        assert result.is_valid
        assert result.errors == []

    def test_missing_day(self, validator):
        schedule = empty_tadarus_schedule(2025)
        schedule = replace(schedule, daily_entries=schedule.daily_entries[:-1])
        assert ValidationErrorType.WRONG_DAY_COUNT in error_types(
            validator.validate_tadarus(schedule)
        )

    def test_wrong_date(self, validator):
        schedule = empty_tadarus_schedule(2025)
        entries = list(schedule.daily_entries)
        entries[4] = replace(entries[4], date=date(2025, 1, 1))
        result = validator.validate_tadarus(replace(schedule, daily_entries=entries))
        assert not result.is_valid
        assert result.errors[0].ramadan_day == 5
        assert result.errors[0].error_type == ValidationErrorType.DATE_MISMATCH

    def test_negative_juz(self, validator):
        schedule = empty_tadarus_schedule(2025)
        entries = list(schedule.daily_entries)
        entries[0] = replace(entries[0], male_juz_read=-1)
        result = validator.validate_tadarus(replace(schedule, daily_entries=entries))
        assert ValidationErrorType.NEGATIVE_JUZ in error_types(result)


class TestTarawihValidation:
    """Tests for tarawih schedule checks."""

    def test_generated_schedule_valid(self, validator, tarawih_schedule):
        result = validator.validate_tarawih(tarawih_schedule)
        assert result.is_valid
        assert result.warnings == []

    def test_empty_schedule_warns_open_slots(self, validator):
        result = validator.validate_tarawih(empty_tarawih_schedule(2025))
        assert result.is_valid
        assert result.warnings == ["60 imam/bilal slots are unassigned"]

    def test_unknown_member(self, validator, tarawih_schedule):
        outsider = TarawihPerson("imam-99", "Tamu", PersonRole.IMAM)
        schedule = assign_person(tarawih_schedule, 2, outsider)
        result = validator.validate_tarawih(schedule)
        assert not result.is_valid
        assert result.errors[0].member_id == "imam-99"
        assert "Day 2:" in str(result.errors[0])

    def test_stale_name_warning(self, validator, tarawih_schedule):
        imams = [replace(p, name="Ustadz Ahmad, Lc") if p.id == "imam-1" else p
                 for p in tarawih_schedule.imams]
        result = validator.validate_tarawih(replace(tarawih_schedule, imams=imams))
        assert result.is_valid
        assert len(result.warnings) == 15

    def test_inactive_assigned_warning(self, validator, tarawih_schedule):
        schedule = set_person_active(tarawih_schedule, "bilal-4", False)
        result = validator.validate_tarawih(schedule)
        assert result.is_valid
        assert len(result.warnings) == 6

    def test_repeated_day(self, validator, tarawih_schedule):
        days = list(tarawih_schedule.daily_schedules)
        days[5] = days[4]
        result = validator.validate_tarawih(replace(tarawih_schedule, daily_schedules=days))
        assert not result.is_valid
        assert error_types(result) == {ValidationErrorType.DUPLICATE_DAY}
        assert result.errors[0].ramadan_day == 5

    def test_duplicate_and_role_mismatch(self, validator):
        schedule = empty_tarawih_schedule(2025)
        schedule = replace(
            schedule,
            imams=[
                TarawihPerson("p1", "A", PersonRole.IMAM),
                TarawihPerson("p2", "B", PersonRole.BILAL),
            ],
            bilals=[TarawihPerson("p1", "C", PersonRole.BILAL)],
        )
        types = error_types(validator.validate_tarawih(schedule))
        assert ValidationErrorType.DUPLICATE_MEMBER_ID in types
        assert ValidationErrorType.ROLE_MISMATCH in types


class TestSnackValidation:
    """Tests for snack schedule checks."""

    @pytest.fixture
    def provider(self):
        return SnackProvider("1", "Ibu Siti", "0812-3456-7890")

    def test_valid(self, validator, provider):
        schedule = add_provider(empty_snack_schedule(2025), provider)
        schedule = assign_provider(schedule, 1, "Senin", 1, provider)
        assert validator.validate_snack(schedule).is_valid

    def test_both_slots_warning(self, validator, provider):
        schedule = add_provider(empty_snack_schedule(2025), provider)
        schedule = assign_provider(schedule, 1, "Senin", 1, provider)
        schedule = assign_provider(schedule, 1, "Senin", 2, provider)
        result = validator.validate_snack(schedule)
        assert result.is_valid
        assert result.warnings == ["Week 1 Senin: Ibu Siti fills both slots"]

    def test_unknown_provider(self, validator, provider):
        schedule = assign_provider(empty_snack_schedule(2025), 2, "Ahad", 2, provider)
        result = validator.validate_snack(schedule)
        assert error_types(result) == {ValidationErrorType.UNKNOWN_MEMBER}

    def test_missing_and_short_week(self, validator):
        schedule = empty_snack_schedule(2025)
        weeks = dict(schedule.weekly_schedules)
        del weeks[4]
        weeks[1] = weeks[1][:5]
        types = error_types(validator.validate_snack(replace(schedule, weekly_schedules=weeks)))
        assert types == {ValidationErrorType.MISSING_WEEK, ValidationErrorType.WRONG_WEEK_LENGTH}
