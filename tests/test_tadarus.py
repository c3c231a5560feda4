"""Tests for tadarus progress aggregation."""

from datetime import date, datetime

import pytest

from musholahelper.domain.errors import InvalidAddressError, InvalidEntryError
from musholahelper.domain.models import TadarusProgress, round_half_up
from musholahelper.scheduling.tadarus import (
    add_daily_entry,
    calculate_progress,
    chart_data,
    empty_tadarus_schedule,
    get_daily_entry,
    reset_tadarus_schedule,
    update_daily_entry,
)


@pytest.fixture
def schedule():
    """Empty 2025 tadarus schedule."""
    return empty_tadarus_schedule(2025)


class TestEmptySchedule:
    """Tests for empty schedule creation."""

    def test_thirty_zero_entries(self, schedule):
        assert len(schedule.daily_entries) == 30
        assert [e.ramadan_day for e in schedule.daily_entries] == list(range(1, 31))
        assert all(e.total_juz_read == 0 for e in schedule.daily_entries)
        assert schedule.daily_entries[0].id == "2025-1"
        assert schedule.daily_entries[29].date == date(2025, 3, 30)

    def test_idempotent(self):
        assert empty_tadarus_schedule(2026) == empty_tadarus_schedule(2026)

    def test_empty_progress(self, schedule):
        progress = schedule.progress
        assert progress.total_juz == 0
        assert progress.completion_percentage == 0
        assert progress.days_completed == 0
        assert progress.days_remaining == 30


class TestAddAndUpdate:
    """Tests for cumulative and absolute entry writes."""

    def test_add_is_cumulative(self, schedule):
        schedule = add_daily_entry(schedule, 5, 3, 2, "Admin")
        schedule = add_daily_entry(schedule, 5, 1, 1, "Takmir")

        entry = get_daily_entry(schedule, 5)
        assert entry.male_juz_read == 4
        assert entry.female_juz_read == 3
        assert entry.total_juz_read == 7
        assert entry.entered_by == "Takmir"

    def test_update_overwrites(self, schedule):
        schedule = add_daily_entry(schedule, 5, 3, 2, "Admin")
        schedule = add_daily_entry(schedule, 5, 1, 1, "Admin")
        schedule = update_daily_entry(schedule, 5, 5, 5)

        entry = get_daily_entry(schedule, 5)
        assert entry.male_juz_read == 5
        assert entry.female_juz_read == 5
        assert entry.entered_by == "Admin"

    def test_add_stamps_time(self, schedule):
        stamp = datetime(2025, 3, 5, 21, 0)
        schedule = add_daily_entry(schedule, 5, 1, 0, "Admin", now=stamp)
        assert get_daily_entry(schedule, 5).created_at == stamp

    def test_input_snapshot_unchanged(self, schedule):
        updated = add_daily_entry(schedule, 1, 2, 2, "Admin")
        assert get_daily_entry(schedule, 1).total_juz_read == 0
        assert get_daily_entry(updated, 1).total_juz_read == 4

    def test_other_days_untouched(self, schedule):
        schedule = add_daily_entry(schedule, 10, 2, 1, "Admin")
        others = [e for e in schedule.daily_entries if e.ramadan_day != 10]
        assert all(e.total_juz_read == 0 for e in others)

    def test_fractional_juz(self, schedule):
        schedule = add_daily_entry(schedule, 1, 0.5, 0.25, "Admin")
        assert get_daily_entry(schedule, 1).total_juz_read == 0.75

    @pytest.mark.parametrize("day", [0, 31, -1])
    def test_day_out_of_range(self, schedule, day):
        with pytest.raises(InvalidAddressError):
            add_daily_entry(schedule, day, 1, 1, "Admin")
        with pytest.raises(InvalidAddressError):
            update_daily_entry(schedule, day, 1, 1)

    def test_negative_juz_rejected(self, schedule):
        with pytest.raises(InvalidEntryError):
            add_daily_entry(schedule, 1, -1, 0, "Admin")
        with pytest.raises(InvalidEntryError):
            update_daily_entry(schedule, 1, 0, -2)

    def test_reset(self, schedule):
        schedule = add_daily_entry(schedule, 3, 4, 4, "Admin")
        schedule = reset_tadarus_schedule(schedule)
        assert schedule == empty_tadarus_schedule(2025)


class TestProgress:
    """Tests for derived progress values."""

    @pytest.mark.parametrize(
        "total,expected",
        [(0, 0), (29, 0), (30, 1), (59, 1), (60, 2), (89, 2)],
    )
    def test_khatam_count(self, schedule, total, expected):
        schedule = update_daily_entry(schedule, 1, total, total)
        progress = schedule.progress
        assert progress.male_khatam_count == expected
        assert progress.female_khatam_count == expected
        assert progress.total_khatam_count == 2 * expected

    def test_totals_and_percentage(self, schedule):
        schedule = add_daily_entry(schedule, 1, 10, 5, "Admin")
        schedule = add_daily_entry(schedule, 2, 20, 10, "Admin")
        progress = schedule.progress

        assert progress.total_male_juz == 30
        assert progress.total_female_juz == 15
        assert progress.total_juz == progress.total_male_juz + progress.total_female_juz
        assert progress.completion_percentage == 75
        assert progress.days_completed == 2
        assert progress.days_remaining == 28

    def test_percentage_rounds(self, schedule):
        schedule = add_daily_entry(schedule, 1, 1, 0, "Admin")
        # 1 / 60 * 100 = 1.67
        assert schedule.progress.completion_percentage == 2

    def test_percentage_can_exceed_hundred(self, schedule):
        schedule = update_daily_entry(schedule, 1, 60, 30)
        assert schedule.progress.completion_percentage == 150

    def test_recomputed_after_correction(self, schedule):
        schedule = add_daily_entry(schedule, 1, 3, 0, "Admin")
        schedule = update_daily_entry(schedule, 1, 0, 0)
        progress = calculate_progress(schedule)
        assert progress.days_completed == 0
        assert progress.total_juz == 0

    def test_calculate_matches_property(self, schedule):
        schedule = add_daily_entry(schedule, 7, 2, 3, "Admin")
        assert calculate_progress(schedule) == schedule.progress
        assert isinstance(schedule.progress, TadarusProgress)

    def test_round_half_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(2.49) == 2


class TestChartData:
    """Tests for the per-day projection."""

    def test_one_row_per_day_in_order(self, schedule):
        schedule = add_daily_entry(schedule, 3, 1, 2, "Admin")
        rows = chart_data(schedule)

        assert [r.day for r in rows] == list(range(1, 31))
        assert (rows[2].male, rows[2].female, rows[2].total) == (1, 2, 3)
        assert rows[0].total == 0

    def test_restartable(self, schedule):
        assert chart_data(schedule) == chart_data(schedule)
