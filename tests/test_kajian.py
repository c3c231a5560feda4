"""Tests for kajian lecture list operations."""

from datetime import date

import pytest

from musholahelper.domain.errors import DuplicateMemberError, InvalidEntryError
from musholahelper.domain.models import KajianSchedule
from musholahelper.scheduling import add_kajian, kajian_for_year, remove_kajian


def make_kajian(id: str, d: date, time: str = "19:30", **overrides) -> KajianSchedule:
    fields = dict(
        id=id,
        title="Kajian Tafsir",
        ustad_name="Ustadz Abdullah",
        date=d,
        time=time,
        topic="Tafsir Juz Amma",
    )
    fields.update(overrides)
    return KajianSchedule(**fields)


class TestKajian:
    """Tests for adding, removing and filtering kajian."""

    def test_add_and_filter_by_year(self):
        items = []
        items = add_kajian(items, make_kajian("1", date(2025, 3, 10)))
        items = add_kajian(items, make_kajian("2", date(2026, 1, 5)))
        items = add_kajian(items, make_kajian("3", date(2025, 1, 20)))

        result = kajian_for_year(items, 2025)
        assert [k.id for k in result] == ["3", "1"]
        assert kajian_for_year(items, 2024) == []

    def test_same_day_ordered_by_time(self):
        items = [
            make_kajian("a", date(2025, 3, 10), "19:30"),
            make_kajian("b", date(2025, 3, 10), "05:00"),
        ]
        assert [k.id for k in kajian_for_year(items, 2025)] == ["b", "a"]

    def test_year_derived_from_date(self):
        assert make_kajian("1", date(2027, 2, 1)).year == 2027

    @pytest.mark.parametrize("field", ["title", "ustad_name", "time", "topic"])
    def test_required_fields(self, field):
        with pytest.raises(InvalidEntryError):
            add_kajian([], make_kajian("1", date(2025, 3, 10), **{field: " "}))

    def test_unknown_recurring_day(self):
        kajian = make_kajian("1", date(2025, 3, 10), is_recurring=True, recurring_day="Friday")
        with pytest.raises(InvalidEntryError):
            add_kajian([], kajian)

    def test_recurring_kajian(self):
        kajian = make_kajian("1", date(2025, 3, 14), is_recurring=True, recurring_day="Jumat")
        assert add_kajian([], kajian) == [kajian]

    def test_duplicate_id(self):
        items = add_kajian([], make_kajian("1", date(2025, 3, 10)))
        with pytest.raises(DuplicateMemberError):
            add_kajian(items, make_kajian("1", date(2025, 4, 10)))

    def test_remove(self):
        items = [make_kajian("1", date(2025, 3, 10)), make_kajian("2", date(2025, 3, 11))]
        assert [k.id for k in remove_kajian(items, "1")] == ["2"]
        assert remove_kajian(items, "missing") == items
