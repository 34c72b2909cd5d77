from datetime import date

import pytest

from domain.leave_calendar import LeaveCalendar, parse_month_key
from rules import rotor


def test_from_mapping_and_lookup():
    cal = LeaveCalendar.from_mapping({"2024-01": [1, 26], "2024-02": []})
    assert cal.is_leave(date(2024, 1, 26))
    assert not cal.is_leave(date(2024, 2, 26))
    assert cal.as_mapping() == {"2024-01": [1, 26]}


def test_toggle_adds_and_removes_days():
    cal = LeaveCalendar().toggle(2024, 1, 2)
    assert cal.days_for(2024, 1) == {2}
    assert cal.toggle(2024, 1, 2).days_for(2024, 1) == frozenset()


def test_toggle_refuses_sundays():
    cal = LeaveCalendar()
    assert cal.toggle(2024, 1, 7) is cal


def test_equal_calendars_hash_alike():
    left = LeaveCalendar.from_mapping({"2024-03": [5, 4]})
    right = LeaveCalendar({(2024, 3): [4, 5]})
    assert left == right
    assert hash(left) == hash(right)


@pytest.mark.parametrize("key", ["2024", "2024-13", "abc-01"])
def test_invalid_month_keys(key):
    with pytest.raises(ValueError):
        parse_month_key(key)


def test_year_to_date_walk_and_admissibility():
    days = list(rotor.iter_year_to_date(2024, 2))
    assert days[0] == date(2024, 1, 1)
    assert days[-1] == date(2024, 2, 29)
    assert len(days) == 60
    cal = LeaveCalendar.from_mapping({"2024-01": [2]})
    assert rotor.is_admissible(date(2024, 1, 1), cal)
    assert not rotor.is_admissible(date(2024, 1, 2), cal)
    assert not rotor.is_admissible(date(2024, 1, 7), cal)
