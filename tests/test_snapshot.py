import pytest

from adapters.snapshot import SnapshotError, dump_snapshot, load_snapshot
from domain.models import StaffCategory, StaffStatus

BROWSER_EXPORT = {
    "locations": [
        {"id": "loc-1", "name": "Block A"},
        {"id": "loc-2", "name": "Block B", "excludedFromSchedule": True},
    ],
    "staff": [
        {
            "id": "s1",
            "name": "Kumar",
            "locationId": "loc-1",
            "additionalLocationIds": ["loc-2"],
            "category": "Block Integrator / Federation Coordinator",
            "meetId": "kumar@meet",
            "status": "Working",
        },
        {"id": "s2", "name": "Devi", "locationId": "loc-1", "category": "Associate", "status": "Long Leave"},
    ],
    "topics": [{"id": "t1", "name": "Kindness"}],
    "thirukkurals": [{"id": "k1", "topicId": "t1", "verse": "Verse one"}],
    "sharingConfigs": [{"day": "Monday", "locationIds": ["loc-1", "loc-2"]}],
    "globalLeaveDays": {"2024-0": [1, 26]},
}


def test_loads_browser_export_format():
    snapshot = load_snapshot(BROWSER_EXPORT)
    assert [loc.excluded_from_schedule for loc in snapshot.locations] == [False, True]
    kumar, devi = snapshot.staff
    assert kumar.category is StaffCategory.PERMANENT
    assert kumar.additional_location_ids == ("loc-2",)
    assert devi.status is StaffStatus.LONG_LEAVE
    assert snapshot.verses[0].text == "Verse one"
    assert snapshot.sharing_rules[0].location_ids == ("loc-1", "loc-2")
    assert snapshot.leave_calendar.days_for(2024, 1) == {1, 26}


def test_snapshot_is_hashable_and_round_trips():
    snapshot = load_snapshot(BROWSER_EXPORT)
    again = load_snapshot(dump_snapshot(snapshot))
    assert again == snapshot
    assert hash(again) == hash(snapshot)


def test_category_accepts_enum_names():
    payload = {"staff": [{"id": "x", "name": "X", "locationId": "l", "category": "permanent"}]}
    assert load_snapshot(payload).staff[0].category is StaffCategory.PERMANENT


@pytest.mark.parametrize(
    "payload",
    [
        {"staff": [{"id": "x", "category": "Volunteer"}]},
        {"topics": [{"name": "no id"}]},
        {"locations": {"id": "not-a-list"}},
        {"globalLeaveDays": {"January": [1]}},
        ["not", "a", "mapping"],
    ],
)
def test_malformed_payloads_raise(payload):
    with pytest.raises(SnapshotError):
        load_snapshot(payload)


@pytest.mark.parametrize(
    "key, expected",
    [("2025-0", (2025, 1)), ("2025-1", (2025, 2)), ("2025-11", (2025, 12))],
)
def test_browser_leave_keys_count_months_from_zero(key, expected):
    snapshot = load_snapshot({"globalLeaveDays": {key: [3]}})
    assert snapshot.leave_calendar.days_for(*expected) == {3}
    assert list(snapshot.leave_calendar) == [expected]


def test_leave_days_section_uses_calendar_months():
    snapshot = load_snapshot({"leave_days": {"2025-01": [3], "2025-12": [4]}})
    assert snapshot.leave_calendar.days_for(2025, 1) == {3}
    assert snapshot.leave_calendar.days_for(2025, 12) == {4}
    with pytest.raises(SnapshotError):
        load_snapshot({"leave_days": {"2025-0": [3]}})


def test_browser_leave_key_out_of_range():
    with pytest.raises(SnapshotError):
        load_snapshot({"globalLeaveDays": {"2025-12": [3]}})


@pytest.mark.parametrize(
    "payload",
    [
        {"locations": [{"id": "L", "name": "One"}, {"id": "L", "name": "Two"}]},
        {"staff": [
            {"id": "s", "name": "A", "locationId": "L", "category": "MIS"},
            {"id": "s", "name": "B", "locationId": "L", "category": "MIS"},
        ]},
        {"topics": [{"id": "t", "name": "A"}, {"id": "t", "name": "B"}]},
        {"verses": [{"id": "v", "text": "A"}, {"id": "v", "text": "B"}]},
    ],
)
def test_duplicate_ids_are_rejected(payload):
    with pytest.raises(SnapshotError, match="Duplicate"):
        load_snapshot(payload)
