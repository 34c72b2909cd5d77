"""Convert exported data payloads into domain snapshots and back."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping

from domain.leave_calendar import LeaveCalendar
from domain.models import (
    Location,
    SharingRule,
    Snapshot,
    Staff,
    StaffCategory,
    StaffStatus,
    Topic,
    Verse,
)

from adapters.config_loader import read_document

# Section names accepted in payloads; the second spelling is the browser export format.
SECTION_ALIASES = {
    "verses": ("verses", "thirukkurals"),
    "sharing_rules": ("sharing_rules", "sharingConfigs"),
    "leave_days": ("leave_days", "globalLeaveDays"),
}

_CATEGORY_ALIASES = {member.name.lower(): member for member in StaffCategory}
_CATEGORY_ALIASES.update({member.value.lower(): member for member in StaffCategory})


class SnapshotError(ValueError):
    """Raised when a data payload cannot be turned into a snapshot."""


def _field(spec: Mapping[str, Any], *names: str, default: Any = None) -> Any:
    for name in names:
        if name in spec and spec[name] is not None:
            return spec[name]
    return default


def _required(spec: Mapping[str, Any], kind: str, *names: str) -> Any:
    value = _field(spec, *names)
    if value is None or value == "":
        raise SnapshotError(f"{kind} entry is missing '{names[0]}': {dict(spec)!r}")
    return value


def _section(payload: Mapping[str, Any], key: str) -> List[Mapping[str, Any]]:
    for name in SECTION_ALIASES.get(key, (key,)):
        if name in payload and payload[name] is not None:
            value = payload[name]
            if not isinstance(value, list):
                raise SnapshotError(f"Section '{name}' must be a list")
            return value
    return []


def parse_category(value: Any) -> StaffCategory:
    if isinstance(value, StaffCategory):
        return value
    category = _CATEGORY_ALIASES.get(str(value).strip().lower())
    if category is None:
        raise SnapshotError(f"Unknown staff category: {value!r}")
    return category


def parse_status(value: Any) -> StaffStatus:
    if isinstance(value, StaffStatus):
        return value
    for status in StaffStatus:
        if str(value).strip().lower() in {status.value.lower(), status.name.lower()}:
            return status
    raise SnapshotError(f"Unknown staff status: {value!r}")


def parse_location(spec: Mapping[str, Any]) -> Location:
    return Location(
        id=str(_required(spec, "Location", "id")),
        name=str(_field(spec, "name", default="")),
        excluded_from_schedule=bool(_field(spec, "excluded_from_schedule", "excludedFromSchedule", default=False)),
    )


def parse_staff(spec: Mapping[str, Any]) -> Staff:
    extra = _field(spec, "additional_location_ids", "additionalLocationIds", default=[]) or []
    return Staff(
        id=str(_required(spec, "Staff", "id")),
        name=str(_field(spec, "name", default="")),
        location_id=str(_field(spec, "location_id", "locationId", default="")),
        category=parse_category(_required(spec, "Staff", "category")),
        status=parse_status(_field(spec, "status", default=StaffStatus.WORKING.value)),
        additional_location_ids=tuple(str(loc_id) for loc_id in extra),
    )


def parse_topic(spec: Mapping[str, Any]) -> Topic:
    return Topic(id=str(_required(spec, "Topic", "id")), name=str(_field(spec, "name", default="")))


def parse_verse(spec: Mapping[str, Any]) -> Verse:
    return Verse(
        id=str(_required(spec, "Verse", "id")),
        topic_id=str(_field(spec, "topic_id", "topicId", default="")),
        text=str(_field(spec, "text", "verse", default="")),
    )


def parse_sharing_rule(spec: Mapping[str, Any]) -> SharingRule:
    return SharingRule(
        day=str(_required(spec, "Sharing rule", "day")),
        location_ids=tuple(str(loc_id) for loc_id in _field(spec, "location_ids", "locationIds", default=[]) or []),
    )


def _leave_calendar(raw: Any, *, zero_based: bool = False) -> LeaveCalendar:
    if raw is None or raw == []:
        return LeaveCalendar()
    if not isinstance(raw, Mapping):
        raise SnapshotError("Leave days must be a mapping of month keys to day numbers")
    try:
        return LeaveCalendar.from_mapping(raw, zero_based=zero_based)
    except ValueError as exc:
        raise SnapshotError(str(exc)) from exc


def _parse_all(items: Iterable[Mapping[str, Any]], parser, *, kind: str = "") -> tuple:
    parsed = []
    seen: set[str] = set()
    for item in items:
        if not isinstance(item, Mapping):
            raise SnapshotError(f"Expected an object, got {item!r}")
        record = parser(item)
        record_id = getattr(record, "id", None)
        if record_id is not None:
            if record_id in seen:
                raise SnapshotError(f"Duplicate {kind} id: {record_id!r}")
            seen.add(record_id)
        parsed.append(record)
    return tuple(parsed)


def load_snapshot(payload: Mapping[str, Any]) -> Snapshot:
    if not isinstance(payload, Mapping):
        raise SnapshotError("Snapshot payload must be a mapping")
    # leave_days uses 1-based "YYYY-MM" keys; the browser export keys months from 0.
    leave_raw, zero_based = None, False
    for name in SECTION_ALIASES["leave_days"]:
        if name in payload:
            leave_raw, zero_based = payload[name], name == "globalLeaveDays"
            break
    return Snapshot(
        locations=_parse_all(_section(payload, "locations"), parse_location, kind="location"),
        staff=_parse_all(_section(payload, "staff"), parse_staff, kind="staff"),
        topics=_parse_all(_section(payload, "topics"), parse_topic, kind="topic"),
        verses=_parse_all(_section(payload, "verses"), parse_verse, kind="verse"),
        sharing_rules=_parse_all(_section(payload, "sharing_rules"), parse_sharing_rule),
        leave_calendar=_leave_calendar(leave_raw, zero_based=zero_based),
    )


def load_snapshot_file(path: str | Path) -> Snapshot:
    return load_snapshot(read_document(path))


def dump_snapshot(snapshot: Snapshot) -> Dict[str, Any]:
    return {
        "locations": [
            {"id": loc.id, "name": loc.name, "excluded_from_schedule": loc.excluded_from_schedule}
            for loc in snapshot.locations
        ],
        "staff": [
            {
                "id": member.id,
                "name": member.name,
                "location_id": member.location_id,
                "additional_location_ids": list(member.additional_location_ids),
                "category": member.category.value,
                "status": member.status.value,
            }
            for member in snapshot.staff
        ],
        "topics": [{"id": topic.id, "name": topic.name} for topic in snapshot.topics],
        "verses": [{"id": verse.id, "topic_id": verse.topic_id, "text": verse.text} for verse in snapshot.verses],
        "sharing_rules": [{"day": rule.day, "location_ids": list(rule.location_ids)} for rule in snapshot.sharing_rules],
        "leave_days": snapshot.leave_calendar.as_mapping(),
    }
