from __future__ import annotations

import json
from typing import Dict, List

from domain.models import Location, SharingRule, Snapshot, Staff, Topic, Verse

from adapters.snapshot import parse_category, parse_status
from dao import calendar_dao
from services import db


def list_locations() -> List[Location]:
    rows = db.query_all("SELECT id, name, excluded_from_schedule FROM locations ORDER BY position")
    return [
        Location(id=row["id"], name=row["name"], excluded_from_schedule=bool(row["excluded_from_schedule"]))
        for row in rows
    ]


def list_staff() -> List[Staff]:
    rows = db.query_all(
        "SELECT id, name, location_id, additional_location_ids_json, category, status FROM staff ORDER BY position"
    )
    return [
        Staff(
            id=row["id"],
            name=row["name"],
            location_id=row["location_id"],
            category=parse_category(row["category"]),
            status=parse_status(row["status"]),
            additional_location_ids=tuple(json.loads(row["additional_location_ids_json"] or "[]")),
        )
        for row in rows
    ]


def list_topics() -> List[Topic]:
    rows = db.query_all("SELECT id, name FROM topics ORDER BY position")
    return [Topic(id=row["id"], name=row["name"]) for row in rows]


def list_verses() -> List[Verse]:
    rows = db.query_all("SELECT id, topic_id, text FROM verses ORDER BY position")
    return [Verse(id=row["id"], topic_id=row["topic_id"] or "", text=row["text"]) for row in rows]


def list_sharing_rules() -> List[SharingRule]:
    rows = db.query_all("SELECT day, location_ids_json FROM sharing_rules ORDER BY position")
    return [SharingRule(day=row["day"], location_ids=tuple(json.loads(row["location_ids_json"] or "[]"))) for row in rows]


def load_snapshot() -> Snapshot:
    return Snapshot(
        locations=tuple(list_locations()),
        staff=tuple(list_staff()),
        topics=tuple(list_topics()),
        verses=tuple(list_verses()),
        sharing_rules=tuple(list_sharing_rules()),
        leave_calendar=calendar_dao.load_leave_calendar(),
    )


def replace_snapshot(snapshot: Snapshot) -> Dict[str, int]:
    """Replace the stored catalog and return the number of records kept per table."""
    db.replace_table(
        "locations",
        ("id", "name", "excluded_from_schedule", "position"),
        ((loc.id, loc.name, 1 if loc.excluded_from_schedule else 0, pos) for pos, loc in enumerate(snapshot.locations)),
    )
    db.replace_table(
        "staff",
        ("id", "name", "location_id", "additional_location_ids_json", "category", "status", "position"),
        (
            (
                member.id,
                member.name,
                member.location_id,
                json.dumps(list(member.additional_location_ids), ensure_ascii=False),
                member.category.value,
                member.status.value,
                pos,
            )
            for pos, member in enumerate(snapshot.staff)
        ),
    )
    db.replace_table(
        "topics",
        ("id", "name", "position"),
        ((topic.id, topic.name, pos) for pos, topic in enumerate(snapshot.topics)),
    )
    db.replace_table(
        "verses",
        ("id", "topic_id", "text", "position"),
        ((verse.id, verse.topic_id, verse.text, pos) for pos, verse in enumerate(snapshot.verses)),
    )
    # First rule per weekday wins, matching the generator's lookup.
    seen: set[str] = set()
    rules = []
    for rule in snapshot.sharing_rules:
        if rule.day in seen:
            continue
        seen.add(rule.day)
        rules.append(rule)
    db.replace_table(
        "sharing_rules",
        ("day", "location_ids_json", "position"),
        ((rule.day, json.dumps(list(rule.location_ids)), pos) for pos, rule in enumerate(rules)),
    )
    calendar_dao.replace_leave_calendar(snapshot.leave_calendar)
    return {
        "locations": len(snapshot.locations),
        "staff": len(snapshot.staff),
        "topics": len(snapshot.topics),
        "verses": len(snapshot.verses),
        "sharing_rules": len(rules),
    }
