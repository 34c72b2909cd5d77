"""Month schedule generation with year-to-date rotation replay."""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from config import CONFIG
from domain.leave_calendar import LeaveCalendar, format_month_key
from domain.models import Location, ScheduleRow, SharingRule, Snapshot, Staff, Topic, Verse

from rules import rotor, staffing

logger = logging.getLogger(__name__)

ENGLISH_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def _rule_locations(
    rules: Sequence[SharingRule], day_name: str, active: Dict[str, Location]
) -> List[Location]:
    for rule in rules:
        if rule.day == day_name:
            return [active[loc_id] for loc_id in rule.location_ids if loc_id in active]
    return []


def generate(
    locations: Iterable[Location],
    staff: Iterable[Staff],
    topics: Sequence[Topic],
    verses: Sequence[Verse],
    sharing_rules: Sequence[SharingRule],
    leave_calendar: Optional[LeaveCalendar],
    year: int,
    month: int,
    *,
    weekday_names: Optional[Sequence[str]] = None,
    placeholders: Optional[Dict[str, str]] = None,
) -> List[ScheduleRow]:
    """Build the rows for ``month`` of ``year`` (1-based month).

    Rotation cursors are replayed from January 1 so that every month of a year
    sees the same continuous topic, verse and location sequence no matter which
    month is requested. Only rows of the requested month are returned.
    """
    locations = list(locations)
    staff = list(staff)
    if not locations or not staff or not topics or not verses:
        return []

    active = [loc for loc in locations if not loc.excluded_from_schedule]
    if not active:
        return []

    names = list(weekday_names or CONFIG["weekday_names"])
    marks = {**CONFIG["placeholders"], **(placeholders or {})}
    no_staff, no_rule = marks["no_staff"], marks["no_rule"]
    leave_calendar = leave_calendar or LeaveCalendar()

    active_by_id = {loc.id: loc for loc in active}
    primary_order = sorted(active, key=lambda loc: loc.id)
    directory = staffing.StaffDirectory(staff, active_by_id)
    state = rotor.RotationState()
    rows: List[ScheduleRow] = []

    for day in rotor.iter_year_to_date(year, month):
        if not rotor.is_admissible(day, leave_calendar):
            continue

        topic = rotor.pick(topics, state.topic)
        verse = rotor.pick(verses, state.verse)
        primary = rotor.pick(primary_order, state.primary_location)
        state.advance_day()

        emit = day.month == month
        weekday = names[day.weekday()]
        day_locations = _rule_locations(sharing_rules, ENGLISH_DAYS[day.weekday()], active_by_id)

        if not day_locations:
            if emit:
                rows.append(
                    ScheduleRow(
                        date=day,
                        weekday=weekday,
                        topic=topic.name,
                        verse=verse.text,
                        sharing1_location=primary.name,
                        sub_row_location=no_rule,
                        sharing2_staff=no_rule,
                        sharing3_staff=no_rule,
                        sharing4_staff=no_rule,
                        is_first_sub_row=True,
                        sub_row_span=1,
                    )
                )
            continue

        span = len(day_locations)
        for idx, location in enumerate(day_locations):
            s2 = staffing.sharing2(directory, location.id, no_staff)
            s3 = staffing.sharing3(directory, location.id, day, no_staff)
            s4 = staffing.sharing4(directory, location.id, state.assistant_cursor(location.id), no_staff)
            state.advance_assistant(location.id)
            if emit:
                rows.append(
                    ScheduleRow(
                        date=day,
                        weekday=weekday,
                        topic=topic.name,
                        verse=verse.text,
                        sharing1_location=primary.name,
                        sub_row_location=location.name,
                        sharing2_staff=s2,
                        sharing3_staff=s3,
                        sharing4_staff=s4,
                        is_first_sub_row=idx == 0,
                        sub_row_span=span,
                    )
                )
    return rows


def generate_from_snapshot(snapshot: Snapshot, year: int, month: int, **kwargs) -> List[ScheduleRow]:
    return generate(
        snapshot.locations,
        snapshot.staff,
        snapshot.topics,
        snapshot.verses,
        snapshot.sharing_rules,
        snapshot.leave_calendar,
        year,
        month,
        **kwargs,
    )


class SchedulerService:
    """Memoizing facade over :func:`generate` keyed on the snapshot and period."""

    def __init__(self, config: Optional[Dict] = None):
        self.config = config or CONFIG
        self._weekday_names: Tuple[str, ...] = tuple(self.config.get("weekday_names", CONFIG["weekday_names"]))
        self._placeholders: Dict[str, str] = {**CONFIG["placeholders"], **self.config.get("placeholders", {})}
        self._cached = lru_cache(maxsize=int(self.config.get("cache_size", 32)))(self._generate)

    def _generate(self, snapshot: Snapshot, year: int, month: int) -> Tuple[ScheduleRow, ...]:
        logger.debug("Cache miss for %s", format_month_key(year, month))
        return tuple(
            generate_from_snapshot(
                snapshot,
                year,
                month,
                weekday_names=self._weekday_names,
                placeholders=self._placeholders,
            )
        )

    # ------------------------------------------------------------------
    def generate_month(self, snapshot: Snapshot, year: int, month: int) -> List[ScheduleRow]:
        if not 1 <= month <= 12:
            raise ValueError(f"Month must be within 1..12, got {month}")
        rows = self._cached(snapshot, year, month)
        logger.info("Generated %d rows for %s", len(rows), format_month_key(year, month))
        return list(rows)

    def cache_info(self):
        return self._cached.cache_info()

    def clear_cache(self) -> None:
        self._cached.cache_clear()


__all__ = ["generate", "generate_from_snapshot", "SchedulerService", "ENGLISH_DAYS"]
