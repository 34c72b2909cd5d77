"""Rotation utilities for the year-to-date calendar walk."""
from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, Iterator, Sequence, TypeVar

from domain.leave_calendar import LeaveCalendar

T = TypeVar("T")

SUNDAY = 6


def last_day_of_month(year: int, month: int) -> date:
    _, days = calendar.monthrange(year, month)
    return date(year, month, days)


def iter_year_to_date(year: int, month: int) -> Iterator[date]:
    """Yield every day from January 1 of ``year`` through the end of ``month``."""
    day = date(year, 1, 1)
    end = last_day_of_month(year, month)
    while day <= end:
        yield day
        day += timedelta(days=1)


def is_admissible(day: date, leave_calendar: LeaveCalendar) -> bool:
    return day.weekday() != SUNDAY and not leave_calendar.is_leave(day)


def week_index(day: date) -> int:
    return (day.day - 1) // 7


def pick(items: Sequence[T], cursor: int) -> T:
    return items[cursor % len(items)]


@dataclass
class RotationState:
    """Cursors threaded through a single generation call."""

    topic: int = 0
    verse: int = 0
    primary_location: int = 0
    assistants: Dict[str, int] = field(default_factory=dict)

    def advance_day(self) -> None:
        self.topic += 1
        self.verse += 1
        self.primary_location += 1

    def assistant_cursor(self, location_id: str) -> int:
        return self.assistants.get(location_id, 0)

    def advance_assistant(self, location_id: str) -> None:
        self.assistants[location_id] = self.assistant_cursor(location_id) + 1
