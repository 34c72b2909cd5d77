"""Domain dataclasses for roster scheduling."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Tuple

from .leave_calendar import LeaveCalendar


class StaffCategory(str, Enum):
    PERMANENT = "Block Integrator / Federation Coordinator"
    CONTRACTUAL = "Contractual"
    REGIONAL = "Regional"
    MIS = "MIS"
    PSDB = "PSDB"
    ASSOCIATE = "Associate"
    ACCOUNTANT = "Accountant"


class StaffStatus(str, Enum):
    WORKING = "Working"
    NOT_WORKING = "Not Working"
    LONG_LEAVE = "Long Leave"


@dataclass(frozen=True)
class Location:
    id: str
    name: str
    excluded_from_schedule: bool = False


@dataclass(frozen=True)
class Staff:
    id: str
    name: str
    location_id: str
    category: StaffCategory
    status: StaffStatus = StaffStatus.WORKING
    additional_location_ids: Tuple[str, ...] = ()

    @property
    def is_working(self) -> bool:
        return self.status is StaffStatus.WORKING

    def serves(self, location_id: str) -> bool:
        return self.location_id == location_id or location_id in self.additional_location_ids


@dataclass(frozen=True)
class Topic:
    id: str
    name: str


@dataclass(frozen=True)
class Verse:
    id: str
    topic_id: str
    text: str


@dataclass(frozen=True)
class SharingRule:
    day: str
    location_ids: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ScheduleRow:
    date: date
    weekday: str
    topic: str
    verse: str
    sharing1_location: str
    sub_row_location: str
    sharing2_staff: str
    sharing3_staff: str
    sharing4_staff: str
    is_first_sub_row: bool
    sub_row_span: int

    def as_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "weekday": self.weekday,
            "topic": self.topic,
            "verse": self.verse,
            "sharing1_location": self.sharing1_location,
            "sub_row_location": self.sub_row_location,
            "sharing2_staff": self.sharing2_staff,
            "sharing3_staff": self.sharing3_staff,
            "sharing4_staff": self.sharing4_staff,
            "is_first_sub_row": self.is_first_sub_row,
            "sub_row_span": self.sub_row_span,
        }


@dataclass(frozen=True)
class Snapshot:
    """Everything the generator reads, frozen so it can serve as a cache key."""

    locations: Tuple[Location, ...] = ()
    staff: Tuple[Staff, ...] = ()
    topics: Tuple[Topic, ...] = ()
    verses: Tuple[Verse, ...] = ()
    sharing_rules: Tuple[SharingRule, ...] = ()
    leave_calendar: LeaveCalendar = field(default_factory=LeaveCalendar)
