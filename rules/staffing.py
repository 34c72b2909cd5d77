"""Staff selection for the three per-location sharing roles."""
from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from domain.models import Staff, StaffCategory

from rules import rotor

Priority = Tuple[StaffCategory, ...]

SHARING2_PRIORITY: Priority = (StaffCategory.PERMANENT, StaffCategory.ACCOUNTANT, StaffCategory.MIS)
# Picked when the zero-based week index is even.
SHARING3_EVEN_WEEK: Priority = (StaffCategory.ACCOUNTANT, StaffCategory.MIS, StaffCategory.PERMANENT)
SHARING3_ODD_WEEK: Priority = (StaffCategory.MIS, StaffCategory.ACCOUNTANT, StaffCategory.PERMANENT)


class StaffDirectory:
    """Working staff indexed by the locations they serve."""

    def __init__(self, staff: Iterable[Staff], location_ids: Iterable[str]) -> None:
        working = [member for member in staff if member.is_working]
        self._pools: Dict[str, List[Staff]] = {
            loc_id: [member for member in working if member.serves(loc_id)] for loc_id in location_ids
        }
        self._associates: Dict[str, List[Staff]] = {
            loc_id: sorted(
                (member for member in pool if member.category is StaffCategory.ASSOCIATE),
                key=lambda member: member.id,
            )
            for loc_id, pool in self._pools.items()
        }

    def pool(self, location_id: str) -> List[Staff]:
        return list(self._pools.get(location_id, ()))

    def associates(self, location_id: str) -> List[Staff]:
        return list(self._associates.get(location_id, ()))

    def first_by_priority(self, location_id: str, priority: Sequence[StaffCategory]) -> Optional[Staff]:
        pool = self._pools.get(location_id, ())
        for category in priority:
            for member in pool:
                if member.category is category:
                    return member
        return None


def sharing3_priority(day: date) -> Priority:
    if rotor.week_index(day) % 2 == 0:
        return SHARING3_EVEN_WEEK
    return SHARING3_ODD_WEEK


def sharing2(directory: StaffDirectory, location_id: str, placeholder: str) -> str:
    member = directory.first_by_priority(location_id, SHARING2_PRIORITY)
    return member.name if member else placeholder


def sharing3(directory: StaffDirectory, location_id: str, day: date, placeholder: str) -> str:
    member = directory.first_by_priority(location_id, sharing3_priority(day))
    return member.name if member else placeholder


def sharing4(directory: StaffDirectory, location_id: str, cursor: int, placeholder: str) -> str:
    associates = directory.associates(location_id)
    if not associates:
        return placeholder
    return rotor.pick(associates, cursor).name
