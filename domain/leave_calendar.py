"""Leave days grouped by month."""
from __future__ import annotations

from datetime import date
from typing import Dict, FrozenSet, Iterable, Iterator, Mapping, Tuple

MonthKey = Tuple[int, int]


def parse_month_key(value: str, *, zero_based: bool = False) -> MonthKey:
    """Parse ``"YYYY-MM"`` into a ``(year, month)`` tuple.

    With ``zero_based`` the month part counts from 0, as in browser exports
    (``"2025-0"`` is January).
    """
    try:
        year_str, month_str = str(value).split("-", 1)
        year, month = int(year_str), int(month_str)
    except ValueError as exc:
        raise ValueError(f"Invalid month key: {value!r}") from exc
    if zero_based:
        month += 1
    if not 1 <= month <= 12:
        raise ValueError(f"Month out of range in key: {value!r}")
    return year, month


def format_month_key(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"


class LeaveCalendar:
    """Immutable set of non-working day numbers per (year, month).

    Days that are not listed are working days. Instances are hashable so they
    can take part in cache keys.
    """

    def __init__(self, days: Mapping[MonthKey, Iterable[int]] | None = None) -> None:
        self._days: Dict[MonthKey, FrozenSet[int]] = {}
        for key, values in (days or {}).items():
            numbers = frozenset(int(v) for v in values if 1 <= int(v) <= 31)
            if numbers:
                self._days[(int(key[0]), int(key[1]))] = numbers

    @classmethod
    def from_mapping(
        cls, payload: Mapping[str, Iterable[int]] | None, *, zero_based: bool = False
    ) -> "LeaveCalendar":
        return cls({parse_month_key(key, zero_based=zero_based): values for key, values in (payload or {}).items()})

    def as_mapping(self) -> Dict[str, list[int]]:
        return {format_month_key(*key): sorted(values) for key, values in sorted(self._days.items())}

    def days_for(self, year: int, month: int) -> FrozenSet[int]:
        return self._days.get((year, month), frozenset())

    def is_leave(self, day: date) -> bool:
        return day.day in self.days_for(day.year, day.month)

    def toggle(self, year: int, month: int, day_number: int) -> "LeaveCalendar":
        """Return a copy with ``day_number`` flipped; Sundays are never leave days."""
        if date(year, month, day_number).weekday() == 6:
            return self
        current = set(self.days_for(year, month))
        current.symmetric_difference_update({day_number})
        updated = dict(self._days)
        updated[(year, month)] = frozenset(current)
        return LeaveCalendar(updated)

    def _key(self) -> Tuple[Tuple[MonthKey, Tuple[int, ...]], ...]:
        return tuple((key, tuple(sorted(values))) for key, values in sorted(self._days.items()))

    def __iter__(self) -> Iterator[MonthKey]:
        return iter(sorted(self._days))

    def __len__(self) -> int:
        return len(self._days)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LeaveCalendar):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"LeaveCalendar({self.as_mapping()!r})"
