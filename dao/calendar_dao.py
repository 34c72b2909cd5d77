from __future__ import annotations

from collections import defaultdict
from typing import Dict, List

from domain.leave_calendar import LeaveCalendar, format_month_key, parse_month_key

from services import db


def load_leave_calendar() -> LeaveCalendar:
    rows = db.query_all("SELECT ym, day FROM leave_days ORDER BY ym, day")
    grouped: Dict[tuple[int, int], List[int]] = defaultdict(list)
    for row in rows:
        grouped[parse_month_key(row["ym"])].append(int(row["day"]))
    return LeaveCalendar(grouped)


def list_leave_days(year: int, month: int) -> List[int]:
    rows = db.query_all("SELECT day FROM leave_days WHERE ym = ? ORDER BY day", (format_month_key(year, month),))
    return [int(row["day"]) for row in rows]


def replace_leave_calendar(leave_calendar: LeaveCalendar) -> None:
    db.replace_table(
        "leave_days",
        ("ym", "day"),
        (
            (ym, day)
            for ym, days in leave_calendar.as_mapping().items()
            for day in days
        ),
    )


def toggle_leave_day(year: int, month: int, day: int) -> List[int]:
    """Flip one day in the stored calendar and return the month's leave days."""
    current = load_leave_calendar()
    updated = current.toggle(year, month, day)
    if updated is not current:
        ym = format_month_key(year, month)
        if day in updated.days_for(year, month):
            db.execute("INSERT OR IGNORE INTO leave_days(ym, day) VALUES (?, ?)", (ym, day))
        else:
            db.execute("DELETE FROM leave_days WHERE ym = ? AND day = ?", (ym, day))
    return sorted(updated.days_for(year, month))
