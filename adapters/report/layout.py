"""Column layout shared by the tabular exporters."""
from __future__ import annotations

from datetime import date
from typing import Iterable, List, Sequence

from domain.models import ScheduleRow

# Columns blanked on non-first sub-rows so a date group reads as one merged block.
MERGED_COLUMNS = 5


def display_date(day: date) -> str:
    return day.strftime("%d-%m-%Y")


def export_filename(prefix: str, year: int, month: int, suffix: str) -> str:
    return f"{prefix}_{display_date(date(year, month, 1))}.{suffix}"


def row_values(row: ScheduleRow) -> List[str]:
    values = [
        display_date(row.date),
        row.weekday,
        row.topic,
        row.verse,
        row.sharing1_location,
        row.sub_row_location,
        row.sharing2_staff,
        row.sharing3_staff,
        row.sharing4_staff,
    ]
    if not row.is_first_sub_row:
        values[:MERGED_COLUMNS] = [""] * MERGED_COLUMNS
    return values


def table(rows: Iterable[ScheduleRow]) -> List[List[str]]:
    return [row_values(row) for row in rows]


def headers(config: dict) -> Sequence[str]:
    return list(config["export"]["headers"])
