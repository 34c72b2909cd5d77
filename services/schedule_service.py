from __future__ import annotations

from io import BytesIO, StringIO
from typing import Any, Dict, List, Tuple

from flask import current_app

from domain.leave_calendar import format_month_key, parse_month_key
from domain.models import ScheduleRow

from adapters.report import csv_writer, layout, xlsx_writer
from dao import catalog_dao
from services.scheduler import SchedulerService


def get_scheduler() -> SchedulerService:
    return current_app.extensions["roster.scheduler"]


def get_rows(month_ym: str) -> List[ScheduleRow]:
    year, month = parse_month_key(month_ym)
    snapshot = catalog_dao.load_snapshot()
    return get_scheduler().generate_month(snapshot, year, month)


def generate_payload(month_ym: str) -> Dict[str, Any]:
    rows = get_rows(month_ym)
    year, month = parse_month_key(month_ym)
    return {
        "month": format_month_key(year, month),
        "count": len(rows),
        "dates": len({row.date for row in rows}),
        "rows": [row.as_dict() for row in rows],
    }


def export_xlsx(month_ym: str) -> Tuple[BytesIO, str]:
    rows = get_rows(month_ym)
    year, month = parse_month_key(month_ym)
    config = get_scheduler().config
    stream = xlsx_writer.to_stream(rows, config=config)
    return stream, layout.export_filename(config["export"]["file_prefix"], year, month, "xlsx")


def export_csv(month_ym: str) -> Tuple[StringIO, str]:
    rows = get_rows(month_ym)
    year, month = parse_month_key(month_ym)
    config = get_scheduler().config
    buffer = csv_writer.to_buffer(rows, config=config)
    return buffer, layout.export_filename(config["export"]["file_prefix"], year, month, "csv")
