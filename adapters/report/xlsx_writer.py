"""Excel schedule export."""
from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import BinaryIO, Sequence

try:  # pragma: no cover - exercised in integration
    from openpyxl import Workbook
    from openpyxl.styles import Alignment, Font
    from openpyxl.utils import get_column_letter
except ImportError as exc:  # pragma: no cover - depends on environment
    Workbook = None
    Alignment = Font = get_column_letter = None
    _IMPORT_ERROR = exc
else:  # pragma: no cover - imported when dependency present
    _IMPORT_ERROR = None

from config import CONFIG
from domain.models import ScheduleRow

from adapters.report import layout


class XLSXExportUnavailable(RuntimeError):
    """Raised when Excel export cannot run due to missing dependencies."""


HEADER_FONT = Font(bold=True) if Font else None
TOP = Alignment(vertical="top", wrap_text=True) if Alignment else None


def build_workbook(rows: Sequence[ScheduleRow], *, config: dict | None = None):
    if Workbook is None:
        raise XLSXExportUnavailable(
            "openpyxl is required for Excel export. Install 'openpyxl' to enable XLSX reports."
        ) from _IMPORT_ERROR

    config = config or CONFIG
    export_cfg = config["export"]
    wb = Workbook()
    ws = wb.active
    ws.title = export_cfg.get("sheet_title", "Schedule")

    ws.append(layout.headers(config))
    for cell in ws[1]:
        cell.font = HEADER_FONT

    for values in layout.table(rows):
        ws.append(values)
        for cell in ws[ws.max_row]:
            cell.alignment = TOP

    for idx, width in enumerate(export_cfg.get("column_widths", []), start=1):
        ws.column_dimensions[get_column_letter(idx)].width = width
    return wb


def write_rows(path: str | Path, rows: Sequence[ScheduleRow], *, config: dict | None = None) -> Path:
    wb = build_workbook(rows, config=config)
    path = Path(path)
    wb.save(path)
    return path


def to_stream(rows: Sequence[ScheduleRow], *, config: dict | None = None) -> BinaryIO:
    wb = build_workbook(rows, config=config)
    stream = BytesIO()
    wb.save(stream)
    stream.seek(0)
    return stream
