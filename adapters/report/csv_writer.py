"""CSV schedule export."""
from __future__ import annotations

import csv
from io import StringIO
from pathlib import Path
from typing import Sequence, TextIO

from config import CONFIG
from domain.models import ScheduleRow

from adapters.report import layout


def _write(handle: TextIO, rows: Sequence[ScheduleRow], config: dict) -> None:
    writer = csv.writer(handle)
    writer.writerow(layout.headers(config))
    writer.writerows(layout.table(rows))


def write_rows(path: str | Path, rows: Sequence[ScheduleRow], *, config: dict | None = None) -> Path:
    path = Path(path)
    with path.open("w", newline="", encoding="utf-8") as handle:
        _write(handle, rows, config or CONFIG)
    return path


def to_buffer(rows: Sequence[ScheduleRow], *, config: dict | None = None) -> StringIO:
    buffer = StringIO()
    _write(buffer, rows, config or CONFIG)
    buffer.seek(0)
    return buffer
