"""Generate a month's roster from a data snapshot file."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from domain.leave_calendar import parse_month_key
from domain.models import ScheduleRow

from adapters.config_loader import load_config
from adapters.report import csv_writer, layout, xlsx_writer
from adapters.snapshot import SnapshotError, load_snapshot_file
from services.scheduler import SchedulerService

logger = logging.getLogger("roster")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a monthly sharing roster")
    parser.add_argument("snapshot", type=Path, help="JSON/YAML data snapshot")
    parser.add_argument("--month", required=True, help="Target month as YYYY-MM")
    parser.add_argument("--config", type=Path, help="Optional config overrides (JSON/YAML)")
    parser.add_argument("--xlsx", type=Path, help="Write an Excel workbook to this path")
    parser.add_argument("--csv", type=Path, help="Write a CSV file to this path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def format_table(rows: Sequence[ScheduleRow], headers: Sequence[str]) -> str:
    table = [list(headers)] + layout.table(rows)
    widths = [max(len(str(line[col])) for line in table) for col in range(len(headers))]
    lines = [" | ".join(str(value).ljust(widths[col]) for col, value in enumerate(line)) for line in table]
    lines.insert(1, "-+-".join("-" * width for width in widths))
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.get("log_level", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        year, month = parse_month_key(args.month)
        snapshot = load_snapshot_file(args.snapshot)
    except (SnapshotError, ValueError, FileNotFoundError) as exc:
        logger.error("%s", exc)
        return 2

    rows = SchedulerService(config).generate_month(snapshot, year, month)
    if not rows:
        logger.warning("No rows generated for %s; check that the catalog is not empty", args.month)

    if args.xlsx:
        path = xlsx_writer.write_rows(args.xlsx, rows, config=config)
        logger.info("Excel export written to %s", path)
    if args.csv:
        path = csv_writer.write_rows(args.csv, rows, config=config)
        logger.info("CSV export written to %s", path)
    if not args.xlsx and not args.csv:
        print(format_table(rows, layout.headers(config)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
