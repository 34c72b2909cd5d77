from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Any, Iterable, Sequence

from flask import current_app, g

SCHEMA_PATH = Path(__file__).resolve().parent.parent / "migrations" / "schema.sql"


class DatabaseError(RuntimeError):
    """Raised when the SQLite layer encounters an unexpected error."""


def get_db() -> sqlite3.Connection:
    if "db" not in g:
        db_path = current_app.config["DATABASE"]
        conn = sqlite3.connect(db_path)
        conn.row_factory = sqlite3.Row
        g.db = conn
    return g.db  # type: ignore[return-value]


def close_db(_: Any) -> None:
    conn = g.pop("db", None)
    if conn is not None:
        conn.close()


def executescript(script: str) -> None:
    db = get_db()
    try:
        db.executescript(script)
    except sqlite3.Error as exc:
        raise DatabaseError(str(exc)) from exc


def initialize_schema() -> None:
    script = SCHEMA_PATH.read_text(encoding="utf-8")
    executescript(script)


def query_all(sql: str, params: Sequence[Any] | None = None) -> list[sqlite3.Row]:
    db = get_db()
    cur = db.execute(sql, params or [])
    try:
        return cur.fetchall()
    finally:
        cur.close()


def execute(sql: str, params: Sequence[Any] | None = None) -> int:
    db = get_db()
    cur = db.execute(sql, params or [])
    db.commit()
    return cur.rowcount


def replace_table(table: str, columns: Sequence[str], rows: Iterable[Sequence[Any]]) -> None:
    """Delete every row of ``table`` and insert ``rows`` in one transaction."""
    db = get_db()
    placeholders = ", ".join("?" for _ in columns)
    try:
        with db:
            db.execute(f"DELETE FROM {table}")
            db.executemany(f"INSERT INTO {table}({', '.join(columns)}) VALUES ({placeholders})", list(rows))
    except sqlite3.Error as exc:
        raise DatabaseError(str(exc)) from exc
