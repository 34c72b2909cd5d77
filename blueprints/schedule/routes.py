from __future__ import annotations

from datetime import date
from urllib.parse import quote

from flask import Blueprint, Response, jsonify, request

from services import schedule_service

bp = Blueprint("schedule", __name__)


def _resolve_month() -> str:
    payload = request.get_json(silent=True) or {}
    month = request.args.get("month") or payload.get("month")
    if month:
        return str(month)
    today = date.today()
    return f"{today.year:04d}-{today.month:02d}"


def _attachment(filename: str) -> str:
    return f"attachment; filename*=UTF-8''{quote(filename)}"


@bp.route("/api/schedule")
def get_schedule():
    return jsonify(schedule_service.generate_payload(_resolve_month()))


@bp.route("/api/schedule/generate", methods=["POST"])
def generate_endpoint():
    result = schedule_service.generate_payload(_resolve_month())
    return jsonify({"ok": True, **result})


@bp.route("/api/export/xlsx")
def export_xlsx():
    stream, filename = schedule_service.export_xlsx(_resolve_month())
    return Response(
        stream.getvalue(),
        mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": _attachment(filename)},
    )


@bp.route("/api/export/csv")
def export_csv():
    buffer, filename = schedule_service.export_csv(_resolve_month())
    return Response(
        buffer.getvalue(),
        mimetype="text/csv",
        headers={"Content-Disposition": _attachment(filename)},
    )
