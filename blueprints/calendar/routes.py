from __future__ import annotations

from flask import Blueprint, jsonify, request

from domain.leave_calendar import format_month_key, parse_month_key

from dao import calendar_dao

bp = Blueprint("calendar", __name__)


@bp.route("/api/leave-days", methods=["GET"])
def list_leave_days():
    month = request.args.get("month")
    if not month:
        return jsonify({"leave_days": calendar_dao.load_leave_calendar().as_mapping()})
    year, month_num = parse_month_key(month)
    return jsonify({"month": format_month_key(year, month_num), "days": calendar_dao.list_leave_days(year, month_num)})


@bp.route("/api/leave-days/toggle", methods=["POST"])
def toggle_leave_day():
    payload = request.get_json(force=True) or {}
    if not isinstance(payload, dict) or payload.get("month") is None or payload.get("day") is None:
        raise ValueError("Both 'month' and 'day' are required")
    year, month = parse_month_key(payload["month"])
    days = calendar_dao.toggle_leave_day(year, month, int(payload["day"]))
    return jsonify({"month": format_month_key(year, month), "days": days})
