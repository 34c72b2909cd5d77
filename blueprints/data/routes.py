from __future__ import annotations

from flask import Blueprint, jsonify, request

from adapters.snapshot import dump_snapshot, load_snapshot
from dao import catalog_dao

bp = Blueprint("data", __name__)


@bp.route("/api/data", methods=["GET"])
def get_all_data():
    return jsonify(dump_snapshot(catalog_dao.load_snapshot()))


@bp.route("/api/data", methods=["POST"])
def import_data():
    snapshot = load_snapshot(request.get_json(force=True))
    stored = catalog_dao.replace_snapshot(snapshot)
    return jsonify({"ok": True, **stored})
