from __future__ import annotations

import logging
import os
from pathlib import Path

from flask import Flask, jsonify

from adapters.config_loader import load_config
from adapters.snapshot import SnapshotError
from services import db as db_service
from services.scheduler import SchedulerService

logger = logging.getLogger(__name__)

BLUEPRINTS = [
    ("blueprints.schedule.routes", "bp"),
    ("blueprints.calendar.routes", "bp"),
    ("blueprints.data.routes", "bp"),
]


def create_app(test_config: dict | None = None) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_mapping(
        DATABASE=os.path.join(app.instance_path, "roster.sqlite"),
        ROSTER_CONFIG=os.environ.get("ROSTER_CONFIG"),
        AUTO_INIT_DB=True,
    )

    if test_config:
        app.config.update(test_config)

    Path(app.instance_path).mkdir(parents=True, exist_ok=True)

    app.extensions["roster.scheduler"] = SchedulerService(load_config(app.config.get("ROSTER_CONFIG")))

    for import_path, attr in BLUEPRINTS:
        module = __import__(import_path, fromlist=[attr])
        blueprint = getattr(module, attr)
        app.register_blueprint(blueprint)

    @app.route("/healthz")
    def healthcheck() -> tuple[str, int]:
        return "OK", 200

    @app.errorhandler(SnapshotError)
    @app.errorhandler(ValueError)
    def bad_request(exc: Exception):
        logger.warning("Rejected request: %s", exc)
        return jsonify({"ok": False, "error": str(exc)}), 400

    app.teardown_appcontext(db_service.close_db)

    @app.cli.command("init-db")
    def init_db_command() -> None:
        """Initialize the SQLite schema."""
        db_service.initialize_schema()
        print("Database initialized.")

    if app.config.get("AUTO_INIT_DB", True):
        with app.app_context():
            db_service.initialize_schema()

    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app = create_app()
    app.run(debug=True)
