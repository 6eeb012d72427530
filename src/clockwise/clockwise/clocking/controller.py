from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_utc
from ..common.http import api_errors
from ..core.constants import DEFAULT_RECENT_LOGS_LIMIT
from ..core.exceptions import ValidationError
from ..container import Container
from .export import export_filename


def register(app: Flask, container: Container) -> None:
    @app.route("/api/logs", methods=["POST"], endpoint="add_log")
    @api_errors
    def add_log():
        data = request.get_json(silent=True)
        if data is None:
            raise ValidationError("Invalid form data")
        log = container.clocking_service.submit(data)
        return jsonify({"success": True, "log": log.to_dict()}), 201

    @app.route("/api/logs", methods=["GET"], endpoint="list_logs")
    @api_errors
    def list_logs():
        limit_s = request.args.get("limit")
        if limit_s is None:
            rows = [log.to_dict() for log in container.clocking_service.all_logs()]
        else:
            try:
                limit = int(limit_s)
            except ValueError:
                raise ValidationError("limit must be an integer")
            rows = container.clocking_service.get_history_ui(limit=limit)
        return jsonify({"success": True, "logs": rows})

    @app.route("/api/logs/export.csv", methods=["GET"], endpoint="export_logs_csv")
    @api_errors
    def export_logs_csv():
        csv_bytes = container.clocking_service.export_csv().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={export_filename(now_utc())}"},
        )

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @api_errors
    def dashboard():
        stats = container.clocking_service.stats()
        recent = container.clocking_service.get_history_ui(limit=DEFAULT_RECENT_LOGS_LIMIT)
        return jsonify({"success": True, "stats": stats.to_dict(), "recentLogs": recent})

    @app.route("/api/dashboard/stats", methods=["GET"], endpoint="dashboard_stats")
    @api_errors
    def dashboard_stats():
        return jsonify({"success": True, "stats": container.clocking_service.stats().to_dict()})
