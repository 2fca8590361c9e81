from __future__ import annotations

from flask import Flask, jsonify

from ..common.formatting import format_timestamp
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/health", methods=["GET"], endpoint="api_health")
    def api_health():
        status = container.health_service.check()
        body = {
            "success": status.is_connected,
            "status": status.state.value,
            "checked_at": format_timestamp(status.checked_at),
        }
        if status.message:
            body["message"] = status.message
        return jsonify(body), 200 if status.is_connected else 503
