from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.serializers import log_json
from ..common.validators import parse_optional_int
from ..common.web import fail, handle_errors, json_body, login_required
from ..container import Container
from ..core.constants import DEFAULT_LOG_LIMIT
from ..core.exceptions import AuthenticationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="api_login")
    @handle_errors("log in")
    def api_login():
        data = json_body()
        try:
            admin = container.auth_service.login(str(data.get("email") or ""), str(data.get("password") or ""))
        except AuthenticationError as e:
            return fail(str(e), 401)

        session.clear()
        session.permanent = True
        session["admin_id"] = admin.admin_id
        session["admin_email"] = admin.email
        return jsonify({"success": True, "admin": {"id": admin.admin_id, "email": admin.email}})

    @app.route("/api/logout", methods=["POST"], endpoint="api_logout")
    def api_logout():
        session.clear()
        return jsonify({"success": True, "message": "Logged out"})

    @app.route("/api/me", methods=["GET"], endpoint="api_me")
    @login_required
    def api_me():
        return jsonify({"success": True, "admin": {"id": session["admin_id"], "email": session.get("admin_email")}})

    @app.route("/api/settings/password", methods=["POST"], endpoint="api_change_password")
    @login_required
    @handle_errors("change password")
    def api_change_password():
        data = json_body()
        container.auth_service.change_password(
            admin_id=int(session["admin_id"]),
            current_password=str(data.get("current_password") or ""),
            new_password=str(data.get("new_password") or ""),
            confirm_password=str(data.get("confirm_password") or ""),
        )
        return jsonify({"success": True, "message": "Password updated"})

    @app.route("/api/logs", methods=["GET"], endpoint="api_logs")
    @login_required
    @handle_errors("load activity log")
    def api_logs():
        limit = parse_optional_int(request.args.get("limit"), "Limit") or DEFAULT_LOG_LIMIT
        entries = container.audit_service.list_recent(limit)
        return jsonify({"success": True, "logs": [log_json(e) for e in entries]})
