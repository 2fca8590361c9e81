from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..common.serializers import dashboard_json, overview_json
from ..common.web import handle_errors, json_body, login_required, period_from
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def download(export):
        return app.response_class(
            export.content,
            mimetype=export.mimetype,
            headers={"Content-Disposition": f"attachment; filename={export.filename}"},
        )

    @app.route("/api/dashboard", methods=["GET"], endpoint="api_dashboard")
    @login_required
    @handle_errors("load dashboard")
    def api_dashboard():
        summary = container.analytics_service.build_dashboard(now_local().date())
        types = container.project_type_service.list_types()
        return jsonify({"success": True, "dashboard": dashboard_json(summary, types=types)})

    @app.route("/api/analytics", methods=["GET"], endpoint="api_analytics")
    @login_required
    @handle_errors("load analytics")
    def api_analytics():
        today = now_local().date()
        overview = container.analytics_service.build_overview(period_from(request.args, today=today), today=today)
        types = container.project_type_service.list_types()
        return jsonify({"success": True, "analytics": overview_json(overview, types=types)})

    @app.route("/api/analytics/export.csv", methods=["POST"], endpoint="api_export_csv")
    @login_required
    @handle_errors("export projects")
    def api_export_csv():
        data = json_body()
        period = period_from(data, today=now_local().date())
        return download(
            container.export_service.export_projects(password=str(data.get("password") or ""), period=period, fmt="csv")
        )

    @app.route("/api/analytics/export.xlsx", methods=["POST"], endpoint="api_export_xlsx")
    @login_required
    @handle_errors("export projects")
    def api_export_xlsx():
        data = json_body()
        period = period_from(data, today=now_local().date())
        return download(
            container.export_service.export_projects(password=str(data.get("password") or ""), period=period, fmt="xlsx")
        )

    @app.route("/api/analytics/report.pdf", methods=["POST"], endpoint="api_analytics_report")
    @login_required
    @handle_errors("generate the analytics report")
    def api_analytics_report():
        data = json_body()
        today = now_local().date()
        period = period_from(data, today=today)
        return download(
            container.export_service.analytics_report(password=str(data.get("password") or ""), period=period, today=today)
        )
