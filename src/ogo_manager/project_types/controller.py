from __future__ import annotations

from flask import Flask, jsonify

from ..common.serializers import project_type_json
from ..common.web import handle_errors, json_body, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/settings/project-types", methods=["GET"], endpoint="api_project_types")
    @login_required
    @handle_errors("load project types")
    def api_project_types():
        types = container.project_type_service.list_types()
        return jsonify({"success": True, "project_types": [project_type_json(t) for t in types]})

    @app.route("/api/settings/project-types", methods=["POST"], endpoint="api_add_project_type")
    @login_required
    @handle_errors("add project type")
    def api_add_project_type():
        type_id = container.project_type_service.add_type(str(json_body().get("name") or ""))
        return jsonify({"success": True, "message": "Project type added", "id": type_id}), 201

    @app.route("/api/settings/project-types/<int:type_id>", methods=["PUT"], endpoint="api_rename_project_type")
    @login_required
    @handle_errors("update project type")
    def api_rename_project_type(type_id: int):
        container.project_type_service.rename_type(type_id, str(json_body().get("name") or ""))
        return jsonify({"success": True, "message": "Project type updated"})

    @app.route("/api/settings/project-types/<int:type_id>", methods=["DELETE"], endpoint="api_delete_project_type")
    @login_required
    @handle_errors("delete project type")
    def api_delete_project_type(type_id: int):
        container.project_type_service.delete_type(type_id)
        return jsonify({"success": True, "message": "Project type deleted"})
