from __future__ import annotations

from typing import Any, List

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_optional_date
from ..common.serializers import project_json
from ..common.validators import parse_bool, parse_money, parse_optional_int
from ..common.web import ALL, handle_errors, json_body, login_required, parse_month
from ..container import Container
from ..core.enums import ProjectSort, ProjectStatus
from ..core.exceptions import ValidationError
from .model import ProjectQuery


def _type_ids(value: Any) -> List[int]:
    if value is None or value == "":
        return []
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, (list, tuple)):
        raise ValidationError("Project types must be a list")
    ids = [parse_optional_int(v, "Project type") for v in value]
    return [i for i in ids if i is not None]


def _project_fields(data: dict) -> dict:
    fields: dict = {}
    for key in ("project_code", "client_name", "client_uni_org", "status"):
        if key in data:
            fields[key] = str(data.get(key) or "")
    if "type_ids" in data:
        fields["type_ids"] = _type_ids(data.get("type_ids"))
    if "deadline_date" in data:
        fields["deadline_date"] = parse_optional_date(data.get("deadline_date"), "Deadline date")
    for key, label in (("price", "Price"), ("advance", "Advance"), ("payment_of_emp", "Employee payment")):
        if key in data:
            fields[key] = parse_money(data.get(key), label)
    if "assigned_to" in data:
        fields["assigned_to"] = parse_optional_int(data.get("assigned_to"), "Assigned employee")
    if "fast_deliver" in data:
        fields["fast_deliver"] = parse_bool(data.get("fast_deliver"))
    return fields


def _query_from_args(args) -> ProjectQuery:
    status_raw = (args.get("status") or "").strip()
    if status_raw and status_raw.lower() != ALL:
        try:
            status = ProjectStatus(status_raw)
        except ValueError:
            raise ValidationError("Status is not valid")
    else:
        status = None

    month_raw = (args.get("month") or "").strip()
    year_raw = (args.get("year") or "").strip()
    month = None if month_raw.lower() in ("", ALL) else parse_month(month_raw)
    year = None if year_raw.lower() in ("", ALL) else parse_optional_int(year_raw, "Year")

    try:
        sort = ProjectSort(args.get("sort") or ProjectSort.DEADLINE_ASC.value)
    except ValueError:
        raise ValidationError("Sort order is not valid")

    return ProjectQuery(status=status, month=month, year=year, text=args.get("q") or "", sort=sort)


def register(app: Flask, container: Container) -> None:
    def render(projects):
        types = container.project_type_service.list_types()
        names = {e.employee_id: e.full_name for e in container.employee_service.list_employees()}
        return [project_json(p, types=types, employee_names=names) for p in projects]

    @app.route("/api/projects", methods=["GET"], endpoint="api_projects")
    @login_required
    @handle_errors("load projects")
    def api_projects():
        projects = container.project_service.list_projects(_query_from_args(request.args))
        return jsonify({"success": True, "projects": render(projects)})

    @app.route("/api/projects/next-code", methods=["GET"], endpoint="api_next_project_code")
    @login_required
    @handle_errors("suggest a project ID")
    def api_next_project_code():
        return jsonify({"success": True, "project_code": container.project_service.next_project_code()})

    @app.route("/api/projects", methods=["POST"], endpoint="api_create_project")
    @login_required
    @handle_errors("add project")
    def api_create_project():
        fields = _project_fields(json_body())
        fields.setdefault("project_code", "")
        fields.setdefault("client_name", "")
        if not fields.get("status"):
            fields["status"] = ProjectStatus.PENDING
        project_id = container.project_service.create_project(**fields)
        project = container.project_service.get_project(project_id)
        return jsonify({"success": True, "message": "Project added", "project": render([project])[0]}), 201

    @app.route("/api/projects/<int:project_id>", methods=["GET"], endpoint="api_project")
    @login_required
    @handle_errors("load project")
    def api_project(project_id: int):
        project = container.project_service.get_project(project_id)
        return jsonify({"success": True, "project": render([project])[0]})

    @app.route("/api/projects/<int:project_id>", methods=["PUT"], endpoint="api_update_project")
    @login_required
    @handle_errors("update project")
    def api_update_project(project_id: int):
        project = container.project_service.update_project(project_id, **_project_fields(json_body()))
        return jsonify({"success": True, "message": "Project updated", "project": render([project])[0]})

    @app.route("/api/projects/<int:project_id>", methods=["DELETE"], endpoint="api_delete_project")
    @login_required
    @handle_errors("delete project")
    def api_delete_project(project_id: int):
        container.project_service.delete_project(project_id)
        return jsonify({"success": True, "message": "Project deleted"})

    @app.route("/api/projects/<int:project_id>/receipt.pdf", methods=["GET"], endpoint="api_project_receipt")
    @login_required
    @handle_errors("build the project receipt")
    def api_project_receipt(project_id: int):
        export = container.export_service.project_receipt(project_id)
        return app.response_class(
            export.content,
            mimetype=export.mimetype,
            headers={"Content-Disposition": f"attachment; filename={export.filename}"},
        )

    @app.route("/api/search", methods=["GET"], endpoint="api_search")
    @login_required
    @handle_errors("search projects")
    def api_search():
        results = container.search_service.search(request.args.get("q") or "")
        return jsonify({"success": True, "projects": render(results)})
