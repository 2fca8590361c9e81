from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import now_local, parse_optional_date
from ..common.serializers import employee_json
from ..common.web import handle_errors, json_body, login_required
from ..container import Container

_TEXT_FIELDS = ("employee_code", "first_name", "last_name", "position", "address", "whatsapp", "email", "qualifications")


def _employee_fields(data: dict) -> dict:
    fields = {k: str(data.get(k) or "") for k in _TEXT_FIELDS if k in data}
    if "birthday" in data:
        fields["birthday"] = parse_optional_date(data.get("birthday"), "Birthday")
    return fields


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="api_employees")
    @login_required
    @handle_errors("load employees")
    def api_employees():
        today = now_local().date()
        employees = container.employee_service.list_employees()
        return jsonify({"success": True, "employees": [employee_json(e, today=today) for e in employees]})

    @app.route("/api/employees", methods=["POST"], endpoint="api_create_employee")
    @login_required
    @handle_errors("add employee")
    def api_create_employee():
        fields = _employee_fields(json_body())
        employee_id = container.employee_service.create_employee(
            employee_code=fields.get("employee_code", ""),
            first_name=fields.get("first_name", ""),
            last_name=fields.get("last_name", ""),
            birthday=fields.get("birthday"),
            position=fields.get("position", ""),
            address=fields.get("address", ""),
            whatsapp=fields.get("whatsapp", ""),
            email=fields.get("email", ""),
            qualifications=fields.get("qualifications", ""),
        )
        employee = container.employee_service.get_employee(employee_id)
        payload = employee_json(employee, today=now_local().date())
        return jsonify({"success": True, "message": "Employee added", "employee": payload}), 201

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="api_employee")
    @login_required
    @handle_errors("load employee")
    def api_employee(employee_id: int):
        employee = container.employee_service.get_employee(employee_id)
        return jsonify({"success": True, "employee": employee_json(employee, today=now_local().date())})

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="api_update_employee")
    @login_required
    @handle_errors("update employee")
    def api_update_employee(employee_id: int):
        employee = container.employee_service.update_employee(employee_id, **_employee_fields(json_body()))
        payload = employee_json(employee, today=now_local().date())
        return jsonify({"success": True, "message": "Employee updated", "employee": payload})

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="api_delete_employee")
    @login_required
    @handle_errors("delete employee")
    def api_delete_employee(employee_id: int):
        container.employee_service.delete_employee(employee_id)
        return jsonify({"success": True, "message": "Employee deleted"})
