from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Any, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import optional_email, optional_text, require_max_length, require_non_empty
from ..core.constants import MAX_EMAIL_LENGTH, MAX_EMPLOYEE_CODE_LENGTH, MAX_NAME_LENGTH, MAX_WHATSAPP_LENGTH
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee, EmployeeData
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

_EDITABLE = {
    "employee_code",
    "first_name",
    "last_name",
    "birthday",
    "position",
    "address",
    "whatsapp",
    "email",
    "qualifications",
}


class EmployeeService:
    """Use case: manage staff records."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def _clean(self, data: EmployeeData, *, current_id: Optional[int] = None) -> EmployeeData:
        code = require_max_length(
            require_non_empty(data.employee_code, "Employee ID").upper(), "Employee ID", MAX_EMPLOYEE_CODE_LENGTH
        )
        existing = self._employees.get_by_code(code)
        if existing and existing.employee_id != current_id:
            raise ValidationError("Employee ID already exists")

        if data.birthday is not None and data.birthday > now_local().date():
            raise ValidationError("Birthday cannot be in the future")

        return EmployeeData(
            employee_code=code,
            first_name=require_max_length(require_non_empty(data.first_name, "First name"), "First name", MAX_NAME_LENGTH),
            last_name=require_max_length(require_non_empty(data.last_name, "Last name"), "Last name", MAX_NAME_LENGTH),
            birthday=data.birthday,
            position=require_max_length(optional_text(data.position), "Position", MAX_NAME_LENGTH),
            address=optional_text(data.address),
            whatsapp=require_max_length(optional_text(data.whatsapp), "WhatsApp", MAX_WHATSAPP_LENGTH),
            email=require_max_length(optional_email(data.email), "Email", MAX_EMAIL_LENGTH),
            qualifications=optional_text(data.qualifications),
        )

    def create_employee(
        self,
        *,
        employee_code: str,
        first_name: str,
        last_name: str,
        birthday: Optional[date] = None,
        position: str = "",
        address: str = "",
        whatsapp: str = "",
        email: str = "",
        qualifications: str = "",
    ) -> int:
        data = self._clean(
            EmployeeData(
                employee_code=employee_code,
                first_name=first_name,
                last_name=last_name,
                birthday=birthday,
                position=position,
                address=address,
                whatsapp=whatsapp,
                email=email,
                qualifications=qualifications,
            )
        )
        employee_id = self._employees.create(data=data)
        logger.info("Created employee %s (%s)", employee_id, data.employee_code)
        return employee_id

    def update_employee(self, employee_id: int, **changes: Any) -> Employee:
        unknown = set(changes) - _EDITABLE
        if unknown:
            raise ValidationError(f"Unknown employee fields: {', '.join(sorted(unknown))}")

        current = self.get_employee(employee_id)
        data = self._clean(replace(current.to_data(), **changes), current_id=current.employee_id)
        if not self._employees.update(current.employee_id, data=data):
            raise NotFoundError("Employee not found")
        return self.get_employee(current.employee_id)

    def delete_employee(self, employee_id: int) -> None:
        if not self._employees.delete_by_id(int(employee_id)):
            raise NotFoundError("Employee not found")
        logger.info("Deleted employee %s", employee_id)
