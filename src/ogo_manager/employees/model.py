from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import years_between


@dataclass(frozen=True)
class EmployeeData:
    """Editable fields of an employee (write model)."""

    employee_code: str
    first_name: str
    last_name: str
    birthday: Optional[date] = None
    position: str = ""
    address: str = ""
    whatsapp: str = ""
    email: str = ""
    qualifications: str = ""


@dataclass(frozen=True)
class Employee:
    """Domain entity: a staff record projects can be assigned to."""

    employee_id: int
    employee_code: str
    first_name: str
    last_name: str
    birthday: Optional[date] = None
    position: str = ""
    address: str = ""
    whatsapp: str = ""
    email: str = ""
    qualifications: str = ""
    created_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def age(self, today: date) -> Optional[int]:
        if not self.birthday:
            return None
        return years_between(self.birthday, today)

    def to_data(self) -> EmployeeData:
        return EmployeeData(
            employee_code=self.employee_code,
            first_name=self.first_name,
            last_name=self.last_name,
            birthday=self.birthday,
            position=self.position,
            address=self.address,
            whatsapp=self.whatsapp,
            email=self.email,
            qualifications=self.qualifications,
        )
