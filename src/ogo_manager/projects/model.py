from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Tuple

from ..core.enums import ProjectSort, ProjectStatus


@dataclass(frozen=True)
class ProjectData:
    """Editable fields of a project (write model)."""

    project_code: str
    client_name: str
    client_uni_org: str = ""
    type_ids: Tuple[int, ...] = ()
    deadline_date: Optional[date] = None
    price: Decimal = Decimal("0")
    advance: Decimal = Decimal("0")
    assigned_to: Optional[int] = None
    payment_of_emp: Decimal = Decimal("0")
    status: ProjectStatus = ProjectStatus.PENDING
    fast_deliver: bool = False


@dataclass(frozen=True)
class Project:
    """Domain entity: a unit of client work tracked through a status lifecycle."""

    project_id: int
    project_code: str
    client_name: str
    client_uni_org: str = ""
    type_ids: Tuple[int, ...] = ()
    deadline_date: Optional[date] = None
    price: Decimal = Decimal("0")
    advance: Decimal = Decimal("0")
    assigned_to: Optional[int] = None
    payment_of_emp: Decimal = Decimal("0")
    status: ProjectStatus = ProjectStatus.PENDING
    fast_deliver: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def balance(self) -> Decimal:
        return self.price - self.advance

    @property
    def profit(self) -> Decimal:
        return self.price - self.payment_of_emp

    @property
    def is_delivered(self) -> bool:
        return self.status == ProjectStatus.DELIVERED

    def to_data(self) -> ProjectData:
        return ProjectData(
            project_code=self.project_code,
            client_name=self.client_name,
            client_uni_org=self.client_uni_org,
            type_ids=self.type_ids,
            deadline_date=self.deadline_date,
            price=self.price,
            advance=self.advance,
            assigned_to=self.assigned_to,
            payment_of_emp=self.payment_of_emp,
            status=self.status,
            fast_deliver=self.fast_deliver,
        )


@dataclass(frozen=True)
class ProjectQuery:
    """Filters of the project management screen. None means 'all'."""

    status: Optional[ProjectStatus] = None
    month: Optional[int] = None
    year: Optional[int] = None
    text: str = ""
    sort: ProjectSort = ProjectSort.DEADLINE_ASC
