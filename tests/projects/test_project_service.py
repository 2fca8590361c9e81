from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from ogo_manager.core.enums import ProjectSort, ProjectStatus
from ogo_manager.core.exceptions import NotFoundError, ValidationError
from ogo_manager.projects.model import ProjectQuery
from ogo_manager.projects.service import ProjectService, natural_key, next_code_after


@pytest.fixture
def service(projects_repo, employees_repo, types_repo):
    return ProjectService(projects_repo, employees_repo, types_repo)


def test_next_code_after_uses_highest_number():
    assert next_code_after([]) == "PJ1000"
    assert next_code_after(["PJ1000", "PJ1009", "PJ999", "bad"]) == "PJ1010"
    assert next_code_after(["PJ10000"]) == "PJ10001"


def test_natural_key_orders_numbers_by_value():
    assert sorted(["PJ1000", "PJ999", "PJ10000"], key=natural_key) == ["PJ999", "PJ1000", "PJ10000"]


def test_next_project_code_from_repository(service):
    assert service.next_project_code() == "PJ1004"


def test_create_project_normalizes_and_persists(service, projects_repo):
    project_id = service.create_project(
        project_code=" pj2000 ",
        client_name="  Dilan  ",
        type_ids=[2, 1, 2],
        price=Decimal("1500"),
        assigned_to=1,
        status="Running",
    )

    created = projects_repo.get_by_id(project_id)
    assert created.project_code == "PJ2000"
    assert created.client_name == "Dilan"
    assert created.type_ids == (2, 1)
    assert created.status == ProjectStatus.RUNNING


@pytest.mark.parametrize(
    "changes, message",
    [
        ({"project_code": "PX1000"}, "Project ID must start with PJ"),
        ({"project_code": "PJ12"}, "Project ID must start with PJ"),
        ({"project_code": "PJ" + "1" * 15}, "Project ID must start with PJ"),
        ({"client_name": "C" * 256}, "Client name must be at most 255 characters"),
        ({"client_uni_org": "U" * 256}, "University/Organization must be at most 255 characters"),
        ({"project_code": "PJ1001"}, "Project ID already exists"),
        ({"client_name": "  "}, "Client name is required"),
        ({"price": Decimal("-1")}, "Price cannot be negative"),
        ({"assigned_to": 99}, "Assigned employee does not exist"),
        ({"type_ids": [1, 42]}, "Unknown project type: 42"),
        ({"status": "Archived"}, "Status is not valid"),
    ],
)
def test_create_project_rejects_invalid_input(service, changes, message):
    fields = {"project_code": "PJ3000", "client_name": "Client"}
    fields.update(changes)

    with pytest.raises(ValidationError) as e:
        service.create_project(**fields)

    assert message in str(e.value)


def test_update_project_keeps_own_code_and_changes_fields(service):
    updated = service.update_project(2, project_code="PJ1002", status="Delivered", deadline_date=date(2024, 4, 1))

    assert updated.status == ProjectStatus.DELIVERED
    assert updated.deadline_date == date(2024, 4, 1)
    assert updated.client_name == "Sachini Dias"


def test_update_project_rejects_unknown_fields(service):
    with pytest.raises(ValidationError):
        service.update_project(1, colour="red")


def test_update_missing_project(service):
    with pytest.raises(NotFoundError):
        service.update_project(404, client_name="X")


def test_delete_project(service, projects_repo):
    service.delete_project(3)
    assert projects_repo.get_by_id(3) is None

    with pytest.raises(NotFoundError):
        service.delete_project(3)


def test_list_projects_filters_by_status_period_and_text(service):
    assert [p.project_id for p in service.list_projects(ProjectQuery(status=ProjectStatus.RUNNING))] == [2]
    assert [p.project_id for p in service.list_projects(ProjectQuery(month=2, year=2024))] == [3]
    # text matches the assigned employee's name as well as client fields
    assert sorted(p.project_id for p in service.list_projects(ProjectQuery(text="nimal"))) == [1, 3]
    assert [p.project_id for p in service.list_projects(ProjectQuery(text="sliit"))] == [2]


def test_list_projects_sorting_puts_undated_last(service):
    asc = service.list_projects(ProjectQuery(sort=ProjectSort.DEADLINE_ASC))
    desc = service.list_projects(ProjectQuery(sort=ProjectSort.DEADLINE_DESC))
    by_code = service.list_projects(ProjectQuery(sort=ProjectSort.CODE_DESC))

    assert [p.project_id for p in asc] == [1, 2, 3]
    assert [p.project_id for p in desc] == [2, 1, 3]
    assert [p.project_code for p in by_code] == ["PJ1003", "PJ1002", "PJ1001"]
