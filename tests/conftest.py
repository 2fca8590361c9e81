from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal

import pytest
from werkzeug.security import generate_password_hash

from ogo_manager.admin.model import Admin
from ogo_manager.audit.model import LogEntry
from ogo_manager.container import assemble
from ogo_manager.core.enums import ProjectStatus, SearchField
from ogo_manager.employees.model import Employee
from ogo_manager.project_types.model import ProjectType
from ogo_manager.projects.model import Project

ADMIN_EMAIL = "admin@ogotechnology.com"
ADMIN_PASSWORD = "admin123"


class FakeEmployeesRepo:
    def __init__(self, employees=()):
        self._rows = {e.employee_id: e for e in employees}
        self._next_id = max(self._rows, default=0) + 1
        self.fail_ping = False

    def list_all(self):
        return list(self._rows.values())

    def get_by_id(self, employee_id):
        return self._rows.get(int(employee_id))

    def get_by_code(self, employee_code):
        return next((e for e in self._rows.values() if e.employee_code == employee_code), None)

    def create(self, *, data):
        eid = self._next_id
        self._next_id += 1
        self._rows[eid] = Employee(employee_id=eid, created_at=datetime(2024, 1, 1, 9, 0), **data.__dict__)
        return eid

    def update(self, employee_id, *, data):
        current = self._rows.get(int(employee_id))
        if not current:
            return False
        self._rows[int(employee_id)] = replace(current, **data.__dict__)
        return True

    def delete_by_id(self, employee_id):
        return self._rows.pop(int(employee_id), None) is not None

    def ping(self):
        if self.fail_ping:
            raise ConnectionError("database is down")


class FakeProjectTypesRepo:
    def __init__(self, types=()):
        self._rows = {t.type_id: t for t in types}
        self._next_id = max(self._rows, default=0) + 1

    def list_all(self):
        return sorted(self._rows.values(), key=lambda t: t.type_id)

    def get_by_id(self, type_id):
        return self._rows.get(int(type_id))

    def get_by_name(self, name):
        return next((t for t in self._rows.values() if t.name.lower() == name.lower()), None)

    def create(self, *, name):
        tid = self._next_id
        self._next_id += 1
        self._rows[tid] = ProjectType(type_id=tid, name=name)
        return tid

    def rename(self, type_id, *, name):
        current = self._rows.get(int(type_id))
        if not current:
            return False
        self._rows[int(type_id)] = replace(current, name=name)
        return True

    def delete(self, type_id):
        return self._rows.pop(int(type_id), None) is not None


class FakeProjectsRepo:
    def __init__(self, projects=()):
        self._rows = {p.project_id: p for p in projects}
        self._next_id = max(self._rows, default=0) + 1
        self.failing_fields: set = set()

    def list_all(self):
        return sorted(self._rows.values(), key=lambda p: p.created_at or datetime.min, reverse=True)

    def get_by_id(self, project_id):
        return self._rows.get(int(project_id))

    def get_by_code(self, project_code):
        return next((p for p in self._rows.values() if p.project_code == project_code), None)

    def list_codes(self):
        return [p.project_code for p in self._rows.values()]

    def create(self, *, data):
        pid = self._next_id
        self._next_id += 1
        self._rows[pid] = Project(project_id=pid, created_at=datetime(2024, 3, 15, 10, 0), **data.__dict__)
        return pid

    def update(self, project_id, *, data):
        current = self._rows.get(int(project_id))
        if not current:
            return False
        self._rows[int(project_id)] = replace(current, **data.__dict__)
        return True

    def delete_by_id(self, project_id):
        return self._rows.pop(int(project_id), None) is not None

    def search_field(self, *, field, term, limit):
        if field in self.failing_fields:
            raise RuntimeError(f"lookup on {field.value} failed")
        attr = {
            SearchField.CLIENT_NAME: "client_name",
            SearchField.CLIENT_ORG: "client_uni_org",
            SearchField.PROJECT_CODE: "project_code",
        }[field]
        needle = term.lower()
        return [p for p in self.list_all() if needle in (getattr(p, attr) or "").lower()][:limit]

    def list_by_assignees(self, *, employee_ids, limit):
        ids = set(int(i) for i in employee_ids)
        return [p for p in self.list_all() if p.assigned_to in ids][:limit]


class FakeAdminsRepo:
    def __init__(self, admins=()):
        self._rows = {a.admin_id: a for a in admins}

    def get_by_id(self, admin_id):
        return self._rows.get(int(admin_id))

    def get_by_email(self, email):
        return next((a for a in self._rows.values() if a.email == email), None)

    def list_all(self):
        return list(self._rows.values())

    def set_password_hash(self, admin_id, *, password_hash):
        current = self._rows.get(int(admin_id))
        if not current:
            return False
        self._rows[int(admin_id)] = replace(current, password_hash=password_hash)
        return True


class FakeLogsRepo:
    def __init__(self):
        self.entries: list[LogEntry] = []

    def add(self, *, admin_id, admin_email, action):
        entry = LogEntry(
            log_id=len(self.entries) + 1,
            admin_id=admin_id,
            admin_email=admin_email,
            action=action,
            created_at=datetime(2024, 3, 20, 12, 0),
        )
        self.entries.append(entry)
        return entry.log_id

    def list_recent(self, *, limit):
        return list(reversed(self.entries))[:limit]

    @property
    def actions(self):
        return [e.action for e in self.entries]


def make_employee(employee_id, first_name, last_name, code=None, **kw):
    return Employee(
        employee_id=employee_id,
        employee_code=code or f"EMP{employee_id:03d}",
        first_name=first_name,
        last_name=last_name,
        **kw,
    )


def make_project(project_id, *, created_at=None, price="0", advance="0", payment="0", **kw):
    kw.setdefault("project_code", f"PJ{1000 + project_id}")
    kw.setdefault("client_name", f"Client {project_id}")
    return Project(
        project_id=project_id,
        price=Decimal(price),
        advance=Decimal(advance),
        payment_of_emp=Decimal(payment),
        created_at=created_at,
        **kw,
    )


class FakeSettings:
    SECRET_KEY = "test-secret"
    CURRENCY = "LKR"
    SEARCH_RESULT_LIMIT = 50
    EMPLOYEE_RANKING = "earnings"
    REPORT_FILENAME_PREFIX = "OGO-Analytics"
    COMPANY = {
        "name": "OGO TECHNOLOGY",
        "department": "Department of Academic Services",
        "city": "Galle, Sri Lanka",
        "phone": "+94 75 930 7059",
        "email": "info@ogotechnology.com",
    }


@pytest.fixture
def fixed_now():
    return datetime(2024, 3, 20, 12, 0, 0)


@pytest.fixture
def employees_repo():
    return FakeEmployeesRepo(
        [
            make_employee(1, "Nimal", "Perera", position="Writer", birthday=date(1995, 6, 1)),
            make_employee(2, "Kamala", "Silva", position="Designer"),
        ]
    )


@pytest.fixture
def types_repo():
    return FakeProjectTypesRepo(
        [
            ProjectType(type_id=1, name="Research Paper"),
            ProjectType(type_id=2, name="Presentation"),
        ]
    )


@pytest.fixture
def projects_repo():
    return FakeProjectsRepo(
        [
            make_project(
                1,
                client_name="Amal Fernando",
                client_uni_org="University of Ruhuna",
                type_ids=(1,),
                deadline_date=date(2024, 3, 25),
                price="10000",
                advance="4000",
                payment="3000",
                assigned_to=1,
                status=ProjectStatus.DELIVERED,
                created_at=datetime(2024, 3, 2, 9, 0),
            ),
            make_project(
                2,
                client_name="Sachini Dias",
                client_uni_org="SLIIT",
                type_ids=(1, 2),
                deadline_date=date(2024, 3, 28),
                price="20000",
                advance="5000",
                payment="8000",
                assigned_to=2,
                status=ProjectStatus.RUNNING,
                fast_deliver=True,
                created_at=datetime(2024, 3, 10, 9, 0),
            ),
            make_project(
                3,
                client_name="Ruwan Jay",
                client_uni_org="University of Ruhuna",
                price="5000",
                payment="1000",
                assigned_to=1,
                status=ProjectStatus.PENDING,
                created_at=datetime(2024, 2, 14, 9, 0),
            ),
        ]
    )


@pytest.fixture
def admins_repo():
    return FakeAdminsRepo(
        [Admin(admin_id=1, email=ADMIN_EMAIL, password_hash=generate_password_hash(ADMIN_PASSWORD))]
    )


@pytest.fixture
def logs_repo():
    return FakeLogsRepo()


@pytest.fixture
def container(employees_repo, projects_repo, types_repo, admins_repo, logs_repo):
    return assemble(
        employees_repo=employees_repo,
        projects_repo=projects_repo,
        project_types_repo=types_repo,
        admins_repo=admins_repo,
        logs_repo=logs_repo,
        settings=FakeSettings,
    )


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from ogo_manager.main import create_app

    app = create_app(container)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def logged_in(client):
    resp = client.post("/api/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    return client
