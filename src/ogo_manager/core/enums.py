from __future__ import annotations

from enum import Enum


class ProjectStatus(str, Enum):
    """Lifecycle of a project, stored verbatim in the projects table."""

    RUNNING = "Running"
    PENDING = "Pending"
    DELIVERED = "Delivered"
    CORRECTION = "Correction"
    REJECTED = "Rejected"


class ProjectSort(str, Enum):
    DEADLINE_ASC = "deadline-asc"
    DEADLINE_DESC = "deadline-desc"
    CODE_ASC = "code-asc"
    CODE_DESC = "code-desc"


class SearchField(str, Enum):
    """Project columns the global search box queries independently."""

    CLIENT_NAME = "client_name"
    CLIENT_ORG = "client_uni_org"
    PROJECT_CODE = "project_code"


class LogAction(str, Enum):
    """Actions written to the audit log table."""

    LOGIN_SUCCESS = "login_success"
    LOGIN_FAIL = "login_fail"
    EXPORT_SUCCESS = "export_success"
    EXPORT_FAIL = "export_fail"
    EXPORT_AUTH_SUCCESS = "export_auth_success"
    EXPORT_AUTH_FAIL = "export_auth_fail"
    EXPORT_AUTH_ERROR = "export_auth_error"
    PASSWORD_CHANGE = "password_change"


class ConnectionState(str, Enum):
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"


class RankingMetric(str, Enum):
    """Score used to order the employee performance table."""

    EARNINGS = "earnings"
    REVENUE = "revenue"


class TrendDirection(str, Enum):
    INCREASING = "Increasing"
    DECREASING = "Decreasing"
    STABLE = "Stable"
