from __future__ import annotations

import pytest
from werkzeug.security import check_password_hash

from conftest import ADMIN_EMAIL, ADMIN_PASSWORD

from ogo_manager.admin.service import AdminAuthService
from ogo_manager.audit.service import AuditService
from ogo_manager.core.enums import LogAction
from ogo_manager.core.exceptions import AuthenticationError, ValidationError


@pytest.fixture
def auth(admins_repo, logs_repo):
    return AdminAuthService(admins_repo, AuditService(logs_repo))


def test_login_success_is_logged(auth, logs_repo):
    admin = auth.login(ADMIN_EMAIL, ADMIN_PASSWORD)

    assert admin.admin_id == 1
    assert logs_repo.actions == ["login_success"]
    assert logs_repo.entries[0].admin_email == ADMIN_EMAIL


def test_login_wrong_password_is_logged(auth, logs_repo):
    with pytest.raises(AuthenticationError, match="Invalid email or password."):
        auth.login(ADMIN_EMAIL, "nope")

    assert logs_repo.actions == ["login_fail"]


def test_login_unknown_email_gives_same_message(auth, logs_repo):
    with pytest.raises(AuthenticationError, match="Invalid email or password."):
        auth.login("someone@else.com", ADMIN_PASSWORD)


def test_export_password_matches_any_admin(auth, logs_repo):
    admin = auth.verify_export_password(ADMIN_PASSWORD)

    assert admin.email == ADMIN_EMAIL
    assert logs_repo.actions == ["export_success"]


def test_export_password_failure_logged_as_unknown(auth, logs_repo):
    with pytest.raises(AuthenticationError):
        auth.verify_export_password(
            "wrong",
            success_action=LogAction.EXPORT_AUTH_SUCCESS,
            fail_action=LogAction.EXPORT_AUTH_FAIL,
        )

    assert logs_repo.actions == ["export_auth_fail"]
    assert logs_repo.entries[0].admin_email == "Unknown"
    assert logs_repo.entries[0].admin_id is None


def test_blank_export_password_rejected_without_logging(auth, logs_repo):
    with pytest.raises(ValidationError):
        auth.verify_export_password("  ")
    assert logs_repo.actions == []


def test_change_password(auth, admins_repo, logs_repo):
    auth.change_password(
        admin_id=1,
        current_password=ADMIN_PASSWORD,
        new_password="s3cret-pass",
        confirm_password="s3cret-pass",
    )

    assert check_password_hash(admins_repo.get_by_id(1).password_hash, "s3cret-pass")
    assert logs_repo.actions == ["password_change"]


@pytest.mark.parametrize(
    "current, new, confirm, message",
    [
        ("wrong", "abcdef", "abcdef", "Current password is incorrect."),
        (ADMIN_PASSWORD, "abcdef", "abcdeg", "New passwords do not match."),
        (ADMIN_PASSWORD, "abc", "abc", "at least 6 characters"),
        (ADMIN_PASSWORD, ADMIN_PASSWORD, ADMIN_PASSWORD, "must be different"),
    ],
)
def test_change_password_rules(auth, current, new, confirm, message):
    with pytest.raises(ValidationError, match=message):
        auth.change_password(admin_id=1, current_password=current, new_password=new, confirm_password=confirm)


class BrokenLogsRepo:
    def add(self, **kwargs):
        raise RuntimeError("log table missing")

    def list_recent(self, *, limit):
        return []


def test_audit_failure_does_not_block_login(admins_repo, caplog):
    auth = AdminAuthService(admins_repo, AuditService(BrokenLogsRepo()))

    assert auth.login(ADMIN_EMAIL, ADMIN_PASSWORD).admin_id == 1
    assert "Failed to log action login_success" in caplog.text
