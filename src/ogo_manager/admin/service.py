from __future__ import annotations

import logging
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..audit.service import UNKNOWN_EMAIL, AuditService
from ..common.validators import require_min_length
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import LogAction
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from .model import Admin, SessionAdmin
from .repository import AdminRepository

logger = logging.getLogger(__name__)

INVALID_LOGIN = "Invalid email or password."
INVALID_EXPORT_PASSWORD = "Invalid password. Please try again."


def _password_ok(admin: Admin, password: str) -> bool:
    try:
        return check_password_hash(admin.password_hash, password)
    except Exception:
        # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
        return False


class AdminAuthService:
    """Use cases: admin login, export authorisation and password change."""

    def __init__(self, admins: AdminRepository, audit: AuditService):
        self._admins = admins
        self._audit = audit

    def login(self, email: str, password: str) -> SessionAdmin:
        email = (email or "").strip()
        admin = self._admins.get_by_email(email) if email else None
        if not admin:
            logger.warning("Login attempt for unknown admin %r", email)
            raise AuthenticationError(INVALID_LOGIN)

        if not _password_ok(admin, password or ""):
            self._audit.record(LogAction.LOGIN_FAIL, admin_id=admin.admin_id, admin_email=admin.email)
            raise AuthenticationError(INVALID_LOGIN)

        self._audit.record(LogAction.LOGIN_SUCCESS, admin_id=admin.admin_id, admin_email=admin.email)
        return SessionAdmin(admin_id=admin.admin_id, email=admin.email)

    def verify_export_password(
        self,
        password: str,
        *,
        success_action: LogAction = LogAction.EXPORT_SUCCESS,
        fail_action: LogAction = LogAction.EXPORT_FAIL,
        error_action: Optional[LogAction] = None,
    ) -> SessionAdmin:
        """Authorise an export with any admin's password.

        Returns the admin whose password matched.
        """

        if not password or not password.strip():
            raise ValidationError("Please enter a password.")

        try:
            admins = self._admins.list_all()
        except Exception:
            logger.exception("Export authentication failed")
            self._audit.record(error_action or fail_action)
            raise AuthenticationError("Authentication failed. Please try again.")

        for admin in admins:
            if _password_ok(admin, password):
                self._audit.record(success_action, admin_id=admin.admin_id, admin_email=admin.email)
                return SessionAdmin(admin_id=admin.admin_id, email=admin.email)

        self._audit.record(fail_action, admin_email=UNKNOWN_EMAIL)
        raise AuthenticationError(INVALID_EXPORT_PASSWORD)

    def change_password(self, *, admin_id: int, current_password: str, new_password: str, confirm_password: str) -> None:
        admin = self._admins.get_by_id(int(admin_id))
        if not admin:
            raise NotFoundError("Admin account not found")

        if not _password_ok(admin, current_password or ""):
            raise ValidationError("Current password is incorrect.")
        if new_password != confirm_password:
            raise ValidationError("New passwords do not match.")
        require_min_length(new_password, "New password", MIN_PASSWORD_LENGTH)
        if new_password == current_password:
            raise ValidationError("New password must be different from the current one.")

        if not self._admins.set_password_hash(admin.admin_id, password_hash=generate_password_hash(new_password)):
            raise NotFoundError("Admin account not found")
        self._audit.record(LogAction.PASSWORD_CHANGE, admin_id=admin.admin_id, admin_email=admin.email)
        logger.info("Password changed for %s", admin.email)
