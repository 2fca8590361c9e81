from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Admin:
    """Credential row allowed to log in and authorise exports."""

    admin_id: int
    email: str
    password_hash: str


@dataclass(frozen=True)
class SessionAdmin:
    """What we store into Flask session after login."""

    admin_id: int
    email: str
