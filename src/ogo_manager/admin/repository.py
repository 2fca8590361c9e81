from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Admin


class AdminRepository(Protocol):
    def get_by_id(self, admin_id: int) -> Optional[Admin]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Admin]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Admin]:
        raise NotImplementedError

    def set_password_hash(self, admin_id: int, *, password_hash: str) -> bool:
        raise NotImplementedError
