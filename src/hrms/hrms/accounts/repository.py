from __future__ import annotations

from typing import Optional, Protocol

from ..common.pagination import Page, PageRequest
from ..core.enums import UserType
from .model import Account, PasswordView


class AccountRepository(Protocol):
    def get_by_staff_id(self, staff_id: str) -> Optional[Account]:
        raise NotImplementedError

    def create(self, account: Account) -> None:
        raise NotImplementedError

    def update_password(self, staff_id: str, password_hash: str) -> bool:
        raise NotImplementedError

    def update_user_type(self, staff_id: str, user_type: UserType) -> bool:
        raise NotImplementedError

    def delete_by_staff_id(self, staff_id: str) -> bool:
        raise NotImplementedError

    def list_views(self, page: PageRequest) -> Page[PasswordView]:
        raise NotImplementedError

    def get_view(self, staff_id: str) -> Optional[PasswordView]:
        raise NotImplementedError
