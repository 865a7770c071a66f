from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Model, UserType
from .model import AuthorityDetail


class AuthorityDetailRepository(Protocol):
    def get_by_id(self, detail_id: str) -> Optional[AuthorityDetail]:
        raise NotImplementedError

    def get_by_user_type_and_model(self, user_type: UserType, model: Model) -> Optional[AuthorityDetail]:
        raise NotImplementedError

    def list_by_user_type(self, user_type: UserType) -> Sequence[AuthorityDetail]:
        raise NotImplementedError

    def create(self, detail: AuthorityDetail) -> None:
        raise NotImplementedError

    def update(self, detail: AuthorityDetail) -> bool:
        raise NotImplementedError
