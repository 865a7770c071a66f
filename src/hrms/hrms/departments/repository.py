from __future__ import annotations

from typing import Optional, Protocol

from ..common.pagination import Page, PageRequest
from .model import Department


class DepartmentRepository(Protocol):
    """Repository interface for departments.

    Services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, dep_id: str) -> Optional[Department]:
        raise NotImplementedError

    def get_by_name(self, dep_name: str) -> Optional[Department]:
        raise NotImplementedError

    def list_all(self, page: PageRequest) -> Page[Department]:
        raise NotImplementedError

    def create(self, department: Department) -> None:
        raise NotImplementedError

    def update(self, department: Department) -> bool:
        raise NotImplementedError

    def delete(self, dep_id: str) -> bool:
        raise NotImplementedError
