from __future__ import annotations

from typing import Optional, Protocol

from ..common.pagination import Page, PageRequest
from .model import Salary


class SalaryRepository(Protocol):
    def get_by_id(self, salary_id: str) -> Optional[Salary]:
        raise NotImplementedError

    def get_by_staff_id(self, staff_id: str) -> Optional[Salary]:
        raise NotImplementedError

    def list_all(self, page: PageRequest) -> Page[Salary]:
        raise NotImplementedError

    def create(self, salary: Salary) -> None:
        raise NotImplementedError

    def update(self, salary: Salary) -> bool:
        raise NotImplementedError

    def delete(self, salary_id: str) -> bool:
        raise NotImplementedError
