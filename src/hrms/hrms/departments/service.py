from __future__ import annotations

from typing import Optional

from ..common.ids import random_id
from ..common.pagination import Page, PageRequest
from ..common.validators import optional_str, require_non_empty
from ..core.constants import ALL
from ..core.exceptions import ConflictError, NotFoundError
from .model import Department
from .repository import DepartmentRepository


class DepartmentService:
    def __init__(self, departments: DepartmentRepository):
        self._departments = departments

    def create(self, *, dep_name: str, dep_describe: Optional[str] = None) -> Department:
        dep_name = require_non_empty(dep_name, "dep_name")
        if self._departments.get_by_name(dep_name):
            raise ConflictError(f"Department {dep_name!r} already exists")

        department = Department(dep_id=random_id("dep"), dep_name=dep_name, dep_describe=optional_str(dep_describe))
        self._departments.create(department)
        return department

    def edit(self, *, dep_id: str, dep_name: str, dep_describe: Optional[str] = None) -> Department:
        dep_id = require_non_empty(dep_id, "dep_id")
        dep_name = require_non_empty(dep_name, "dep_name")

        if not self._departments.get_by_id(dep_id):
            raise NotFoundError(f"Department {dep_id!r} not found")
        same_name = self._departments.get_by_name(dep_name)
        if same_name and same_name.dep_id != dep_id:
            raise ConflictError(f"Department {dep_name!r} already exists")

        department = Department(dep_id=dep_id, dep_name=dep_name, dep_describe=optional_str(dep_describe))
        self._departments.update(department)
        return department

    def delete(self, dep_id: str) -> None:
        if not self._departments.delete(dep_id):
            raise NotFoundError(f"Department {dep_id!r} not found")

    def query(self, dep_id: str, page: Optional[PageRequest] = None) -> Page[Department]:
        """dep_id 'all' lists every department."""

        if dep_id == ALL:
            return self._departments.list_all(page or PageRequest())

        department = self._departments.get_by_id(dep_id)
        if not department:
            raise NotFoundError(f"Department {dep_id!r} not found")
        return Page(items=[department], total=1)
