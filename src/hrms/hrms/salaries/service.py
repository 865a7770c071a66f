from __future__ import annotations

from typing import Any, Mapping, Optional

from ..common.ids import random_id
from ..common.pagination import Page, PageRequest
from ..common.validators import parse_bool, require_amount, require_non_empty
from ..core.constants import ALL
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..staff.repository import StaffRepository
from .model import Salary
from .repository import SalaryRepository

AMOUNT_FIELDS = ("base", "subsidy", "bonus", "commission", "other")


class SalaryService:
    """Use case: one salary definition per staff member."""

    def __init__(self, salaries: SalaryRepository, staff: StaffRepository):
        self._salaries = salaries
        self._staff = staff

    def create(self, data: Mapping[str, Any]) -> Salary:
        staff_id = require_non_empty(data.get("staff_id"), "staff_id")
        staff = self._staff.get_by_id(staff_id)
        if not staff:
            raise ValidationError(f"Staff {staff_id!r} does not exist")
        if self._salaries.get_by_staff_id(staff_id):
            raise ConflictError(f"Staff {staff_id!r} already has a salary")

        salary = Salary(
            salary_id=random_id("salary"),
            staff_id=staff_id,
            staff_name=staff.staff_name,
            fund=parse_bool(data.get("fund", False)),
            **{f: require_amount(data.get(f), f) for f in AMOUNT_FIELDS},
        )
        self._salaries.create(salary)
        return salary

    def edit(self, data: Mapping[str, Any]) -> Salary:
        salary_id = require_non_empty(data.get("salary_id"), "salary_id")
        existing = self._salaries.get_by_id(salary_id)
        if not existing:
            raise NotFoundError(f"Salary {salary_id!r} not found")

        salary = Salary(
            salary_id=salary_id,
            staff_id=existing.staff_id,
            staff_name=existing.staff_name,
            fund=parse_bool(data.get("fund", existing.fund)),
            **{f: require_amount(data.get(f, getattr(existing, f)), f) for f in AMOUNT_FIELDS},
        )
        self._salaries.update(salary)
        return salary

    def delete(self, salary_id: str) -> None:
        if not self._salaries.delete(salary_id):
            raise NotFoundError(f"Salary {salary_id!r} not found")

    def query_by_staff(self, staff_id: str, page: Optional[PageRequest] = None) -> Page[Salary]:
        if staff_id == ALL:
            return self._salaries.list_all(page or PageRequest())

        salary = self._salaries.get_by_staff_id(staff_id)
        if not salary:
            raise NotFoundError(f"No salary for staff {staff_id!r}")
        return Page(items=[salary], total=1)
