from __future__ import annotations

from typing import Optional, Protocol

from ..common.pagination import Page, PageRequest
from .model import SalaryRecord


class SalaryRecordRepository(Protocol):
    def get_by_id(self, salary_record_id: str) -> Optional[SalaryRecord]:
        raise NotImplementedError

    def get_for_staff_and_month(self, staff_id: str, salary_date: str) -> Optional[SalaryRecord]:
        raise NotImplementedError

    def list_for_staff(self, staff_id: Optional[str], page: PageRequest) -> Page[SalaryRecord]:
        """Newest month first; None lists every staff member."""

        raise NotImplementedError

    def create(self, record: SalaryRecord) -> None:
        raise NotImplementedError

    def update(self, record: SalaryRecord) -> bool:
        raise NotImplementedError

    def mark_paid(self, salary_record_id: str) -> bool:
        """Flip is_pay on an unpaid record; False when it was already paid or missing."""

        raise NotImplementedError

    def delete(self, salary_record_id: str) -> bool:
        raise NotImplementedError
