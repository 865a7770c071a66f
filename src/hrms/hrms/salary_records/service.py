from __future__ import annotations

from dataclasses import replace
from typing import Any, Mapping, Optional

from ..common.datetime_utils import require_month
from ..common.ids import random_id
from ..common.log import get_logger
from ..common.pagination import Page, PageRequest
from ..common.validators import parse_bool, require_amount, require_non_empty
from ..core.constants import ALL
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..salaries.repository import SalaryRepository
from ..salaries.service import AMOUNT_FIELDS
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayComponents, SalaryRecord
from .repository import SalaryRecordRepository

logger = get_logger(__name__)


def _apply(record: SalaryRecord, components: PayComponents, calculator: PayrollCalculator) -> SalaryRecord:
    breakdown = calculator.calculate(components)
    return replace(
        record,
        base=components.base,
        subsidy=components.subsidy,
        bonus=components.bonus,
        commission=components.commission,
        other=components.other,
        fund=components.fund,
        pension_insurance=breakdown.pension_insurance,
        medical_insurance=breakdown.medical_insurance,
        unemployment_insurance=breakdown.unemployment_insurance,
        housing_fund=breakdown.housing_fund,
        tax=breakdown.tax,
        total=breakdown.total,
    )


class SalaryRecordService:
    """Use case: monthly salary records derived from a staff member's salary."""

    def __init__(
        self,
        records: SalaryRecordRepository,
        salaries: SalaryRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._records = records
        self._salaries = salaries
        self._calculator = calculator or StandardPayrollCalculator()

    def create(self, data: Mapping[str, Any]) -> SalaryRecord:
        staff_id = require_non_empty(data.get("staff_id"), "staff_id")
        salary_date = require_month(data.get("salary_date"), "salary_date")

        salary = self._salaries.get_by_staff_id(staff_id)
        if not salary:
            raise ValidationError(f"Staff {staff_id!r} has no salary")
        if self._records.get_for_staff_and_month(staff_id, salary_date):
            raise ConflictError(f"Salary record for {staff_id!r} in {salary_date} already exists")

        components = PayComponents(
            base=salary.base,
            subsidy=salary.subsidy,
            bonus=salary.bonus,
            commission=salary.commission,
            other=salary.other,
            fund=salary.fund,
        )
        record = _apply(
            SalaryRecord(
                salary_record_id=random_id("sr"),
                staff_id=staff_id,
                staff_name=salary.staff_name,
                salary_date=salary_date,
            ),
            components,
            self._calculator,
        )
        self._records.create(record)
        logger.info("salary record created", extra={"staff_id": staff_id, "salary_date": salary_date})
        return record

    def edit(self, data: Mapping[str, Any]) -> SalaryRecord:
        salary_record_id = require_non_empty(data.get("salary_record_id"), "salary_record_id")
        existing = self._records.get_by_id(salary_record_id)
        if not existing:
            raise NotFoundError(f"Salary record {salary_record_id!r} not found")
        if existing.is_pay:
            raise ConflictError("A paid salary record cannot be edited")

        current = existing.components
        components = PayComponents(
            fund=parse_bool(data.get("fund", current.fund)),
            **{f: require_amount(data.get(f, getattr(current, f)), f) for f in AMOUNT_FIELDS},
        )
        record = _apply(existing, components, self._calculator)
        if not self._records.update(record):
            # Paid between the read and the write.
            raise ConflictError("A paid salary record cannot be edited")
        return record

    def delete(self, salary_record_id: str) -> None:
        if not self._records.delete(salary_record_id):
            raise NotFoundError(f"Salary record {salary_record_id!r} not found")

    def query_by_staff(self, staff_id: str, page: Optional[PageRequest] = None) -> Page[SalaryRecord]:
        staff_id = require_non_empty(staff_id, "staff_id")
        return self._records.list_for_staff(None if staff_id == ALL else staff_id, page or PageRequest())

    def is_paid(self, salary_record_id: str) -> bool:
        record = self._records.get_by_id(salary_record_id)
        if not record:
            raise NotFoundError(f"Salary record {salary_record_id!r} not found")
        return record.is_pay

    def pay(self, salary_record_id: str) -> None:
        record = self._records.get_by_id(salary_record_id)
        if not record:
            raise NotFoundError(f"Salary record {salary_record_id!r} not found")
        if record.is_pay or not self._records.mark_paid(salary_record_id):
            raise ConflictError(f"Salary record {salary_record_id!r} is already paid")
        logger.info("salary record paid", extra={"salary_record_id": salary_record_id, "staff_id": record.staff_id})
