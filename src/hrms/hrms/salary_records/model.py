from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

ZERO = Decimal("0.00")


@dataclass(frozen=True)
class PayComponents:
    """Gross pay parts a record is computed from."""

    base: Decimal = ZERO
    subsidy: Decimal = ZERO
    bonus: Decimal = ZERO
    commission: Decimal = ZERO
    other: Decimal = ZERO
    fund: bool = False

    @property
    def gross(self) -> Decimal:
        return self.base + self.subsidy + self.bonus + self.commission + self.other


@dataclass(frozen=True)
class PayBreakdown:
    pension_insurance: Decimal
    medical_insurance: Decimal
    unemployment_insurance: Decimal
    housing_fund: Decimal
    tax: Decimal
    total: Decimal

    @property
    def insurances(self) -> Decimal:
        return self.pension_insurance + self.medical_insurance + self.unemployment_insurance + self.housing_fund


@dataclass(frozen=True)
class SalaryRecord:
    """One month of disbursed (or pending) pay for a staff member."""

    salary_record_id: str
    staff_id: str
    staff_name: str
    salary_date: str
    base: Decimal = ZERO
    subsidy: Decimal = ZERO
    bonus: Decimal = ZERO
    commission: Decimal = ZERO
    other: Decimal = ZERO
    pension_insurance: Decimal = ZERO
    medical_insurance: Decimal = ZERO
    unemployment_insurance: Decimal = ZERO
    housing_fund: Decimal = ZERO
    tax: Decimal = ZERO
    total: Decimal = ZERO
    fund: bool = False
    is_pay: bool = False

    @property
    def components(self) -> PayComponents:
        return PayComponents(
            base=self.base,
            subsidy=self.subsidy,
            bonus=self.bonus,
            commission=self.commission,
            other=self.other,
            fund=self.fund,
        )
