from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Salary:
    """Monthly pay components of one staff member."""

    salary_id: str
    staff_id: str
    staff_name: str
    base: Decimal = Decimal("0.00")
    subsidy: Decimal = Decimal("0.00")
    bonus: Decimal = Decimal("0.00")
    commission: Decimal = Decimal("0.00")
    other: Decimal = Decimal("0.00")
    fund: bool = False
