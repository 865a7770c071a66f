from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ..model import PayBreakdown, PayComponents
from .base import PayrollCalculator

CENT = Decimal("0.01")

PENSION_RATE = Decimal("0.08")
MEDICAL_RATE = Decimal("0.02")
UNEMPLOYMENT_RATE = Decimal("0.005")
HOUSING_FUND_RATE = Decimal("0.12")

TAX_THRESHOLD = Decimal("5000")

# (upper bound of monthly taxable income, rate, quick deduction)
TAX_BRACKETS = (
    (Decimal("3000"), Decimal("0.03"), Decimal("0")),
    (Decimal("12000"), Decimal("0.10"), Decimal("210")),
    (Decimal("25000"), Decimal("0.20"), Decimal("1410")),
    (Decimal("35000"), Decimal("0.25"), Decimal("2660")),
    (Decimal("55000"), Decimal("0.30"), Decimal("4410")),
    (Decimal("80000"), Decimal("0.35"), Decimal("7160")),
    (None, Decimal("0.45"), Decimal("15160")),
)


def _cents(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def income_tax(taxable: Decimal) -> Decimal:
    """Monthly progressive income tax on income above the threshold."""
    if taxable <= 0:
        return Decimal("0.00")
    for upper, rate, deduction in TAX_BRACKETS:
        if upper is None or taxable <= upper:
            return _cents(taxable * rate - deduction)
    raise AssertionError("unreachable: last bracket is open-ended")


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: social insurance on base pay, then progressive tax on the rest."""

    def calculate(self, components: PayComponents) -> PayBreakdown:
        pension = _cents(components.base * PENSION_RATE)
        medical = _cents(components.base * MEDICAL_RATE)
        unemployment = _cents(components.base * UNEMPLOYMENT_RATE)
        housing_fund = _cents(components.base * HOUSING_FUND_RATE) if components.fund else Decimal("0.00")

        insurances = pension + medical + unemployment + housing_fund
        tax = income_tax(components.gross - insurances - TAX_THRESHOLD)

        return PayBreakdown(
            pension_insurance=pension,
            medical_insurance=medical,
            unemployment_insurance=unemployment,
            housing_fund=housing_fund,
            tax=tax,
            total=_cents(components.gross - insurances - tax),
        )
