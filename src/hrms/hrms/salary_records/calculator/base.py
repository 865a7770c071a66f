from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import PayBreakdown, PayComponents


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(self, components: PayComponents) -> PayBreakdown:
        raise NotImplementedError
