from __future__ import annotations

from abc import ABC, abstractmethod

from ...employees.model import Employee
from ..model import PayrollConfig, PayrollDetails


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(self, employee: Employee, config: PayrollConfig) -> PayrollDetails:
        raise NotImplementedError
