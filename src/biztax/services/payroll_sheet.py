"""PAYE worksheet for a handful of employees."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from biztax.calculators.paye import PayeEngine
from biztax.calculators.types import Employee, PayeResult


class PayrollSheet:
    """Employees entered one at a time, with their PAYE results.

    Results are recomputed on entry and never edited in place.
    """

    def __init__(self, engine: PayeEngine | None = None):
        self.engine = engine or PayeEngine()
        self._entries: list[tuple[Employee, PayeResult]] = []

    def add(self, annual_gross_salary: Any, name: str | None = None) -> PayeResult:
        name = (name or "").strip() or f"Employee {len(self._entries) + 1}"
        employee = Employee(name=name, annual_gross_salary=annual_gross_salary)
        result = self.engine.compute(employee)
        self._entries.append((employee, result))
        return result

    def remove(self, employee_id: str) -> bool:
        before = len(self._entries)
        self._entries = [(e, r) for e, r in self._entries if e.id != employee_id]
        return len(self._entries) < before

    def entries(self) -> list[tuple[Employee, PayeResult]]:
        return list(self._entries)

    @property
    def total_monthly_remittance(self) -> Decimal:
        return sum((r.monthly_tax for _, r in self._entries), Decimal("0"))

    @property
    def total_annual_tax(self) -> Decimal:
        return sum((r.annual_tax for _, r in self._entries), Decimal("0"))
