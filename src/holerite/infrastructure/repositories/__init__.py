"""Payroll record storage."""

from holerite.infrastructure.repositories.memory import (
    InMemoryPayrollRepository,
    PayrollRepository,
)

__all__ = [
    "InMemoryPayrollRepository",
    "PayrollRepository",
]
