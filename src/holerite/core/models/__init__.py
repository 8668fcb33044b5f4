"""Domain models for payroll records."""

from holerite.core.models.payroll import PayrollInput, PayrollResult
from holerite.core.models.record import PayrollRecord

__all__ = [
    "PayrollInput",
    "PayrollResult",
    "PayrollRecord",
]
