"""Payroll and tax calculators."""

from holerite.core.calculators.payroll import (
    calculate_absence_deduction,
    calculate_family_allowance,
    calculate_fgts,
    calculate_overtime,
    calculate_payroll,
    calculate_transportation_voucher,
    calculate_weekly_rest,
)
from holerite.core.calculators.taxes import (
    calculate_dependent_deduction,
    calculate_inss,
    calculate_irrf,
)

__all__ = [
    "calculate_absence_deduction",
    "calculate_dependent_deduction",
    "calculate_family_allowance",
    "calculate_fgts",
    "calculate_inss",
    "calculate_irrf",
    "calculate_overtime",
    "calculate_payroll",
    "calculate_transportation_voucher",
    "calculate_weekly_rest",
]
