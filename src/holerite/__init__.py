"""Holerite - Brazilian payroll calculation engine."""

__version__ = "0.1.0"

from holerite.core.calculators import calculate_payroll
from holerite.core.models import PayrollInput, PayrollResult
from holerite.core.validation import validate_record
from holerite.shared.validators import format_cnpj, validate_cnpj

__all__ = [
    "__version__",
    "PayrollInput",
    "PayrollResult",
    "calculate_payroll",
    "format_cnpj",
    "validate_cnpj",
    "validate_record",
]
