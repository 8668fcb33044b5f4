"""Shared utilities for Holerite."""

from holerite.shared.formatters import format_currency, format_reference_period
from holerite.shared.validators import format_cnpj, validar_cnpj, validate_cnpj

__all__ = [
    # Validators
    "format_cnpj",
    "validar_cnpj",
    "validate_cnpj",
    # Formatters
    "format_currency",
    "format_reference_period",
]
