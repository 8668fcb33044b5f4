"""Readers for payroll input files."""

from holerite.infrastructure.parsers.json_loader import (
    load_payroll_inputs,
    parse_payroll_input,
    read_payroll_file,
)

__all__ = [
    "load_payroll_inputs",
    "parse_payroll_input",
    "read_payroll_file",
]
