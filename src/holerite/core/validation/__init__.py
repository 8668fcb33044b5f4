"""Input validation for payroll records."""

from holerite.core.validation.record_validator import RecordValidator, validate_record

__all__ = [
    "RecordValidator",
    "validate_record",
]
