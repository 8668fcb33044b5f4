"""Payroll record lifecycle: validate, check duplicates, calculate, persist."""

from datetime import date, datetime, timezone
from typing import Callable

from loguru import logger

from holerite.core.calculators.payroll import calculate_payroll
from holerite.core.models.payroll import PayrollInput
from holerite.core.models.record import PayrollRecord
from holerite.core.rules.tax_constants import ANO_MINIMO
from holerite.core.validation.record_validator import validate_record
from holerite.infrastructure.repositories.memory import PayrollRepository
from holerite.shared.exceptions import (
    DuplicateRecordError,
    FieldErrors,
    RecordNotFoundError,
    ValidationError,
)

ENTIDADE = "Funcionário"


def _agora() -> datetime:
    return datetime.now(timezone.utc)


class RecordService:
    """Creates, reads, updates and soft-deletes payroll records.

    Every create and update recalculates the whole payroll from the input;
    a stored result never outlives the input it was derived from.
    """

    def __init__(
        self,
        repository: PayrollRepository,
        today_provider: Callable[[], date] = date.today,
    ):
        self.repository = repository
        self.today_provider = today_provider

    def create(self, payroll_input: PayrollInput) -> PayrollRecord:
        """Register a new payroll record.

        Raises:
            ValidationError: If any field is invalid
            DuplicateRecordError: If the employee id is already registered
        """
        self._validate(payroll_input)

        if self.repository.exists(payroll_input.employee_id):
            logger.warning("Matrícula {} já cadastrada", payroll_input.employee_id)
            raise DuplicateRecordError(ENTIDADE, payroll_input.employee_id)

        agora = _agora()
        record = PayrollRecord(
            id=self.repository.next_id(),
            result=calculate_payroll(payroll_input),
            created_at=agora,
            updated_at=agora,
        )
        self.repository.add(record)

        logger.info("Folha cadastrada: id {} matrícula {}", record.id, record.employee_id)
        return record

    def get(self, record_id: int) -> PayrollRecord:
        """Return an active record by id."""
        record = self.repository.get(record_id)
        if record is None or record.is_deleted:
            raise RecordNotFoundError(ENTIDADE, record_id)
        return record

    def get_by_employee_id(self, employee_id: str) -> PayrollRecord:
        """Return the active record of an employee."""
        record = self.repository.get_by_employee_id(employee_id)
        if record is None:
            raise RecordNotFoundError(ENTIDADE, employee_id)
        return record

    def list_all(self, include_deleted: bool = False) -> list[PayrollRecord]:
        return self.repository.list_records(include_deleted=include_deleted)

    def list_by_reference_period(self, month: int, year: int) -> list[PayrollRecord]:
        """Active records of a reference period.

        Raises:
            ValidationError: If month or year is out of range
        """
        errors: FieldErrors = {}
        if not 1 <= month <= 12:
            errors["reference_month"] = ["Mês de referência deve estar entre 1 e 12"]
        if year <= ANO_MINIMO:
            errors["reference_year"] = [f"Ano de referência deve ser maior que {ANO_MINIMO}"]
        if errors:
            raise ValidationError(errors)

        return self.repository.list_by_reference_period(month, year)

    def update(self, record_id: int, payroll_input: PayrollInput) -> PayrollRecord:
        """Replace the input of a record and recalculate it.

        Raises:
            RecordNotFoundError: If the record does not exist or was deleted
            ValidationError: If any field is invalid
            DuplicateRecordError: If the new employee id belongs to another record
        """
        existing = self.get(record_id)
        self._validate(payroll_input)

        if (
            payroll_input.employee_id != existing.employee_id
            and self.repository.exists(payroll_input.employee_id)
        ):
            logger.warning("Matrícula {} já cadastrada", payroll_input.employee_id)
            raise DuplicateRecordError(ENTIDADE, payroll_input.employee_id)

        updated = existing.model_copy(
            update={
                "result": calculate_payroll(payroll_input),
                "updated_at": _agora(),
            }
        )
        self.repository.replace(updated)

        logger.info("Folha alterada: id {} matrícula {}", updated.id, updated.employee_id)
        return updated

    def delete(self, record_id: int) -> None:
        """Soft delete a record."""
        existing = self.get(record_id)
        agora = _agora()
        self.repository.replace(
            existing.model_copy(
                update={"is_deleted": True, "deleted_at": agora, "updated_at": agora}
            )
        )
        logger.info("Folha excluída: id {} matrícula {}", record_id, existing.employee_id)

    def _validate(self, payroll_input: PayrollInput) -> None:
        errors = validate_record(payroll_input, today=self.today_provider())
        if errors:
            for campo, mensagens in errors.items():
                logger.warning("Campo inválido {}: {}", campo, "; ".join(mensagens))
            raise ValidationError(errors)
