"""In-memory payroll record repository."""

from typing import Optional, Protocol

from holerite.core.models.record import PayrollRecord


class PayrollRepository(Protocol):
    """Storage collaborator used by ``RecordService``."""

    def next_id(self) -> int: ...

    def add(self, record: PayrollRecord) -> PayrollRecord: ...

    def get(self, record_id: int) -> Optional[PayrollRecord]: ...

    def get_by_employee_id(self, employee_id: str) -> Optional[PayrollRecord]: ...

    def list_records(self, include_deleted: bool = False) -> list[PayrollRecord]: ...

    def list_by_reference_period(self, month: int, year: int) -> list[PayrollRecord]: ...

    def replace(self, record: PayrollRecord) -> PayrollRecord: ...

    def exists(self, employee_id: str) -> bool: ...


class InMemoryPayrollRepository:
    """Dict-backed repository with sequential ids.

    Soft-deleted records are kept and only returned when explicitly asked
    for with ``include_deleted``.
    """

    def __init__(self) -> None:
        self._records: dict[int, PayrollRecord] = {}
        self._last_id = 0

    def next_id(self) -> int:
        self._last_id += 1
        return self._last_id

    def add(self, record: PayrollRecord) -> PayrollRecord:
        self._records[record.id] = record
        return record

    def get(self, record_id: int) -> Optional[PayrollRecord]:
        return self._records.get(record_id)

    def get_by_employee_id(self, employee_id: str) -> Optional[PayrollRecord]:
        for record in self._records.values():
            if record.employee_id == employee_id and not record.is_deleted:
                return record
        return None

    def list_records(self, include_deleted: bool = False) -> list[PayrollRecord]:
        return [r for r in self._records.values() if include_deleted or not r.is_deleted]

    def list_by_reference_period(self, month: int, year: int) -> list[PayrollRecord]:
        return [
            r
            for r in self.list_records()
            if r.reference_month == month and r.reference_year == year
        ]

    def replace(self, record: PayrollRecord) -> PayrollRecord:
        self._records[record.id] = record
        return record

    def exists(self, employee_id: str) -> bool:
        return self.get_by_employee_id(employee_id) is not None
