"""Pytest configuration and fixtures."""

import json
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Any, Callable

import pytest
from loguru import logger

from holerite.core.models import PayrollInput

VALID_CNPJ = "11222333000181"


@pytest.fixture(autouse=True)
def reset_loguru_sinks():
    """Drop sinks installed by CLI runs so they never outlive a test."""
    yield
    logger.remove()


@pytest.fixture
def today() -> date:
    """Fixed reference date for hire date checks."""
    return date(2024, 6, 30)


@pytest.fixture
def make_input() -> Callable[..., PayrollInput]:
    """Factory for a valid PayrollInput with optional overrides."""

    def _make(**overrides: Any) -> PayrollInput:
        data: dict[str, Any] = {
            "reference_month": 5,
            "reference_year": 2024,
            "employee_id": "00123",
            "name": "Maria da Silva",
            "position": "Analista",
            "company_tax_id": VALID_CNPJ,
            "hire_date": date(2020, 3, 1),
            "absence_days": 0,
            "base_salary": Decimal("5000.00"),
            "working_hours": 220,
            "overtime_hours": 10,
            "dependent_count": 2,
            "child_count": 1,
            "transportation_voucher_opt_in": True,
        }
        data.update(overrides)
        return PayrollInput(**data)

    return _make


@pytest.fixture
def sample_record() -> dict[str, Any]:
    """Raw camelCase record as found in input files."""
    return {
        "referenceMonth": 5,
        "referenceYear": 2024,
        "employeeId": "00123",
        "name": "Maria da Silva",
        "position": "Analista",
        "companyTaxId": "11.222.333/0001-81",
        "hireDate": "2020-03-01",
        "absenceDays": 0,
        "baseSalary": 5000.00,
        "workingHours": 220,
        "overtimeHours": 10,
        "dependentCount": 2,
        "childCount": 1,
        "transportationVoucherOptIn": True,
    }


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[Any, str], Path]:
    """Write a JSON payload to a temporary file and return its path."""

    def _write(payload: Any, name: str = "folha.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
        return path

    return _write
