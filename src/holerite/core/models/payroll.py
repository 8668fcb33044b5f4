"""Payroll input and result models."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

PAYROLL_MODEL_CONFIG = {
    "frozen": True,
    "alias_generator": to_camel,
    "populate_by_name": True,
}


class PayrollInput(BaseModel):
    """Monthly inputs for one employee.

    Only types are enforced here. Value ranges are checked by
    ``RecordValidator`` so that every violation can be reported together.
    """

    # Reference period
    reference_month: int = Field(..., description="Reference month (1-12)")
    reference_year: int = Field(..., description="Reference year (> 1959)")

    # Identification
    employee_id: str = Field(..., description="Matrícula (up to 5 digits)")
    name: str = Field(..., description="Employee name")
    position: str = Field(..., description="Cargo / função")
    company_tax_id: str = Field(..., description="Employer CNPJ")
    hire_date: date = Field(..., description="Data de admissão")

    # Monthly figures
    absence_days: int = Field(default=0, description="Faltas no período")
    base_salary: Decimal = Field(..., description="Salário base")
    working_hours: int = Field(..., description="Carga horária mensal")
    overtime_hours: int = Field(default=0, description="Horas extras")
    dependent_count: int = Field(default=0, description="Dependentes para IRRF")
    child_count: int = Field(default=0, description="Filhos para salário família")
    transportation_voucher_opt_in: bool = Field(
        default=False, description="Optou por vale-transporte"
    )

    model_config = PAYROLL_MODEL_CONFIG


class PayrollResult(PayrollInput):
    """Payroll input plus every derived amount, in cents."""

    # Earnings
    total_overtime: Decimal = Field(default=Decimal("0.00"))
    weekly_rest: Decimal = Field(default=Decimal("0.00"), description="DSR")
    gross_salary: Decimal = Field(default=Decimal("0.00"))

    # Taxes
    inss: Decimal = Field(default=Decimal("0.00"))
    dependent_deduction: Decimal = Field(default=Decimal("0.00"))
    irrf: Decimal = Field(default=Decimal("0.00"))

    # Benefits and other deductions
    family_allowance: Decimal = Field(
        default=Decimal("0.00"), description="Salário família (not part of net pay)"
    )
    transportation_voucher_deduction: Decimal = Field(default=Decimal("0.00"))
    absence_deduction: Decimal = Field(default=Decimal("0.00"))
    fgts: Decimal = Field(
        default=Decimal("0.00"), description="Employer contribution (not part of net pay)"
    )

    net_salary: Decimal = Field(default=Decimal("0.00"))

    @property
    def total_deductions(self) -> Decimal:
        """Sum of the amounts withheld from the employee."""
        return (
            self.inss
            + self.irrf
            + self.transportation_voucher_deduction
            + self.absence_deduction
        )

    @property
    def payroll_input(self) -> PayrollInput:
        """Return the input fields this result was calculated from."""
        return PayrollInput(**self.model_dump(include=set(PayrollInput.model_fields)))
