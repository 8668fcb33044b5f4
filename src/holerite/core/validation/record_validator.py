"""Field-level validation of payroll inputs."""

import re
from datetime import date
from typing import Optional

from holerite.core.models.payroll import PayrollInput
from holerite.core.rules.tax_constants import (
    ANO_MINIMO,
    HORAS_TRABALHADAS_MAXIMO,
    LIMITE_CAMPOS_DOIS_DIGITOS,
    SALARIO_BASE_MAXIMO,
    TAMANHO_CARGO,
    TAMANHO_MATRICULA,
    TAMANHO_NOME,
)
from holerite.shared.exceptions import FieldErrors
from holerite.shared.formatters import format_currency
from holerite.shared.validators import validate_cnpj

# Letters (including accented Latin) and whitespace
LETRAS_E_ESPACOS = re.compile(r"[a-zA-ZÀ-ÿ\s]+")
SOMENTE_DIGITOS = re.compile(r"[0-9]+")


class RecordValidator:
    """Collects every constraint violation of a payroll input.

    Checks are independent: a failing field never stops the others from
    being checked, and the caller receives the complete error map.
    """

    def __init__(self, payroll_input: PayrollInput, today: Optional[date] = None):
        self.payroll_input = payroll_input
        self.today = today or date.today()
        self.errors: FieldErrors = {}

    def validate(self) -> FieldErrors:
        """Run all field checks."""
        self._check_reference_period()
        self._check_employee_id()
        self._check_text("name", "Nome", TAMANHO_NOME)
        self._check_text("position", "Cargo", TAMANHO_CARGO)
        self._check_company_tax_id()
        self._check_hire_date()
        self._check_base_salary()
        self._check_working_hours()
        self._check_two_digit_counts()
        self._check_child_count()

        return self.errors

    def _add(self, field: str, message: str) -> None:
        self.errors.setdefault(field, []).append(message)

    def _check_reference_period(self) -> None:
        if not 1 <= self.payroll_input.reference_month <= 12:
            self._add("reference_month", "Mês de referência deve estar entre 1 e 12")

        if self.payroll_input.reference_year <= ANO_MINIMO:
            self._add("reference_year", f"Ano de referência deve ser maior que {ANO_MINIMO}")

    def _check_employee_id(self) -> None:
        matricula = self.payroll_input.employee_id

        if not matricula.strip():
            self._add("employee_id", "Matrícula é obrigatória")

        if len(matricula) > TAMANHO_MATRICULA:
            self._add(
                "employee_id",
                f"Matrícula deve ter no máximo {TAMANHO_MATRICULA} caracteres",
            )
        if not SOMENTE_DIGITOS.fullmatch(matricula):
            self._add("employee_id", "Matrícula deve conter apenas números")

    def _check_text(self, field: str, label: str, max_length: int) -> None:
        """Required alphabetic field (name, position)."""
        valor = getattr(self.payroll_input, field)

        if not valor.strip():
            self._add(field, f"{label} é obrigatório")

        if len(valor) > max_length:
            self._add(field, f"{label} deve ter no máximo {max_length} caracteres")
        if not LETRAS_E_ESPACOS.fullmatch(valor):
            self._add(field, f"{label} deve conter apenas letras e espaços")

    def _check_company_tax_id(self) -> None:
        cnpj = self.payroll_input.company_tax_id

        if not cnpj.strip():
            self._add("company_tax_id", "CNPJ é obrigatório")
        elif not validate_cnpj(cnpj):
            self._add("company_tax_id", "CNPJ inválido")

    def _check_hire_date(self) -> None:
        admissao = self.payroll_input.hire_date

        if admissao.year <= ANO_MINIMO:
            self._add("hire_date", f"Ano de admissão deve ser maior que {ANO_MINIMO}")
        if admissao > self.today:
            self._add("hire_date", "Data de admissão não pode estar no futuro")

    def _check_base_salary(self) -> None:
        salario = self.payroll_input.base_salary

        if salario <= 0:
            self._add("base_salary", "Salário base deve ser maior que zero")
        elif salario > SALARIO_BASE_MAXIMO:
            self._add(
                "base_salary",
                f"Salário base não pode exceder {format_currency(SALARIO_BASE_MAXIMO)}",
            )

    def _check_working_hours(self) -> None:
        horas = self.payroll_input.working_hours

        if horas <= 0:
            self._add("working_hours", "Carga horária deve ser maior que zero")
        elif horas > HORAS_TRABALHADAS_MAXIMO:
            self._add(
                "working_hours",
                f"Carga horária não pode exceder {HORAS_TRABALHADAS_MAXIMO}",
            )

    def _check_two_digit_counts(self) -> None:
        """Fields stored with two digits in the legacy record layout."""
        campos = {
            "overtime_hours": "Horas extras",
            "absence_days": "Faltas",
            "dependent_count": "Dependentes",
            "child_count": "Filhos",
        }
        for field, label in campos.items():
            valor = getattr(self.payroll_input, field)
            if valor < 0:
                self._add(field, f"{label} não pode ser negativo")
            elif valor > LIMITE_CAMPOS_DOIS_DIGITOS:
                self._add(field, f"{label} não pode exceder {LIMITE_CAMPOS_DOIS_DIGITOS}")

    def _check_child_count(self) -> None:
        if self.payroll_input.child_count > self.payroll_input.dependent_count:
            self._add("child_count", "Filhos não pode exceder o número de dependentes")


def validate_record(payroll_input: PayrollInput, today: Optional[date] = None) -> FieldErrors:
    """Convenience function to validate a payroll input."""
    validator = RecordValidator(payroll_input, today=today)
    return validator.validate()
