"""Payroll calculation for one employee and reference period.

Steps run in a fixed order and each consumes the unrounded output of the
previous one. Rounding to cents happens only when the result is built, so
reordering steps or rounding early changes the outcome.
"""

from decimal import Decimal, localcontext

from loguru import logger

from holerite.core.calculators.taxes import (
    calculate_dependent_deduction,
    calculate_inss,
    calculate_irrf,
)
from holerite.core.models.payroll import PayrollInput, PayrollResult
from holerite.core.rules.tax_constants import (
    ARREDONDAMENTO_MONETARIO,
    CENTAVO,
    DIAS_DESCANSO_MES,
    DIAS_MES_COMERCIAL,
    DIAS_UTEIS_MES,
    FAIXAS_SALARIO_FAMILIA,
    MULTIPLICADOR_HORA_EXTRA,
    PERCENTUAL_FGTS,
    PERCENTUAL_VALE_TRANSPORTE,
    PRECISAO_DECIMAL,
)

ZERO = Decimal("0")


def calculate_overtime(base_salary: Decimal, working_hours: int, overtime_hours: int) -> Decimal:
    """Overtime pay at 150% of the hourly rate.

    Example: base 3000, 220 hours, 10 overtime hours gives an hourly rate of
    13.6363..., an overtime rate of 20.4545... and 204.55 in total.
    """
    if working_hours == 0 or overtime_hours == 0:
        return ZERO

    valor_hora = base_salary / working_hours
    return valor_hora * MULTIPLICADOR_HORA_EXTRA * overtime_hours


def calculate_weekly_rest(total_overtime: Decimal) -> Decimal:
    """DSR (descanso semanal remunerado) proportional to overtime pay."""
    if total_overtime == 0:
        return ZERO

    return (total_overtime / DIAS_UTEIS_MES) * DIAS_DESCANSO_MES


def calculate_transportation_voucher(base_salary: Decimal, opt_in: bool) -> Decimal:
    """Vale-transporte deduction: 6% of base salary when opted in."""
    return base_salary * PERCENTUAL_VALE_TRANSPORTE if opt_in else ZERO


def calculate_family_allowance(base_salary: Decimal, child_count: int) -> Decimal:
    """Salário família per child, by base salary band."""
    if child_count == 0:
        return ZERO

    for limite, valor_por_filho in FAIXAS_SALARIO_FAMILIA:
        if base_salary <= limite:
            return child_count * valor_por_filho

    return ZERO


def calculate_absence_deduction(base_salary: Decimal, absence_days: int) -> Decimal:
    """Deduction for unpaid days over a 30-day month."""
    if absence_days == 0:
        return ZERO

    return (base_salary / DIAS_MES_COMERCIAL) * absence_days


def calculate_fgts(gross_salary: Decimal) -> Decimal:
    """FGTS employer contribution (8% of gross); not withheld from the employee."""
    return gross_salary * PERCENTUAL_FGTS


def _centavos(valor: Decimal) -> Decimal:
    return valor.quantize(CENTAVO, rounding=ARREDONDAMENTO_MONETARIO)


def calculate_payroll(payroll_input: PayrollInput) -> PayrollResult:
    """Derive every payroll amount for a validated input.

    Net salary is gross minus INSS, IRRF, vale-transporte and absences.
    Salário família and FGTS are reported but never enter net pay.

    Args:
        payroll_input: Input already accepted by ``RecordValidator``

    Returns:
        New PayrollResult with all monetary fields in cents
    """
    with localcontext() as ctx:
        ctx.prec = PRECISAO_DECIMAL

        base = payroll_input.base_salary

        total_overtime = calculate_overtime(
            base, payroll_input.working_hours, payroll_input.overtime_hours
        )
        weekly_rest = calculate_weekly_rest(total_overtime)
        gross_salary = base + total_overtime + weekly_rest
        transportation_voucher = calculate_transportation_voucher(
            base, payroll_input.transportation_voucher_opt_in
        )
        inss = calculate_inss(gross_salary)
        dependent_deduction = calculate_dependent_deduction(payroll_input.dependent_count)
        irrf = calculate_irrf(gross_salary, inss, payroll_input.dependent_count)
        family_allowance = calculate_family_allowance(base, payroll_input.child_count)
        absence_deduction = calculate_absence_deduction(base, payroll_input.absence_days)
        fgts = calculate_fgts(gross_salary)
        net_salary = gross_salary - inss - irrf - transportation_voucher - absence_deduction

        result = PayrollResult(
            **payroll_input.model_dump(include=set(PayrollInput.model_fields)),
            total_overtime=_centavos(total_overtime),
            weekly_rest=_centavos(weekly_rest),
            gross_salary=_centavos(gross_salary),
            inss=_centavos(inss),
            dependent_deduction=_centavos(dependent_deduction),
            irrf=_centavos(irrf),
            family_allowance=_centavos(family_allowance),
            transportation_voucher_deduction=_centavos(transportation_voucher),
            absence_deduction=_centavos(absence_deduction),
            fgts=_centavos(fgts),
            net_salary=_centavos(net_salary),
        )

    logger.debug(
        "Folha calculada: matrícula {} ref {:02d}/{} bruto {} líquido {}",
        result.employee_id,
        result.reference_month,
        result.reference_year,
        result.gross_salary,
        result.net_salary,
    )
    return result
