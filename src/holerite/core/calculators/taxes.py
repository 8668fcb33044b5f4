"""INSS and IRRF calculation.

Both tables are applied flat: once an amount falls into a bracket, that
bracket's rate (and, for IRRF, its parcela a deduzir) applies to the whole
amount. Results are returned unrounded; rounding to cents happens when the
payroll result is assembled.
"""

from decimal import Decimal

from holerite.core.rules.tax_constants import (
    DEDUCAO_DEPENDENTE,
    FAIXAS_INSS,
    FAIXAS_IRRF,
    INSS_MAXIMO,
    LIMITE_ISENCAO_IRRF,
)

ZERO = Decimal("0")


def calculate_inss(gross_salary: Decimal) -> Decimal:
    """Calculate the INSS contribution for a gross salary.

    Args:
        gross_salary: Gross salary (base + overtime + DSR)

    Returns:
        INSS amount; fixed at the ceiling value above the last bracket
    """
    if gross_salary <= 0:
        return ZERO

    for limite, aliquota in FAIXAS_INSS:
        if gross_salary <= limite:
            return gross_salary * aliquota

    return INSS_MAXIMO


def calculate_dependent_deduction(dependent_count: int) -> Decimal:
    """Total IRRF deduction for the given number of dependents."""
    return dependent_count * DEDUCAO_DEPENDENTE


def calculate_irrf(gross_salary: Decimal, inss: Decimal, dependent_count: int) -> Decimal:
    """Calculate withheld income tax.

    Taxable income is ``gross_salary - inss - dependent deduction``. Income
    up to the exemption limit pays nothing; above it, a single formula
    ``taxable * aliquota - parcela`` from the matching bracket applies.

    Args:
        gross_salary: Gross salary
        inss: INSS already computed for this gross salary
        dependent_count: Number of dependents

    Returns:
        IRRF amount, never negative
    """
    base_calculo = gross_salary - inss - calculate_dependent_deduction(dependent_count)

    if base_calculo <= LIMITE_ISENCAO_IRRF:
        return ZERO

    for limite, aliquota, parcela in FAIXAS_IRRF:
        if limite is None or base_calculo <= limite:
            imposto = base_calculo * aliquota - parcela
            break

    # Just above the exemption limit the 7.5% formula dips below zero
    return max(imposto, ZERO)
