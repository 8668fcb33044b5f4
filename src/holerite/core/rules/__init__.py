"""Business rules and rate tables for payroll calculation."""

from holerite.core.rules.tax_constants import (
    CENTAVO,
    DEDUCAO_DEPENDENTE,
    FAIXAS_INSS,
    FAIXAS_IRRF,
    FAIXAS_SALARIO_FAMILIA,
    INSS_MAXIMO,
    LIMITE_ISENCAO_IRRF,
    PERCENTUAL_FGTS,
    PERCENTUAL_VALE_TRANSPORTE,
    TETO_INSS,
)

__all__ = [
    "CENTAVO",
    "DEDUCAO_DEPENDENTE",
    "FAIXAS_INSS",
    "FAIXAS_IRRF",
    "FAIXAS_SALARIO_FAMILIA",
    "INSS_MAXIMO",
    "LIMITE_ISENCAO_IRRF",
    "PERCENTUAL_FGTS",
    "PERCENTUAL_VALE_TRANSPORTE",
    "TETO_INSS",
]
