"""Rate tables and limits for monthly payroll calculation.

Values reproduce the legacy payroll rule set (INSS/IRRF tables, salário
família bands and per-dependent deduction) the system was built on.
Brackets are flat: the rate of the bracket the amount falls into applies to
the whole amount, never marginally.
"""

from decimal import ROUND_HALF_UP, Decimal

# === Decimal handling ===

# Working precision for the calculation chain (significant digits)
PRECISAO_DECIMAL = 28

# Monetary results are presented in cents
CENTAVO = Decimal("0.01")
ARREDONDAMENTO_MONETARIO = ROUND_HALF_UP

# === INSS (monthly, applied to gross salary) ===
# Format: (limite_superior, aliquota)

FAIXAS_INSS = [
    (Decimal("1556.94"), Decimal("0.08")),   # 8%
    (Decimal("2594.92"), Decimal("0.09")),   # 9%
    (Decimal("5189.82"), Decimal("0.11")),   # 11%
]

# Above the ceiling the contribution is fixed at the top rate over the ceiling
TETO_INSS = FAIXAS_INSS[-1][0]
INSS_MAXIMO = (TETO_INSS * FAIXAS_INSS[-1][1]).quantize(CENTAVO, ARREDONDAMENTO_MONETARIO)

# === IRRF (monthly, applied to gross - INSS - dependents) ===

# Taxable income up to this value is exempt
LIMITE_ISENCAO_IRRF = Decimal("1903.98")

# Format: (limite_superior, aliquota, parcela_a_deduzir); None = no upper limit
FAIXAS_IRRF = [
    (Decimal("2826.65"), Decimal("0.075"), Decimal("142.80")),   # 7.5%
    (Decimal("3751.05"), Decimal("0.15"), Decimal("354.80")),    # 15%
    (Decimal("4664.68"), Decimal("0.225"), Decimal("636.13")),   # 22.5%
    (None, Decimal("0.275"), Decimal("869.36")),                 # 27.5%
]

# Deduction per dependent
DEDUCAO_DEPENDENTE = Decimal("189.59")

# === Salário família ===
# Format: (limite_salario_base, valor_por_filho)

FAIXAS_SALARIO_FAMILIA = [
    (Decimal("806.80"), Decimal("41.37")),
    (Decimal("1212.64"), Decimal("29.16")),
]

# === Earnings ===

# Overtime is paid at 150% of the hourly rate
MULTIPLICADOR_HORA_EXTRA = Decimal("1.5")

# DSR: 4 rest days over 26 working days per month
DIAS_UTEIS_MES = Decimal("26")
DIAS_DESCANSO_MES = Decimal("4")

# Absence deduction uses a 30-day month
DIAS_MES_COMERCIAL = Decimal("30")

# === Deductions and employer charges ===

PERCENTUAL_VALE_TRANSPORTE = Decimal("0.06")
PERCENTUAL_FGTS = Decimal("0.08")

# === Record limits (input validation) ===

ANO_MINIMO = 1959  # years must be strictly greater
SALARIO_BASE_MAXIMO = Decimal("999999.99")
HORAS_TRABALHADAS_MAXIMO = 999
LIMITE_CAMPOS_DOIS_DIGITOS = 99  # absences, overtime, dependents, children
TAMANHO_MATRICULA = 5
TAMANHO_NOME = 35
TAMANHO_CARGO = 30
