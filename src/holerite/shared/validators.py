"""Data validators for Holerite."""

import re

# Multipliers for the CNPJ check digits
PESOS_DIGITO_1 = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
PESOS_DIGITO_2 = [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]


def _somente_digitos(valor: str) -> str:
    return re.sub(r"[^0-9]", "", valor or "")


def _digito_verificador(digitos: str, pesos: list[int]) -> int:
    """Módulo 11 check digit over the leading digits."""
    soma = sum(int(digitos[i]) * peso for i, peso in enumerate(pesos))
    resto = soma % 11
    return 0 if resto < 2 else 11 - resto


def validate_cnpj(cnpj: str) -> bool:
    """
    Validate Brazilian CNPJ number.

    Args:
        cnpj: CNPJ string (can contain formatting characters)

    Returns:
        True if valid, False otherwise
    """
    valido, _ = validar_cnpj(cnpj)
    return valido


def format_cnpj(cnpj: str) -> str:
    """Format CNPJ as XX.XXX.XXX/XXXX-XX.

    Input that does not clean to 14 digits is returned unchanged, so a
    formatted value does not imply a valid one.
    """
    digitos = _somente_digitos(cnpj)
    if len(digitos) != 14:
        return cnpj
    return f"{digitos[:2]}.{digitos[2:5]}.{digitos[5:8]}/{digitos[8:12]}-{digitos[12:]}"


def validar_cnpj(cnpj: str) -> tuple[bool, str]:
    """Validate CNPJ and return reason if invalid.

    Uses módulo 11 algorithm for check digit calculation.

    Multipliers:
    - 1st digit: 5,4,3,2,9,8,7,6,5,4,3,2 (positions 0-11)
    - 2nd digit: 6,5,4,3,2,9,8,7,6,5,4,3,2 (positions 0-12)

    Args:
        cnpj: CNPJ string (can contain formatting characters)

    Returns:
        (True, "") if valid
        (False, "reason") if invalid
    """
    # Remove formatting
    cnpj = _somente_digitos(cnpj)

    if len(cnpj) != 14:
        return False, f"CNPJ deve ter 14 dígitos, tem {len(cnpj)}"

    # Reject CNPJs with all same digits
    if cnpj == cnpj[0] * 14:
        return False, "CNPJ com todos dígitos iguais é inválido"

    digito1 = _digito_verificador(cnpj, PESOS_DIGITO_1)
    if int(cnpj[12]) != digito1:
        return False, f"Primeiro dígito verificador inválido (esperado {digito1})"

    digito2 = _digito_verificador(cnpj, PESOS_DIGITO_2)
    if int(cnpj[13]) != digito2:
        return False, f"Segundo dígito verificador inválido (esperado {digito2})"

    return True, ""
