"""JSON reader for payroll inputs.

Accepts a single object or a list of objects with camelCase (``hireDate``)
or snake_case (``hire_date``) keys. Numbers are read as ``Decimal`` so no
monetary value ever passes through ``float``.
"""

import json
from decimal import Decimal
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from holerite.core.models.payroll import PayrollInput
from holerite.shared.exceptions import (
    FieldErrors,
    ParseError,
    UnsupportedFileError,
    ValidationError,
)

# alias (camelCase) -> field name
_CAMPOS_POR_ALIAS = {
    (info.alias or nome): nome for nome, info in PayrollInput.model_fields.items()
}


def _mensagem(erro: dict[str, Any]) -> str:
    tipo = erro["type"]
    if tipo == "missing":
        return "Campo obrigatório"
    if tipo.startswith("date"):
        return "Data inválida"
    return f"Valor inválido ({erro['msg']})"


def _field_errors(exc: PydanticValidationError) -> FieldErrors:
    errors: FieldErrors = {}
    for erro in exc.errors():
        chave = str(erro["loc"][0]) if erro["loc"] else "__root__"
        campo = _CAMPOS_POR_ALIAS.get(chave, chave)
        errors.setdefault(campo, []).append(_mensagem(erro))
    return errors


def read_payroll_file(file_path: Path) -> list[dict[str, Any]]:
    """Read the raw records of a payroll JSON file.

    Raises:
        UnsupportedFileError: If the file is not .json
        ParseError: If the file cannot be read or decoded
    """
    if file_path.suffix.lower() != ".json":
        raise UnsupportedFileError(
            f"Formato de arquivo não suportado: {file_path.suffix}. Use arquivos .json."
        )

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f, parse_float=Decimal)
    except OSError as e:
        raise ParseError(f"Não foi possível ler {file_path.name}: {e}") from e
    except json.JSONDecodeError as e:
        raise ParseError(f"JSON inválido em {file_path.name}: {e}") from e

    registros = data if isinstance(data, list) else [data]
    if not all(isinstance(r, dict) for r in registros):
        raise ParseError(f"{file_path.name} deve conter um objeto ou uma lista de objetos")
    return registros


def parse_payroll_input(data: dict[str, Any]) -> PayrollInput:
    """Build a PayrollInput from a decoded record.

    Raises:
        ValidationError: If a field is missing or has the wrong type
    """
    try:
        return PayrollInput.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(_field_errors(e)) from e


def load_payroll_inputs(file_path: Path) -> list[PayrollInput]:
    """Load every payroll input of a JSON file.

    Type errors of all records are collected; for files with more than one
    record the field names are prefixed with the 1-based record position.

    Raises:
        UnsupportedFileError: If the file is not .json
        ParseError: If the file cannot be read or decoded
        ValidationError: If any record has missing or mistyped fields
    """
    registros = read_payroll_file(file_path)

    inputs: list[PayrollInput] = []
    errors: FieldErrors = {}
    for posicao, registro in enumerate(registros, 1):
        try:
            inputs.append(parse_payroll_input(registro))
        except ValidationError as e:
            for campo, mensagens in e.errors.items():
                chave = campo if len(registros) == 1 else f"{posicao}.{campo}"
                errors[chave] = mensagens

    if errors:
        raise ValidationError(errors)
    return inputs
