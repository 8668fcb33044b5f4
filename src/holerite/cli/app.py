"""Main Typer application for Holerite."""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from holerite import __version__
from holerite.cli.console import console, print_error, print_success, print_warning
from holerite.core.calculators import calculate_payroll
from holerite.core.models import PayrollResult
from holerite.core.services import RecordService
from holerite.core.validation import validate_record
from holerite.infrastructure.parsers import (
    load_payroll_inputs,
    parse_payroll_input,
    read_payroll_file,
)
from holerite.infrastructure.repositories import InMemoryPayrollRepository
from holerite.shared.exceptions import (
    DuplicateRecordError,
    FieldErrors,
    ParseError,
    ValidationError,
)
from holerite.shared.formatters import format_currency, format_reference_period
from holerite.shared.logging_config import configure_logging
from holerite.shared.validators import format_cnpj, validar_cnpj

app = typer.Typer(
    name="holerite",
    help="Cálculo de folha de pagamento: INSS, IRRF, FGTS e salário líquido",
    add_completion=True,
    no_args_is_help=True,
)

ArquivoFolha = Annotated[
    Path,
    typer.Argument(
        help="Arquivo .json com um registro ou uma lista de registros",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Holerite v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            help="Mostra a versão e sai",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Mostra logs de depuração"),
    ] = False,
) -> None:
    """Holerite - Cálculo de folha de pagamento."""
    configure_logging(verbose)


@app.command()
def calcular(
    arquivo: ArquivoFolha,
    output: Annotated[
        str,
        typer.Option(
            "--output",
            "-o",
            help="Formato de saída: table, json",
        ),
    ] = "table",
) -> None:
    """Valida e calcula a folha de cada registro do arquivo."""
    try:
        inputs = load_payroll_inputs(arquivo)
    except ValidationError as e:
        print_error("Arquivo com campos ausentes ou de tipo inválido")
        _print_field_errors(e.errors)
        raise typer.Exit(1)
    except ParseError as e:
        print_error(escape(str(e)))
        raise typer.Exit(1)

    saida_json: list[dict] = []
    invalidos = 0

    for payroll_input in inputs:
        errors = validate_record(payroll_input)

        if errors:
            invalidos += 1
            if output == "json":
                saida_json.append(
                    {"employeeId": payroll_input.employee_id, "errors": errors}
                )
            else:
                console.print()
                matricula = escape(payroll_input.employee_id) or "-"
                print_error(f"Matrícula {matricula}: campo(s) inválido(s)")
                _print_field_errors(errors)
            continue

        result = calculate_payroll(payroll_input)
        if output == "json":
            saida_json.append(result.model_dump(mode="json", by_alias=True))
        else:
            _print_payslip(result)

    if output == "json":
        print(json.dumps(saida_json, indent=2, ensure_ascii=False))

    if invalidos:
        raise typer.Exit(1)


@app.command()
def processar(arquivo: ArquivoFolha) -> None:
    """Cadastra os registros do arquivo, rejeitando duplicados e inválidos."""
    try:
        registros = read_payroll_file(arquivo)
    except ParseError as e:
        print_error(escape(str(e)))
        raise typer.Exit(1)

    service = RecordService(InMemoryPayrollRepository())

    table = Table(show_header=True, header_style="bold", title="Processamento")
    table.add_column("#", style="dim", width=4)
    table.add_column("Matrícula")
    table.add_column("Situação")
    table.add_column("Líquido", justify="right")
    table.add_column("Detalhes", overflow="fold")

    rejeitados = 0
    for posicao, registro in enumerate(registros, 1):
        matricula = escape(str(registro.get("employeeId", registro.get("employee_id", "-"))))
        try:
            record = service.create(parse_payroll_input(registro))
        except ValidationError as e:
            rejeitados += 1
            table.add_row(
                str(posicao), matricula, "[error]Inválido[/error]", "-", escape(_resumo(e.errors))
            )
            continue
        except DuplicateRecordError as e:
            rejeitados += 1
            table.add_row(
                str(posicao), matricula, "[warning]Duplicado[/warning]", "-", escape(str(e))
            )
            continue

        table.add_row(
            str(posicao),
            record.employee_id,
            "[success]Cadastrado[/success]",
            format_currency(record.result.net_salary),
            f"id {record.id}",
        )

    console.print()
    console.print(table)

    cadastrados = len(service.list_all())
    if rejeitados:
        print_warning(f"{cadastrados} cadastrado(s), {rejeitados} rejeitado(s)")
        raise typer.Exit(1)
    print_success(f"{cadastrados} registro(s) cadastrado(s)")


@app.command()
def cnpj(
    valor: Annotated[str, typer.Argument(help="CNPJ com ou sem formatação")],
) -> None:
    """Valida e formata um CNPJ."""
    valido, motivo = validar_cnpj(valor)

    if not valido:
        print_error(f"CNPJ inválido: {motivo}")
        raise typer.Exit(1)

    print_success(f"CNPJ válido: {format_cnpj(valor)}")


def _resumo(errors: FieldErrors) -> str:
    return "; ".join(f"{campo}: {', '.join(msgs)}" for campo, msgs in errors.items())


def _print_field_errors(errors: FieldErrors) -> None:
    """Print the field error map as a table."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Campo", style="cyan")
    table.add_column("Erro", overflow="fold")

    for campo, mensagens in errors.items():
        for mensagem in mensagens:
            table.add_row(escape(campo), escape(mensagem))

    console.print(table)


def _print_payslip(result: PayrollResult) -> None:
    """Print one payslip: header panel plus earnings/deductions table."""
    console.print()
    console.print(
        Panel.fit(
            f"[header]Funcionário:[/header] {result.name} (matrícula {result.employee_id})\n"
            f"[header]Cargo:[/header] {result.position}\n"
            f"[header]CNPJ:[/header] {format_cnpj(result.company_tax_id)}\n"
            f"[header]Admissão:[/header] {result.hire_date.strftime('%d/%m/%Y')}\n"
            f"[header]Referência:[/header] "
            f"{format_reference_period(result.reference_month, result.reference_year)}",
            title="Holerite",
            border_style="blue",
        )
    )

    table = Table(show_header=True, header_style="bold")
    table.add_column("Descrição", style="cyan")
    table.add_column("Referência", justify="right")
    table.add_column("Proventos", justify="right", style="currency")
    table.add_column("Descontos", justify="right", style="currency_negative")

    table.add_row("Salário base", f"{result.working_hours}h", format_currency(result.base_salary), "")
    if result.total_overtime:
        table.add_row("Horas extras 50%", f"{result.overtime_hours}h", format_currency(result.total_overtime), "")
        table.add_row("DSR sobre horas extras", "", format_currency(result.weekly_rest), "")
    table.add_row("INSS", "", "", format_currency(result.inss))
    table.add_row("IRRF", f"{result.dependent_count} dep.", "", format_currency(result.irrf))
    if result.transportation_voucher_deduction:
        table.add_row("Vale-transporte", "6%", "", format_currency(result.transportation_voucher_deduction))
    if result.absence_deduction:
        table.add_row("Faltas", f"{result.absence_days}d", "", format_currency(result.absence_deduction))

    console.print(table)

    console.print(f"[header]Salário bruto:[/header] [value]{format_currency(result.gross_salary)}[/value]")
    console.print(f"[header]Total de descontos:[/header] [value]{format_currency(result.total_deductions)}[/value]")
    console.print(f"[header]Salário líquido:[/header] [value]{format_currency(result.net_salary)}[/value]")
    console.print(
        f"[muted]Dedução por dependentes (base IRRF): {format_currency(result.dependent_deduction)} | "
        f"Salário família: {format_currency(result.family_allowance)} | "
        f"FGTS (empregador): {format_currency(result.fgts)}[/muted]"
    )


if __name__ == "__main__":
    app()
