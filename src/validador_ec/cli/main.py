"""CLI principal (Typer).

Por qué una CLI delgada:
- Toda la semántica vive en `IdentifierValidator`; aquí solo se parsean
  argumentos, se elige el tipo de documento y se presenta el resultado.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path

import typer
from rich.console import Console

from validador_ec.adapters.json_exporter import build_report, export_outcomes_json
from validador_ec.cli import doctor
from validador_ec.cli.ui_components import build_outcomes_table, build_summary_panel, print_banner
from validador_ec.core.app_logging import configure_logging
from validador_ec.core.config import ValidatorSettings
from validador_ec.core.domain.document_type import DocumentType
from validador_ec.core.domain.models import ValidationOutcome
from validador_ec.core.services.validator import IdentifierValidator

app = typer.Typer(no_args_is_help=True, help="Validate Ecuadorian cedulas and RUCs (SRI rules).")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


class DocumentTypeChoice(str, Enum):
    AUTO = "auto"
    CEDULA = DocumentType.CEDULA.value
    RUC_NATURAL = DocumentType.RUC_NATURAL.value
    RUC_PRIVATE = DocumentType.RUC_PRIVATE.value
    RUC_PUBLIC = DocumentType.RUC_PUBLIC.value


def _settings(ctx: typer.Context) -> ValidatorSettings:
    if isinstance(ctx.obj, ValidatorSettings):
        return ctx.obj
    return ValidatorSettings()


def _check(validator: IdentifierValidator, number: str, choice: DocumentTypeChoice) -> ValidationOutcome:
    if choice is DocumentTypeChoice.AUTO:
        return validator.check(number)
    return validator.check_as(number, choice.value)


def _read_numbers(path: Path) -> list[str]:
    numbers: list[str] = []
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        numbers.append(line)
    return numbers


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every failed guard (DEBUG)."),
) -> None:
    settings = ValidatorSettings()
    configure_logging(logging.DEBUG if verbose else settings.log_level_number)
    ctx.obj = settings


@app.command()
def validate(
    ctx: typer.Context,
    numbers: list[str] = typer.Argument(..., help="Cedula (10 digits) or RUC (13 digits) numbers."),
    document_type: DocumentTypeChoice = typer.Option(
        DocumentTypeChoice.AUTO,
        "--type",
        "-t",
        case_sensitive=False,
        help="Force the rules of one document type instead of auto-detecting.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON report instead of a table."),
) -> None:
    """Validate one or more numbers. Exit status 1 if any is invalid."""

    settings = _settings(ctx)
    validator = IdentifierValidator(settings)
    outcomes = [_check(validator, number, document_type) for number in numbers]

    if as_json:
        typer.echo(json.dumps(build_report(outcomes), ensure_ascii=False, indent=2, sort_keys=True))
    else:
        if settings.show_banner:
            print_banner(_console)
        _console.print(build_outcomes_table(outcomes))

    if not all(o.valid for o in outcomes):
        raise typer.Exit(code=1)


@app.command(name="extract-cedula")
def extract_cedula(
    ctx: typer.Context,
    ruc: str = typer.Argument(..., help="Natural person RUC (13 digits)."),
) -> None:
    """Print the cedula behind a natural person RUC."""

    cedula = IdentifierValidator(_settings(ctx)).extract_cedula_from_ruc(ruc)
    if cedula is None:
        _err_console.print("[red]Not a valid natural person RUC.[/red]")
        raise typer.Exit(code=1)
    typer.echo(cedula)


@app.command()
def batch(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="One number per line."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write a JSON report to this path."),
) -> None:
    """Validate every number in a file (blank lines and # comments are skipped)."""

    settings = _settings(ctx)
    validator = IdentifierValidator(settings)
    outcomes = [validator.check(number) for number in _read_numbers(path)]

    _console.print(build_outcomes_table(outcomes, title=path.name))
    _console.print(build_summary_panel(outcomes))

    if output is not None:
        written = export_outcomes_json(outcomes=outcomes, output_path=output)
        _console.print(f"[green]Report saved to:[/green] {written}")

    if not all(o.valid for o in outcomes):
        raise typer.Exit(code=1)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
