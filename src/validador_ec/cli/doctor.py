"""Comando doctor: diagnóstico de configuración y autochequeo del motor.

Por qué existe:
- Permite verificar rápidamente la configuración efectiva y que los vectores
  de referencia sigan validando igual.
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from validador_ec.core.checksum import (
    MODULO_10,
    MODULO_11_PRIVATE,
    MODULO_11_PUBLIC,
    ChecksumScheme,
    compute_check_digit,
)
from validador_ec.core.config import ValidatorSettings, get_user_env_file
from validador_ec.core.domain.document_type import DocumentType
from validador_ec.core.services.validator import IdentifierValidator

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and engine self-checks.")

_console = Console()

# (digits, scheme, expected check digit)
CHECKSUM_VECTORS: tuple[tuple[str, ChecksumScheme, int], ...] = (
    ("092668785", MODULO_10, 6),
    ("060291094", MODULO_10, 5),
    ("099239753", MODULO_11_PRIVATE, 5),
    ("17600015", MODULO_11_PUBLIC, 5),
)

# (number, expected validity, expected type)
IDENTIFIER_VECTORS: tuple[tuple[str, bool, DocumentType], ...] = (
    ("0926687856", True, DocumentType.CEDULA),
    ("0926687858", False, DocumentType.CEDULA),
    ("0602910945001", True, DocumentType.RUC_NATURAL),
    ("0992397535001", True, DocumentType.RUC_PRIVATE),
    ("1760001550001", True, DocumentType.RUC_PUBLIC),
    ("0962893970001", False, DocumentType.RUC_PUBLIC),
)


def run_self_checks(validator: IdentifierValidator | None = None) -> list[tuple[str, bool, str]]:
    """Ejecuta los vectores de referencia; devuelve filas ``(nombre, ok, detalle)``."""

    validator = validator or IdentifierValidator()
    rows: list[tuple[str, bool, str]] = []

    for digits, scheme, expected in CHECKSUM_VECTORS:
        got = compute_check_digit(digits, scheme)
        rows.append((f"{scheme.name} {digits}", got == expected, f"expected {expected}, got {got}"))

    for number, expected_valid, expected_type in IDENTIFIER_VECTORS:
        outcome = validator.check(number)
        ok = outcome.valid is expected_valid and outcome.document_type is expected_type
        detail = f"{outcome.document_type_label or '-'} valid={outcome.valid}"
        rows.append((f"validate {number}", ok, detail))

    return rows


@app.command()
def run() -> None:
    """Show the effective configuration and run the engine self-checks."""

    settings = ValidatorSettings()

    table = Table(title="VALIDADOR-EC Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("User env file", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))
    table.add_row("Log level", "OK", settings.log_level)
    if settings.extended_sequential_bypass:
        table.add_row("Extended sequential bypass", "ON", "Private RUC sequential > 999999 skips check digit")
    else:
        table.add_row("Extended sequential bypass", "OFF", "Check digit always verified")

    failures = 0
    for name, ok, detail in run_self_checks():
        failures += 0 if ok else 1
        table.add_row(name, "OK" if ok else "FAIL", detail)

    _console.print(table)

    if failures:
        _console.print(f"\n[red]{failures} self-check(s) failed.[/red]")
        raise typer.Exit(code=1)
