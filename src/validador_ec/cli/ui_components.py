"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en `validate`, `batch` y `doctor`.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from validador_ec.core.domain.models import ValidationOutcome


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Se omite en modo `--json` para no ensuciar la salida de pipelines.
    """

    title = Text("VALIDADOR-EC", style="bold cyan")
    subtitle = Text("Cédula • RUC persona natural • RUC sociedades", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_outcomes_table(outcomes: Sequence[ValidationOutcome], *, title: str = "Validation") -> Table:
    table = Table(title=title)
    table.add_column("Number", style="cyan", no_wrap=True)
    table.add_column("Type", style="white")
    table.add_column("Province", style="magenta")
    table.add_column("Valid", no_wrap=True)
    table.add_column("Error", style="red")

    for outcome in outcomes:
        table.add_row(
            outcome.number or "-",
            outcome.document_type.label() if outcome.document_type else "-",
            outcome.province_name or "-",
            Text("yes", style="green") if outcome.valid else Text("no", style="red"),
            outcome.error,
        )
    return table


def build_summary_panel(outcomes: Sequence[ValidationOutcome]) -> Panel:
    """Panel con el conteo válidos/inválidos de un lote."""

    valid = sum(1 for o in outcomes if o.valid)
    invalid = len(outcomes) - valid
    body = Text()
    body.append(f"Total: {len(outcomes)}\n")
    body.append(f"Valid: {valid}\n", style="green")
    body.append(f"Invalid: {invalid}", style="red" if invalid else "dim")
    border = "green" if not invalid else "yellow"
    return Panel(body, title=Text("Summary", style="bold"), border_style=border)
