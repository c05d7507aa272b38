"""Exportación JSON de resultados de validación.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines (carga masiva de RUCs).
- Permite revisar un lote sin depender de la salida de la terminal.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from validador_ec.core.domain.models import ValidationOutcome


def build_report(outcomes: Iterable[ValidationOutcome]) -> dict:
    items = list(outcomes)
    valid = sum(1 for o in items if o.valid)
    return {
        "total": len(items),
        "valid": valid,
        "invalid": len(items) - valid,
        "outcomes": [o.model_dump(mode="json") for o in items],
    }


def export_outcomes_json(*, outcomes: Iterable[ValidationOutcome], output_path: Path) -> Path:
    """Exporta un lote de `ValidationOutcome` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = build_report(outcomes)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
