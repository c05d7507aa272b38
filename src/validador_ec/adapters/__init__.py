"""Adaptadores de salida (exportación de resultados)."""

from validador_ec.adapters.json_exporter import build_report, export_outcomes_json

__all__ = ["build_report", "export_outcomes_json"]
