"""Tipos de documento que entiende el validador.

Por qué aquí:
- Una única fuente de verdad de las etiquetas para el validador, la CLI y el
  exportador JSON.
"""

from __future__ import annotations

from enum import Enum


class DocumentType(str, Enum):
    """Variantes de documento de identificación ecuatoriano."""

    CEDULA = "cedula"
    RUC_NATURAL = "ruc_natural"
    RUC_PRIVATE = "ruc_private"
    RUC_PUBLIC = "ruc_public"

    @classmethod
    def from_label(cls, label: str) -> "DocumentType":
        """Resuelve una etiqueta como ``"ruc_public"`` (sin distinguir mayúsculas)."""

        return cls(label.strip().lower())

    def label(self) -> str:
        """Etiqueta legible para tablas y logging."""

        return {
            DocumentType.CEDULA: "Cedula",
            DocumentType.RUC_NATURAL: "RUC (natural person)",
            DocumentType.RUC_PRIVATE: "RUC (private company)",
            DocumentType.RUC_PUBLIC: "RUC (public company)",
        }[self]
