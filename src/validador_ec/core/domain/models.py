"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da un resultado inmutable y autodocumentado (Field) que el CLI y el
  exportador JSON serializan sin conversiones manuales.
- Cada validación devuelve su propio resultado: no hay estado compartido que
  leer después con getters.

Nota:
- `number` se guarda siempre como texto; los ceros iniciales son parte del
  identificador.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from validador_ec.core.domain.document_type import DocumentType
from validador_ec.core.domain.errors import ErrorKind
from validador_ec.core.domain.provinces import province_name as lookup_province_name


class ValidationOutcome(BaseModel):
    """Resultado de una llamada de validación.

    Por qué existe:
    - Reúne validez, mensaje y tipo detectado en un solo valor, de modo que el
      mismo validador puede usarse desde varios hilos sin pisarse.
    - `document_type` se informa aunque la validación falle, en cuanto el tipo
      queda determinado.
    """

    model_config = ConfigDict(frozen=True)

    number: str = Field(
        default="",
        description="Número evaluado, tal como llegó a los guards (solo recortado en auto-detección).",
    )
    valid: bool = Field(
        default=False,
        description="True si todos los guards pasaron.",
    )
    error: str = Field(
        default="",
        description="Mensaje del primer guard que falló; vacío si es válido.",
    )
    error_kind: ErrorKind | None = Field(
        default=None,
        description="Código legible por máquina del guard que falló.",
    )
    document_type: DocumentType | None = Field(
        default=None,
        description="Tipo de documento detectado o forzado (None si no se llegó a determinar).",
    )
    province_code: int | None = Field(
        default=None,
        ge=1,
        le=30,
        description="Código de provincia, presente solo si el guard de provincia pasó.",
    )

    @property
    def document_type_label(self) -> str:
        """Etiqueta del tipo (``"cedula"``, ``"ruc_public"``...) o cadena vacía."""

        return self.document_type.value if self.document_type is not None else ""

    @property
    def province_name(self) -> str | None:
        return lookup_province_name(self.province_code)
