"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2, Enum).
- El dominio no conoce CLI, archivos ni configuración: solo conceptos del problema.
"""

from validador_ec.core.domain.document_type import DocumentType
from validador_ec.core.domain.errors import ErrorKind, ValidationFailure
from validador_ec.core.domain.models import ValidationOutcome

__all__ = [
    "DocumentType",
    "ErrorKind",
    "ValidationFailure",
    "ValidationOutcome",
]
