"""Errores de validación del dominio.

Por qué aquí:
- Los mensajes son un contrato estable (integraciones comparan el texto literal),
  así que viven en un único lugar.
- `ErrorKind` agrega un código legible por máquina sin romper ese contrato.
"""

from __future__ import annotations

from enum import Enum


MSG_EMPTY = "Value cannot be empty"
MSG_NON_DIGIT = "Value can only contain digits"
MSG_LENGTH = "Value must have {length} characters"
MSG_PROVINCE = "Province code (first two digits) must be between 01-24 or 30"
MSG_THIRD_DIGIT_NATURAL = "Third digit must be between 0 and 5 for cedula and natural person RUC"
MSG_THIRD_DIGIT_PRIVATE = "Third digit must be 9 for private companies"
MSG_THIRD_DIGIT_PUBLIC = "Third digit must be 6 for public companies"
MSG_ESTABLISHMENT = "Establishment code cannot be 0"
MSG_CHECK_DIGIT = "Check digit validation failed"
MSG_UNKNOWN_RUC_TYPE = "Invalid third digit for RUC. Must be 0-5 (natural), 6 (public), or 9 (private)"
MSG_UNKNOWN_LENGTH = "Invalid document length. Cedula must have 10 digits, RUC must have 13 digits"


class ErrorKind(str, Enum):
    """Código del guard que rechazó el número."""

    EMPTY = "empty"
    NON_DIGIT = "non_digit"
    LENGTH = "length"
    PROVINCE = "province"
    THIRD_DIGIT = "third_digit"
    ESTABLISHMENT = "establishment"
    CHECK_DIGIT = "check_digit"
    UNKNOWN_RUC_TYPE = "unknown_ruc_type"
    UNKNOWN_LENGTH = "unknown_length"


class ValidationFailure(Exception):
    """Fallo de un guard.

    Se lanza dentro del pipeline y se convierte en `ValidationOutcome` en el
    borde del validador; nunca sale de las operaciones públicas.
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
