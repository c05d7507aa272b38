"""Validador de cédulas y RUC ecuatorianos (reglas del SRI)."""

from validador_ec.core.checksum import compute_check_digit
from validador_ec.core.config import ValidatorSettings
from validador_ec.core.domain.document_type import DocumentType
from validador_ec.core.domain.errors import ErrorKind, ValidationFailure
from validador_ec.core.domain.models import ValidationOutcome
from validador_ec.core.services.validator import IdentifierValidator

__version__ = "0.1.0"

__all__ = [
    "DocumentType",
    "ErrorKind",
    "IdentifierValidator",
    "ValidationFailure",
    "ValidationOutcome",
    "ValidatorSettings",
    "compute_check_digit",
]
