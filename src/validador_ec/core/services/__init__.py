"""Servicios del Core (motor de validación)."""

from validador_ec.core.services.validator import IdentifierValidator

__all__ = ["IdentifierValidator"]
