"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El validador y la CLI leen la misma configuración de forma consistente.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "validador-ec"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "validador-ec"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "validador-ec"
    return Path.home() / ".config" / "validador-ec"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class ValidatorSettings(BaseSettings):
    """Configuración central del validador.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para el validador y la CLI.
    """

    model_config = SettingsConfigDict(
        env_prefix="VALIDADOR_EC_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    extended_sequential_bypass: bool = Field(
        default=False,
        description=(
            "Omitir el dígito verificador en RUC de sociedades privadas cuyo secuencial "
            "extendido (posiciones 3-9) supera 999999."
        ),
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )
    show_banner: bool = Field(
        default=True,
        description="Mostrar el banner en la salida interactiva de la CLI.",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


# Defaults de librería: no leen variables de entorno ni `.env`. La configuración
# del entorno solo se carga en el borde (CLI).
DEFAULT_SETTINGS = ValidatorSettings.model_construct()
