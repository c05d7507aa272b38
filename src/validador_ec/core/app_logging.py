"""Configuración de logging.

Los módulos del paquete usan `logging.getLogger(__name__)`; aquí solo se
instala el handler (Rich) sobre el logger del paquete.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


PACKAGE_LOGGER = "validador_ec"


def configure_logging(level: str | int = "WARNING", *, console: Console | None = None) -> logging.Logger:
    """Configura el logger del paquete con un único `RichHandler`.

    Es idempotente: los handlers existentes se eliminan antes de añadir el
    nuevo, para no duplicar mensajes si la CLI se invoca varias veces en el
    mismo proceso (tests).
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger.setLevel(level)
    logger.addHandler(handler)
    return logger
