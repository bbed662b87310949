"""Logging de la aplicación (Rich en stderr).

stdout queda reservado para el resultado de la tirada; todo diagnóstico va
por stderr para no romper pipelines (`dice-roll 3d6 | ...`).
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from core.config import AppSettings

LOGGER_NAME = "dice_roll"


def configure_logging(settings: AppSettings | None = None) -> logging.Logger:
    """Configura el logger raíz de la app y lo devuelve.

    Es idempotente: llamadas repetidas (p.ej. en tests) no duplican handlers.
    """

    settings = settings or AppSettings()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.log_level)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
