"""Logging del paquete.

Por qué aquí:
- La librería nunca configura handlers por su cuenta: el logger `quran_content`
  lleva un `NullHandler` y la aplicación decide qué hacer con los registros.
- La CLI (y quien quiera) puede activar salida legible con `configure_logging`.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "quran_content"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(
    level: int = logging.INFO,
    *,
    rich: bool = True,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configura el logger `quran_content` con un único handler.

    - `rich=True`: `RichHandler` sobre stderr (modo CLI).
    - `rich=False`: `StreamHandler` clásico con `DEFAULT_FORMAT`.

    Llamarla varias veces reemplaza el handler anterior.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    handler: logging.Handler
    if rich:
        handler = RichHandler(
            console=Console(file=stream or sys.stderr),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt=DEFAULT_DATE_FORMAT))
    else:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
    handler.setLevel(level)
    logger.addHandler(handler)
    return logger


def disable_logging() -> None:
    """Vuelve al estado por defecto de librería (sin salida)."""

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())
