"""Configuración de logging (stdlib).

Un único logger con nombre `kanban_projects`: consola y, opcionalmente,
fichero rotativo.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from core.config import AppSettings

LOGGER_NAME = "kanban_projects"


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def setup_logging(
    settings: AppSettings | None = None,
    *,
    rotate_bytes: int = 1_000_000,
    backups: int = 3,
) -> logging.Logger:
    settings = settings or AppSettings()

    logger = get_logger()
    logger.setLevel(getattr(logging, settings.log_level, logging.WARNING))
    logger.handlers.clear()
    logger.propagate = False

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            settings.log_file,
            maxBytes=rotate_bytes,
            backupCount=backups,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
