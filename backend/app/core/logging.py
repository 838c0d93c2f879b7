# backend/app/core/logging.py
"""
Inicialización del logging de la aplicación.

Los módulos obtienen su logger con logging.getLogger(__name__); aquí solo se
configura el logger raíz a partir de LOG_LEVEL y LOG_FORMAT.
"""

import logging
from typing import Optional

from app.core.config import settings


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """
    Configura el logger raíz una única vez.

    Los parámetros explícitos tienen prioridad sobre los valores de settings.
    Un nivel desconocido cae en INFO.
    """
    level_name = (level or settings.LOG_LEVEL or "INFO").upper()
    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logging.basicConfig(
        level=log_level,
        format=fmt or settings.LOG_FORMAT,
    )
    # SQLAlchemy es muy ruidoso en DEBUG
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
