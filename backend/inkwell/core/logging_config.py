# backend/inkwell/core/logging_config.py
"""
Configuración del logging de la aplicación.

Cada módulo obtiene su propio logger con ``logging.getLogger(__name__)``;
aquí solo se configura el logger raíz una vez, al arrancar la aplicación,
con el nivel y el formato definidos en ``settings``.
"""

import logging
import sys

from inkwell.core.config import settings


def configure_logging() -> None:
    """
    Configura el logger raíz con un único handler hacia stderr.

    Lee LOG_LEVEL y LOG_FORMAT de la configuración. Si el nivel no es
    válido se usa INFO.
    """
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Evitar handlers duplicados si la app se recarga
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(settings.LOG_FORMAT))
    root_logger.addHandler(console_handler)

    # SQLAlchemy es muy verboso en INFO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    root_logger.info(f"Logging configurado: level={settings.LOG_LEVEL}")
