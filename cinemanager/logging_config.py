"""
Configuration du logging de CineManager via loguru.

Les parametres viennent de Settings (CINEMANAGER_LOG_*) :
- console : messages colores au niveau log_level
- fichier : tout a partir de DEBUG, une ligne JSON par message, avec rotation
"""

import sys
from typing import Optional

from loguru import logger

from .config import Settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | "
    "<level>{message}</level>"
)


def configure_logging(settings: Settings, level: Optional[str] = None) -> None:
    """Remplace les sinks loguru par la console et le fichier de settings.

    Args :
        settings : Parametres de l'application (niveau, fichier, rotation)
        level : Niveau console impose (ex: "DEBUG" avec --verbose)
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=level or settings.log_level,
        format=CONSOLE_FORMAT,
        colorize=True,
    )

    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
    )

    logger.debug("Logging configure", log_file=str(settings.log_file))
