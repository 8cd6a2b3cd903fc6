"""
Configuracion de loguru para los comandos de sincronizacion.

Un sink a stderr con formato corto para la narrativa de pasos y,
opcionalmente, un archivo rotado diariamente.
"""
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = "<level>{message}</level>"
VERBOSE_FORMAT = "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <7}</level> | {name}:{line} - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {message}"


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Reemplaza los sinks por defecto de loguru.

    Args:
        level: Nivel minimo para consola (INFO, DEBUG, ...)
        log_file: Ruta de archivo de log; vacio o None desactiva el archivo

    Raises:
        ValueError: si el nivel no existe en loguru (se valida antes de quitar
            los sinks actuales).
    """
    level = level.upper()
    logger.level(level)
    logger.remove()
    logger.add(
        sys.stderr,
        format=VERBOSE_FORMAT if level == "DEBUG" else CONSOLE_FORMAT,
        level=level,
        colorize=None,
    )

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(log_file),
            format=FILE_FORMAT,
            rotation="1 day",
            retention="30 days",
            level="DEBUG",
            encoding="utf-8",
        )
