"""
Piezas compartidas por los comandos sync-from-airtable / sync-to-airtable.

Carga .env, construye la configuración una sola vez y traduce los errores
a un mensaje accionable y exit code 1.
"""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger
from pydantic import ValidationError

from i18n_sync.core.config import AirtableConfig, Settings, build_airtable_config
from i18n_sync.infrastructure.external.airtable.airtable_client import AirtableClient
from i18n_sync.infrastructure.repositories.translation_repository import (
    AirtableTranslationRepository,
)
from i18n_sync.shared.exceptions.base import AppException
from i18n_sync.shared.exceptions.sync import ConfigurationError
from i18n_sync.shared.utils.logging_config import configure_logging


def build_parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--messages-dir",
        default=None,
        help="Directorio con en.json y zh-TW.json (por defecto MESSAGES_DIR o ./messages).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Calcula y reporta los cambios sin escribir nada.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Logging en nivel DEBUG."
    )
    return parser


def load_settings(args: argparse.Namespace, env_file: Optional[Path] = None) -> Settings:
    """
    Carga variables desde .env (sin pisar el entorno) y arma Settings.

    También configura loguru, por eso debe llamarse antes de cualquier log.

    Raises:
        ConfigurationError: una variable no tiene el tipo esperado o LOG_LEVEL
            no es un nivel válido.
    """
    load_dotenv(env_file or Path.cwd() / ".env", override=False)
    try:
        settings = Settings()
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err.get("loc"))
        raise ConfigurationError(f"Variables de entorno inválidas: {fields}") from e

    level = "DEBUG" if args.verbose else settings.LOG_LEVEL
    try:
        configure_logging(level, settings.LOG_FILE or None)
    except ValueError as e:
        raise ConfigurationError(f"LOG_LEVEL inválido: {settings.LOG_LEVEL}") from e

    if not settings.has_api_key:
        logger.warning("⚠️  Advertencia: AIRTABLE_API_KEY no está configurada")
        logger.warning("   Crea un archivo .env con tu API key")
        logger.warning("   Referencia: .env.example")
    return settings


def build_repository(settings: Settings) -> tuple[AirtableTranslationRepository, AirtableClient]:
    config: AirtableConfig = build_airtable_config(settings)
    client = AirtableClient(config)
    return AirtableTranslationRepository(client, view=config.view or None), client


def report_failure(error: Exception) -> int:
    """Loguea el error (con sugerencia si aplica) y retorna el exit code."""
    if isinstance(error, AppException):
        logger.error(f"❌ Sincronización fallida: {error.message}")
        if error.hint:
            logger.error(f"   {error.hint}")
    else:
        logger.opt(exception=error).error(f"❌ Sincronización fallida: {error}")
    return 1
