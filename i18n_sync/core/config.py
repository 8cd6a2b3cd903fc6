"""
Configuracion central del sincronizador.

Lee variables de entorno una sola vez al arrancar y las convierte en objetos
de configuracion explicitos que se pasan a cada componente. El .env lo carga
el CLI con python-dotenv antes de construir Settings.
No hay estado global: el CLI construye Settings y de ahi AirtableConfig / SyncPaths.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings

from i18n_sync.shared.exceptions.sync import ConfigurationError

# Limite de Airtable: maximo 10 records por llamada de create/update.
AIRTABLE_MAX_BATCH_SIZE = 10


class Settings(BaseSettings):
    """
    Configuracion leida del entorno.

    - AIRTABLE_API_KEY vacio no es fatal: se advierte y Airtable respondera 401.
    - MESSAGES_DIR es relativo al directorio de trabajo si no es absoluto.
    """

    # Airtable
    AIRTABLE_API_KEY: str = Field(default="")
    AIRTABLE_BASE_ID: str = Field(default="appEU2lQbZMggJjxk")
    AIRTABLE_TABLE_NAME: str = Field(default="i18n")
    AIRTABLE_VIEW: str = Field(default="Grid view")
    AIRTABLE_API_URL: str = Field(default="https://api.airtable.com/v0")
    AIRTABLE_TIMEOUT_S: int = Field(default=30)

    # Archivos de mensajes
    MESSAGES_DIR: str = Field(default="messages")

    # Escritura por lotes hacia Airtable
    SYNC_BATCH_SIZE: int = Field(default=AIRTABLE_MAX_BATCH_SIZE)
    SYNC_BATCH_DELAY_MS: int = Field(default=200)

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE: str = Field(default="")

    @computed_field
    @property
    def has_api_key(self) -> bool:
        """Indica si se configuro un token de Airtable."""
        return bool(self.AIRTABLE_API_KEY.strip())

    class Config:
        """Configuracion de Pydantic."""
        case_sensitive = True
        extra = "ignore"


@dataclass(frozen=True)
class AirtableConfig:
    """Credenciales y ubicacion de la tabla de traducciones en Airtable."""

    api_key: str
    base_id: str
    table_name: str
    view: str = "Grid view"
    api_url: str = "https://api.airtable.com/v0"
    timeout_s: int = 30


@dataclass(frozen=True)
class BatchConfig:
    """Tamano de lote y pausa entre lotes para escrituras remotas."""

    batch_size: int = AIRTABLE_MAX_BATCH_SIZE
    delay_s: float = 0.2


@dataclass(frozen=True)
class SyncPaths:
    """Rutas de los archivos de mensajes por locale."""

    messages_dir: Path

    @property
    def en(self) -> Path:
        return self.messages_dir / "en.json"

    @property
    def zh_tw(self) -> Path:
        return self.messages_dir / "zh-TW.json"


def build_airtable_config(settings: Settings) -> AirtableConfig:
    """
    Construye AirtableConfig validando lo minimo indispensable.

    Raises:
        ConfigurationError: si base o tabla estan vacios.
    """
    base_id = settings.AIRTABLE_BASE_ID.strip()
    table_name = settings.AIRTABLE_TABLE_NAME.strip()
    if not base_id:
        raise ConfigurationError("AIRTABLE_BASE_ID no puede estar vacio")
    if not table_name:
        raise ConfigurationError("AIRTABLE_TABLE_NAME no puede estar vacio")

    return AirtableConfig(
        api_key=settings.AIRTABLE_API_KEY.strip(),
        base_id=base_id,
        table_name=table_name,
        view=settings.AIRTABLE_VIEW,
        api_url=settings.AIRTABLE_API_URL.rstrip("/"),
        timeout_s=settings.AIRTABLE_TIMEOUT_S,
    )


def build_batch_config(settings: Settings) -> BatchConfig:
    """
    Construye BatchConfig. El tamano de lote nunca supera el limite de Airtable.
    """
    if settings.SYNC_BATCH_SIZE < 1:
        raise ConfigurationError("SYNC_BATCH_SIZE debe ser mayor que 0")
    if settings.SYNC_BATCH_DELAY_MS < 0:
        raise ConfigurationError("SYNC_BATCH_DELAY_MS no puede ser negativo")

    return BatchConfig(
        batch_size=min(settings.SYNC_BATCH_SIZE, AIRTABLE_MAX_BATCH_SIZE),
        delay_s=settings.SYNC_BATCH_DELAY_MS / 1000.0,
    )


def build_sync_paths(settings: Settings, messages_dir: Optional[str] = None) -> SyncPaths:
    """Resuelve el directorio de mensajes (el argumento del CLI tiene prioridad)."""
    return SyncPaths(messages_dir=Path(messages_dir or settings.MESSAGES_DIR))
