"""
Excepciones de los pipelines de sincronización.

Cualquiera de ellas aborta la corrida actual: no hay reintentos ni
recuperación parcial. Volver a ejecutar el comando es idempotente.
"""
from typing import Optional

from i18n_sync.shared.exceptions.base import AppException, hint_for_status

__all__ = [
    "BatchOperationError",
    "ConfigurationError",
    "FetchError",
    "InvalidMessagesError",
    "ReadError",
    "WriteError",
    "hint_for_status",
]


class ConfigurationError(AppException):
    """Configuración inválida (variables de entorno o argumentos)."""

    error_code = "CONFIGURATION_ERROR"


class FetchError(AppException):
    """Falló la lectura de records desde Airtable (red, auth, not-found)."""

    error_code = "FETCH_ERROR"


class ReadError(AppException):
    """No se pudo leer o parsear un archivo JSON de mensajes."""

    error_code = "READ_ERROR"

    def __init__(self, path: str, reason: str):
        super().__init__(f"No se pudo leer {path}: {reason}")
        self.path = path


class InvalidMessagesError(ReadError):
    """
    El archivo existe y es legible pero su contenido no es un objeto plano
    key -> string. El pull lo reescribe; el push aborta.
    """


class WriteError(AppException):
    """No se pudo respaldar o escribir un archivo JSON de mensajes."""

    error_code = "WRITE_ERROR"

    def __init__(self, path: str, reason: str):
        super().__init__(f"No se pudo escribir {path}: {reason}")
        self.path = path


class BatchOperationError(AppException):
    """
    Falló un lote de create/update en Airtable.

    Los lotes anteriores ya quedaron aplicados: no hay rollback.
    """

    error_code = "BATCH_OPERATION_ERROR"

    def __init__(
        self,
        batch_number: int,
        total_batches: int,
        reason: str,
        status_code: Optional[int] = None
    ):
        super().__init__(
            f"Falló el lote {batch_number}/{total_batches}: {reason}",
            status_code=status_code,
        )
        self.batch_number = batch_number
        self.total_batches = total_batches
