"""
Raíz de los errores del sincronizador.

Cada subclase fija su `error_code`. Los errores que vienen de una respuesta
de Airtable guardan el status HTTP, y con él el CLI sugiere qué revisar.
"""
from typing import Optional

# Sugerencias para los status que casi siempre son configuración local.
STATUS_HINTS = {
    401: "Verifica que AIRTABLE_API_KEY sea correcta",
    404: "Verifica que AIRTABLE_BASE_ID y AIRTABLE_TABLE_NAME sean correctos",
}


def hint_for_status(status_code: Optional[int]) -> Optional[str]:
    """Sugerencia accionable para un código HTTP conocido (401 / 404)."""
    if status_code is None:
        return None
    return STATUS_HINTS.get(status_code)


class AppException(Exception):
    """
    Error esperado que aborta la corrida con exit code 1.

    Attributes:
        message: Texto que se muestra al usuario
        status_code: Status HTTP de Airtable; None si el error es local
    """

    error_code = "SYNC_ERROR"

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def hint(self) -> Optional[str]:
        return hint_for_status(self.status_code)

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} (HTTP {self.status_code})"
