"""
Cliente REST de Airtable para la tabla de traducciones.

Sin reintentos ni backoff: una corrida que falla se vuelve a ejecutar completa.
"""
from .airtable_client import AirtableApiError, AirtableClient

__all__ = ["AirtableApiError", "AirtableClient"]
