"""
Excepciones del sincronizador.
"""
from i18n_sync.shared.exceptions.base import AppException
from i18n_sync.shared.exceptions.sync import (
    BatchOperationError,
    ConfigurationError,
    FetchError,
    InvalidMessagesError,
    ReadError,
    WriteError,
    hint_for_status,
)

__all__ = [
    "AppException",
    "BatchOperationError",
    "ConfigurationError",
    "FetchError",
    "InvalidMessagesError",
    "ReadError",
    "WriteError",
    "hint_for_status",
]
