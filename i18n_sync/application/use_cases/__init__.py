"""
Casos de uso de la aplicacion.
"""
from .pull_use_cases import PullFromAirtableUseCase, PullResult
from .push_use_cases import PushToAirtableUseCase, PushResult

__all__ = ["PullFromAirtableUseCase", "PullResult", "PushToAirtableUseCase", "PushResult"]
