"""
Escritura por lotes hacia Airtable.

Airtable acepta máximo 10 records por llamada y limita el rate por base,
por eso los lotes se procesan en secuencia con una pausa fija entre ellos.
"""
from __future__ import annotations

import math
import time
from typing import Any, Callable, Optional, Sequence, TypeVar

from loguru import logger

from i18n_sync.core.config import AIRTABLE_MAX_BATCH_SIZE
from i18n_sync.shared.exceptions.sync import BatchOperationError

T = TypeVar("T")

BatchOperation = Callable[[list[T]], Sequence[Any]]


def chunked(items: Sequence[T], size: int) -> list[list[T]]:
    """Parte `items` en listas de tamaño `size` (la última puede ser menor)."""
    if size < 1:
        raise ValueError("El tamaño de lote debe ser mayor que 0")
    return [list(items[i:i + size]) for i in range(0, len(items), size)]


def run_in_batches(
    items: Sequence[T],
    operation: BatchOperation,
    *,
    batch_size: int = AIRTABLE_MAX_BATCH_SIZE,
    delay_s: float = 0.2,
    sleep: Optional[Callable[[float], None]] = None,
) -> list[Any]:
    """
    Aplica `operation` a cada lote, en orden y nunca en paralelo.

    - Pausa `delay_s` entre lotes, no después del último.
    - El primer lote que falla aborta todo con BatchOperationError; los lotes
      previos quedan aplicados (no hay rollback ni reintento).

    Returns:
        Resultados concatenados de todos los lotes.
    """
    sleep = sleep or time.sleep
    batches = chunked(items, batch_size)
    total_batches = len(batches)
    results: list[Any] = []
    processed = 0

    for index, batch in enumerate(batches, start=1):
        try:
            result = operation(batch)
        except Exception as e:
            logger.error(f"Falló el procesamiento por lotes (lote {index}/{total_batches}): {e}")
            raise BatchOperationError(
                batch_number=index,
                total_batches=total_batches,
                reason=str(e),
                status_code=getattr(e, "status_code", None),
            ) from e

        results.extend(result or [])
        processed += len(batch)
        logger.info(f"   Procesados {processed}/{len(items)} records")

        if index < total_batches:
            sleep(delay_s)

    return results


def batch_count(total: int, batch_size: int = AIRTABLE_MAX_BATCH_SIZE) -> int:
    return math.ceil(total / batch_size) if total else 0
