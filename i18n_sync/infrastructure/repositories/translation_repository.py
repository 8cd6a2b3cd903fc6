"""
Repositorio de traducciones respaldado por la tabla de Airtable.

Traduce entre los dicts crudos del cliente HTTP y las entidades del dominio,
y convierte los errores de Airtable en FetchError.
"""
from __future__ import annotations

from typing import Any, Optional

from loguru import logger

from i18n_sync.domain.entities.translation import RecordUpdate, RemoteRecord, TranslationRecord
from i18n_sync.infrastructure.external.airtable.airtable_client import (
    AirtableApiError,
    AirtableClient,
)
from i18n_sync.shared.exceptions.sync import FetchError


class AirtableTranslationRepository:
    """
    Acceso a la tabla de traducciones.

    Uso:
        repo = AirtableTranslationRepository(client, view="Grid view")
        records = repo.fetch_all()
        repo.create([TranslationRecord("a", "A", "甲")])
    """

    def __init__(self, client: AirtableClient, *, view: Optional[str] = None) -> None:
        self._client = client
        self._view = view

    def fetch_all(self) -> list[RemoteRecord]:
        """
        Lee todos los records de la tabla, página por página.

        Raises:
            FetchError: si falla cualquier página (se conserva el status HTTP).
        """
        try:
            return [
                RemoteRecord.from_fields(rec["id"], rec.get("fields") or {})
                for rec in self._client.iter_records(view=self._view)
            ]
        except AirtableApiError as e:
            raise FetchError(
                f"Error al obtener records de Airtable: {e.message}",
                status_code=e.status_code,
            ) from e

    def fetch_snapshot(self) -> dict[str, RemoteRecord]:
        """
        Records existentes indexados por key.

        - Records sin key se ignoran.
        - Si hay keys duplicadas, gana el primero en el orden de la vista.
        """
        snapshot: dict[str, RemoteRecord] = {}
        for record in self.fetch_all():
            if not record.key:
                continue
            if record.key in snapshot:
                logger.debug(
                    f"Key duplicada en Airtable '{record.key}' (record {record.record_id}); se ignora"
                )
                continue
            snapshot[record.key] = record
        return snapshot

    def create(self, records: list[TranslationRecord]) -> list[dict[str, Any]]:
        """Crea un lote (≤10) de records nuevos."""
        return self._client.create_records(r.to_fields() for r in records)

    def update(self, updates: list[RecordUpdate]) -> list[dict[str, Any]]:
        """Actualiza un lote (≤10) enviando el payload completo de cada record."""
        return self._client.update_records(u.to_payload() for u in updates)
