"""
Configuración de fixtures para pytest.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import pytest

from i18n_sync.core.config import SyncPaths
from i18n_sync.infrastructure.external.airtable.airtable_client import AirtableApiError
from i18n_sync.infrastructure.repositories.translation_repository import (
    AirtableTranslationRepository,
)


class FakeAirtableClient:
    """
    Tabla de Airtable en memoria con la misma interfaz que AirtableClient.

    - calls registra (método, tamaño de lote) en orden.
    - fail_on_call: índice (1-based) de la llamada de escritura que debe fallar.
    """

    def __init__(
        self,
        records: Optional[list[dict[str, Any]]] = None,
        *,
        fail_on_call: Optional[int] = None,
        fail_status: int = 422,
        fetch_status: Optional[int] = None,
    ) -> None:
        self.records = [dict(r) for r in (records or [])]
        self.calls: list[tuple[str, int]] = []
        self.fail_on_call = fail_on_call
        self.fail_status = fail_status
        self.fetch_status = fetch_status
        self._next_id = len(self.records) + 1

    def iter_records(self, *, view=None, page_size=100):
        if self.fetch_status is not None:
            raise AirtableApiError(
                f"Airtable request falló {self.fetch_status}", status_code=self.fetch_status
            )
        for rec in self.records:
            yield {"id": rec["id"], "fields": dict(rec["fields"])}

    def _register(self, method: str, size: int) -> None:
        self.calls.append((method, size))
        if self.fail_on_call is not None and len(self.calls) == self.fail_on_call:
            raise AirtableApiError("INVALID_REQUEST", status_code=self.fail_status)

    def create_records(self, fields_list):
        fields_list = list(fields_list)
        self._register("create", len(fields_list))
        created = []
        for fields in fields_list:
            rec = {"id": f"rec{self._next_id:03d}", "fields": dict(fields)}
            self._next_id += 1
            self.records.append(rec)
            created.append(rec)
        return created

    def update_records(self, updates):
        updates = list(updates)
        self._register("update", len(updates))
        by_id = {rec["id"]: rec for rec in self.records}
        updated = []
        for u in updates:
            by_id[u["id"]]["fields"].update(u["fields"])
            updated.append(by_id[u["id"]])
        return updated

    def fields_by_key(self) -> dict[str, dict[str, Any]]:
        return {rec["fields"]["key"]: rec["fields"] for rec in self.records}


def make_record(record_id: str, key: Optional[str], en: Optional[str] = None, zh_tw: Optional[str] = None) -> dict:
    fields: dict[str, Any] = {}
    if key is not None:
        fields["key"] = key
    if en is not None:
        fields["en"] = en
    if zh_tw is not None:
        fields["zh-TW"] = zh_tw
    return {"id": record_id, "fields": fields}


def write_json(path: Path, data: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")


@pytest.fixture
def sync_paths(tmp_path: Path) -> SyncPaths:
    """Directorio de mensajes vacío dentro de tmp_path."""
    return SyncPaths(messages_dir=tmp_path / "messages")


@pytest.fixture
def fake_client() -> FakeAirtableClient:
    return FakeAirtableClient()


@pytest.fixture
def repository(fake_client: FakeAirtableClient) -> AirtableTranslationRepository:
    return AirtableTranslationRepository(fake_client, view="Grid view")
