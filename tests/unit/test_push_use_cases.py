"""
Tests del push archivos locales -> Airtable, con un cliente Airtable en memoria.
"""
from __future__ import annotations

import pytest
from loguru import logger

from i18n_sync.application.use_cases.push_use_cases import PushToAirtableUseCase
from i18n_sync.core.config import BatchConfig
from i18n_sync.infrastructure.repositories.translation_repository import (
    AirtableTranslationRepository,
)
from i18n_sync.shared.exceptions.sync import BatchOperationError, ReadError
from tests.conftest import FakeAirtableClient, make_record, write_json


def _use_case(client, sync_paths, sleeps=None, **kwargs) -> PushToAirtableUseCase:
    sleeps = sleeps if sleeps is not None else []
    return PushToAirtableUseCase(
        AirtableTranslationRepository(client),
        sync_paths,
        BatchConfig(batch_size=10, delay_s=0.2),
        sleep=sleeps.append,
        **kwargs,
    )


def test_push_creates_updates_and_skips(sync_paths) -> None:
    write_json(sync_paths.en, {"a": "1", "b": "2", "x": "new"})
    write_json(sync_paths.zh_tw, {"b": "兩", "c": "3", "x": "y"})
    client = FakeAirtableClient([
        make_record("recX", "x", en="old", zh_tw="y"),
        make_record("recB", "b", en="2", zh_tw="兩"),
    ])

    result = _use_case(client, sync_paths).execute()

    assert (result.created, result.updated, result.unchanged) == (2, 1, 1)
    assert client.calls == [("create", 2), ("update", 1)]
    fields = client.fields_by_key()
    assert fields["a"] == {"key": "a", "en": "1", "zh-TW": ""}
    assert fields["c"] == {"key": "c", "en": "", "zh-TW": "3"}
    assert fields["x"] == {"key": "x", "en": "new", "zh-TW": "y"}


def test_push_is_idempotent(sync_paths) -> None:
    write_json(sync_paths.en, {"a": "1"})
    write_json(sync_paths.zh_tw, {"a": "一"})
    client = FakeAirtableClient()

    _use_case(client, sync_paths).execute()
    second = _use_case(client, sync_paths).execute()

    assert (second.created, second.updated, second.unchanged) == (0, 0, 1)
    assert client.calls == [("create", 1)]


def test_push_chunks_creates_in_batches_of_ten(sync_paths) -> None:
    write_json(sync_paths.en, {f"key{i:02d}": str(i) for i in range(23)})
    client = FakeAirtableClient()
    sleeps: list[float] = []

    _use_case(client, sync_paths, sleeps=sleeps).execute()

    assert client.calls == [("create", 10), ("create", 10), ("create", 3)]
    assert sleeps == [0.2, 0.2]


def test_failed_batch_aborts_and_leaves_previous_batches_applied(sync_paths) -> None:
    write_json(sync_paths.en, {f"key{i:02d}": str(i) for i in range(15)})
    client = FakeAirtableClient(fail_on_call=2, fail_status=422)

    with pytest.raises(BatchOperationError) as exc_info:
        _use_case(client, sync_paths).execute()

    assert exc_info.value.batch_number == 2
    assert exc_info.value.status_code == 422
    assert len(client.records) == 10


def test_dry_run_makes_no_remote_writes(sync_paths) -> None:
    write_json(sync_paths.en, {"a": "1"})
    client = FakeAirtableClient([make_record("recA", "a", en="0")])

    result = _use_case(client, sync_paths, dry_run=True).execute()

    assert result.updated == 1
    assert client.calls == []
    assert client.fields_by_key()["a"]["en"] == "0"


def test_null_local_values_are_pushed_as_blank(sync_paths) -> None:
    write_json(sync_paths.en, {"a": None, "b": "B"})
    client = FakeAirtableClient()

    result = _use_case(client, sync_paths).execute()

    assert result.created == 2
    assert client.fields_by_key()["a"] == {"key": "a", "en": "", "zh-TW": ""}
    assert client.fields_by_key()["b"] == {"key": "b", "en": "B", "zh-TW": ""}


def test_missing_files_push_nothing(sync_paths) -> None:
    client = FakeAirtableClient()
    result = _use_case(client, sync_paths).execute()
    assert (result.created, result.updated, result.unchanged) == (0, 0, 0)
    assert client.calls == []


def test_invalid_local_json_aborts_before_fetch(sync_paths) -> None:
    sync_paths.messages_dir.mkdir(parents=True)
    sync_paths.en.write_text("{", encoding="utf-8")
    client = FakeAirtableClient(fetch_status=500)

    with pytest.raises(ReadError):
        _use_case(client, sync_paths).execute()


def test_nothing_to_send_is_reported_without_batches(sync_paths) -> None:
    write_json(sync_paths.en, {"a": "1"})
    client = FakeAirtableClient([make_record("recA", "a", en="1")])
    messages: list[str] = []
    handler_id = logger.add(messages.append, format="{message}")
    try:
        result = _use_case(client, sync_paths).execute()
    finally:
        logger.remove(handler_id)

    assert result.unchanged == 1
    assert client.calls == []
    assert any("Nada que enviar a Airtable" in m for m in messages)
    assert not any("Creando records" in m for m in messages)
