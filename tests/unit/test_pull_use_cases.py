"""
Tests del pull Airtable -> archivos locales, con un cliente Airtable en memoria.
"""
from __future__ import annotations

from datetime import datetime, timezone

import pytest
from loguru import logger

from i18n_sync.application.use_cases.pull_use_cases import PullFromAirtableUseCase
from i18n_sync.infrastructure.repositories.translation_repository import (
    AirtableTranslationRepository,
)
from i18n_sync.infrastructure.storage.message_files import read_messages
from i18n_sync.shared.exceptions.sync import FetchError
from tests.conftest import FakeAirtableClient, make_record, write_json

FIXED_NOW = datetime(2026, 10, 19, 8, 30, 12, 345000, tzinfo=timezone.utc)


def _use_case(client, sync_paths, **kwargs) -> PullFromAirtableUseCase:
    return PullFromAirtableUseCase(
        AirtableTranslationRepository(client), sync_paths, clock=lambda: FIXED_NOW, **kwargs
    )


def _backups(sync_paths):
    return sorted(p.name for p in sync_paths.messages_dir.glob("*.backup-*.json"))


def test_first_pull_creates_sorted_files_without_backup(sync_paths) -> None:
    client = FakeAirtableClient([
        make_record("rec1", "nav.home", en="Home", zh_tw="首頁"),
        make_record("rec2", "auth.login", en="Login"),
        make_record("rec3", None, en="ignored"),
    ])
    result = _use_case(client, sync_paths).execute()

    assert result.records_read == 3
    assert list(read_messages(sync_paths.en)) == ["auth.login", "nav.home"]
    assert read_messages(sync_paths.zh_tw) == {"nav.home": "首頁"}
    assert result.files["en"].backup_path is None
    assert result.files["en"].summary.added == ["auth.login", "nav.home"]
    assert _backups(sync_paths) == []


def test_second_pull_without_remote_changes_writes_nothing(sync_paths) -> None:
    client = FakeAirtableClient([make_record("rec1", "a", en="A", zh_tw="甲")])
    _use_case(client, sync_paths).execute()
    en_stat = sync_paths.en.stat()
    zh_stat = sync_paths.zh_tw.stat()

    result = _use_case(client, sync_paths).execute()

    assert not result.changed
    assert sync_paths.en.stat().st_mtime_ns == en_stat.st_mtime_ns
    assert sync_paths.zh_tw.stat().st_mtime_ns == zh_stat.st_mtime_ns
    assert _backups(sync_paths) == []


def test_only_changed_locale_is_backed_up_and_rewritten(sync_paths) -> None:
    write_json(sync_paths.en, {"a": "A", "b": "B"})
    write_json(sync_paths.zh_tw, {"a": "甲", "b": "舊"})
    en_before = sync_paths.en.read_bytes()
    en_mtime = sync_paths.en.stat().st_mtime_ns
    client = FakeAirtableClient([
        make_record("rec1", "a", en="A", zh_tw="甲"),
        make_record("rec2", "b", en="B", zh_tw="乙"),
    ])

    result = _use_case(client, sync_paths).execute()

    assert _backups(sync_paths) == ["zh-TW.backup-2026-10-19T08-30-12-345Z.json"]
    assert sync_paths.en.read_bytes() == en_before
    assert sync_paths.en.stat().st_mtime_ns == en_mtime
    assert read_messages(sync_paths.zh_tw) == {"a": "甲", "b": "乙"}
    assert not result.files["en"].written
    assert result.files["zh-TW"].written
    assert result.files["zh-TW"].summary.modified == ["b"]


def test_pull_reports_added_and_removed_keys(sync_paths) -> None:
    write_json(sync_paths.en, {"a": "1", "b": "2"})
    client = FakeAirtableClient([make_record("rec1", "a", en="1"), make_record("rec2", "c", en="3")])

    summary = _use_case(client, sync_paths).execute().files["en"].summary

    assert summary.added == ["c"]
    assert summary.modified == []
    assert summary.removed == ["b"]


def test_dry_run_touches_nothing(sync_paths) -> None:
    write_json(sync_paths.en, {"a": "old"})
    before = sync_paths.en.read_bytes()
    client = FakeAirtableClient([make_record("rec1", "a", en="new")])

    result = _use_case(client, sync_paths, dry_run=True).execute()

    assert result.changed
    assert result.files["en"].summary.modified == ["a"]
    assert not result.files["en"].written
    assert sync_paths.en.read_bytes() == before
    assert not sync_paths.zh_tw.exists()
    assert _backups(sync_paths) == []


def test_fetch_failure_aborts_before_touching_files(sync_paths) -> None:
    write_json(sync_paths.en, {"a": "A"})
    before = sync_paths.en.read_bytes()

    with pytest.raises(FetchError) as exc_info:
        _use_case(FakeAirtableClient(fetch_status=404), sync_paths).execute()

    assert exc_info.value.status_code == 404
    assert sync_paths.en.read_bytes() == before
    assert _backups(sync_paths) == []


def test_null_values_in_existing_file_are_rewritten(sync_paths) -> None:
    write_json(sync_paths.en, {"a": None})
    write_json(sync_paths.zh_tw, {"a": "甲"})
    client = FakeAirtableClient([make_record("rec1", "a", en="A", zh_tw="甲")])

    result = _use_case(client, sync_paths).execute()

    assert _backups(sync_paths) == ["en.backup-2026-10-19T08-30-12-345Z.json"]
    assert read_messages(sync_paths.en) == {"a": "A"}
    assert result.files["en"].written
    assert result.files["en"].summary.modified == ["a"]
    assert not result.files["zh-TW"].written


def test_existing_file_equal_after_blanking_nulls_is_still_rewritten(sync_paths) -> None:
    write_json(sync_paths.en, {"a": None})
    write_json(sync_paths.zh_tw, {})
    client = FakeAirtableClient([make_record("rec1", "a", en="")])

    messages: list[str] = []
    handler_id = logger.add(messages.append, format="{message}")
    try:
        result = _use_case(client, sync_paths).execute()
    finally:
        logger.remove(handler_id)

    assert result.files["en"].written
    assert not result.files["en"].summary.has_changes
    assert not any("en.json cambios:" in m for m in messages)
    assert sync_paths.en.read_text(encoding="utf-8") == '{\n  "a": ""\n}\n'


def test_corrupt_existing_file_is_backed_up_and_rewritten(sync_paths) -> None:
    sync_paths.messages_dir.mkdir(parents=True, exist_ok=True)
    sync_paths.en.write_text("{ not json", encoding="utf-8")
    client = FakeAirtableClient([make_record("rec1", "a", en="A")])

    result = _use_case(client, sync_paths).execute()

    backup = sync_paths.messages_dir / "en.backup-2026-10-19T08-30-12-345Z.json"
    assert backup.read_text(encoding="utf-8") == "{ not json"
    assert read_messages(sync_paths.en) == {"a": "A"}
    assert result.files["en"].summary.added == ["a"]
