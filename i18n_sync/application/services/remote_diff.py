"""
Plan de cambios contra Airtable (push).

A nivel record la comparación es por field (en, zh-TW) para decidir el update;
a nivel archivo basta con mappings_equal.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping

from i18n_sync.domain.entities.translation import RecordUpdate, RemoteRecord, TranslationRecord


@dataclass
class RemotePlan:
    """Partición disjunta de los records locales."""

    to_create: list[TranslationRecord] = field(default_factory=list)
    to_update: list[RecordUpdate] = field(default_factory=list)
    unchanged: list[TranslationRecord] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.to_create and not self.to_update


def needs_update(existing: RemoteRecord, record: TranslationRecord) -> bool:
    """True si cambia en o zh-TW. Un field ausente en Airtable equivale a ""."""
    return (existing.en or "") != record.en or (existing.zh_tw or "") != record.zh_tw


def plan_remote_changes(
    local_records: Iterable[TranslationRecord],
    snapshot: Mapping[str, RemoteRecord],
) -> RemotePlan:
    """
    Clasifica cada record local en to_create / to_update / unchanged.

    to_update lleva el id remoto y el payload completo (key, en, zh-TW).
    """
    plan = RemotePlan()
    for record in local_records:
        existing = snapshot.get(record.key)
        if existing is None:
            plan.to_create.append(record)
        elif needs_update(existing, record):
            plan.to_update.append(RecordUpdate(record_id=existing.record_id, record=record))
        else:
            plan.unchanged.append(record)
    return plan
