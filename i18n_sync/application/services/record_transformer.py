"""
Transformaciones entre records de Airtable y mappings por locale.

- pull: records remotos -> {"en": {...}, "zh-TW": {...}} ordenados por key
- push: mappings locales -> un TranslationRecord por key (unión de ambos locales)
"""
from __future__ import annotations

from typing import Iterable

from loguru import logger

from i18n_sync.domain.entities.translation import (
    LOCALES,
    RemoteRecord,
    TranslationMapping,
    TranslationRecord,
)


def sort_mapping(mapping: TranslationMapping) -> TranslationMapping:
    """Nuevo dict con las keys en orden lexicográfico (orden de serialización)."""
    return {key: mapping[key] for key in sorted(mapping)}


def records_to_mappings(records: Iterable[RemoteRecord]) -> dict[str, TranslationMapping]:
    """
    Construye un mapping por locale a partir de los records remotos.

    Reglas:
    - Record sin key (None o "") se descarta en silencio.
    - Valor None se omite del mapping de ese locale; "" se conserva.
    - Key duplicada: gana el primer record visto.
    """
    mappings: dict[str, TranslationMapping] = {locale: {} for locale in LOCALES}
    seen: set[str] = set()

    for record in records:
        if not record.key:
            continue
        if record.key in seen:
            logger.debug(f"Key duplicada '{record.key}' (record {record.record_id}); se ignora")
            continue
        seen.add(record.key)

        for locale in LOCALES:
            value = record.value_for(locale)
            if value is not None:
                mappings[locale][record.key] = value

    return {locale: sort_mapping(mapping) for locale, mapping in mappings.items()}


def merge_mappings(en: TranslationMapping, zh_tw: TranslationMapping) -> list[TranslationRecord]:
    """
    Un record por cada key presente en al menos un locale.

    El locale faltante se completa con "" (nunca ausente). Salida ordenada por key.
    """
    keys = sorted(set(en) | set(zh_tw))
    return [
        TranslationRecord(key=key, en=en.get(key) or "", zh_tw=zh_tw.get(key) or "")
        for key in keys
    ]
