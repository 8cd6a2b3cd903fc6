"""
Entidades de traducción compartidas por ambos pipelines.

Se mantienen libres de I/O para poder testearlas fácilmente.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

# Nombres de los fields en la tabla de Airtable.
KEY_FIELD = "key"
EN_FIELD = "en"
ZH_TW_FIELD = "zh-TW"

LOCALE_EN = "en"
LOCALE_ZH_TW = "zh-TW"
LOCALES = (LOCALE_EN, LOCALE_ZH_TW)

TranslationMapping = Dict[str, str]


@dataclass(frozen=True)
class TranslationRecord:
    """
    Record listo para enviar a Airtable.

    Ambos valores son siempre strings: un locale faltante se envía como "".
    """

    key: str
    en: str = ""
    zh_tw: str = ""

    def to_fields(self) -> dict[str, str]:
        return {KEY_FIELD: self.key, EN_FIELD: self.en, ZH_TW_FIELD: self.zh_tw}


@dataclass(frozen=True)
class RemoteRecord:
    """
    Record leído de Airtable.

    - record_id: asignado por Airtable, opaco.
    - en / zh_tw: None si el field no vino en la respuesta (Airtable omite
      los fields vacíos), distinto de "".
    """

    record_id: str
    key: Optional[str]
    en: Optional[str] = None
    zh_tw: Optional[str] = None

    @classmethod
    def from_fields(cls, record_id: str, fields: dict[str, Any]) -> "RemoteRecord":
        return cls(
            record_id=record_id,
            key=_as_text(fields.get(KEY_FIELD)),
            en=_as_text(fields.get(EN_FIELD)),
            zh_tw=_as_text(fields.get(ZH_TW_FIELD)),
        )

    def value_for(self, locale: str) -> Optional[str]:
        if locale == LOCALE_EN:
            return self.en
        if locale == LOCALE_ZH_TW:
            return self.zh_tw
        raise ValueError(f"Locale no soportado: {locale}")


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)


@dataclass(frozen=True)
class RecordUpdate:
    """Update pendiente: id del record remoto + payload completo (reemplazo total)."""

    record_id: str
    record: TranslationRecord

    def to_payload(self) -> dict[str, Any]:
        return {"id": self.record_id, "fields": self.record.to_fields()}
