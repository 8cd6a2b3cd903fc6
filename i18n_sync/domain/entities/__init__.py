"""
Entidades del dominio.
"""
from i18n_sync.domain.entities.translation import (
    EN_FIELD,
    KEY_FIELD,
    LOCALE_EN,
    LOCALE_ZH_TW,
    LOCALES,
    ZH_TW_FIELD,
    RecordUpdate,
    RemoteRecord,
    TranslationMapping,
    TranslationRecord,
)

__all__ = [
    "EN_FIELD",
    "KEY_FIELD",
    "LOCALE_EN",
    "LOCALE_ZH_TW",
    "LOCALES",
    "ZH_TW_FIELD",
    "RecordUpdate",
    "RemoteRecord",
    "TranslationMapping",
    "TranslationRecord",
]
