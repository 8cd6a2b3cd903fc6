"""
Caso de uso: Airtable -> archivos de mensajes locales (pull).

Flujo:
1. Leer todos los records de Airtable
2. Convertirlos a un mapping ordenado por locale
3. Comparar con los archivos actuales
4. Respaldar solo los archivos que cambian
5. Reescribir solo los archivos que cambian
6. Reportar agregados / modificados / removidos

Dos corridas seguidas sin cambios en Airtable no escriben nada en la segunda.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from loguru import logger

from i18n_sync.application.services.mapping_diff import (
    ChangeSummary,
    mappings_equal,
    summarize_changes,
)
from i18n_sync.application.services.record_transformer import records_to_mappings
from i18n_sync.core.config import SyncPaths
from i18n_sync.domain.entities.translation import (
    LOCALE_EN,
    LOCALE_ZH_TW,
    LOCALES,
    TranslationMapping,
)
from i18n_sync.infrastructure.repositories.translation_repository import (
    AirtableTranslationRepository,
)
from i18n_sync.infrastructure.storage.message_files import (
    backup_file,
    read_messages,
    write_messages,
)
from i18n_sync.shared.exceptions.sync import InvalidMessagesError
from i18n_sync.shared.utils.datetime_utils import DateTimeUtils


@dataclass(frozen=True)
class LocaleFileResult:
    """Resultado del pull para un archivo de locale."""

    locale: str
    path: Path
    changed: bool
    summary: ChangeSummary
    backup_path: Optional[Path] = None
    written: bool = False


@dataclass
class PullResult:
    records_read: int = 0
    files: dict[str, LocaleFileResult] = field(default_factory=dict)
    dry_run: bool = False

    @property
    def changed(self) -> bool:
        return any(f.changed for f in self.files.values())


class PullFromAirtableUseCase:
    """
    Orquestador del pull. No guarda estado entre corridas.
    """

    def __init__(
        self,
        repository: AirtableTranslationRepository,
        paths: SyncPaths,
        *,
        dry_run: bool = False,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._repository = repository
        self._paths = paths
        self._dry_run = dry_run
        self._clock = clock or DateTimeUtils.now_utc

    def _path_for(self, locale: str) -> Path:
        return self._paths.en if locale == LOCALE_EN else self._paths.zh_tw

    def execute(self) -> PullResult:
        logger.info("Iniciando sincronización i18n desde Airtable...")
        result = PullResult(dry_run=self._dry_run)

        logger.info("1. Leyendo records de Airtable...")
        records = self._repository.fetch_all()
        result.records_read = len(records)
        logger.info(f"   ✓ {len(records)} records leídos")

        logger.info("2. Convirtiendo formato...")
        new_mappings = records_to_mappings(records)
        logger.info(
            f"   ✓ {len(new_mappings[LOCALE_EN])} traducciones en inglés, "
            f"{len(new_mappings[LOCALE_ZH_TW])} traducciones en chino"
        )

        logger.info("3. Revisando archivos existentes...")
        existing: dict[str, TranslationMapping] = {}
        changed: dict[str, bool] = {}
        for locale in LOCALES:
            existing[locale], valid = self._read_existing(self._path_for(locale))
            changed[locale] = not valid or not mappings_equal(
                existing[locale], new_mappings[locale]
            )

        if not any(changed.values()):
            for locale in LOCALES:
                result.files[locale] = LocaleFileResult(
                    locale=locale,
                    path=self._path_for(locale),
                    changed=False,
                    summary=summarize_changes(existing[locale], new_mappings[locale]),
                )
            logger.info("   ✓ Los archivos ya están al día")
            logger.info("✅ Sincronización completa. Sin cambios.")
            return result

        for locale in LOCALES:
            status = "con cambios" if changed[locale] else "sin cambios"
            logger.info(f"   - {self._path_for(locale).name}: {status}")

        if self._dry_run:
            logger.info("Modo dry-run: no se respaldan ni escriben archivos")

        backups: dict[str, Optional[Path]] = {locale: None for locale in LOCALES}
        if not self._dry_run:
            logger.info("4. Respaldando archivos existentes...")
            now = self._clock()
            for locale in LOCALES:
                if changed[locale]:
                    backups[locale] = backup_file(self._path_for(locale), now)
            if not any(backups.values()):
                logger.info("   (sin respaldo: los archivos no existían)")

            logger.info("5. Actualizando archivos...")
            for locale in LOCALES:
                if changed[locale]:
                    write_messages(self._path_for(locale), new_mappings[locale])

        for locale in LOCALES:
            result.files[locale] = LocaleFileResult(
                locale=locale,
                path=self._path_for(locale),
                changed=changed[locale],
                summary=summarize_changes(existing[locale], new_mappings[locale]),
                backup_path=backups[locale],
                written=changed[locale] and not self._dry_run,
            )

        logger.info("✅ Sincronización completa!")
        self._report(result)
        return result

    @staticmethod
    def _read_existing(path: Path) -> tuple[TranslationMapping, bool]:
        """
        Lee el archivo actual para comparar.

        Un contenido inválido (JSON roto, null, valores no string) no aborta:
        el archivo se marca como cambiado para respaldarlo y reescribirlo.
        """
        try:
            return read_messages(path, null_as_blank=False), True
        except InvalidMessagesError as e:
            logger.warning(f"   ⚠ {path.name} tiene contenido inválido, se reescribirá: {e.message}")
        try:
            return read_messages(path), False
        except InvalidMessagesError:
            return {}, False

    @staticmethod
    def _report(result: PullResult) -> None:
        for file_result in result.files.values():
            summary = file_result.summary
            if not file_result.changed or not summary.has_changes:
                continue
            logger.info(f"{file_result.path.name} cambios:")
            if summary.added:
                logger.info(f"  - Agregadas: {len(summary.added)}")
            if summary.modified:
                logger.info(f"  - Modificadas: {len(summary.modified)}")
            if summary.removed:
                logger.info(f"  - Removidas: {len(summary.removed)}")
