"""
Caso de uso: archivos de mensajes locales -> Airtable (push).

Flujo:
1. Leer en.json y zh-TW.json
2. Unir ambos en un record por key
3. Leer el snapshot actual de Airtable
4. Clasificar: crear / actualizar / sin cambios
5. Crear en lotes de 10
6. Actualizar en lotes de 10

Si un lote falla, los anteriores ya quedaron aplicados en Airtable. No hay
rollback: volver a ejecutar el push converge, porque solo envía diferencias.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from loguru import logger

from i18n_sync.application.services.batching import batch_count, run_in_batches
from i18n_sync.application.services.record_transformer import merge_mappings
from i18n_sync.application.services.remote_diff import RemotePlan, plan_remote_changes
from i18n_sync.core.config import BatchConfig, SyncPaths
from i18n_sync.infrastructure.repositories.translation_repository import (
    AirtableTranslationRepository,
)
from i18n_sync.infrastructure.storage.message_files import read_messages


@dataclass(frozen=True)
class PushResult:
    created: int
    updated: int
    unchanged: int
    dry_run: bool = False


class PushToAirtableUseCase:
    """
    Orquestador del push.
    """

    def __init__(
        self,
        repository: AirtableTranslationRepository,
        paths: SyncPaths,
        batch_config: BatchConfig,
        *,
        dry_run: bool = False,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        self._repository = repository
        self._paths = paths
        self._batch_config = batch_config
        self._dry_run = dry_run
        self._sleep = sleep

    def execute(self) -> PushResult:
        logger.info("Iniciando sincronización i18n hacia Airtable...")

        logger.info("1. Leyendo archivos JSON...")
        en_data = read_messages(self._paths.en)
        zh_tw_data = read_messages(self._paths.zh_tw)
        logger.info(f"   ✓ {self._paths.en.name} ({len(en_data)} keys)")
        logger.info(f"   ✓ {self._paths.zh_tw.name} ({len(zh_tw_data)} keys)")

        logger.info("2. Uniendo datos...")
        local_records = merge_mappings(en_data, zh_tw_data)
        logger.info(f"   ✓ {len(local_records)} records en total")

        logger.info("3. Revisando records existentes en Airtable...")
        snapshot = self._repository.fetch_snapshot()
        logger.info(f"   ✓ {len(snapshot)} records existentes")

        logger.info("4. Analizando operaciones necesarias...")
        plan = plan_remote_changes(local_records, snapshot)
        logger.info(f"   - Por crear: {len(plan.to_create)}")
        logger.info(f"   - Por actualizar: {len(plan.to_update)}")
        logger.info(f"   - Sin cambios: {len(plan.unchanged)}")

        if plan.is_empty:
            logger.info("   ✓ Nada que enviar a Airtable")
        elif self._dry_run:
            logger.info("Modo dry-run: no se envían cambios a Airtable")
        else:
            self._apply(plan)

        logger.info("✅ Sincronización completa!")
        logger.info(
            f"Total: {len(plan.to_create)} creados, {len(plan.to_update)} actualizados, "
            f"{len(plan.unchanged)} sin cambios"
        )
        return PushResult(
            created=len(plan.to_create),
            updated=len(plan.to_update),
            unchanged=len(plan.unchanged),
            dry_run=self._dry_run,
        )

    def _apply(self, plan: RemotePlan) -> None:
        batch_size = self._batch_config.batch_size

        if plan.to_create:
            logger.info(
                f"5. Creando records ({batch_count(len(plan.to_create), batch_size)} lotes)..."
            )
            run_in_batches(
                plan.to_create,
                self._repository.create,
                batch_size=batch_size,
                delay_s=self._batch_config.delay_s,
                sleep=self._sleep,
            )
            logger.info(f"   ✓ {len(plan.to_create)} records creados")

        if plan.to_update:
            logger.info(
                f"6. Actualizando records ({batch_count(len(plan.to_update), batch_size)} lotes)..."
            )
            run_in_batches(
                plan.to_update,
                self._repository.update,
                batch_size=batch_size,
                delay_s=self._batch_config.delay_s,
                sleep=self._sleep,
            )
            logger.info(f"   ✓ {len(plan.to_update)} records actualizados")
