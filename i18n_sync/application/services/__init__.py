"""
Servicios de aplicacion.

Logica pura de reconciliacion reutilizada por ambos pipelines:
transformacion de records, comparacion de mappings, plan remoto y lotes.
"""
from i18n_sync.application.services.batching import chunked, run_in_batches
from i18n_sync.application.services.mapping_diff import (
    ChangeSummary,
    mappings_equal,
    summarize_changes,
)
from i18n_sync.application.services.record_transformer import (
    merge_mappings,
    records_to_mappings,
    sort_mapping,
)
from i18n_sync.application.services.remote_diff import RemotePlan, plan_remote_changes

__all__ = [
    "ChangeSummary",
    "RemotePlan",
    "chunked",
    "mappings_equal",
    "merge_mappings",
    "plan_remote_changes",
    "records_to_mappings",
    "run_in_batches",
    "sort_mapping",
    "summarize_changes",
]
