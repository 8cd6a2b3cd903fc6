"""
Comparación de mappings key -> string.

mappings_equal decide si un archivo debe reescribirse; summarize_changes
solo alimenta el reporte final.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from i18n_sync.domain.entities.translation import TranslationMapping


def mappings_equal(a: TranslationMapping, b: TranslationMapping) -> bool:
    """Mismo conjunto de keys y mismo valor por key. El orden no importa."""
    if len(a) != len(b):
        return False
    for key, value in a.items():
        if key not in b or b[key] != value:
            return False
    return True


@dataclass(frozen=True)
class ChangeSummary:
    """Keys agregadas, modificadas, removidas y sin cambios entre dos versiones."""

    added: list[str] = field(default_factory=list)
    modified: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    unchanged: list[str] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        return bool(self.added or self.modified or self.removed)


def summarize_changes(old: TranslationMapping, new: TranslationMapping) -> ChangeSummary:
    """
    Clasifica las keys de `new` contra `old`.

    Se compara por presencia de key (no por valor "truthy"): una key con ""
    sigue contando como presente.
    """
    added: list[str] = []
    modified: list[str] = []
    unchanged: list[str] = []

    for key in sorted(new):
        if key not in old:
            added.append(key)
        elif old[key] != new[key]:
            modified.append(key)
        else:
            unchanged.append(key)

    removed = sorted(key for key in old if key not in new)
    return ChangeSummary(added=added, modified=modified, removed=removed, unchanged=unchanged)
