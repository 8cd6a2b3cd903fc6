"""
Utilidades compartidas.
"""
from i18n_sync.shared.utils.datetime_utils import DateTimeUtils
from i18n_sync.shared.utils.logging_config import configure_logging

__all__ = ["DateTimeUtils", "configure_logging"]
