"""
Utilidades para manejo de fechas y horas.
"""
from datetime import datetime, timezone
from typing import Optional


class DateTimeUtils:
    """Clase de utilidades para operaciones con fechas y horas."""

    @staticmethod
    def now_utc() -> datetime:
        """
        Obtiene la fecha y hora actual en UTC.

        Returns:
            datetime: Fecha y hora actual en UTC
        """
        return datetime.now(timezone.utc)

    @staticmethod
    def to_iso_string(dt: datetime) -> str:
        """
        Convierte un datetime a ISO 8601 en UTC con milisegundos y sufijo 'Z'.

        Ejemplo: 2026-10-19T08:30:12.345Z
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        dt_utc = dt.astimezone(timezone.utc)
        return dt_utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    @staticmethod
    def to_file_timestamp(dt: Optional[datetime] = None) -> str:
        """
        Timestamp seguro para nombres de archivo: ISO 8601 con ':' y '.' -> '-'.

        Ejemplo: 2026-10-19T08-30-12-345Z
        """
        iso = DateTimeUtils.to_iso_string(dt or DateTimeUtils.now_utc())
        return iso.replace(":", "-").replace(".", "-")
