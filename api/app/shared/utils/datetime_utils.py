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
    def now_iso() -> str:
        """
        Fecha y hora actual en UTC como string ISO 8601 con sufijo 'Z',
        formato que acepta la columna timestamptz de Supabase.
        """
        now = DateTimeUtils.now_utc()
        return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    @staticmethod
    def from_iso_string(iso_string: str) -> Optional[datetime]:
        """
        Convierte un string ISO 8601 a datetime.

        Args:
            iso_string: String en formato ISO 8601 (acepta sufijo 'Z')

        Returns:
            Optional[datetime]: Objeto datetime o None si hay error
        """
        try:
            return datetime.fromisoformat(str(iso_string).replace("Z", "+00:00"))
        except (ValueError, TypeError):
            return None
