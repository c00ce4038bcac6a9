"""
Casos de uso de la aplicacion.
"""
from .record_use_cases import RecordUseCases

__all__ = ["RecordUseCases"]
