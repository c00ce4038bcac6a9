"""
Data Transfer Objects (DTOs) para la capa de aplicacion.
"""
from .record_dto import (
    RecordCreateDTO,
    RecordUpdateDTO,
    RecordResponseDTO,
    MessageResponseDTO,
)

__all__ = [
    "RecordCreateDTO",
    "RecordUpdateDTO",
    "RecordResponseDTO",
    "MessageResponseDTO",
]
