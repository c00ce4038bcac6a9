"""
Excepciones relacionadas con la lógica de dominio.
"""
from typing import Any

from app.shared.exceptions.base import AppException


class DomainException(AppException):
    """Excepción base para errores de dominio."""

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR", details=None):
        super().__init__(
            message=message,
            status_code=400,
            error_code=error_code,
            details=details
        )


class ValidationException(DomainException):
    """Excepción para errores de validación."""

    def __init__(self, message: str, field: str = None):
        details = {"field": field} if field else None
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            details=details
        )


class EntityNotFoundException(DomainException):
    """Excepción cuando no se encuentra una entidad."""

    def __init__(self, entity_id: Any, message: str = "Dato no encontrado"):
        super().__init__(
            message=message,
            error_code="ENTITY_NOT_FOUND",
            details={"id": str(entity_id)}
        )
        self.status_code = 404


class RemoteStoreException(AppException):
    """
    Excepción para cualquier fallo del almacén remoto (red, restricciones,
    permisos). El mensaje del almacén se propaga tal cual al cliente.
    """

    def __init__(self, message: str, operation: str = None):
        details = {"operation": operation} if operation else None
        super().__init__(
            message=message,
            status_code=500,
            error_code="REMOTE_STORE_ERROR",
            details=details
        )
