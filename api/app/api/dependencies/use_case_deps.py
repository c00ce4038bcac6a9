"""
Dependencias para inyeccion de casos de uso.
"""
from fastapi import Depends

from app.application.use_cases.record_use_cases import RecordUseCases
from app.domain.repositories.record_repository import IRecordRepository
from app.api.dependencies.repository_deps import get_record_repository


def get_record_use_cases(
    record_repository: IRecordRepository = Depends(get_record_repository)
) -> RecordUseCases:
    """
    Dependencia para obtener los casos de uso de registros.

    Args:
        record_repository: Repositorio de registros

    Returns:
        RecordUseCases: Instancia de casos de uso de registros
    """
    return RecordUseCases(record_repository)
