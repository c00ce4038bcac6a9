"""
Casos de uso relacionados con los registros de la tabla `datos`.
"""
import math
from typing import Any, List, Union

from loguru import logger

from app.domain.repositories.record_repository import IRecordRepository
from app.application.dto.record_dto import (
    RecordCreateDTO,
    RecordUpdateDTO,
    RecordResponseDTO,
)
from app.shared.exceptions.domain import (
    EntityNotFoundException,
    RemoteStoreException,
    ValidationException,
)
from app.shared.utils.datetime_utils import DateTimeUtils


REQUIRED_FIELDS_MESSAGE = "Name and value are required"


def is_falsy(value: Any) -> bool:
    """
    Falsedad al estilo JSON/JavaScript: null, false, "", 0 y NaN.
    Listas y objetos vacíos cuentan como valores presentes.
    """
    if value is None or value is False or value == "":
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0 or (isinstance(value, float) and math.isnan(value))
    return False


class RecordUseCases:
    """
    Casos de uso para operaciones con registros.
    Cada operación hace exactamente una llamada al almacén remoto y no
    reintenta: cualquier fallo del almacén termina en RemoteStoreException.
    """

    def __init__(self, record_repository: IRecordRepository):
        """
        Inicializa los casos de uso con sus dependencias.

        Args:
            record_repository: Repositorio de registros
        """
        self.record_repository = record_repository

    async def list_records(self) -> List[RecordResponseDTO]:
        """
        Lista todos los registros ordenados por id ascendente.

        Raises:
            RemoteStoreException: Si falla el almacén remoto
        """
        try:
            rows = await self.record_repository.list_ordered()
        except Exception as e:
            raise self._remote_error("Error al obtener datos", e) from e

        return [RecordResponseDTO.model_validate(row) for row in rows]

    async def create_record(self, dto: RecordCreateDTO) -> RecordResponseDTO:
        """
        Crea un nuevo registro.

        `nombre` no puede ser falsy (ver `is_falsy`); `valor` solo debe estar presente
        (0, "" y null son válidos).

        Raises:
            ValidationException: Si falta nombre o valor
            RemoteStoreException: Si falla el almacén remoto
        """
        if dto is None or is_falsy(dto.nombre) or not dto.has_valor():
            raise ValidationException(REQUIRED_FIELDS_MESSAGE)

        try:
            row = await self.record_repository.create(
                {"nombre": dto.nombre, "valor": dto.valor}
            )
        except Exception as e:
            raise self._remote_error("Error al crear dato", e) from e

        logger.info(f"Dato creado con id {row.get('id')}")
        return RecordResponseDTO.model_validate(row)

    async def update_record(self, record_id: Union[int, str], dto: RecordUpdateDTO) -> RecordResponseDTO:
        """
        Actualiza un registro existente y marca `updated_at`.

        A diferencia de la creación no se valida la presencia de campos:
        se reenvía lo que venga en el cuerpo.

        Raises:
            EntityNotFoundException: Si ningún registro tiene ese id
            RemoteStoreException: Si falla el almacén remoto
        """
        values = dto.provided_values() if dto is not None else {}
        values["updated_at"] = DateTimeUtils.now_iso()

        try:
            row = await self.record_repository.update(record_id, values)
        except Exception as e:
            raise self._remote_error("Error al actualizar dato", e) from e

        if row is None:
            raise EntityNotFoundException(record_id)

        return RecordResponseDTO.model_validate(row)

    async def delete_record(self, record_id: Union[int, str]) -> None:
        """
        Elimina un registro. Un id inexistente no es un error: el borrado
        por filtro del almacén no distingue ambos casos.

        Raises:
            RemoteStoreException: Si falla el almacén remoto
        """
        try:
            await self.record_repository.delete(record_id)
        except Exception as e:
            raise self._remote_error("Error al eliminar dato", e) from e

    @staticmethod
    def _remote_error(prefix: str, exc: Exception) -> RemoteStoreException:
        """Registra el fallo del almacén y lo convierte en error HTTP 500."""
        message = getattr(exc, "message", None) or str(exc)
        logger.opt(exception=exc).error("{}: {}", prefix, message)
        return RemoteStoreException(message, operation=prefix)
