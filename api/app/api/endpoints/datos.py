"""
Endpoints CRUD sobre la tabla remota `datos`.

El id de la ruta se reenvía tal cual al almacén: si no es un id válido es
el propio almacén quien lo rechaza (500). El cuerpo se acepta como JSON
libre; si no es un objeto se trata como vacío.
"""
from typing import Any, List
from fastapi import APIRouter, Body, Depends, Response, status

from app.application.use_cases.record_use_cases import RecordUseCases
from app.application.dto.record_dto import (
    RecordCreateDTO,
    RecordUpdateDTO,
    RecordResponseDTO
)
from app.api.dependencies.use_case_deps import get_record_use_cases


router = APIRouter(prefix="/datos", tags=["Datos"])


@router.get(
    "",
    response_model=List[RecordResponseDTO],
    response_model_exclude_unset=True,
    summary="Listar todos los datos"
)
async def list_datos(
    use_cases: RecordUseCases = Depends(get_record_use_cases)
) -> List[RecordResponseDTO]:
    """
    Lista todos los registros ordenados por id ascendente.

    Args:
        use_cases: Casos de uso de registros (inyectado)

    Returns:
        List[RecordResponseDTO]: Registros ordenados
    """
    return await use_cases.list_records()


@router.post(
    "",
    response_model=RecordResponseDTO,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
    summary="Crear un nuevo dato"
)
async def create_dato(
    body: Any = Body(default=None),
    use_cases: RecordUseCases = Depends(get_record_use_cases)
) -> RecordResponseDTO:
    """
    Crea un nuevo registro. Requiere `nombre` y `valor`.

    Args:
        body: Cuerpo JSON de la petición
        use_cases: Casos de uso de registros (inyectado)

    Returns:
        RecordResponseDTO: Registro creado con el id asignado por el almacén
    """
    return await use_cases.create_record(RecordCreateDTO.from_body(body))


@router.put(
    "/{record_id}",
    response_model=RecordResponseDTO,
    response_model_exclude_unset=True,
    summary="Actualizar un dato"
)
async def update_dato(
    record_id: str,
    body: Any = Body(default=None),
    use_cases: RecordUseCases = Depends(get_record_use_cases)
) -> RecordResponseDTO:
    """
    Actualiza `nombre`/`valor` de un registro y marca `updated_at`.

    Args:
        record_id: ID del registro a actualizar
        body: Cuerpo JSON con los campos a actualizar
        use_cases: Casos de uso de registros (inyectado)

    Returns:
        RecordResponseDTO: Registro actualizado
    """
    return await use_cases.update_record(record_id, RecordUpdateDTO.from_body(body))


@router.delete(
    "/{record_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Eliminar un dato"
)
async def delete_dato(
    record_id: str,
    use_cases: RecordUseCases = Depends(get_record_use_cases)
) -> Response:
    """
    Elimina un registro. Responde 204 exista o no el id.

    Args:
        record_id: ID del registro a eliminar
        use_cases: Casos de uso de registros (inyectado)
    """
    await use_cases.delete_record(record_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
