"""
Interfaz del repositorio de datos (tabla remota `datos`).
Define el contrato que debe cumplir cualquier implementación.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Union


class IRecordRepository(ABC):
    """
    Interfaz del repositorio de datos.
    Cada operación es una única llamada al almacén remoto; el repositorio
    no guarda copias de los registros entre peticiones.
    """

    @abstractmethod
    async def list_ordered(self) -> List[Dict[str, Any]]:
        """
        Obtiene todos los registros ordenados ascendentemente por id.

        Returns:
            List[Dict[str, Any]]: Filas tal como las entrega el almacén
        """
        pass

    @abstractmethod
    async def create(self, values: Dict[str, Any]) -> Dict[str, Any]:
        """
        Inserta un registro; el almacén asigna el id.

        Args:
            values: Columnas a insertar (nombre, valor)

        Returns:
            Dict[str, Any]: Registro creado
        """
        pass

    @abstractmethod
    async def update(self, record_id: Union[int, str], values: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Actualiza el registro con el id dado.

        Args:
            record_id: ID del registro (tal como llega en la ruta)
            values: Columnas a modificar

        Returns:
            Optional[Dict[str, Any]]: Registro actualizado o None si no existe
        """
        pass

    @abstractmethod
    async def delete(self, record_id: Union[int, str]) -> None:
        """
        Elimina el registro con el id dado. No informa si el registro existía.

        Args:
            record_id: ID del registro a eliminar
        """
        pass
