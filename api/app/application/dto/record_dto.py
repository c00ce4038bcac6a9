"""
DTOs relacionados con los registros de la tabla `datos`.

Los campos de entrada no llevan tipo: el almacén decide. La presencia de
cada campo se distingue de un valor nulo mediante `model_fields_set`.
Los cuerpos que no son un objeto JSON no se rechazan aquí: se tratan como
cuerpos sin campos.
"""
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field


class RecordCreateDTO(BaseModel):
    """DTO para crear un registro."""

    model_config = ConfigDict(extra="ignore")

    nombre: Any = Field(None, description="Nombre del dato")
    valor: Any = Field(None, description="Valor del dato (cualquier escalar)")

    @classmethod
    def from_body(cls, body: Any) -> Optional["RecordCreateDTO"]:
        """DTO a partir del JSON recibido; None si no es un objeto."""
        if not isinstance(body, dict):
            return None
        return cls.model_validate(body)

    def has_valor(self) -> bool:
        """True si la clave `valor` venía en el cuerpo (aunque sea null, 0 o "")."""
        return "valor" in self.model_fields_set


class RecordUpdateDTO(BaseModel):
    """DTO para actualizar un registro. Ningún campo es obligatorio."""

    model_config = ConfigDict(extra="ignore")

    nombre: Any = None
    valor: Any = None

    @classmethod
    def from_body(cls, body: Any) -> "RecordUpdateDTO":
        """DTO a partir del JSON recibido; vacío si no es un objeto."""
        if not isinstance(body, dict):
            return cls()
        return cls.model_validate(body)

    def provided_values(self) -> Dict[str, Any]:
        """Solo las columnas presentes en el cuerpo, con su valor tal cual."""
        return self.model_dump(include=self.model_fields_set & {"nombre", "valor"})


class RecordResponseDTO(BaseModel):
    """
    DTO de respuesta para un registro.
    Columnas adicionales de la tabla (p.ej. created_at) se devuelven sin tocar.
    """

    model_config = ConfigDict(extra="allow", from_attributes=True)

    id: int
    nombre: Any = None
    valor: Any = None
    updated_at: Optional[Any] = None


class MessageResponseDTO(BaseModel):
    """DTO de respuesta del health check."""

    message: str
