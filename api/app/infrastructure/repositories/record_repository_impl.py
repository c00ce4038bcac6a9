"""
Implementación del repositorio de datos sobre Supabase.
"""
from typing import Any, Dict, List, Optional, Union

from app.domain.repositories.record_repository import IRecordRepository
from app.infrastructure.external.supabase.supabase_client import SupabaseClient, eq_filter


class SupabaseRecordRepository(IRecordRepository):
    """
    Repositorio de la tabla `datos` respaldado por PostgREST.
    Los errores del almacén se propagan como SupabaseApiError.
    """

    def __init__(self, client: SupabaseClient, table: str = "datos"):
        self.client = client
        self.table = table

    async def list_ordered(self) -> List[Dict[str, Any]]:
        return await self.client.select(self.table, order_by="id", ascending=True)

    async def create(self, values: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.insert_one(self.table, values)

    async def update(self, record_id: Union[int, str], values: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        rows = await self.client.update_where(
            self.table, values, filters={"id": eq_filter(record_id)}
        )
        return rows[0] if rows else None

    async def delete(self, record_id: Union[int, str]) -> None:
        await self.client.delete_where(self.table, filters={"id": eq_filter(record_id)})
