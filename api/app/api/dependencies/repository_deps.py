"""
Dependencias para inyección de repositorios.
"""
from fastapi import Depends, Request

from app.core.config import settings
from app.infrastructure.external.supabase.supabase_client import SupabaseClient
from app.infrastructure.repositories.record_repository_impl import SupabaseRecordRepository


def get_supabase_client(request: Request) -> SupabaseClient:
    """
    Dependencia para obtener el cliente de Supabase compartido.

    El cliente se construye una única vez en el arranque y vive en
    `app.state`; aquí solo se reutiliza.

    Raises:
        RuntimeError: Si la aplicación no pasó por el arranque
    """
    client = getattr(request.app.state, "supabase_client", None)
    if client is None:
        raise RuntimeError("Cliente de Supabase no inicializado")
    return client


def get_record_repository(
    client: SupabaseClient = Depends(get_supabase_client)
) -> SupabaseRecordRepository:
    """
    Dependencia para obtener el repositorio de registros.

    Args:
        client: Cliente de Supabase compartido

    Returns:
        SupabaseRecordRepository: Repositorio sobre la tabla configurada
    """
    return SupabaseRecordRepository(client, table=settings.SUPABASE_TABLE)
