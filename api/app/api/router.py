"""
Router principal de la API.
Agrupa todos los endpoints bajo el prefijo /api.
"""
from fastapi import APIRouter

from app.api.endpoints import datos


api_router = APIRouter()

api_router.include_router(datos.router)
