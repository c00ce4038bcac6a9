"""
Punto de entrada principal de la aplicación FastAPI.
Configura la aplicación, middlewares, rutas y eventos.
"""
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from app.core.config import settings, get_cors_origins
from app.core.events import lifespan
from app.api.router import api_router
from app.api.middlewares.cors import PermissiveCORSMiddleware
from app.api.middlewares.error_handler import ErrorHandlerMiddleware
from app.application.dto.record_dto import MessageResponseDTO
from app.infrastructure.external.supabase.supabase_client import SupabaseClient
from app.shared.exceptions.base import AppException


HEALTH_MESSAGE = "API funcionando con Supabase"


def create_application(supabase_client: Optional[SupabaseClient] = None) -> FastAPI:
    """
    Factory para crear y configurar la aplicación FastAPI.

    Args:
        supabase_client: Cliente ya construido (si no, se crea en el arranque)

    Returns:
        FastAPI: Instancia configurada de la aplicación
    """
    application = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="API REST sobre la tabla `datos` de Supabase",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    application.state.supabase_client = supabase_client

    # Middleware personalizado para manejo de errores
    application.add_middleware(ErrorHandlerMiddleware)

    # CORS (el último añadido envuelve a los demás)
    application.add_middleware(
        PermissiveCORSMiddleware,
        known_origins=get_cors_origins(settings.CORS_ORIGINS),
    )

    # Incluir routers de la API
    application.include_router(api_router, prefix="/api")

    # Manejador global de excepciones personalizadas
    @application.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_response()
        )

    # Cuerpo o parámetros mal formados
    @application.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        logger.warning(f"Petición inválida en {request.url.path}: {len(errors)} error(es)")
        message = "; ".join(
            f"{'.'.join(str(loc) for loc in e.get('loc', ()))}: {e.get('msg')}"
            for e in errors
        ) or "Petición inválida"
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": message}
        )

    # Health check endpoint
    @application.get("/", response_model=MessageResponseDTO, tags=["Health"])
    async def health_check():
        """Endpoint para verificar el estado de la aplicación."""
        return {"message": HEALTH_MESSAGE}

    return application


# Crear instancia de la aplicación
app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
