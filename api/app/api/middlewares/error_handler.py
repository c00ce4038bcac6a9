"""
Middleware para manejo centralizado de errores.
"""
from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from loguru import logger


INTERNAL_ERROR_MESSAGE = "Error interno del servidor"


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Middleware para capturar errores no previstos por los casos de uso."""

    async def dispatch(self, request: Request, call_next):
        """
        Procesa la petición y captura errores.

        Args:
            request: Petición HTTP
            call_next: Siguiente middleware/handler

        Returns:
            Response: Respuesta HTTP
        """
        try:
            response = await call_next(request)
            return response
        except Exception as exc:
            # El texto del error va como argumento: loguru no interpreta sus llaves
            logger.opt(exception=exc).error(
                "Error no manejado en {} {}: {}",
                request.method,
                request.url.path,
                exc
            )

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": INTERNAL_ERROR_MESSAGE}
            )
