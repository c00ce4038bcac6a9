"""
Manejadores de eventos de inicio y cierre de la aplicacion.
"""
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable
from fastapi import FastAPI
from loguru import logger

from app.core.config import settings, get_cors_origins
from app.infrastructure.external.supabase.supabase_client import build_supabase_client


def startup_handler(app: FastAPI) -> Callable:
    """
    Manejador de eventos de inicio de la aplicacion.

    Args:
        app: Instancia de FastAPI

    Returns:
        Callable: Funcion asincrona de inicio
    """
    async def startup() -> None:
        """Inicializa recursos al inicio de la aplicacion."""
        try:
            logger.info(f"Iniciando {settings.APP_NAME} v{settings.APP_VERSION}")
            logger.info(f"Entorno: {settings.ENVIRONMENT}")

            # Validar configuracion critica
            _validate_config()

            # Configurar logging adicional
            if settings.LOG_FILE:
                logger.add(
                    settings.LOG_FILE,
                    rotation="500 MB",
                    retention="10 days",
                    level=settings.LOG_LEVEL
                )

            # Cliente unico compartido por todas las peticiones
            if getattr(app.state, "supabase_client", None) is None:
                app.state.supabase_client = build_supabase_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_KEY,
                    timeout_s=settings.SUPABASE_TIMEOUT_S,
                )
            logger.info("Conectado a Supabase")
            logger.info(f"Origenes CORS conocidos: {get_cors_origins(settings.CORS_ORIGINS)}")

            logger.success(f"Servidor corriendo en puerto {settings.PORT}")

            _print_available_urls()

        except Exception as e:
            logger.error(f"Error durante startup: {e}")
            logger.exception("Detalle del error:")
            raise

    return startup


def _validate_config() -> None:
    """Valida que la configuracion critica este presente."""
    warnings = []

    if not settings.SUPABASE_URL:
        warnings.append("SUPABASE_URL no configurada - las operaciones de datos fallaran")
    if not settings.SUPABASE_KEY:
        warnings.append("SUPABASE_KEY no configurada - las operaciones de datos fallaran")

    for warning in warnings:
        logger.warning(f"CONFIG: {warning}")


def _print_available_urls() -> None:
    """Imprime las URLs disponibles de la aplicacion."""
    if settings.HOST == "0.0.0.0":
        access_host = "localhost"
    else:
        access_host = settings.HOST

    base_url = f"http://{access_host}:{settings.PORT}"

    logger.opt(colors=True).info("<bold><green>" + "=" * 60 + "</green></bold>")
    logger.opt(colors=True).info("<bold><green>URLS DISPONIBLES:</green></bold>")
    logger.opt(colors=True).info(f"<cyan>  Health:      {base_url}/</cyan>")
    logger.opt(colors=True).info(f"<cyan>  Datos:       {base_url}/api/datos</cyan>")
    logger.opt(colors=True).info(f"<cyan>  Swagger UI:  {base_url}/docs</cyan>")
    logger.opt(colors=True).info("<bold><green>" + "=" * 60 + "</green></bold>")


def shutdown_handler(app: FastAPI) -> Callable:
    """
    Manejador de eventos de cierre de la aplicacion.

    Args:
        app: Instancia de FastAPI

    Returns:
        Callable: Funcion asincrona de cierre
    """
    async def shutdown() -> None:
        """Libera recursos al cerrar la aplicacion."""
        logger.info("Cerrando aplicacion...")

        client = getattr(app.state, "supabase_client", None)
        if client is not None:
            await client.aclose()
            app.state.supabase_client = None
            logger.info("Cliente de Supabase cerrado")

        logger.success("Aplicacion cerrada correctamente")

    return shutdown


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Ciclo de vida: arranque, servicio y cierre ordenado."""
    await startup_handler(app)()
    yield
    await shutdown_handler(app)()
