"""
Middleware CORS permisivo.

Cualquier origen es aceptado (incluidas peticiones sin Origin, como las de
Postman). La lista de orígenes configurada solo se evalúa para dejar
constancia en el log de los orígenes desconocidos.
"""
from typing import List, Sequence

from loguru import logger
from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp


ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE"]


def origin_in_allow_list(origin: str, allowed_origins: Sequence[str]) -> bool:
    """True si el origen empieza por alguno de los orígenes configurados."""
    if not origin:
        return True
    return any(allowed == "*" or origin.startswith(allowed) for allowed in allowed_origins)


class PermissiveCORSMiddleware(CORSMiddleware):
    """
    CORSMiddleware que siempre refleja el origen de la petición.

    Con credenciales habilitadas el navegador no acepta "*", por eso se
    responde con el origen explícito y `Vary: Origin`.
    """

    def __init__(self, app: ASGIApp, known_origins: List[str]) -> None:
        self.known_origins = list(known_origins)
        super().__init__(
            app,
            allow_origins=[o for o in self.known_origins if o != "*"],
            allow_methods=ALLOWED_METHODS,
            allow_headers=["*"],
            allow_credentials=True,
        )

    def is_allowed_origin(self, origin: str) -> bool:
        if not origin_in_allow_list(origin, self.known_origins):
            logger.debug(f"Origen fuera de la lista configurada (aceptado): {origin}")
        return True
