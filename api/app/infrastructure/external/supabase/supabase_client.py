"""
Cliente mínimo de Supabase REST API (PostgREST) sin SDKs externos.

Requisitos cubiertos:
- httpx asíncrono con un único pool compartido
- select ordenado, insert/update devolviendo filas, delete por filtro
- errores del servidor y de red normalizados en SupabaseApiError

Sin reintentos: cualquier fallo se propaga inmediatamente al llamador.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import httpx
from loguru import logger


@dataclass(frozen=True)
class SupabaseCredentials:
    url: str
    key: str


class SupabaseApiError(RuntimeError):
    """Error de integración con Supabase (respuesta no-2xx o fallo de red)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code


def eq_filter(value: Any) -> str:
    """Filtro de igualdad en sintaxis PostgREST (`col=eq.valor`)."""
    return f"eq.{value}"


def _error_message(resp: httpx.Response) -> tuple[str, Optional[str]]:
    """
    Extrae el mensaje de error de una respuesta PostgREST.

    PostgREST responde {"code", "details", "hint", "message"}; si el cuerpo
    no es JSON se usa el texto crudo y, en último caso, la línea de estado.
    """
    try:
        payload = resp.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        message = payload.get("message") or payload.get("msg") or payload.get("error")
        if message:
            return str(message), payload.get("code")

    text = resp.text.strip()
    if text:
        return text, None
    return f"{resp.status_code} {resp.reason_phrase}".strip(), None


class SupabaseClient:
    """
    Cliente HTTP de Supabase para operaciones sobre tablas.

    Importante:
    - No hace cast de tipos de columnas: las filas se devuelven tal como
      las entrega PostgREST.
    - Se crea una vez por proceso; `aclose()` libera el pool al apagar.
    """

    def __init__(
        self,
        credentials: SupabaseCredentials,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout_s: float = 30.0,
    ) -> None:
        self._creds = credentials
        self._base_url = f"{credentials.url.rstrip('/')}/rest/v1"
        self._http = http_client or httpx.AsyncClient(timeout=timeout_s)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def select(
        self,
        table: str,
        *,
        columns: str = "*",
        order_by: Optional[str] = None,
        ascending: bool = True,
    ) -> list[dict[str, Any]]:
        """SELECT de todas las filas, opcionalmente ordenadas por una columna."""
        query: list[tuple[str, str]] = [("select", columns)]
        if order_by:
            direction = "asc" if ascending else "desc"
            query.append(("order", f"{order_by}.{direction}"))

        rows = await self._request_json("GET", table, query=query)
        return rows or []

    async def insert_one(self, table: str, values: dict[str, Any]) -> dict[str, Any]:
        """INSERT de una fila; retorna la fila creada (con su id asignado)."""
        rows = await self._request_json(
            "POST",
            table,
            query=[("select", "*")],
            json=[values],
            prefer="return=representation",
        )
        if not rows:
            raise SupabaseApiError("Supabase no devolvió la fila insertada")
        return rows[0]

    async def update_where(
        self, table: str, values: dict[str, Any], *, filters: dict[str, str]
    ) -> list[dict[str, Any]]:
        """UPDATE filtrado; retorna las filas modificadas (vacío si no hubo match)."""
        query = [(column, expr) for column, expr in filters.items()]
        query.append(("select", "*"))
        rows = await self._request_json(
            "PATCH",
            table,
            query=query,
            json=values,
            prefer="return=representation",
        )
        return rows or []

    async def delete_where(self, table: str, *, filters: dict[str, str]) -> None:
        """
        DELETE filtrado. PostgREST no distingue entre "borró N filas" y
        "no hubo coincidencias": ambos casos terminan sin error.
        """
        query = [(column, expr) for column, expr in filters.items()]
        await self._request_json("DELETE", table, query=query)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request_json(
        self,
        method: str,
        table: str,
        *,
        query: list[tuple[str, str]],
        json: Any = None,
        prefer: Optional[str] = None,
    ) -> Any:
        """
        Request HTTP contra PostgREST.

        Estrategia:
        - 2xx: retorna el JSON (o None si no hay cuerpo, p.ej. 204).
        - no-2xx: SupabaseApiError con el mensaje de PostgREST.
        - error de transporte: SupabaseApiError con el mensaje de httpx.
        """
        headers = {
            "apikey": self._creds.key,
            "Authorization": f"Bearer {self._creds.key}",
            "Content-Type": "application/json",
        }
        if prefer:
            headers["Prefer"] = prefer

        url = f"{self._base_url}/{table}"
        try:
            resp = await self._http.request(
                method,
                url,
                params=query,
                headers=headers,
                json=json,
            )
        except httpx.HTTPError as e:
            message = str(e) or e.__class__.__name__
            raise SupabaseApiError(message) from e

        if 200 <= resp.status_code < 300:
            if resp.status_code == 204 or not resp.content:
                return None
            return resp.json()

        message, code = _error_message(resp)
        logger.debug(f"Supabase {method} {table} -> {resp.status_code}: {message}")
        raise SupabaseApiError(message, status_code=resp.status_code, code=code)


def build_supabase_client(
    url: str, key: str, *, timeout_s: float = 30.0
) -> SupabaseClient:
    """Construye el cliente compartido a partir de la configuración."""
    return SupabaseClient(SupabaseCredentials(url=url, key=key), timeout_s=timeout_s)
