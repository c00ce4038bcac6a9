"""
Configuración de fixtures para pytest.

`FakePostgrest` imita la API REST de Supabase para la tabla `datos` y se
monta detrás de `httpx.MockTransport`, de modo que los tests recorren el
cliente real sin red.
"""
import json
from typing import Any, Dict, Iterable, Optional, Tuple

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.infrastructure.external.supabase.supabase_client import (
    SupabaseClient,
    SupabaseCredentials,
)


SUPABASE_TEST_URL = "https://demo-project.supabase.co"
SUPABASE_TEST_KEY = "test-anon-key"


class FakePostgrest:
    """Tabla en memoria que responde como PostgREST."""

    def __init__(self, ids: Optional[Iterable[int]] = None):
        self.rows: Dict[int, Dict[str, Any]] = {}
        self.requests: list[httpx.Request] = []
        self.failure: Optional[Tuple[int, Any]] = None
        self.network_error: Optional[Exception] = None
        self._ids = iter(ids) if ids is not None else None
        self._next_id = 1

    def fail_with(self, status_code: int, payload: Any) -> None:
        self.failure = (status_code, payload)

    def _assign_id(self) -> int:
        if self._ids is not None:
            return next(self._ids)
        new_id = self._next_id
        self._next_id += 1
        return new_id

    @staticmethod
    def _target_id(request: httpx.Request) -> Optional[int]:
        raw = request.url.params["id"][len("eq."):]
        try:
            return int(raw)
        except ValueError:
            return None

    @staticmethod
    def _invalid_id(request: httpx.Request) -> httpx.Response:
        raw = request.url.params["id"][len("eq."):]
        return httpx.Response(400, json={
            "code": "22P02",
            "details": None,
            "hint": None,
            "message": f'invalid input syntax for type bigint: "{raw}"',
        })

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self.network_error is not None:
            raise self.network_error
        if self.failure is not None:
            status_code, payload = self.failure
            if isinstance(payload, str):
                return httpx.Response(status_code, text=payload)
            return httpx.Response(status_code, json=payload)

        if request.method == "GET":
            rows = list(self.rows.values())
            if request.url.params.get("order") == "id.asc":
                rows.sort(key=lambda r: r["id"])
            return httpx.Response(200, json=rows)

        if request.method == "POST":
            created = []
            for values in json.loads(request.content):
                row = {"id": self._assign_id(), "updated_at": None, **values}
                self.rows[row["id"]] = row
                created.append(row)
            return httpx.Response(201, json=created)

        if request.method in ("PATCH", "DELETE") and self._target_id(request) is None:
            return self._invalid_id(request)

        if request.method == "PATCH":
            row = self.rows.get(self._target_id(request))
            if row is None:
                return httpx.Response(200, json=[])
            row.update(json.loads(request.content))
            return httpx.Response(200, json=[row])

        if request.method == "DELETE":
            self.rows.pop(self._target_id(request), None)
            return httpx.Response(204)

        return httpx.Response(405, json={"message": "método no soportado"})


@pytest.fixture
def fake_store() -> FakePostgrest:
    return FakePostgrest()


@pytest_asyncio.fixture
async def supabase_client(fake_store: FakePostgrest):
    """Cliente real de Supabase apuntando a la tabla en memoria."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(fake_store))
    client = SupabaseClient(
        SupabaseCredentials(url=SUPABASE_TEST_URL, key=SUPABASE_TEST_KEY),
        http_client=http_client,
    )
    yield client
    await client.aclose()


@pytest_asyncio.fixture
async def api_client(supabase_client: SupabaseClient):
    """Cliente HTTP contra la app completa (sin lifespan: el cliente se inyecta)."""
    from main import create_application

    app = create_application(supabase_client=supabase_client)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
