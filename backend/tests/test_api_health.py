from __future__ import annotations

import httpx
from uvicorn.importer import import_from_string

from condo_admin.main import app


async def test_health(client: httpx.AsyncClient):
    res = await client.get("/api/v1/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


def test_uvicorn_entry_point_resolves_to_app():
    assert import_from_string("condo_admin.main:app") is app
