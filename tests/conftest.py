# tests/conftest.py
from __future__ import annotations

import asyncio

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from main import app
from services.db import get_session, init_models, session_factory


@pytest.fixture
def db_engine(tmp_path):
    eng = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'fitness.db'}", poolclass=NullPool
    )
    asyncio.run(init_models(eng))
    yield eng
    asyncio.run(eng.dispose())


@pytest.fixture
def client(db_engine):
    factory = session_factory(db_engine)

    async def _session():
        async with factory() as session:
            yield session

    app.dependency_overrides[get_session] = _session
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def register(client: TestClient, email: str = "runner@example.com", password: str = "secret123") -> dict:
    r = client.post("/api/v1/auth/register", json={"email": email, "password": password})
    assert r.status_code == 201, r.text
    return r.json()


@pytest.fixture
def auth_headers(client) -> dict[str, str]:
    token = register(client)["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def weighed_headers(client, auth_headers) -> dict[str, str]:
    r = client.put("/api/v1/profile", json={"weight": 70}, headers=auth_headers)
    assert r.status_code == 200, r.text
    return auth_headers
