from __future__ import annotations

import os
from collections.abc import AsyncGenerator

import httpx
import pytest
from jose import jwt
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from condo_admin.api.deps import get_record_store
from condo_admin.config import settings
from condo_admin.database import create_tables, drop_tables, get_db
from condo_admin.main import app
from condo_admin.models import *  # noqa: F401, F403  (registers every table)
from condo_admin.schemas.user import UserRole
from condo_admin.services.record_store import SqlRecordStore

# Defaults to a throwaway SQLite file per test; point at Postgres with TEST_DATABASE_URL
_test_db_url = os.environ.get("TEST_DATABASE_URL")


def make_token(subject: str, role: str | None, email: str | None = None) -> str:
    claims = {"sub": subject, "email": email, "role": role}
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


@pytest.fixture()
async def session_factory(tmp_path) -> AsyncGenerator[async_sessionmaker[AsyncSession]]:
    url = _test_db_url or f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"
    engine = create_async_engine(url, echo=False)

    await create_tables(engine)

    yield async_sessionmaker(engine, expire_on_commit=False)

    await drop_tables(engine)

    await engine.dispose()


@pytest.fixture()
async def async_db(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession]:
    async with session_factory() as session:
        yield session


@pytest.fixture()
async def client(
    async_db: AsyncSession,
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[httpx.AsyncClient]:
    async def _override_get_db() -> AsyncGenerator[AsyncSession]:
        yield async_db

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_record_store] = lambda: SqlRecordStore(session_factory)

    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture()
def syndic_token() -> str:
    return make_token("syndic-1", UserRole.SYNDIC.value, "syndic@test.com")


@pytest.fixture()
def resident_token() -> str:
    return make_token("resident-1", UserRole.RESIDENT.value, "resident@test.com")
