"""Shared fixtures: a fresh app per test backed by a throwaway SQLite file."""

import asyncio

import pytest
from fastapi.testclient import TestClient

import barlog.models  # noqa: F401 - register all models
from barlog.db.base import Base
from barlog.db.session import build_engine, build_session_maker, get_db
from barlog.main import create_application


@pytest.fixture
def app(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'barlog.db'}")

    async def create_schema():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(create_schema())
    session_maker = build_session_maker(engine)

    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application = create_application()
    application.dependency_overrides[get_db] = override_get_db
    yield application
    application.dependency_overrides.clear()
    asyncio.run(engine.dispose())


@pytest.fixture
def client(app):
    return TestClient(app)
