"""
Fixtures: una DB SQLite en memoria por test, sembrada con tres usuarios
(TestUser1..3 / user1..3, ids 1..3) e inyectada en SimulatorService.
"""
from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from minitwit.core.config import Settings, get_settings
from minitwit.core.security import hash_password
from minitwit.db.init_db import init_models
from minitwit.db.session import build_engine, build_sessionmaker, get_session
from minitwit.simulator.service import SimulatorService
from minitwit.users.repository import create_user

SEED_USERS = [
    ("TestUser1", "TestUser1@test.com", "user1"),
    ("TestUser2", "TestUser2@test.com", "user2"),
    ("TestUser3", "TestUser3@test.com", "user3"),
]


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(_env_file=None, SECRET_KEY="test-secret")


@pytest_asyncio.fixture()
async def engine():
    engine = build_engine("sqlite+aiosqlite:///:memory:")
    await init_models(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture()
async def db(engine) -> AsyncSession:
    session_factory = build_sessionmaker(engine)
    async with session_factory() as session:
        for username, email, password in SEED_USERS:
            await create_user(session, username, email, hash_password(password))
        await session.commit()
        yield session


@pytest.fixture()
def simulator(db, test_settings) -> SimulatorService:
    return SimulatorService(db, test_settings)


@pytest_asyncio.fixture()
async def client(db, test_settings):
    from minitwit.main import app

    async def _session():
        yield db

    app.dependency_overrides[get_session] = _session
    app.dependency_overrides[get_settings] = lambda: test_settings
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
