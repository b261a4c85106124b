"""
Shared fixtures for the job board test suite.

Each test gets its own SQLite database file; the app's `get_db` dependency
is overridden to hand out sessions bound to it.
"""
import os

os.environ["ENVIRONMENT"] = "testing"
os.environ.setdefault("LOG_TO_FILE", "false")

from datetime import datetime, timedelta

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app import models  # noqa: F401
from app.db.base import Base
from app.db.session import build_engine, get_db
from app.main import app

from .factories import Account, Seeder, new_account


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'jobboard_test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, autoflush=False, expire_on_commit=False)


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def seed(session_factory) -> Seeder:
    return Seeder(session_factory)


@pytest.fixture
def employer() -> Account:
    return new_account("employer")


@pytest.fixture
def candidate() -> Account:
    return new_account("candidate")


@pytest.fixture
def minutes_ago():
    now = datetime.utcnow()

    def _at(minutes: int) -> datetime:
        return now - timedelta(minutes=minutes)

    return _at
