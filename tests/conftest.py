"""
tests.conftest

Shared fixtures.

Responsibilities:
- Give each test its own SQLite database with the `parcel` table created.
- Own the engine lifecycle (the store never disposes it).
- Provide an explicit random generator for collision-resistant client ids.
"""

from __future__ import annotations

import random
import time
from collections.abc import AsyncIterator, Callable

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine

from parcel_tracker.db.init_db import init_db
from parcel_tracker.db.repositories.parcels import ParcelStore
from parcel_tracker.db.session import create_engine
from parcel_tracker.models import Parcel, ParcelStatus
from parcel_tracker.settings import Settings


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(env="test", database_url=f"sqlite+aiosqlite:///{tmp_path / 'tracker.db'}")


@pytest_asyncio.fixture
async def engine(settings: Settings) -> AsyncIterator[AsyncEngine]:
    engine = create_engine(settings)
    await init_db(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def store(engine: AsyncEngine) -> ParcelStore:
    return ParcelStore(engine)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(time.time_ns())


@pytest.fixture
def make_parcel() -> Callable[..., Parcel]:
    def factory(client: int = 1000, address: str = "test") -> Parcel:
        return Parcel(
            client=client,
            status=ParcelStatus.registered,
            address=address,
            created_at="2024-01-01T00:00:00Z",
        )

    return factory


# --- Module Notes -----------------------------------------------------------
# A file database (rather than :memory:) keeps every pooled connection on the
# same data without StaticPool tricks.
