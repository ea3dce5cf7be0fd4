"""
parcel_tracker.db.init_db

DB initialization helpers (dev/test convenience).

Responsibilities:
- Create the `parcel` table for local development and tests.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from parcel_tracker.db import models  # noqa: F401  # registers ParcelRecord on Base.metadata
from parcel_tracker.db.base import Base


async def init_db(engine: AsyncEngine) -> None:
    """
    Create tables if they don't exist.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# --- Module Notes -----------------------------------------------------------
# Schema migrations are out of scope for this package; production databases are
# expected to be provisioned by the deployment.
