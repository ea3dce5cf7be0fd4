"""
parcel_tracker.db.session

Async SQLAlchemy engine helper.

Responsibilities:
- Create the async engine from settings.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from parcel_tracker.settings import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    # pool_pre_ping helps detect stale connections in long-lived processes.
    return create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
    )


# --- Module Notes -----------------------------------------------------------
# Whoever calls `create_engine` owns the engine and must `await engine.dispose()`.
# `ParcelStore` never disposes the engine it is given.
