"""
parcel_tracker.db.repositories.parcels

Repository for `parcel` rows.

Responsibilities:
- Translate parcel operations into single parameterized statements.
- Map rows to the immutable `Parcel` value object.
- Report conditional writes as a `WriteOutcome` instead of silently succeeding.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from parcel_tracker.db.models import ParcelRecord
from parcel_tracker.errors import NotFoundError, StorageError
from parcel_tracker.models import Parcel, ParcelStatus, WriteOutcome
from parcel_tracker.observability.logging import get_logger

log = get_logger(__name__)

_COLUMNS = (
    ParcelRecord.number,
    ParcelRecord.client,
    ParcelRecord.status,
    ParcelRecord.address,
    ParcelRecord.created_at,
)


def _to_parcel(row: Any) -> Parcel:
    return Parcel(
        number=row.number,
        client=row.client,
        status=row.status,
        address=row.address,
        created_at=row.created_at,
    )


class ParcelStore:
    """
    Data access for parcels over a caller-owned `AsyncEngine`.

    Every operation runs in its own transaction and commits on success, so there
    is no state shared between calls and the store can be used concurrently.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    @asynccontextmanager
    async def _begin(self) -> AsyncIterator[AsyncConnection]:
        try:
            async with self._engine.begin() as conn:
                yield conn
        # The sqlite driver raises a bare OverflowError for ints beyond 64 bits.
        except (SQLAlchemyError, OverflowError) as e:
            raise StorageError(str(e)) from e

    async def add(self, parcel: Parcel) -> int:
        stmt = insert(ParcelRecord).values(
            client=parcel.client,
            status=str(parcel.status),
            address=parcel.address,
            created_at=parcel.created_at,
        )
        async with self._begin() as conn:
            result = await conn.execute(stmt)
            number = int(result.inserted_primary_key[0])
        log.debug("parcel_added", number=number, client=parcel.client)
        return number

    async def get(self, number: int) -> Parcel:
        stmt = select(*_COLUMNS).where(ParcelRecord.number == number).limit(1)
        async with self._begin() as conn:
            row = (await conn.execute(stmt)).first()
        if row is None:
            raise NotFoundError(number)
        return _to_parcel(row)

    async def get_by_client(self, client: int) -> list[Parcel]:
        stmt = (
            select(*_COLUMNS)
            .where(ParcelRecord.client == client)
            .order_by(ParcelRecord.number)
        )
        async with self._begin() as conn:
            rows = (await conn.execute(stmt)).all()
        return [_to_parcel(row) for row in rows]

    async def set_status(self, number: int, status: str) -> WriteOutcome:
        stmt = (
            update(ParcelRecord)
            .where(ParcelRecord.number == number)
            .values(status=str(status))
        )
        async with self._begin() as conn:
            result = await conn.execute(stmt)
            outcome = WriteOutcome.applied if result.rowcount else WriteOutcome.not_found
        log.debug("parcel_status_set", number=number, status=str(status), outcome=outcome)
        return outcome

    async def advance_status(self, number: int, previous: str, status: str) -> WriteOutcome:
        # Compare-and-set: only applies while the row still carries `previous`.
        stmt = (
            update(ParcelRecord)
            .where(
                ParcelRecord.number == number,
                ParcelRecord.status == str(previous),
            )
            .values(status=str(status))
        )
        async with self._begin() as conn:
            outcome = await self._conditional_write(conn, stmt, number)
        log.debug(
            "parcel_status_advanced",
            number=number,
            previous=str(previous),
            status=str(status),
            outcome=outcome,
        )
        return outcome

    async def set_address(self, number: int, address: str) -> WriteOutcome:
        stmt = (
            update(ParcelRecord)
            .where(
                ParcelRecord.number == number,
                ParcelRecord.status == str(ParcelStatus.registered),
            )
            .values(address=address)
        )
        async with self._begin() as conn:
            outcome = await self._conditional_write(conn, stmt, number)
        log.debug("parcel_address_set", number=number, outcome=outcome)
        return outcome

    async def delete(self, number: int) -> WriteOutcome:
        stmt = delete(ParcelRecord).where(
            ParcelRecord.number == number,
            ParcelRecord.status == str(ParcelStatus.registered),
        )
        async with self._begin() as conn:
            outcome = await self._conditional_write(conn, stmt, number)
        log.debug("parcel_deleted", number=number, outcome=outcome)
        return outcome

    async def _conditional_write(
        self, conn: AsyncConnection, stmt: Any, number: int
    ) -> WriteOutcome:
        result = await conn.execute(stmt)
        if result.rowcount:
            return WriteOutcome.applied
        # Zero rows: tell a wrong status apart from a missing parcel.
        probe = select(ParcelRecord.number).where(ParcelRecord.number == number)
        exists = (await conn.execute(probe)).first() is not None
        return WriteOutcome.precondition_failed if exists else WriteOutcome.not_found


# --- Module Notes -----------------------------------------------------------
# The existence probe runs in the same transaction as the write, so the outcome
# describes the row as that write saw it.
