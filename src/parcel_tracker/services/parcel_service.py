"""
parcel_tracker.services.parcel_service

Parcel lifecycle service.

Responsibilities:
- Register parcels for a client.
- Advance a parcel through registered -> sent -> delivered.
- Change address / delete, logging when the status forbids it.
"""

from __future__ import annotations

from parcel_tracker.db.repositories.parcels import ParcelStore
from parcel_tracker.models import Parcel, ParcelStatus, WriteOutcome
from parcel_tracker.observability.logging import get_logger

log = get_logger(__name__)

_NEXT_STATUS: dict[str, ParcelStatus] = {
    str(ParcelStatus.registered): ParcelStatus.sent,
    str(ParcelStatus.sent): ParcelStatus.delivered,
}


class ParcelService:
    def __init__(self, store: ParcelStore) -> None:
        self._store = store

    async def register(self, client: int, address: str) -> Parcel:
        parcel = Parcel.new(client, address)
        number = await self._store.add(parcel)
        log.info("parcel_registered", number=number, client=client)
        return Parcel(
            number=number,
            client=parcel.client,
            status=parcel.status,
            address=parcel.address,
            created_at=parcel.created_at,
        )

    async def client_parcels(self, client: int) -> list[Parcel]:
        return await self._store.get_by_client(client)

    async def next_status(self, number: int) -> str | None:
        """
        Move the parcel one step forward. Returns the new status, or None when the
        parcel is already delivered (or carries a status outside the known flow),
        or when it was changed or deleted by someone else after it was read.
        Raises `NotFoundError` for an unknown number.
        """

        parcel = await self._store.get(number)
        next_status = _NEXT_STATUS.get(parcel.status)
        if next_status is None:
            return None

        outcome = await self._store.advance_status(number, parcel.status, next_status)
        if outcome is not WriteOutcome.applied:
            log.warning("parcel_status_not_changed", number=number, outcome=outcome)
            return None

        log.info(
            "parcel_status_changed",
            number=number,
            previous=parcel.status,
            status=str(next_status),
        )
        return str(next_status)

    async def change_address(self, number: int, address: str) -> WriteOutcome:
        outcome = await self._store.set_address(number, address)
        if outcome is not WriteOutcome.applied:
            log.warning("parcel_address_not_changed", number=number, outcome=outcome)
        return outcome

    async def delete(self, number: int) -> WriteOutcome:
        outcome = await self._store.delete(number)
        if outcome is not WriteOutcome.applied:
            log.warning("parcel_not_deleted", number=number, outcome=outcome)
        return outcome
