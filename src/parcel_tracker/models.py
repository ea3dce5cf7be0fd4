"""
parcel_tracker.models

Domain types shared by the store and the service layer.

Responsibilities:
- Define the `Parcel` value object returned by the store.
- Define the status vocabulary and the tagged result of conditional writes.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime, timezone

# RFC 3339 in UTC; lexical order matches chronological order.
CREATED_AT_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class ParcelStatus(enum.StrEnum):
    # Only `registered` parcels may change address or be deleted.
    registered = "registered"
    sent = "sent"
    delivered = "delivered"


class WriteOutcome(enum.StrEnum):
    applied = "APPLIED"
    precondition_failed = "PRECONDITION_FAILED"
    not_found = "NOT_FOUND"


def utc_timestamp(moment: datetime | None = None) -> str:
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).strftime(CREATED_AT_FORMAT)


@dataclass(frozen=True, slots=True)
class Parcel:
    """
    A shipment record. `number` is 0 until the store assigns one.
    """

    client: int
    status: str
    address: str
    created_at: str
    number: int = 0

    @classmethod
    def new(
        cls,
        client: int,
        address: str,
        *,
        status: str = ParcelStatus.registered,
        created_at: str | None = None,
    ) -> Parcel:
        return cls(
            client=client,
            status=str(status),
            address=address,
            created_at=created_at if created_at is not None else utc_timestamp(),
        )

    @property
    def is_registered(self) -> bool:
        return self.status == ParcelStatus.registered
