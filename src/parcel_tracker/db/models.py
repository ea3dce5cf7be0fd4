"""
parcel_tracker.db.models

Persistence schema for parcels.

Responsibilities:
- Map the `parcel` table.
"""

from __future__ import annotations

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from parcel_tracker.db.base import Base


class ParcelRecord(Base):
    __tablename__ = "parcel"

    # AUTOINCREMENT keeps SQLite from reusing the number of a deleted row.
    number: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    client: Mapped[int] = mapped_column(nullable=False, index=True)
    status: Mapped[str] = mapped_column(String(32), nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    # Stored as text (RFC 3339, UTC) so it round-trips byte for byte.
    created_at: Mapped[str] = mapped_column(String(32), nullable=False)

    __table_args__ = {"sqlite_autoincrement": True}


# --- Module Notes -----------------------------------------------------------
# The store talks to this table through Core statements; rows are converted to
# the immutable `parcel_tracker.models.Parcel` before leaving the store.
