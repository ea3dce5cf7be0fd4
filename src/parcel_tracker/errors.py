"""
parcel_tracker.errors

Exceptions raised by the persistence layer.

Responsibilities:
- Separate "no such parcel" from engine-level failures so callers can react
  to each without string matching.
"""

from __future__ import annotations


class ParcelTrackerError(Exception):
    pass


class StorageError(ParcelTrackerError):
    """
    Any failure reported by the storage engine: connection problems, constraint
    violations, a missing table. The SQLAlchemy error is kept as `__cause__`.
    """


class NotFoundError(ParcelTrackerError):
    def __init__(self, number: int) -> None:
        super().__init__(f"parcel {number} not found")
        self.number = number


# --- Module Notes -----------------------------------------------------------
# Conditional writes that match zero rows are not errors; they are reported
# through `parcel_tracker.models.WriteOutcome` instead.
