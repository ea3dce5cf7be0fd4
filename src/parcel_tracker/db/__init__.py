"""
parcel_tracker.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide the ORM mapping, engine helpers, and the parcel store.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The store only needs an `AsyncEngine`; switching backends means changing the
# database URL, not the store.
