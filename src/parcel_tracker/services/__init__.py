"""
parcel_tracker.services

Service-layer package.

Responsibilities:
- Hold parcel business rules (status progression) on top of the store.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services should be pure Python and easily testable against a throwaway database.
