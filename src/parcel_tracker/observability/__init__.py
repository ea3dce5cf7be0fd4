"""
parcel_tracker.observability

Observability package.

Responsibilities:
- Structured logging configuration.
"""

# Package marker.
