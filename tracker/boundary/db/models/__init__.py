"""
Database models package.

Exports:
  - ParcelModel, ParcelStatus: Parcel ORM model and status enum

Dependencies: sqlalchemy, tracker.boundary.db.base
System role: Database model definitions for domain entities
"""

from tracker.boundary.db.models.parcel_model import ParcelModel, ParcelStatus

__all__ = [
    "ParcelModel",
    "ParcelStatus",
]
