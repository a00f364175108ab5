"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, CreatedAtMixin, utc_timestamp: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - ParcelModel, ParcelStatus: Parcel entity and its status enum
  - BaseCRUD, ParcelCRUD, parcel_crud: CRUD classes and singleton

Dependencies: sqlalchemy, tracker.configs
System role: Database adapter providing persistent storage for parcels.
"""

from tracker.boundary.db.base import Base, CreatedAtMixin, utc_timestamp
from tracker.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from tracker.boundary.db.models.parcel_model import ParcelModel, ParcelStatus
from tracker.boundary.db.CRUD import BaseCRUD, ParcelCRUD, parcel_crud

__all__ = [
    # Base classes
    "Base",
    "CreatedAtMixin",
    "utc_timestamp",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "ParcelModel",
    "ParcelStatus",
    # CRUD
    "BaseCRUD",
    "ParcelCRUD",
    "parcel_crud",
]
