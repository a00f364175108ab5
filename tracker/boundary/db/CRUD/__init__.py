"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from tracker.boundary.db.CRUD import parcel_crud

    parcel = await parcel_crud.get_by_id(db, number)
"""

from tracker.boundary.db.CRUD.base_crud import BaseCRUD
from tracker.boundary.db.CRUD.parcel_crud import ParcelCRUD, parcel_crud

__all__ = [
    "BaseCRUD",
    "ParcelCRUD",
    "parcel_crud",
]
