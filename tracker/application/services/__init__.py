"""
Application services.

Exports:
  - ParcelStore: Parcel persistence with the registered-status guard
  - ParcelService: Parcel workflows built on the store
"""

from tracker.application.services.parcel_store import ParcelStore
from tracker.application.services.parcel_service import ParcelService

__all__ = ["ParcelStore", "ParcelService"]
