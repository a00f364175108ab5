"""
Domain models exchanged with callers of the parcel store.
"""

from tracker.models.parcel import Parcel

__all__ = ["Parcel"]
