"""
Parcel tracker.

Persistence layer for postal parcel records with a status-gated
address/deletion rule.
"""

__version__ = "0.1.0"
