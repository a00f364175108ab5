"""
Boundary layer.

Adapters to external systems. The only boundary is the relational
database holding the parcel table.
"""
