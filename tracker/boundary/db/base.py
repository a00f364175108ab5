"""
SQLAlchemy declarative base and common mixins.

Provides base class for all ORM models and a reusable mixin
for the creation timestamp column.

Dependencies: sqlalchemy
System role: Foundation for all database models
"""

from datetime import datetime, timezone

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def utc_timestamp() -> str:
    """Return the current UTC time as an RFC 3339 string (second precision)."""
    return datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)


class Base(DeclarativeBase):
    """
    SQLAlchemy declarative base for ORM model registration.

    All database models inherit from this class to ensure they're
    registered with the metadata and included in table creation.
    """

    pass


class CreatedAtMixin:
    """
    Mixin providing a creation timestamp stored as text.

    The value is supplied by the caller when known and otherwise
    defaults to the current UTC time in RFC 3339 form. It is never
    touched by updates.

    Attributes:
        created_at: Row creation timestamp string (e.g. 2024-01-01T00:00:00Z)
    """

    created_at: Mapped[str] = mapped_column(
        String(),
        default=utc_timestamp,
        nullable=False,
    )
