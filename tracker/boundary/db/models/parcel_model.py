"""
Parcel ORM model.

Maps the single ``parcel`` table holding postal parcel records.

Dependencies: sqlalchemy, tracker.boundary.db.base
System role: Parcel persistence schema
"""

import enum

from sqlalchemy import Enum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from tracker.boundary.db.base import Base, CreatedAtMixin


class ParcelStatus(str, enum.Enum):
    """
    Parcel lifecycle states.

    REGISTERED: Accepted from the client; address may change, parcel may be deleted
    SENT: Handed to delivery; record is frozen except for status
    DELIVERED: Final state
    """

    REGISTERED = "registered"
    SENT = "sent"
    DELIVERED = "delivered"


class ParcelModel(Base, CreatedAtMixin):
    """
    Parcel ORM model.

    Attributes:
        number: Integer primary key assigned by the database
        client: External client identifier (indexed for per-client lookups)
        status: Lifecycle status, persisted as its lowercase value
        address: Delivery address (non-empty, enforced by ParcelStore)
        created_at: Creation timestamp string (from CreatedAtMixin)

    Constraints:
        address may only change, and the row may only be deleted,
        while status is REGISTERED
    """

    __tablename__ = "parcel"

    number: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    client: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        index=True,
        doc="External client identifier",
    )

    status: Mapped[ParcelStatus] = mapped_column(
        Enum(
            ParcelStatus,
            native_enum=False,
            length=16,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
        default=ParcelStatus.REGISTERED,
    )

    address: Mapped[str] = mapped_column(
        String(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return (
            f"<ParcelModel(number={self.number}, client={self.client}, "
            f"status='{self.status.value if self.status else None}')>"
        )
