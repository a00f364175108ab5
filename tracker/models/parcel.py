"""
Parcel domain model.

Plain record returned by and passed to ParcelStore, decoupled from
the ORM session.

Dependencies: pydantic
System role: Parcel data contract
"""

from pydantic import BaseModel, ConfigDict, Field

from tracker.boundary.db.models.parcel_model import ParcelStatus


class Parcel(BaseModel):
    """A trackable postal shipment record."""

    model_config = ConfigDict(from_attributes=True)

    number: int | None = Field(default=None, description="Store-assigned parcel number")
    client: int = Field(description="External client identifier")
    status: ParcelStatus = Field(default=ParcelStatus.REGISTERED, description="Lifecycle status")
    address: str = Field(description="Delivery address")
    created_at: str | None = Field(
        default=None,
        description="Creation timestamp (RFC 3339); set by the store when omitted",
    )
