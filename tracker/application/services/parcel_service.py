"""
Parcel service orchestrator.

Coordinates parcel registration and delivery progress on top of
ParcelStore.

Dependencies: tracker.application.services.parcel_store
System role: Parcel workflow orchestration
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from tracker.application.services.parcel_store import ParcelStore
from tracker.boundary.db.base import utc_timestamp
from tracker.boundary.db.models.parcel_model import ParcelStatus
from tracker.models.parcel import Parcel

logger = logging.getLogger(__name__)

NEXT_STATUS: dict[ParcelStatus, ParcelStatus] = {
    ParcelStatus.REGISTERED: ParcelStatus.SENT,
    ParcelStatus.SENT: ParcelStatus.DELIVERED,
}


class ParcelService:
    """
    Parcel service orchestrator.

    Registers parcels, walks them through the delivery lifecycle and
    exposes the guarded address change and deletion.
    """

    def __init__(self, db: AsyncSession, store: ParcelStore | None = None) -> None:
        """
        Initialize parcel service.

        Args:
            db: AsyncSession for database operations
            store: Store to use; created from ``db`` when omitted
        """
        self.db = db
        self.store = store or ParcelStore(db)

    async def register(self, client: int, address: str) -> Parcel:
        """
        Register a new parcel for a client.

        Args:
            client: External client identifier
            address: Delivery address

        Returns:
            Parcel: Stored parcel including its number

        Raises:
            EmptyAddressError: Address is empty
        """
        parcel = Parcel(
            client=client,
            status=ParcelStatus.REGISTERED,
            address=address,
            created_at=utc_timestamp(),
        )
        parcel.number = await self.store.add(parcel)

        logger.info(
            "Parcel %s registered for client %s, address %s, created %s",
            parcel.number,
            parcel.client,
            parcel.address,
            parcel.created_at,
        )
        return parcel

    async def get_client_parcels(self, client: int) -> list[Parcel]:
        """
        List a client's parcels.

        Args:
            client: External client identifier

        Returns:
            list[Parcel]: Client's parcels, unordered
        """
        parcels = await self.store.get_by_client(client)

        logger.info("Client %s has %d parcel(s)", client, len(parcels))
        for parcel in parcels:
            logger.info(
                "Parcel %s: address %s, created %s, status %s",
                parcel.number,
                parcel.address,
                parcel.created_at,
                parcel.status.value,
            )
        return parcels

    async def next_status(self, number: int) -> ParcelStatus | None:
        """
        Advance a parcel to its next lifecycle status.

        REGISTERED -> SENT -> DELIVERED. A delivered parcel is left as is.

        Args:
            number: Parcel number

        Returns:
            ParcelStatus | None: New status, or None if already delivered

        Raises:
            ParcelNotFoundError: No parcel with this number
        """
        parcel = await self.store.get(number)

        new_status = NEXT_STATUS.get(parcel.status)
        if new_status is None:
            logger.info("Parcel %s is already delivered", number)
            return None

        await self.store.set_status(number, new_status)
        logger.info(
            "Parcel %s status changed: %s -> %s",
            number,
            parcel.status.value,
            new_status.value,
        )
        return new_status

    async def change_address(self, number: int, address: str) -> None:
        """
        Change the delivery address of a registered parcel.

        Raises:
            EmptyAddressError: Address is empty
            ParcelNotFoundError: No parcel with this number
            ParcelStatusGuardError: Parcel already sent
        """
        await self.store.set_address(number, address)

    async def delete(self, number: int) -> None:
        """
        Delete a registered parcel.

        Raises:
            ParcelNotFoundError: No parcel with this number
            ParcelStatusGuardError: Parcel already sent
        """
        await self.store.delete(number)
