"""
Parcel CRUD operations.

Provides Create, Read, Update, Delete operations for ParcelModel
with parcel-specific queries: per-client listing and the
status-guarded address update and delete.

Dependencies: sqlalchemy, tracker.boundary.db.models.parcel_model
System role: Parcel persistence queries
"""

from typing import Sequence

from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.boundary.db.models.parcel_model import ParcelModel, ParcelStatus
from tracker.boundary.db.CRUD.base_crud import BaseCRUD


class ParcelCRUD(BaseCRUD[ParcelModel]):
    """
    CRUD operations for ParcelModel.

    Extends BaseCRUD with client lookups and conditional statements that
    only touch rows still in REGISTERED status. The guard lives in the
    WHERE clause so check and write happen in one statement.
    """

    def __init__(self) -> None:
        """Initialize ParcelCRUD with ParcelModel."""
        super().__init__(ParcelModel)

    async def get_by_client(
        self,
        session: AsyncSession,
        client: int,
    ) -> Sequence[ParcelModel]:
        """
        Retrieve all parcels belonging to a client.

        Args:
            session: Async database session
            client: External client identifier

        Returns:
            Sequence of ParcelModels, in no particular order
        """
        stmt = select(ParcelModel).where(ParcelModel.client == client)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_for_update(
        self,
        session: AsyncSession,
        number: int,
    ) -> ParcelModel | None:
        """
        Re-read a parcel under a row lock.

        Takes SELECT ... FOR UPDATE where the backend supports it (SQLite
        ignores the clause) and overwrites any stale in-session copy.

        Args:
            session: Async database session
            number: Parcel number

        Returns:
            ParcelModel if found, None otherwise
        """
        stmt = (
            select(ParcelModel)
            .where(ParcelModel.number == number)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_status(
        self,
        session: AsyncSession,
        number: int,
        status: ParcelStatus,
    ) -> ParcelModel | None:
        """
        Set parcel status unconditionally.

        Args:
            session: Async database session
            number: Parcel number
            status: New status

        Returns:
            Updated ParcelModel if found, None otherwise
        """
        return await self.update_by_id(session, number, status=status)

    async def update_address_if_registered(
        self,
        session: AsyncSession,
        number: int,
        address: str,
    ) -> bool:
        """
        Change the address of a parcel still in REGISTERED status.

        Args:
            session: Async database session
            number: Parcel number
            address: New delivery address

        Returns:
            True if a row was updated, False if the parcel is missing
            or no longer registered
        """
        stmt = (
            update(ParcelModel)
            .where(
                ParcelModel.number == number,
                ParcelModel.status == ParcelStatus.REGISTERED,
            )
            .values(address=address)
            .returning(ParcelModel.number)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def delete_if_registered(
        self,
        session: AsyncSession,
        number: int,
    ) -> bool:
        """
        Delete a parcel still in REGISTERED status.

        Args:
            session: Async database session
            number: Parcel number

        Returns:
            True if a row was deleted, False if the parcel is missing
            or no longer registered
        """
        stmt = (
            delete(ParcelModel)
            .where(
                ParcelModel.number == number,
                ParcelModel.status == ParcelStatus.REGISTERED,
            )
            .returning(ParcelModel.number)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None


parcel_crud = ParcelCRUD()
