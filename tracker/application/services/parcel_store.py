"""
Parcel store.

Create, read, update and delete operations over the parcel table with
input validation and the rule that address changes and deletions are
only allowed while a parcel is REGISTERED.

Each mutating call is its own unit of work: it commits on success and
rolls back and re-raises on failure.

Dependencies: sqlalchemy, tracker.boundary.db, tracker.core.exceptions
System role: Parcel data-access component
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from tracker.boundary.db.CRUD.parcel_crud import parcel_crud
from tracker.boundary.db.base import utc_timestamp
from tracker.boundary.db.models.parcel_model import ParcelStatus
from tracker.core.exceptions import (
    EmptyAddressError,
    InvalidStatusError,
    ParcelNotFoundError,
    ParcelStatusGuardError,
    ParcelTrackerException,
)
from tracker.models.parcel import Parcel
from tracker.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)


class ParcelStore:
    """Parcel records bound to one database session."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize store.

        Args:
            db: AsyncSession for database operations
        """
        self.db = db

    async def add(self, parcel: Parcel) -> int:
        """
        Insert a parcel.

        Args:
            parcel: Parcel to store; ``number`` is ignored

        Returns:
            int: Generated parcel number

        Raises:
            EmptyAddressError: Address is empty
        """
        if not parcel.address:
            raise EmptyAddressError(details={"client": parcel.client})

        try:
            row = await parcel_crud.create(
                self.db,
                client=parcel.client,
                status=parcel.status,
                address=parcel.address,
                created_at=parcel.created_at or utc_timestamp(),
            )
            number = row.number
            await self.db.commit()
        except Exception as e:
            await self._rollback("add", e, client=parcel.client)
            raise

        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:add - Parcel added",
            number=number,
            client=parcel.client,
            status=parcel.status,
        )
        return number

    async def get(self, number: int) -> Parcel:
        """
        Fetch a parcel by number.

        Raises:
            ParcelNotFoundError: No parcel with this number
        """
        row = await parcel_crud.get_by_id(self.db, number)
        if row is None:
            raise ParcelNotFoundError(number)
        return Parcel.model_validate(row)

    async def get_by_client(self, client: int) -> list[Parcel]:
        """All parcels of a client, unordered. Empty list when there are none."""
        rows = await parcel_crud.get_by_client(self.db, client)
        return [Parcel.model_validate(row) for row in rows]

    async def set_status(self, number: int, status: ParcelStatus | str) -> None:
        """
        Set parcel status.

        Any known status may follow any other; only membership is checked.

        Args:
            number: Parcel number
            status: ParcelStatus member or its string value

        Raises:
            InvalidStatusError: Status is not a ParcelStatus value
            ParcelNotFoundError: No parcel with this number
        """
        try:
            new_status = ParcelStatus(status)
        except ValueError:
            raise InvalidStatusError(status, details={"number": number}) from None

        try:
            row = await parcel_crud.update_status(self.db, number, new_status)
            if row is None:
                raise ParcelNotFoundError(number)
            await self.db.commit()
        except Exception as e:
            await self._rollback("set_status", e, number=number)
            raise

        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:set_status - Status updated",
            number=number,
            status=new_status,
        )

    async def set_address(self, number: int, address: str) -> None:
        """
        Change the delivery address of a REGISTERED parcel.

        Raises:
            EmptyAddressError: Address is empty
            ParcelNotFoundError: No parcel with this number
            ParcelStatusGuardError: Parcel is no longer REGISTERED
        """
        if not address:
            raise EmptyAddressError(details={"number": number})

        try:
            updated = await parcel_crud.update_address_if_registered(
                self.db, number, address
            )
            if not updated:
                await self._raise_blocked(number, "set_address")
            await self.db.commit()
        except Exception as e:
            await self._rollback("set_address", e, number=number)
            raise

        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:set_address - Address updated",
            number=number,
        )

    async def delete(self, number: int) -> None:
        """
        Delete a REGISTERED parcel.

        Raises:
            ParcelNotFoundError: No parcel with this number
            ParcelStatusGuardError: Parcel is no longer REGISTERED
        """
        try:
            deleted = await parcel_crud.delete_if_registered(self.db, number)
            if not deleted:
                await self._raise_blocked(number, "delete")
            await self.db.commit()
        except Exception as e:
            await self._rollback("delete", e, number=number)
            raise

        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:delete - Parcel deleted",
            number=number,
        )

    async def _raise_blocked(self, number: int, operation: str) -> None:
        """Explain why a guarded statement matched no row."""
        row = await parcel_crud.get_for_update(self.db, number)
        if row is None:
            raise ParcelNotFoundError(number)
        raise ParcelStatusGuardError(number, row.status, operation)

    async def _rollback(self, operation: str, exc: Exception, **context) -> None:
        """
        Log a failed operation and roll its transaction back.

        Store errors (not found, guard, validation) are expected outcomes and
        log at WARNING; anything else, typically a driver error, logs at
        ERROR with its traceback.
        """
        message = f"{__name__}:{operation} - failed"
        if isinstance(exc, ParcelTrackerException):
            log_with_context(
                logger,
                logging.WARNING,
                message,
                error_type=type(exc).__name__,
                error_msg=exc.message,
                **context,
            )
        else:
            log_exception_with_context(logger, message, exc, **context)
        await self.db.rollback()
