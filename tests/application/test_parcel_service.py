"""
Test suite for ParcelService.

Tests registration, client listing, lifecycle progression and the
delegation of guarded operations to ParcelStore.

System role: Verification of parcel service orchestration layer
"""

import logging
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.application.services.parcel_service import ParcelService
from tracker.application.services.parcel_store import ParcelStore
from tracker.boundary.db.models.parcel_model import ParcelStatus
from tracker.core.exceptions import (
    EmptyAddressError,
    ParcelNotFoundError,
    ParcelStatusGuardError,
)


@pytest.fixture
def service(test_async_db: AsyncSession) -> ParcelService:
    """Provide ParcelService bound to the test database."""
    return ParcelService(test_async_db)


class TestParcelServiceInit:
    """Test suite for ParcelService initialization."""

    async def test_init_should_create_store_from_session(
        self, test_async_db: AsyncSession
    ) -> None:
        """Test a ParcelStore is built on the given session when none is passed."""
        service = ParcelService(test_async_db)

        assert isinstance(service.store, ParcelStore)
        assert service.store.db is test_async_db

    async def test_init_should_use_given_store(self, test_async_db: AsyncSession) -> None:
        """Test an injected store is kept."""
        store = AsyncMock(spec=ParcelStore)

        service = ParcelService(test_async_db, store=store)

        assert service.store is store


class TestParcelServiceRegister:
    """Test suite for ParcelService.register()."""

    async def test_register_should_store_registered_parcel(
        self, service: ParcelService
    ) -> None:
        """Test registered parcel is persisted with a number and timestamp."""
        parcel = await service.register(1, "Test address")

        stored = await service.store.get(parcel.number)
        assert stored == parcel
        assert stored.status == ParcelStatus.REGISTERED
        assert stored.created_at

    async def test_register_should_reject_empty_address(
        self, service: ParcelService
    ) -> None:
        """Test empty address is refused."""
        with pytest.raises(EmptyAddressError):
            await service.register(1, "")


class TestParcelServiceClientParcels:
    """Test suite for ParcelService.get_client_parcels()."""

    async def test_get_client_parcels_should_list_and_log_each_parcel(
        self, service: ParcelService, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test every client parcel is returned and logged."""
        first = await service.register(5, "Address A")
        second = await service.register(5, "Address B")
        await service.register(6, "Address C")

        with caplog.at_level(logging.INFO, logger="tracker.application.services.parcel_service"):
            parcels = await service.get_client_parcels(5)

        assert {p.number for p in parcels} == {first.number, second.number}
        assert "Client 5 has 2 parcel(s)" in caplog.text
        assert "Address A" in caplog.text
        assert "Address B" in caplog.text


class TestParcelServiceNextStatus:
    """Test suite for ParcelService.next_status()."""

    async def test_next_status_should_walk_lifecycle_and_stop(
        self, service: ParcelService
    ) -> None:
        """Test registered -> sent -> delivered, then no further change."""
        parcel = await service.register(1, "Test address")

        assert await service.next_status(parcel.number) == ParcelStatus.SENT
        assert await service.next_status(parcel.number) == ParcelStatus.DELIVERED
        assert await service.next_status(parcel.number) is None

        stored = await service.store.get(parcel.number)
        assert stored.status == ParcelStatus.DELIVERED

    async def test_next_status_should_raise_not_found_for_unknown_number(
        self, service: ParcelService
    ) -> None:
        """Test unknown parcel surfaces ParcelNotFoundError."""
        with pytest.raises(ParcelNotFoundError):
            await service.next_status(424242)


class TestParcelServiceGuardedOperations:
    """Test suite for change_address() and delete()."""

    async def test_change_address_should_update_registered_parcel(
        self, service: ParcelService
    ) -> None:
        """Test address change before sending."""
        parcel = await service.register(1, "Old address")

        await service.change_address(parcel.number, "New address")

        assert (await service.store.get(parcel.number)).address == "New address"

    async def test_change_address_should_fail_after_sending(
        self, service: ParcelService
    ) -> None:
        """Test address change after sending is blocked."""
        parcel = await service.register(1, "Old address")
        await service.next_status(parcel.number)

        with pytest.raises(ParcelStatusGuardError):
            await service.change_address(parcel.number, "New address")

    async def test_delete_should_remove_registered_parcel(
        self, service: ParcelService
    ) -> None:
        """Test deletion before sending."""
        parcel = await service.register(1, "Test address")

        await service.delete(parcel.number)

        assert await service.get_client_parcels(1) == []

    async def test_delete_should_fail_after_sending(
        self, service: ParcelService
    ) -> None:
        """Test deletion after sending is blocked."""
        parcel = await service.register(1, "Test address")
        await service.next_status(parcel.number)

        with pytest.raises(ParcelStatusGuardError):
            await service.delete(parcel.number)

    async def test_guarded_operations_should_delegate_to_store(
        self, test_async_db: AsyncSession
    ) -> None:
        """Test change_address and delete forward to the store unchanged."""
        store = AsyncMock(spec=ParcelStore)
        service = ParcelService(test_async_db, store=store)

        await service.change_address(3, "Somewhere")
        await service.delete(3)

        store.set_address.assert_awaited_once_with(3, "Somewhere")
        store.delete.assert_awaited_once_with(3)
