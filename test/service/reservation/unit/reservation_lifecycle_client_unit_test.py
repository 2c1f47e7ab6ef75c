"""
Unit tests for ReservationLifecycleClient

Test Focus:
1. create -> cancel -> list_for_user shows the reservation cancelled, never active
2. The local mirror is only replaced by server lists, never patched
3. Client-side precondition: only active reservations can be cancelled
4. Duplicate cancel while one is in flight is ignored
5. A reservation the backend sends in an unknown shape keeps the mirror and shows a message
"""

import asyncio
from typing import Any, Dict, List
from unittest.mock import AsyncMock

import httpx
import pytest

from src.platform.exception.exception_handlers import GENERIC_ERROR_MESSAGE, USER_MESSAGES
from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.service.reservation.app.command.cancel_reservation_use_case import (
    CancelReservationUseCase,
)
from src.service.reservation.app.command.create_reservation_use_case import (
    CreateReservationUseCase,
)
from src.service.reservation.app.query.get_reservation_use_case import GetReservationUseCase
from src.service.reservation.app.query.list_user_reservations_use_case import (
    ListUserReservationsUseCase,
)
from src.service.reservation.domain.reservation_entity import ReservationStatus
from src.service.reservation.driven_adapter.reservation_gateway_impl import (
    ReservationGatewayImpl,
)
from src.service.reservation.driving_adapter.reservation_lifecycle_client import (
    ReservationLifecycleClient,
)


@pytest.mark.unit
class TestReservationLifecycle:
    @pytest.mark.asyncio
    async def test_create_cancel_list_shows_cancelled(
        self, lifecycle_client, reservation_backend
    ) -> None:
        """
        Given: A fresh reservation for seat 12
        When: Cancel it, then list the user's reservations
        Then: The listed reservation is cancelled with the server's reason and timestamp
        """
        # Arrange
        created = await lifecycle_client.create(user_id='7', schedule_id='10', seat_number=12)
        assert created is not None
        assert created.status == ReservationStatus.ACTIVE
        assert created.reservation_code == 'RES-000001'
        assert created.price == 80.0

        # Act
        await lifecycle_client.cancel(reservation_id=created.id, user_id='7')
        await lifecycle_client.list_for_user(user_id='7')

        # Assert
        listed = lifecycle_client.find(created.id)
        assert listed is not None
        assert listed.status == ReservationStatus.CANCELLED
        assert listed.cancellation_reason == 'Cancelled by user'
        assert listed.cancelled_at == '2025-01-11T09:00:00Z'
        assert lifecycle_client.active == []
        assert [r.id for r in lifecycle_client.history] == [created.id]

    @pytest.mark.asyncio
    async def test_cancel_refetches_instead_of_patching(
        self, lifecycle_client, reservation_backend
    ) -> None:
        # Arrange
        created = await lifecycle_client.create(user_id='7', schedule_id='10', seat_number=1)
        await lifecycle_client.list_for_user(user_id='7')
        reservation_backend.calls.clear()

        # Act
        result = await lifecycle_client.cancel(reservation_id=created.id, user_id='7')

        # Assert
        assert result.status == ReservationStatus.CANCELLED
        assert reservation_backend.calls == ['cancel', 'list']
        assert lifecycle_client.find(created.id).status == ReservationStatus.CANCELLED

    @pytest.mark.asyncio
    async def test_cancelled_reservation_cannot_be_cancelled_again(
        self, lifecycle_client, reservation_backend
    ) -> None:
        """
        Given: A cancelled reservation in the local mirror
        When: Cancel requested again
        Then: Refused locally, no request sent
        """
        # Arrange
        created = await lifecycle_client.create(user_id='7', schedule_id='10', seat_number=3)
        await lifecycle_client.cancel(reservation_id=created.id, user_id='7')
        reservation_backend.calls.clear()

        # Act
        result = await lifecycle_client.cancel(reservation_id=created.id, user_id='7')

        # Assert
        assert result is None
        assert 'already cancelled' in lifecycle_client.error_message
        assert reservation_backend.calls == []

    @pytest.mark.asyncio
    async def test_seat_conflict_surfaces_message(self, lifecycle_client) -> None:
        await lifecycle_client.create(user_id='7', schedule_id='10', seat_number=5)

        result = await lifecycle_client.create(user_id='8', schedule_id='10', seat_number=5)

        assert result is None
        assert lifecycle_client.error_message == USER_MESSAGES[ConflictError]

    @pytest.mark.asyncio
    async def test_cancel_unknown_reservation_refreshes_list(
        self, lifecycle_client, reservation_backend
    ) -> None:
        # Arrange
        await lifecycle_client.create(user_id='7', schedule_id='10', seat_number=2)

        # Act
        result = await lifecycle_client.cancel(reservation_id='999', user_id='7')

        # Assert
        assert result is None
        assert lifecycle_client.error_message == USER_MESSAGES[NotFoundError]
        assert [r.seat_number for r in lifecycle_client.reservations] == [2]

    @pytest.mark.asyncio
    async def test_list_failure_keeps_previous_mirror(
        self, lifecycle_client, reservation_backend
    ) -> None:
        # Arrange
        await lifecycle_client.create(user_id='7', schedule_id='10', seat_number=2)
        await lifecycle_client.list_for_user(user_id='7')
        before = list(lifecycle_client.reservations)
        reservation_backend.list_for_user = AsyncMock(side_effect=NotFoundError('gone'))

        # Act
        result = await lifecycle_client.list_for_user(user_id='7')

        # Assert
        assert result is False
        assert lifecycle_client.reservations == before

    @pytest.mark.asyncio
    async def test_duplicate_cancel_in_flight_is_ignored(
        self, lifecycle_client, reservation_backend
    ) -> None:
        # Arrange
        created = await lifecycle_client.create(user_id='7', schedule_id='10', seat_number=4)
        release = asyncio.Event()
        real_cancel = reservation_backend.cancel

        async def slow_cancel(*, reservation_id: str):
            await release.wait()
            return await real_cancel(reservation_id=reservation_id)

        reservation_backend.cancel = slow_cancel
        reservation_backend.calls.clear()

        # Act
        first = asyncio.create_task(
            lifecycle_client.cancel(reservation_id=created.id, user_id='7')
        )
        await asyncio.sleep(0)
        second = await lifecycle_client.cancel(reservation_id=created.id, user_id='7')
        release.set()
        await first

        # Assert
        assert second is None
        assert reservation_backend.calls.count('cancel') == 1

    @pytest.mark.asyncio
    async def test_get_reservation(self, lifecycle_client) -> None:
        created = await lifecycle_client.create(user_id='7', schedule_id='10', seat_number=6)

        fetched = await lifecycle_client.get(reservation_id=created.id)

        assert fetched == created


def _reservation_json(reservation_id: int, **overrides: Any) -> Dict[str, Any]:
    return {
        'id': reservation_id,
        'user_id': 7,
        'schedule_id': 10,
        'seat_number': reservation_id,
        'price': 80.0,
        'status': 'active',
        'reservation_code': f'RES-{reservation_id:0>6}',
        **overrides,
    }


@pytest.mark.unit
class TestReservationLifecycleOverHttp:
    @pytest.fixture
    def served_lists(self) -> List[List[Dict[str, Any]]]:
        return []

    @pytest.fixture
    def http_lifecycle_client(
        self, api_client_factory, served_lists: List[List[Dict[str, Any]]]
    ) -> ReservationLifecycleClient:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=served_lists.pop(0))

        gateway = ReservationGatewayImpl(api_client=api_client_factory(handler, token='tkn'))
        return ReservationLifecycleClient(
            create_reservation_use_case=CreateReservationUseCase(reservation_gateway=gateway),
            list_user_reservations_use_case=ListUserReservationsUseCase(
                reservation_gateway=gateway
            ),
            cancel_reservation_use_case=CancelReservationUseCase(reservation_gateway=gateway),
            get_reservation_use_case=GetReservationUseCase(reservation_gateway=gateway),
        )

    @pytest.mark.asyncio
    async def test_unknown_status_keeps_mirror_and_sets_message(
        self, http_lifecycle_client, served_lists
    ) -> None:
        """
        Given: A listed mirror of one active reservation
        When: The next list carries a status the client does not know
        Then: list_for_user reports failure, the mirror is unchanged, a generic message is shown
        """
        # Arrange
        served_lists.append([_reservation_json(1)])
        assert await http_lifecycle_client.list_for_user(user_id='7') is True
        before = list(http_lifecycle_client.reservations)
        served_lists.append([_reservation_json(1), _reservation_json(2, status='pending')])

        # Act
        result = await http_lifecycle_client.list_for_user(user_id='7')

        # Assert
        assert result is False
        assert http_lifecycle_client.reservations == before
        assert http_lifecycle_client.error_message == GENERIC_ERROR_MESSAGE
        assert http_lifecycle_client.loading is False
