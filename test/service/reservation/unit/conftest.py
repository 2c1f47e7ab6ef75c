"""
Conftest for reservation unit tests - no backend.

InMemoryReservationGateway plays the backend role: it assigns codes and
prices, enforces seat uniqueness per schedule and owns every status change.
"""

from typing import Dict, List

import attrs
import pytest

from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.service.reservation.app.command.cancel_reservation_use_case import (
    CancelReservationUseCase,
)
from src.service.reservation.app.command.create_reservation_use_case import (
    CreateReservationUseCase,
)
from src.service.reservation.app.interface.i_reservation_gateway import IReservationGateway
from src.service.reservation.app.query.get_reservation_use_case import GetReservationUseCase
from src.service.reservation.app.query.list_user_reservations_use_case import (
    ListUserReservationsUseCase,
)
from src.service.reservation.domain.reservation_entity import Reservation, ReservationStatus
from src.service.reservation.driving_adapter.reservation_lifecycle_client import (
    ReservationLifecycleClient,
)


class InMemoryReservationGateway(IReservationGateway):
    def __init__(self, *, price: float = 80.0) -> None:
        self.price = price
        self.rows: Dict[str, Reservation] = {}
        self.calls: List[str] = []

    async def create(self, *, user_id: str, schedule_id: str, seat_number: int) -> Reservation:
        self.calls.append('create')
        taken = any(
            r.schedule_id == schedule_id
            and r.seat_number == seat_number
            and r.status == ReservationStatus.ACTIVE
            for r in self.rows.values()
        )
        if taken:
            raise ConflictError(f'Seat {seat_number} is already taken')

        reservation_id = str(len(self.rows) + 1)
        reservation = Reservation(
            id=reservation_id,
            user_id=user_id,
            schedule_id=schedule_id,
            seat_number=seat_number,
            price=self.price,
            status=ReservationStatus.ACTIVE,
            reservation_code=f'RES-{reservation_id:0>6}',
            created_at='2025-01-10T12:00:00Z',
        )
        self.rows[reservation_id] = reservation
        return reservation

    async def list_for_user(self, *, user_id: str) -> List[Reservation]:
        self.calls.append('list')
        return [r for r in self.rows.values() if r.user_id == user_id]

    async def cancel(self, *, reservation_id: str) -> Reservation:
        self.calls.append('cancel')
        if reservation_id not in self.rows:
            raise NotFoundError(f'Reservation {reservation_id} not found')
        cancelled = attrs.evolve(
            self.rows[reservation_id],
            status=ReservationStatus.CANCELLED,
            cancellation_reason='Cancelled by user',
            cancelled_at='2025-01-11T09:00:00Z',
        )
        self.rows[reservation_id] = cancelled
        return cancelled

    async def get_by_id(self, *, reservation_id: str) -> Reservation:
        self.calls.append('get')
        if reservation_id not in self.rows:
            raise NotFoundError(f'Reservation {reservation_id} not found')
        return self.rows[reservation_id]


@pytest.fixture
def reservation_backend() -> InMemoryReservationGateway:
    return InMemoryReservationGateway()


@pytest.fixture
def lifecycle_client(reservation_backend: InMemoryReservationGateway) -> ReservationLifecycleClient:
    return ReservationLifecycleClient(
        create_reservation_use_case=CreateReservationUseCase(
            reservation_gateway=reservation_backend
        ),
        list_user_reservations_use_case=ListUserReservationsUseCase(
            reservation_gateway=reservation_backend
        ),
        cancel_reservation_use_case=CancelReservationUseCase(
            reservation_gateway=reservation_backend
        ),
        get_reservation_use_case=GetReservationUseCase(reservation_gateway=reservation_backend),
    )
