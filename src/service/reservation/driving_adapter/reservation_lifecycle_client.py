"""
Reservation Lifecycle Client

Mediates create/list/cancel against the backend and mirrors the user's
reservations locally. The mirror is only ever replaced wholesale by the
result of ``list_for_user``; after a cancel the list is re-fetched rather
than patched, so the client never invents a status, timestamp or reason.
"""

from typing import List, Optional

from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.screen.base_screen_controller import BaseScreenController
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
from src.service.reservation.domain.reservation_entity import Reservation, ReservationStatus


class ReservationLifecycleClient(BaseScreenController):
    def __init__(
        self,
        *,
        create_reservation_use_case: CreateReservationUseCase,
        list_user_reservations_use_case: ListUserReservationsUseCase,
        cancel_reservation_use_case: CancelReservationUseCase,
        get_reservation_use_case: GetReservationUseCase,
    ) -> None:
        super().__init__()
        self.create_reservation_use_case = create_reservation_use_case
        self.list_user_reservations_use_case = list_user_reservations_use_case
        self.cancel_reservation_use_case = cancel_reservation_use_case
        self.get_reservation_use_case = get_reservation_use_case
        self.reservations: List[Reservation] = []

    @property
    def active(self) -> List[Reservation]:
        return [r for r in self.reservations if r.status == ReservationStatus.ACTIVE]

    @property
    def history(self) -> List[Reservation]:
        return [r for r in self.reservations if r.is_terminal]

    def find(self, reservation_id: str) -> Optional[Reservation]:
        return next((r for r in self.reservations if r.id == reservation_id), None)

    async def _replace_from_server(self, *, user_id: str) -> List[Reservation]:
        self.reservations = await self.list_user_reservations_use_case.execute(user_id=user_id)
        return self.reservations

    async def create(
        self, *, user_id: str, schedule_id: str, seat_number: int
    ) -> Optional[Reservation]:
        async def operation() -> Reservation:
            return await self.create_reservation_use_case.execute(
                user_id=user_id, schedule_id=schedule_id, seat_number=seat_number
            )

        return await self.run_action('create', operation)

    async def list_for_user(self, *, user_id: str) -> bool:
        async def operation() -> bool:
            await self._replace_from_server(user_id=user_id)
            return True

        return bool(await self.run_action('list', operation))

    async def cancel(self, *, reservation_id: str, user_id: str) -> Optional[Reservation]:
        async def operation() -> Reservation:
            local = self.find(reservation_id)
            if local is not None and not local.can_cancel:
                raise DomainError(f'Reservation {local.reservation_code} is already {local.status}')

            try:
                cancelled = await self.cancel_reservation_use_case.execute(
                    reservation_id=reservation_id
                )
            except NotFoundError:
                await self._replace_from_server(user_id=user_id)
                raise

            await self._replace_from_server(user_id=user_id)
            return cancelled

        return await self.run_action(f'cancel:{reservation_id}', operation)

    async def get(self, *, reservation_id: str) -> Optional[Reservation]:
        async def operation() -> Reservation:
            return await self.get_reservation_use_case.execute(reservation_id=reservation_id)

        return await self.run_action(f'get:{reservation_id}', operation)
