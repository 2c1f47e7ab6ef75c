from typing import Dict, Optional

from src.platform.exception.exceptions import ConflictError, DomainError
from src.platform.screen.base_screen_controller import BaseScreenController
from src.service.auth.app.session import Session
from src.service.reservation.app.command.create_reservation_use_case import (
    CreateReservationUseCase,
)
from src.service.reservation.domain.reservation_entity import Reservation
from src.service.seat_selection.app.query.get_seat_map_use_case import GetSeatMapUseCase
from src.service.seat_selection.domain.seat import SeatStatus
from src.service.seat_selection.domain.seat_map import SeatMap


class SeatSelectionController(BaseScreenController):
    """
    Seat selection screen for one departure.

    ``confirm`` is guarded: while a create request is in flight further
    confirms are ignored, so a double click dispatches one request.
    """

    def __init__(
        self,
        *,
        session: Session,
        get_seat_map_use_case: GetSeatMapUseCase,
        create_reservation_use_case: CreateReservationUseCase,
    ) -> None:
        super().__init__()
        self.session = session
        self.get_seat_map_use_case = get_seat_map_use_case
        self.create_reservation_use_case = create_reservation_use_case
        self.seat_map: Optional[SeatMap] = None
        self.last_reservation: Optional[Reservation] = None

    @property
    def selected_seat(self) -> Optional[int]:
        return self.seat_map.selected_seat if self.seat_map else None

    @property
    def can_confirm(self) -> bool:
        return self.selected_seat is not None and not self.is_busy('confirm')

    def statuses(self) -> Dict[int, SeatStatus]:
        return self.seat_map.statuses() if self.seat_map else {}

    async def open(self, *, schedule_id: str) -> bool:
        async def operation() -> bool:
            # A new departure always starts without a selection
            self.seat_map = await self.get_seat_map_use_case.execute(schedule_id=schedule_id)
            self.last_reservation = None
            return True

        return bool(await self.run_action('open', operation))

    def select(self, seat_number: int) -> bool:
        if self.seat_map is None or self.is_busy('confirm'):
            return False
        return self.seat_map.select(seat_number)

    def cancel_flow(self) -> None:
        if self.seat_map is not None:
            self.seat_map.clear_selection()

    async def confirm(self) -> Optional[Reservation]:
        async def operation() -> Reservation:
            if self.seat_map is None:
                raise DomainError('Choose a departure before confirming')
            user = self.session.user
            if user is None:
                raise DomainError('Sign in to reserve a seat')

            seat_number, schedule_id = self.seat_map.confirm()
            try:
                reservation = await self.create_reservation_use_case.execute(
                    user_id=user.id, schedule_id=schedule_id, seat_number=seat_number
                )
            except ConflictError:
                # Seat taken meanwhile: reload the map so it shows as occupied
                self.seat_map = await self.get_seat_map_use_case.execute(schedule_id=schedule_id)
                raise

            self.seat_map.clear_selection()
            self.last_reservation = reservation
            return reservation

        return await self.run_action('confirm', operation)
