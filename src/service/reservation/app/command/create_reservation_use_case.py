from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.interface.i_reservation_gateway import IReservationGateway
from src.service.reservation.domain.reservation_entity import Reservation


class CreateReservationUseCase:
    """
    Request a seat on a schedule.

    The backend decides whether the seat is still free and assigns price
    and reservation code; nothing here computes either.
    """

    def __init__(self, *, reservation_gateway: IReservationGateway) -> None:
        self.reservation_gateway = reservation_gateway

    @Logger.io
    async def execute(self, *, user_id: str, schedule_id: str, seat_number: int) -> Reservation:
        if seat_number < 1:
            raise DomainError(f'Invalid seat number: {seat_number}')

        reservation = await self.reservation_gateway.create(
            user_id=user_id, schedule_id=schedule_id, seat_number=seat_number
        )
        Logger.base.info(
            f'[RESERVATION] Created {reservation.reservation_code} '
            f'(schedule {schedule_id}, seat {seat_number})'
        )
        return reservation
