from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.interface.i_reservation_gateway import IReservationGateway
from src.service.reservation.domain.reservation_entity import Reservation


class CancelReservationUseCase:
    """
    Request cancellation.

    The returned reservation is the server's answer; callers re-list the
    user's reservations afterwards instead of patching status locally.
    """

    def __init__(self, *, reservation_gateway: IReservationGateway) -> None:
        self.reservation_gateway = reservation_gateway

    @Logger.io
    async def execute(self, *, reservation_id: str) -> Reservation:
        reservation = await self.reservation_gateway.cancel(reservation_id=reservation_id)
        Logger.base.info(f'[RESERVATION] Cancel requested for {reservation_id}')
        return reservation
