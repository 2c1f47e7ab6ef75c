from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.interface.i_reservation_gateway import IReservationGateway
from src.service.reservation.domain.reservation_entity import Reservation


class GetReservationUseCase:
    def __init__(self, *, reservation_gateway: IReservationGateway) -> None:
        self.reservation_gateway = reservation_gateway

    @Logger.io
    async def execute(self, *, reservation_id: str) -> Reservation:
        return await self.reservation_gateway.get_by_id(reservation_id=reservation_id)
