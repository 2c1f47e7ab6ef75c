from enum import StrEnum
from typing import Any, Mapping, Optional

import attrs

from src.service.shared_kernel.domain.payload import build_entity


class ReservationStatus(StrEnum):
    ACTIVE = 'active'
    CANCELLED = 'cancelled'
    COMPLETED = 'completed'


@attrs.define
class Reservation:
    """
    Server-shaped reservation.

    Status transitions happen on the backend only
    (active -> cancelled via cancel, active -> completed after the trip);
    the client displays whatever the last fetch returned.
    """

    id: str = attrs.field(converter=str)
    user_id: str = attrs.field(converter=str)
    schedule_id: str = attrs.field(converter=str)
    seat_number: int = attrs.field(converter=int)
    price: float = attrs.field(converter=float)
    status: ReservationStatus = attrs.field(converter=ReservationStatus)
    reservation_code: str
    cancellation_reason: Optional[str] = None
    cancelled_at: Optional[str] = None
    completed_at: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def can_cancel(self) -> bool:
        return self.status == ReservationStatus.ACTIVE

    @property
    def is_terminal(self) -> bool:
        return self.status in (ReservationStatus.CANCELLED, ReservationStatus.COMPLETED)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Reservation':
        return build_entity(cls, data)
