from typing import Any, List, Mapping, Optional

import attrs

from src.service.shared_kernel.domain.payload import build_entity


def _seat_numbers(value: Any) -> Optional[List[int]]:
    if value is None:
        return None
    return [int(number) for number in value]


@attrs.define
class Schedule:
    """One concrete departure of a bus on a route"""

    id: str = attrs.field(converter=str)
    route_id: str = attrs.field(converter=str)
    bus_id: str = attrs.field(converter=str)
    departure_time: str
    arrival_time: str
    date: str  # YYYY-MM-DD, compared as a plain string
    available_seats: int
    total_capacity: int
    status: str = 'scheduled'
    # Per-seat data is optional: older backends only send the counts
    occupied_seats: Optional[List[int]] = attrs.field(default=None, converter=_seat_numbers)
    reserved_seats: Optional[List[int]] = attrs.field(default=None, converter=_seat_numbers)
    actual_departure_time: Optional[str] = None
    actual_arrival_time: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def has_seats_left(self) -> bool:
        return self.available_seats > 0

    @property
    def has_seat_data(self) -> bool:
        return self.occupied_seats is not None or self.reserved_seats is not None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Schedule':
        return build_entity(cls, data)
