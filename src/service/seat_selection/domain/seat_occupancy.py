from typing import FrozenSet, Iterable, Optional

import attrs

from src.service.catalog.domain.entity.schedule_entity import Schedule


@attrs.define(frozen=True)
class SeatOccupancy:
    """Backend-supplied per-seat state for one schedule"""

    occupied: FrozenSet[int] = attrs.field(factory=frozenset, converter=frozenset)
    # Held but not sold (e.g. a pending reservation): not occupied, not selectable
    reserved: FrozenSet[int] = attrs.field(factory=frozenset, converter=frozenset)

    @classmethod
    def from_seat_lists(
        cls, *, occupied: Optional[Iterable[int]], reserved: Optional[Iterable[int]]
    ) -> 'SeatOccupancy':
        return cls(occupied=occupied or (), reserved=reserved or ())

    @classmethod
    def from_schedule(cls, schedule: Schedule) -> Optional['SeatOccupancy']:
        if not schedule.has_seat_data:
            return None
        return cls.from_seat_lists(
            occupied=schedule.occupied_seats, reserved=schedule.reserved_seats
        )
