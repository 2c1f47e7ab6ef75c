"""
Seat map for one schedule plus the single in-progress selection.

Selection rules:
- only a seat that classifies as AVAILABLE (with no selection in play) can
  be selected; anything else is ignored without raising
- selecting a new seat replaces the previous selection
- changing schedule clears the selection
"""

from typing import Dict, List, Optional, Tuple

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.seat_selection.domain.seat import Seat, SeatStatus, classify
from src.service.seat_selection.domain.seat_occupancy import SeatOccupancy


DEFAULT_SEATS_PER_ROW = 4


def derive_seat_map(total_capacity: int, occupancy: Optional[SeatOccupancy] = None) -> List[Seat]:
    """
    Seats numbered 1..total_capacity.

    Without occupancy data every seat is available and unoccupied; that is
    a placeholder until the backend reports per-seat state, not a guess.
    """
    if total_capacity < 0:
        raise DomainError(f'Total capacity cannot be negative, got {total_capacity}')

    if occupancy is None:
        return [Seat(number=n) for n in range(1, total_capacity + 1)]

    return [
        Seat(
            number=n,
            available=n not in occupancy.reserved,
            occupied=n in occupancy.occupied,
        )
        for n in range(1, total_capacity + 1)
    ]


@attrs.define
class SeatMap:
    schedule_id: Optional[str]
    seats: List[Seat] = attrs.field(factory=list)
    selected_seat: Optional[int] = None

    @classmethod
    def for_schedule(
        cls,
        *,
        schedule_id: str,
        total_capacity: int,
        occupancy: Optional[SeatOccupancy] = None,
    ) -> 'SeatMap':
        return cls(schedule_id=schedule_id, seats=derive_seat_map(total_capacity, occupancy))

    def seat(self, seat_number: int) -> Optional[Seat]:
        if 1 <= seat_number <= len(self.seats):
            return self.seats[seat_number - 1]
        return None

    def classify(self, seat_number: int) -> SeatStatus:
        seat = self.seat(seat_number)
        if seat is None:
            raise DomainError(f'Seat {seat_number} does not exist on this bus')
        return classify(seat, self.selected_seat)

    def statuses(self) -> Dict[int, SeatStatus]:
        return {seat.number: classify(seat, self.selected_seat) for seat in self.seats}

    def select(self, seat_number: int) -> bool:
        seat = self.seat(seat_number)
        if seat is None or classify(seat, None) != SeatStatus.AVAILABLE:
            Logger.base.debug(f'[SEAT] Ignored selection of seat {seat_number}')
            return False
        self.selected_seat = seat_number
        return True

    def clear_selection(self) -> None:
        self.selected_seat = None

    def change_schedule(
        self,
        *,
        schedule_id: str,
        total_capacity: int,
        occupancy: Optional[SeatOccupancy] = None,
    ) -> None:
        self.schedule_id = schedule_id
        self.seats = derive_seat_map(total_capacity, occupancy)
        self.selected_seat = None

    def confirm(self) -> Tuple[int, str]:
        """Hand the choice to the reservation flow; seat state is left untouched."""
        if self.schedule_id is None:
            raise DomainError('Choose a departure before confirming')
        if self.selected_seat is None:
            raise DomainError('Select a seat before confirming')
        return self.selected_seat, self.schedule_id

    def rows(self, seats_per_row: int = DEFAULT_SEATS_PER_ROW) -> List[List[Seat]]:
        """Group seats for a 2 + aisle + 2 layout; the last row may be short."""
        if seats_per_row < 1:
            raise DomainError('seats_per_row must be positive')
        return [
            self.seats[start : start + seats_per_row]
            for start in range(0, len(self.seats), seats_per_row)
        ]
