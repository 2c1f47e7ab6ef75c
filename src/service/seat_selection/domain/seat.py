"""
Seat Value Object

A seat is selectable iff it is available and not occupied. Status
precedence when classifying: OCCUPIED > SELECTED > AVAILABLE/UNAVAILABLE.
"""

from enum import StrEnum
from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError


class SeatStatus(StrEnum):
    AVAILABLE = 'available'
    SELECTED = 'selected'
    OCCUPIED = 'occupied'
    UNAVAILABLE = 'unavailable'


def _validate_number(instance: 'Seat', attribute: 'attrs.Attribute[int]', value: int) -> None:
    if value < 1:
        raise DomainError(f'Seat number must be >= 1, got {value}')


@attrs.define(frozen=True)
class Seat:
    number: int = attrs.field(validator=_validate_number)
    available: bool = True
    occupied: bool = False

    @property
    def is_selectable(self) -> bool:
        return self.available and not self.occupied


def classify(seat: Seat, current_selection: Optional[int]) -> SeatStatus:
    if seat.occupied:
        return SeatStatus.OCCUPIED
    if current_selection is not None and seat.number == current_selection:
        return SeatStatus.SELECTED
    return SeatStatus.AVAILABLE if seat.available else SeatStatus.UNAVAILABLE
