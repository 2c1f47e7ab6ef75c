"""
Conftest for seat selection unit tests - no backend.

The seeded occupancy stub reproduces the demo behaviour of marking random
seats occupied, deterministically, so map rendering can be exercised with a
realistic mix of seat states.
"""

import random
from typing import Optional

import pytest

from src.service.catalog.domain.entity.schedule_entity import Schedule
from src.service.seat_selection.app.interface.i_seat_occupancy_query_handler import (
    ISeatOccupancyQueryHandler,
)
from src.service.seat_selection.domain.seat_occupancy import SeatOccupancy


class SeededOccupancyStub(ISeatOccupancyQueryHandler):
    def __init__(self, *, seed: int, occupied_ratio: float = 0.3) -> None:
        self.seed = seed
        self.occupied_ratio = occupied_ratio

    async def get_occupancy(self, *, schedule: Schedule) -> Optional[SeatOccupancy]:
        rng = random.Random(f'{self.seed}:{schedule.id}')
        occupied = [
            n for n in range(1, schedule.total_capacity + 1) if rng.random() < self.occupied_ratio
        ]
        return SeatOccupancy.from_seat_lists(occupied=occupied, reserved=None)


@pytest.fixture
def seeded_occupancy_handler() -> SeededOccupancyStub:
    return SeededOccupancyStub(seed=42)
