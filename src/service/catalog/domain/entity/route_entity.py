from typing import Any, Mapping, Optional

import attrs

from src.service.shared_kernel.domain.payload import build_entity


@attrs.define
class Route:
    """Origin-destination pair offered by a company, independent of any date"""

    id: str = attrs.field(converter=str)
    company_id: str = attrs.field(converter=str)
    origin: str
    destination: str
    price: float
    duration: str = ''
    status: str = 'active'
    distance_km: Optional[float] = None
    description: Optional[str] = None
    total_bookings: int = 0
    popularity_score: float = 0.0
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def label(self) -> str:
        return f'{self.origin} → {self.destination}'

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Route':
        return build_entity(cls, data)
