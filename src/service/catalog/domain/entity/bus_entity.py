from typing import Any, List, Mapping, Optional

import attrs

from src.service.shared_kernel.domain.payload import build_entity, optional_str


@attrs.define
class Bus:
    id: str = attrs.field(converter=str)
    company_id: str = attrs.field(converter=str)
    plate_number: str
    capacity: int
    model: str = ''
    status: str = 'active'
    features: List[str] = attrs.field(factory=list, converter=lambda v: list(v or []))
    year: Optional[int] = None
    mileage: int = 0
    last_maintenance_date: Optional[str] = attrs.field(default=None, converter=optional_str)
    next_maintenance_due: Optional[str] = attrs.field(default=None, converter=optional_str)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Bus':
        return build_entity(cls, data)
