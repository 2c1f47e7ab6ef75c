from typing import Any, Mapping, Optional

import attrs

from src.service.shared_kernel.domain.payload import build_entity


@attrs.define
class Company:
    id: str = attrs.field(converter=str)
    name: str
    phone: str = ''
    email: str = ''
    address: Optional[str] = None
    description: Optional[str] = None
    status: str = 'active'
    rating: float = 0.0
    total_trips: int = 0
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Company':
        return build_entity(cls, data)
