from enum import StrEnum
from typing import Any, Mapping, Optional

import attrs

from src.service.shared_kernel.domain.payload import build_entity


class UserRole(StrEnum):
    ADMIN = 'admin'
    USER = 'user'


@attrs.define
class User:
    id: str = attrs.field(converter=str)
    email: str
    name: str
    role: UserRole = attrs.field(default=UserRole.USER, converter=UserRole)
    is_active: bool = True
    email_verified: bool = False
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'User':
        return build_entity(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return attrs.asdict(self)
