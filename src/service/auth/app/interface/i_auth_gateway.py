from abc import ABC, abstractmethod

import attrs

from src.service.shared_kernel.domain.entity.user_entity import User


@attrs.define(frozen=True)
class AuthResult:
    access_token: str = attrs.field(repr=False)
    user: User


class IAuthGateway(ABC):
    @abstractmethod
    async def login(self, *, email: str, password: str) -> AuthResult:
        pass

    @abstractmethod
    async def register(self, *, name: str, email: str, password: str) -> AuthResult:
        pass
