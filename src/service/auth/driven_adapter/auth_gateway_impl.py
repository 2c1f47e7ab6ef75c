from typing import Any

from src.platform.exception.exceptions import ApiError
from src.platform.http.api_client import ApiClient
from src.platform.logging.loguru_io import Logger
from src.service.auth.app.interface.i_auth_gateway import AuthResult, IAuthGateway
from src.service.shared_kernel.domain.entity.user_entity import User


def _to_auth_result(data: Any) -> AuthResult:
    if not isinstance(data, dict) or 'access_token' not in data or 'user' not in data:
        raise ApiError('Auth response is missing access_token or user')
    return AuthResult(access_token=data['access_token'], user=User.from_dict(data['user']))


class AuthGatewayImpl(IAuthGateway):
    def __init__(self, *, api_client: ApiClient) -> None:
        self.api_client = api_client

    @Logger.io
    async def login(self, *, email: str, password: str) -> AuthResult:
        data = await self.api_client.post(
            '/auth/login', body={'email': email, 'password': password}
        )
        return _to_auth_result(data)

    @Logger.io
    async def register(self, *, name: str, email: str, password: str) -> AuthResult:
        data = await self.api_client.post(
            '/auth/register', body={'name': name, 'email': email, 'password': password}
        )
        return _to_auth_result(data)
