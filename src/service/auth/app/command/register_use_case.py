from src.platform.logging.loguru_io import Logger
from src.service.auth.app.interface.i_auth_gateway import IAuthGateway
from src.service.auth.app.session import Session
from src.service.shared_kernel.domain.entity.user_entity import User


class RegisterUseCase:
    """Create an account; the backend signs the new user in right away."""

    def __init__(self, *, auth_gateway: IAuthGateway, session: Session) -> None:
        self.auth_gateway = auth_gateway
        self.session = session

    @Logger.io
    async def execute(self, *, name: str, email: str, password: str) -> User:
        result = await self.auth_gateway.register(name=name, email=email, password=password)
        await self.session.establish(access_token=result.access_token, user=result.user)
        Logger.base.info(f'[AUTH] Registered user {result.user.id}')
        return result.user
