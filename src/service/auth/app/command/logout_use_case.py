from src.platform.logging.loguru_io import Logger
from src.service.auth.app.session import Session


class LogoutUseCase:
    def __init__(self, *, session: Session) -> None:
        self.session = session

    @Logger.io
    async def execute(self) -> None:
        await self.session.clear()
