from typing import Optional

from src.platform.screen.base_screen_controller import BaseScreenController, parse_form
from src.service.auth.app.command.login_use_case import LoginUseCase
from src.service.auth.app.command.logout_use_case import LogoutUseCase
from src.service.auth.app.command.register_use_case import RegisterUseCase
from src.service.auth.app.session import Session
from src.service.auth.driving_adapter.schema.auth_schema import LoginForm, RegisterForm
from src.service.shared_kernel.domain.entity.user_entity import User


class AuthController(BaseScreenController):
    """Login / register forms and the logout action"""

    def __init__(
        self,
        *,
        session: Session,
        login_use_case: LoginUseCase,
        register_use_case: RegisterUseCase,
        logout_use_case: LogoutUseCase,
    ) -> None:
        super().__init__()
        self.session = session
        self.login_use_case = login_use_case
        self.register_use_case = register_use_case
        self.logout_use_case = logout_use_case

    @property
    def user(self) -> Optional[User]:
        return self.session.user

    @property
    def is_authenticated(self) -> bool:
        return self.session.is_authenticated

    async def login(self, *, email: str, password: str) -> bool:
        async def operation() -> User:
            form = parse_form(LoginForm, {'email': email, 'password': password})
            return await self.login_use_case.execute(email=form.email, password=form.password)

        return await self.run_action('login', operation) is not None

    async def register(self, *, name: str, email: str, password: str) -> bool:
        async def operation() -> User:
            form = parse_form(RegisterForm, {'name': name, 'email': email, 'password': password})
            return await self.register_use_case.execute(
                name=form.name, email=form.email, password=form.password
            )

        return await self.run_action('register', operation) is not None

    async def logout(self) -> None:
        await self.logout_use_case.execute()
        self.error_message = None
