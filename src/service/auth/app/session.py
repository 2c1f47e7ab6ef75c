"""
Client session: access token + user snapshot.

Passed explicitly to whoever needs it (HTTP client token provider, screen
controllers). Lifecycle: ``init_on_load`` once at startup, ``establish``
after login/register, ``clear`` on logout.
"""

from typing import Optional

from src.platform.exception.exceptions import ApiError
from src.platform.logging.loguru_io import Logger
from src.service.auth.app.interface.i_session_store import ISessionStore
from src.service.shared_kernel.domain.entity.user_entity import User


class Session:
    def __init__(self, *, session_store: ISessionStore) -> None:
        self._session_store = session_store
        self._access_token: Optional[str] = None
        self._user: Optional[User] = None

    @property
    def access_token(self) -> Optional[str]:
        return self._access_token

    @property
    def user(self) -> Optional[User]:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None and bool(self._access_token)

    @property
    def is_admin(self) -> bool:
        return self._user is not None and self._user.is_admin

    def get_access_token(self) -> Optional[str]:
        return self._access_token

    async def init_on_load(self) -> bool:
        """Restore a persisted session; returns whether one was found."""
        stored = await self._session_store.load()
        if not stored:
            return False

        try:
            access_token = stored['access_token']
            user = User.from_dict(stored['user'])
        except (KeyError, TypeError, ApiError) as e:
            Logger.base.warning(f'[SESSION] Discarding unreadable session: {type(e).__name__}')
            await self._session_store.clear()
            return False

        self._access_token = access_token
        self._user = user
        Logger.base.info(f'[SESSION] Restored session for user {user.id}')
        return True

    async def establish(self, *, access_token: str, user: User) -> None:
        self._access_token = access_token
        self._user = user
        await self._session_store.save(access_token=access_token, user=user.to_dict())

    async def clear(self) -> None:
        self._access_token = None
        self._user = None
        await self._session_store.clear()
