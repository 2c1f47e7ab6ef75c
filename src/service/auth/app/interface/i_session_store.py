from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class ISessionStore(ABC):
    """Durable local storage for the access token and user snapshot"""

    @abstractmethod
    async def load(self) -> Optional[Dict[str, Any]]:
        """Return the persisted ``{access_token, user}`` or None when nothing usable is stored"""
        pass

    @abstractmethod
    async def save(self, *, access_token: str, user: Dict[str, Any]) -> None:
        pass

    @abstractmethod
    async def clear(self) -> None:
        pass
