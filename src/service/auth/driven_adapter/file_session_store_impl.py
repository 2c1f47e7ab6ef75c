from pathlib import Path
from typing import Any, Dict, Optional

import anyio
import orjson

from src.platform.logging.loguru_io import Logger
from src.service.auth.app.interface.i_session_store import ISessionStore


class FileSessionStoreImpl(ISessionStore):
    """JSON file on disk; survives a restart so the user is not asked to sign in again"""

    def __init__(self, *, path: Path) -> None:
        self._path = anyio.Path(path)

    async def load(self) -> Optional[Dict[str, Any]]:
        if not await self._path.exists():
            return None

        try:
            data = orjson.loads(await self._path.read_bytes())
        except orjson.JSONDecodeError:
            Logger.base.warning(f'[SESSION] Corrupt session file {self._path}, removing it')
            await self.clear()
            return None

        if not isinstance(data, dict):
            await self.clear()
            return None
        return data

    async def save(self, *, access_token: str, user: Dict[str, Any]) -> None:
        await self._path.parent.mkdir(parents=True, exist_ok=True)
        await self._path.write_bytes(orjson.dumps({'access_token': access_token, 'user': user}))

    async def clear(self) -> None:
        await self._path.unlink(missing_ok=True)
