"""Thin async REST wrapper: base URL, bearer-token injection, JSON bodies, error mapping."""

from typing import Any, Callable, Dict, Optional

import httpx
import orjson

from src.platform.exception.exceptions import (
    ApiError,
    AuthenticationError,
    ConflictError,
    CustomBaseError,
    ForbiddenError,
    NetworkError,
    NotFoundError,
)
from src.platform.logging.loguru_io import Logger


TokenProvider = Callable[[], Optional[str]]

STATUS_CODE_ERRORS: Dict[int, Callable[[str], CustomBaseError]] = {
    401: AuthenticationError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
}


def _extract_detail(response: httpx.Response) -> str:
    try:
        body = orjson.loads(response.content)
    except orjson.JSONDecodeError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and body.get('detail'):
        return str(body['detail'])
    return response.reason_phrase


def error_from_response(response: httpx.Response) -> CustomBaseError:
    detail = _extract_detail(response)
    error_factory = STATUS_CODE_ERRORS.get(response.status_code)
    if error_factory:
        return error_factory(detail)
    return ApiError(detail, response.status_code)


class ApiClient:
    def __init__(
        self,
        *,
        base_url: str,
        timeout: float,
        token_provider: Optional[TokenProvider] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._token_provider = token_provider
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(timeout),
            transport=transport,
            headers={'Accept': 'application/json'},
        )

    def _headers(self, *, has_body: bool) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        if has_body:
            headers['Content-Type'] = 'application/json'
        token = self._token_provider() if self._token_provider else None
        if token:
            headers['Authorization'] = f'Bearer {token}'
        return headers

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Any] = None,
    ) -> Any:
        # Empty query terms are never sent
        query = {k: v for k, v in (params or {}).items() if v not in (None, '')}
        try:
            response = await self._client.request(
                method,
                path,
                params=query or None,
                content=orjson.dumps(body) if body is not None else None,
                headers=self._headers(has_body=body is not None),
            )
        except httpx.TransportError as e:
            raise NetworkError(f'{method} {path} failed: {type(e).__name__}: {e}') from e

        if response.is_error:
            error = error_from_response(response)
            Logger.base.warning(
                f'[API] {method} {path} -> {response.status_code} {type(error).__name__}: {error.message}'
            )
            raise error

        if not response.content:
            return None
        try:
            return orjson.loads(response.content)
        except orjson.JSONDecodeError as e:
            raise ApiError(
                f'{method} {path} returned a malformed body', response.status_code
            ) from e

    async def get(self, path: str, *, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request('GET', path, params=params)

    async def post(self, path: str, *, body: Optional[Any] = None) -> Any:
        return await self.request('POST', path, body=body)

    async def put(self, path: str, *, body: Optional[Any] = None) -> Any:
        return await self.request('PUT', path, body=body)

    async def delete(self, path: str) -> Any:
        return await self.request('DELETE', path)

    async def aclose(self) -> None:
        await self._client.aclose()
