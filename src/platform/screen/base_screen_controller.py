"""
Screen controller base.

Every screen follows the same shape: local form state, an async call to a
use case, a list re-render. This base owns the parts they share:

- ``loading`` while any action is in flight
- a per-action in-flight guard so a double submit dispatches one request
- call-site error handling: log the cause, expose a generic message, keep
  the previously displayed state untouched
"""

from typing import Any, Awaitable, Callable, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from src.platform.exception.exception_handlers import to_user_message
from src.platform.exception.exceptions import CustomBaseError, ValidationError
from src.platform.logging.loguru_io import Logger


_T = TypeVar('_T')
_FormT = TypeVar('_FormT', bound=BaseModel)


def parse_form(form_cls: Type[_FormT], data: dict[str, Any]) -> _FormT:
    """Validate raw form input locally; failures never reach the network."""
    try:
        return form_cls.model_validate(data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = '.'.join(str(part) for part in first['loc']) or 'form'
        message = first['msg'].removeprefix('Value error, ')
        raise ValidationError(f'{field}: {message}') from e


class BaseScreenController:
    def __init__(self) -> None:
        self.loading: bool = False
        self.error_message: Optional[str] = None
        self._in_flight: set[str] = set()

    def is_busy(self, action: str) -> bool:
        return action in self._in_flight

    async def run_action(
        self, action: str, operation: Callable[[], Awaitable[_T]]
    ) -> Optional[_T]:
        if action in self._in_flight:
            Logger.base.debug(f'[{type(self).__name__}] {action} ignored: already in flight')
            return None

        self._in_flight.add(action)
        self.loading = True
        self.error_message = None
        try:
            return await operation()
        except CustomBaseError as e:
            Logger.base.warning(
                f'[{type(self).__name__}] {action} failed: {type(e).__name__}: {e.message}'
            )
            self.error_message = to_user_message(e)
            return None
        finally:
            self._in_flight.discard(action)
            self.loading = bool(self._in_flight)
