from contextvars import ContextVar
from datetime import datetime
from enum import StrEnum
import logging
import os
import sys
from typing import TYPE_CHECKING

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import Settings, settings
from src.platform.constant.path import LOG_DIR
from src.platform.logging.service_context import get_service_context


# Keys whose values never reach a log line
SENSITIVE_KEYWORDS = {
    'password',
    'access_token',
    'token',
}

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)

# Chatty third-party loggers and the level below which they are dropped
NOISY_LOGGERS = {
    'httpcore': logging.INFO,
    'asyncio': logging.INFO,
}


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


def _default_extra() -> dict[str, str]:
    return {
        ExtraField.SERVICE_CONTEXT: get_service_context(),
        ExtraField.CHAIN_START_TIME: '',
        ExtraField.CALL_TARGET: '',
    }


class InterceptHandler(logging.Handler):
    """Route stdlib logging (httpx, asyncio) into loguru with our extra fields"""

    def __init__(self, target: 'LoguruLogger') -> None:
        super().__init__()
        self._target = target

    def emit(self, record: logging.LogRecord) -> None:
        for prefix, min_level in NOISY_LOGGERS.items():
            if record.name.startswith(prefix) and record.levelno < min_level:
                return

        try:
            level: str | int = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk out of the logging module so file/line point at the real caller
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        self._target.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)


def _log_file_path() -> str:
    # TEST_LOG_DIR keeps test runs out of the real log directory
    log_dir = os.environ.get('TEST_LOG_DIR', str(LOG_DIR))
    prefix = 'test_' if os.environ.get('TEST_LOG_DIR') else ''
    return f'{log_dir}/{prefix}{datetime.now().strftime("%Y-%m-%d")}.log'


def configure_logging(config: Settings) -> 'LoguruLogger':
    """Install sinks once per process and return the bound client logger."""
    loguru_logger.remove()
    bound = loguru_logger.bind(**_default_extra())
    min_log_level = 'DEBUG' if config.DEBUG else 'INFO'

    bound.add(sys.stderr, format=io_log_format, level=min_log_level)
    if config.LOG_TO_FILE:
        bound.add(
            _log_file_path(),
            format=io_log_format,
            rotation='1 day',
            retention='7 days',
            compression='gz',
            level=min_log_level,
        )

    logging.basicConfig(handlers=[InterceptHandler(bound)], level=0, force=True)
    return bound


custom_logger = configure_logging(settings)
