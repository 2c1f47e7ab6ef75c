from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.platform.constant.path import SESSION_DIR


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Bus Booking Client'
    VERSION: str = '0.1.0'
    DEBUG: bool = False

    # Backend API
    API_BASE_URL: str = 'http://localhost:8000/api'
    API_TIMEOUT_SECONDS: float = 10.0  # Transport timeout, no client-side retry

    # Session persistence
    SESSION_FILE: Path = SESSION_DIR / 'session.json'

    # Logging
    LOG_TO_FILE: bool = False

    @field_validator('API_BASE_URL', mode='before')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        if isinstance(v, str):
            return v.rstrip('/')
        return v


settings = Settings()  # type: ignore
