from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Ticket Sales'
    VERSION: str = '0.1.0'
    DEBUG: bool = False  # Enables arg/return tracing and the log file sink

    # Pricing
    TICKET_PRICE: float = 100.0

    # Log file sink (DEBUG only)
    LOG_FILE_ROTATION: str = '1 day'
    LOG_FILE_RETENTION: str = '7 days'

    @field_validator('TICKET_PRICE')
    @classmethod
    def validate_ticket_price(cls, v: float) -> float:
        if v < 0:
            raise ValueError('TICKET_PRICE must not be negative')
        return v


settings = Settings()  # type: ignore
