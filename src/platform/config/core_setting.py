from pathlib import Path
from typing import List

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

    PROJECT_NAME: str = 'Event Registration'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = []  # add your frontend URL here

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, list):
            return v
        return []

    # Ticket offers
    DEFAULT_CURRENCY: str = 'RWF'
    VIP_PRICE: int = 25000
    VIP_SEAT_SHARE: float = 0.2
    STUDENT_SEAT_SHARE: float = 0.3

    # Simulated payment gateway latency (seconds)
    PAYMENT_PROCESSING_DELAY_SECONDS: float = 3.0
    FREE_REGISTRATION_DELAY_SECONDS: float = 1.0
    # Delay between entering success and handing the ticket to the caller
    CONFIRMATION_DELAY_SECONDS: float = 2.0

    # Upper bound for the long-poll result endpoint
    REGISTRATION_RESULT_TIMEOUT_SECONDS: float = 30.0
    # Settled attempts stay readable this long before they are dropped
    REGISTRATION_RETENTION_SECONDS: float = 60.0

    @field_validator(
        'PAYMENT_PROCESSING_DELAY_SECONDS',
        'FREE_REGISTRATION_DELAY_SECONDS',
        'CONFIRMATION_DELAY_SECONDS',
        'REGISTRATION_RETENTION_SECONDS',
    )
    @classmethod
    def non_negative_delay(cls, v: float) -> float:
        if v < 0:
            raise ValueError('delay must not be negative')
        return v


settings = Settings()  # type: ignore
