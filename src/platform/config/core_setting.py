from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.platform.constant.path import DATA_DIR


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Railway Reservation System'
    VERSION: str = '0.1.0'
    DEBUG: bool = False  # Enables Logger.io tracing and file logs

    # Train
    TOTAL_SEATS: int = Field(default=10, ge=1)  # Fixed for the process lifetime

    # Durable ledger
    LEDGER_PATH: Path = DATA_DIR / 'bookings.txt'

    # Request dispatcher
    MAX_WORKERS: int = Field(default=4, ge=1)  # ThreadPool concurrent worker count

    @field_validator('LEDGER_PATH', mode='before')
    @classmethod
    def expand_ledger_path(cls, v: str | Path) -> Path:
        return Path(v).expanduser()


settings = Settings()  # type: ignore
