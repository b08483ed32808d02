from pathlib import Path
from typing import Optional

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

    PROJECT_NAME: str = 'Concert Ticketing Ledger'
    VERSION: str = '0.1.0'
    DEBUG: bool = False  # Enables IO tracing and the rotating file sink

    # Logging
    LOG_LEVEL: str = 'INFO'
    LOG_DIR: Optional[str] = None  # Falls back to <project>/logs

    # Persistence (JSON snapshot adapter)
    LEDGER_SNAPSHOT_PATH: str = str(_PROJECT_ROOT / 'ledger_snapshot.json')


settings = Settings()  # type: ignore
