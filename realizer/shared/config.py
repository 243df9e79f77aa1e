# realizer/shared/config.py
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.

    Every field can be overridden from the environment with the
    ``REALIZER_`` prefix (e.g. ``REALIZER_LOG_LEVEL=DEBUG``).
    """

    # --- Application Meta ---
    APP_NAME: str = "Clause Realizer"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: LogFormat = LogFormat.CONSOLE

    # --- Realization ---
    DEFAULT_LANGUAGE: str = "en"

    # Directory holding {lang}_lexicon.json; None means <project>/data/lexicon
    LEXICON_DIR: Optional[Path] = None

    # Unknown words raise instead of becoming plain words
    STRICT_LEXICON: bool = False

    model_config = SettingsConfigDict(env_prefix="REALIZER_", env_file=".env", extra="ignore")


settings = Settings()
