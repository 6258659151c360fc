"""
Configuration loaded from environment variables.

Values come from the process environment, optionally seeded from a `.env`
file in the project root. They are read once into an immutable Settings
instance returned by get_settings().
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)


@dataclass(frozen=True)
class Settings:
    """
    Application settings.

    Attributes:
        app_name: Name used in logs and the OpenAPI title
        app_env: Environment name (development, production, ...)
        log_level: Console logging level
        log_dir: Directory for daily log files, or None for console only
        base_url: Prefix for the `uri` field of serialized entities
        host: Bind address used by the root runner
        port: Bind port used by the root runner
        reject_sentinel_values: Keep refusing the legacy "empty" / "EMPTYNAME" names
    """
    app_name: str
    app_env: str
    log_level: str
    log_dir: Optional[str]
    base_url: str
    host: str
    port: int
    reject_sentinel_values: bool

    def is_development(self) -> bool:
        return self.app_env.lower() == "development"


def _get_bool(key: str, default: str) -> bool:
    return os.getenv(key, default).strip().lower() in ("1", "true", "yes", "on")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Build the cached Settings instance from the environment.
    """
    return Settings(
        app_name=os.getenv("APP_NAME", "medication-api"),
        app_env=os.getenv("APP_ENV", "development"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_dir=os.getenv("LOG_DIR") or None,
        base_url=os.getenv("BASE_URL", "http://localhost:8080/api/v1").rstrip("/"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8080")),
        reject_sentinel_values=_get_bool("REJECT_SENTINEL_VALUES", "true"),
    )
