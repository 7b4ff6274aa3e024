"""
Runtime configuration for the product API.

Values come from environment variables, optionally loaded from a .env file
in the working directory.
"""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_PORT = 3000


def _env_bool(name: str, default: bool = False) -> bool:
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    return raw in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Settings for one application instance."""

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    api_key: Optional[str] = None
    require_api_key: bool = False
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Build Settings from the current environment."""
    raw_port = (os.getenv("PORT") or "").strip()
    try:
        port = int(raw_port) if raw_port else DEFAULT_PORT
    except ValueError:
        port = DEFAULT_PORT

    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        api_key=os.getenv("API_KEY") or None,
        require_api_key=_env_bool("REQUIRE_API_KEY"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
