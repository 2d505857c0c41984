"""
Configuration management for the MealDB Browser.

This module centralizes environment variable loading from .env file at project root.
It should be imported early in both backend (api/main.py) and frontend (streamlit_app/app.py)
to ensure .env is loaded before any other code accesses environment variables.

In production .env will usually not exist; load_dotenv() is safe to call and will no-op,
and platform environment variables are used instead.

Environment Variables:
- MEALDB_BASE_URL: Optional, defaults to "https://www.themealdb.com/api/json/v1"
- MEALDB_API_KEY: Optional, defaults to the free test key "1"
- MEALDB_TIMEOUT_SECONDS: Optional, per-request timeout towards TheMealDB (default 10)
- LOG_LEVEL: Optional, backend log level (default INFO)
- BACKEND_URL: Optional, backend URL used by the Streamlit app (defaults to http://localhost:8000)
- BACKEND_TIMEOUT_SECONDS: Optional, Streamlit -> backend request timeout (default 20)
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_MEALDB_BASE_URL = "https://www.themealdb.com/api/json/v1"
DEFAULT_MEALDB_API_KEY = "1"
DEFAULT_MEALDB_TIMEOUT_SECONDS = 10.0
DEFAULT_BACKEND_URL = "http://localhost:8000"
DEFAULT_BACKEND_TIMEOUT_SECONDS = 20.0


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    Locates the project root by going up from this file's location
    (api/config.py -> project root) and loads .env if it exists.
    Existing environment variables take precedence over .env values.
    """
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


# Load .env file on module import
load_env_file()


def _get_float(name: str, default: float) -> float:
    """Read a positive float from the environment, falling back to default on bad values."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logging.getLogger(__name__).warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default
    return value if value > 0 else default


class MealDBConfig:
    """Configuration for the TheMealDB connector."""

    @staticmethod
    def get_base_url() -> str:
        """
        Get TheMealDB API root (without the key segment).

        Returns:
            Base URL string with trailing slash removed
        """
        return os.getenv("MEALDB_BASE_URL", DEFAULT_MEALDB_BASE_URL).rstrip("/")

    @staticmethod
    def get_api_key() -> str:
        """
        Get TheMealDB access key.

        Returns:
            API key string (default: "1", the public test key)
        """
        return os.getenv("MEALDB_API_KEY") or DEFAULT_MEALDB_API_KEY

    @staticmethod
    def get_timeout() -> float:
        """Per-request timeout in seconds for TheMealDB calls."""
        return _get_float("MEALDB_TIMEOUT_SECONDS", DEFAULT_MEALDB_TIMEOUT_SECONDS)


class FrontendConfig:
    """Configuration for the Streamlit frontend."""

    @staticmethod
    def get_backend_url() -> str:
        """
        Get the backend API base URL.

        Returns:
            Backend URL string with trailing slash removed. Defaults to
            http://localhost:8000 for local development.
        """
        return os.getenv("BACKEND_URL", DEFAULT_BACKEND_URL).rstrip("/")

    @staticmethod
    def get_timeout() -> float:
        return _get_float("BACKEND_TIMEOUT_SECONDS", DEFAULT_BACKEND_TIMEOUT_SECONDS)


def get_log_level() -> int:
    """
    Get the backend log level from LOG_LEVEL.

    Returns:
        A logging level constant; unknown names fall back to INFO
    """
    name = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO
