"""
Configuration for the bed management backend.

Values come from environment variables. A `.env` file in the working
directory is loaded first when present.
"""
import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

env_path = Path.cwd() / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes"}


def _as_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    """Application settings."""

    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./bedmanager.db")

    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "4000"))
    DEBUG: bool = _as_bool(os.getenv("DEBUG", "false"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    CORS_ORIGINS: List[str] = _as_list(os.getenv("CORS_ORIGINS", "*"))

    # Upper bound on attempts to draw an unused short identifier
    ID_MAX_ATTEMPTS: int = int(os.getenv("ID_MAX_ATTEMPTS", "20"))
