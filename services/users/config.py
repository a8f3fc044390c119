from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


def _load_repo_env() -> None:
    """Load the nearest .env starting from this file upward."""
    current = Path(__file__).resolve()
    for candidate in [current.parent, *current.parents]:
        env_file = candidate / ".env"
        if env_file.exists():
            load_dotenv(env_file)
            return


_load_repo_env()


def _env_list(name: str, default: str) -> tuple[str, ...]:
    raw = os.getenv(name, default)
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def _normalize_prefix(raw: str) -> str:
    prefix = "/" + raw.strip().strip("/")
    return "" if prefix == "/" else prefix


@dataclass(frozen=True)
class UsersConfig:
    api_prefix: str
    cors_origins: tuple[str, ...]
    log_level: str


def load_config() -> UsersConfig:
    return UsersConfig(
        api_prefix=_normalize_prefix(os.getenv("USERS_API_PREFIX", "/api")),
        cors_origins=_env_list("USERS_CORS_ORIGINS", "http://localhost:5173"),
        log_level=os.getenv("USERS_LOG_LEVEL", "INFO").upper(),
    )
