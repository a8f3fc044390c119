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


def _env_float(name: str) -> float | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"Environment variable {name} must be a number") from exc


@dataclass(frozen=True)
class ConsoleConfig:
    api_base_url: str
    timeout_seconds: float | None
    log_level: str


def load_config() -> ConsoleConfig:
    return ConsoleConfig(
        api_base_url=os.getenv("USERS_API_URL", "http://localhost:5000/api"),
        timeout_seconds=_env_float("USERS_API_TIMEOUT_SECONDS"),
        log_level=os.getenv("CONSOLE_LOG_LEVEL", "WARNING").upper(),
    )
