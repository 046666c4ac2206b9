from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def _default_env_file() -> str:
    repo_root = Path(__file__).resolve().parents[2]
    return str(repo_root / ".env")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("[CONFIG] %s=%r is not a number, using %s", name, raw, default)
        return default


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("[CONFIG] %s=%r is not an integer, using %s", name, raw, default)
        return default


@dataclass(frozen=True)
class Settings:
    archive_path: str = "data/broiler_data.json"
    tick_seconds: float = 2.0
    window_capacity: int = 6
    activity_seed: Optional[int] = None

    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"


def get_settings() -> Settings:
    # Load env file (if present) but still allow overriding via real environment variables.
    env_file = os.getenv("ISENS_ENV_FILE", _default_env_file())
    if env_file and Path(env_file).exists():
        load_dotenv(env_file, override=False)

    defaults = Settings()

    tick_seconds = _env_float("ISENS_TICK_SECONDS", defaults.tick_seconds)
    if tick_seconds <= 0:
        logger.warning("[CONFIG] ISENS_TICK_SECONDS must be > 0, using %s", defaults.tick_seconds)
        tick_seconds = defaults.tick_seconds

    window_capacity = _env_int("ISENS_WINDOW_CAPACITY", defaults.window_capacity)
    if window_capacity is None or window_capacity < 1:
        logger.warning("[CONFIG] ISENS_WINDOW_CAPACITY must be >= 1, using %s", defaults.window_capacity)
        window_capacity = defaults.window_capacity

    return Settings(
        archive_path=os.getenv("ISENS_ARCHIVE_PATH", defaults.archive_path),
        tick_seconds=tick_seconds,
        window_capacity=window_capacity,
        activity_seed=_env_int("ISENS_ACTIVITY_SEED", None),
        host=os.getenv("ISENS_HOST", defaults.host),
        port=_env_int("ISENS_PORT", defaults.port) or defaults.port,
        log_level=os.getenv("ISENS_LOG_LEVEL", defaults.log_level).upper(),
    )
