"""Runtime configuration for the tracker."""

import os
import sys
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Literal, Optional

from dotenv import load_dotenv
from loguru import logger

StorageBackend = Literal["file", "redis"]

DEFAULT_API_BASE = "https://leetcode-api-pied.vercel.app"
DEFAULT_DATA_FILE = Path.home() / ".leettrack" / "leettrack-data.json"
# Package data of infrastructure
DEFAULT_CATALOG_PATH = Path(
    str(resources.files("infrastructure").joinpath("assets", "problems.json"))
)
DEFAULT_STORAGE_KEY = "leetTrackerData"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


@dataclass(frozen=True)
class Settings:
    """Application settings, read once at startup and passed explicitly."""

    storage_backend: StorageBackend = "file"
    data_file: Path = DEFAULT_DATA_FILE
    redis_url: str = "redis://localhost:6379/0"
    storage_key: str = DEFAULT_STORAGE_KEY
    migrate_from_redis: bool = False
    api_base: str = DEFAULT_API_BASE
    catalog_path: Path = DEFAULT_CATALOG_PATH
    http_timeout: float = 15.0
    seed_samples: bool = True
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Settings":
        """
        Build settings from environment variables.

        Variables from a .env file are loaded first; real environment
        variables take precedence.
        """
        load_dotenv(env_file)

        backend = os.getenv("LEETTRACK_STORAGE_BACKEND", "file").strip().lower()
        if backend not in ("file", "redis"):
            raise ValueError(f"LEETTRACK_STORAGE_BACKEND must be 'file' or 'redis', got {backend!r}")

        timeout = float(os.getenv("LEETTRACK_HTTP_TIMEOUT", "15"))
        if timeout <= 0:
            raise ValueError("LEETTRACK_HTTP_TIMEOUT must be positive")

        data_file = os.getenv("LEETTRACK_DATA_FILE")
        catalog_path = os.getenv("LEETTRACK_CATALOG_PATH")

        return cls(
            storage_backend=backend,  # type: ignore[arg-type]
            data_file=Path(data_file).expanduser() if data_file else DEFAULT_DATA_FILE,
            redis_url=os.getenv("LEETTRACK_REDIS_URL", "redis://localhost:6379/0"),
            storage_key=os.getenv("LEETTRACK_STORAGE_KEY", DEFAULT_STORAGE_KEY),
            migrate_from_redis=_parse_bool(
                "LEETTRACK_MIGRATE_FROM_REDIS", os.getenv("LEETTRACK_MIGRATE_FROM_REDIS", "false")
            ),
            api_base=os.getenv("LEETTRACK_API_BASE", DEFAULT_API_BASE).rstrip("/"),
            catalog_path=Path(catalog_path).expanduser() if catalog_path else DEFAULT_CATALOG_PATH,
            http_timeout=timeout,
            seed_samples=_parse_bool(
                "LEETTRACK_SEED_SAMPLES", os.getenv("LEETTRACK_SEED_SAMPLES", "true")
            ),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            host=os.getenv("LEETTRACK_HOST", "127.0.0.1"),
            port=int(os.getenv("LEETTRACK_PORT", "8000")),
        )


def configure_logging(level: str = "INFO") -> None:
    """Route loguru output to stderr at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level)
