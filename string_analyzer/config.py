import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    cors_origins: Optional[List[str]] = None


def _parse_port(raw: str) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"PORT must be an integer, got {raw!r}") from None


@lru_cache()
def get_settings() -> Settings:
    """Read settings from the environment (and .env, if present)."""
    origins = os.getenv("CORS_ORIGINS", "*")
    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=_parse_port(os.getenv("PORT", "8000")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_origins=[origin.strip() for origin in origins.split(",") if origin.strip()],
    )


def configure_logging(level: str = None) -> None:
    """Configure root logging once for the process"""
    level = level or get_settings().log_level
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
