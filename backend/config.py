import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent / ".env")


def _get_bool(name: str, fallback: str = "0") -> bool:
    return os.getenv(name, fallback).strip().lower() in {"1", "true", "yes", "on"}


def _get_int(name: str, fallback: str) -> int:
    raw_value = os.getenv(name, fallback)
    try:
        return int(raw_value)
    except ValueError as exc:
        raise RuntimeError(f"Invalid integer for environment variable {name}: {raw_value!r}") from exc


def _get_list(name: str, fallback: str = "") -> List[str]:
    raw_value = os.getenv(name, fallback)
    if not raw_value:
        return []
    return [item.strip() for item in raw_value.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = _get_int("PORT", "3000")
    dev_logging: bool = _get_bool("DEV_LOGGING")
    allowed_origins: List[str] = field(
        default_factory=lambda: _get_list("ALLOWED_ORIGINS", "*")
    )


settings = Settings()
