"""Runtime settings read from the environment.

Values are resolved once per process; tests that tweak the environment call
``get_settings.cache_clear()``.
"""
from __future__ import annotations
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List

from .domain.enums import Locale
from .services.locale_config import resolve_locale

TRUTHY = {"1", "true", "TRUE", "yes", "on"}
DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://localhost:5173"]


def _split_origins(raw: str | None) -> List[str]:
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [o.strip() for o in raw.split(",") if o.strip()]


@dataclass(frozen=True)
class Settings:
    default_locale: Locale = Locale.PT
    cors_allow_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    log_level: str = "INFO"
    load_dotenv: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        default_locale=resolve_locale(os.getenv("VOICE_AGENDA_DEFAULT_LOCALE"), Locale.PT),
        cors_allow_origins=_split_origins(os.getenv("CORS_ALLOW_ORIGINS")),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        load_dotenv=os.getenv("APP_LOAD_DOTENV") in TRUTHY,
    )
