from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


def _to_bool(value: str | None, *, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    background_enabled: bool
    unsplash_url: str
    unsplash_client_id: str
    background_timeout_seconds: float


@lru_cache
def get_settings() -> Settings:
    return Settings(
        background_enabled=_to_bool(os.getenv("CSV_MERGER_BACKGROUND_ENABLED"), default=True),
        unsplash_url=os.getenv(
            "CSV_MERGER_UNSPLASH_URL",
            "https://api.unsplash.com/photos/random?query=landscape,nature&orientation=landscape",
        ),
        unsplash_client_id=os.getenv(
            "CSV_MERGER_UNSPLASH_CLIENT_ID",
            "v7PaeqIlbJKzwBp67VUMQ91HKHyxBPwDDOLcCVl5KVM",
        ),
        background_timeout_seconds=float(os.getenv("CSV_MERGER_BACKGROUND_TIMEOUT_SECONDS", "10")),
    )
