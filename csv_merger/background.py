"""Decorative background image lookup. Never required by the merge pipeline."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from .config import Settings

logger = logging.getLogger(__name__)

IMAGE_PARAMS = "q=80&fm=jpg&crop=entropy"


class BackgroundFetchError(RuntimeError):
    pass


def fetch_background_url(settings: Settings, width: int) -> str:
    try:
        response = httpx.get(
            settings.unsplash_url,
            headers={"Authorization": f"Client-ID {settings.unsplash_client_id}"},
            timeout=settings.background_timeout_seconds,
        )
        response.raise_for_status()
        payload = response.json()
    except (httpx.HTTPError, ValueError) as exc:
        raise BackgroundFetchError(str(exc)) from exc

    urls = payload.get("urls") if isinstance(payload, dict) else None
    full = urls.get("full") if isinstance(urls, dict) else None
    if not isinstance(full, str) or not full:
        raise BackgroundFetchError("Invalid photo payload: missing urls.full")

    return f"{full}&w={width}&{IMAGE_PARAMS}"


def random_background(settings: Settings, width: int) -> Optional[str]:
    """Best-effort variant: failures are logged and yield None."""
    if not settings.background_enabled:
        return None
    try:
        return fetch_background_url(settings, width)
    except BackgroundFetchError as exc:
        logger.warning("Error fetching background image: %s", exc)
        return None
