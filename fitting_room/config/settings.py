"""Settings loader for the fitting room bot."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


def _load_env_file(path: str = ".env") -> None:
    """Populate environment variables from a .env file if present."""

    env_path = Path(path)
    if not env_path.exists():
        return

    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())


@dataclass(slots=True, frozen=True)
class FittingRoomSettings:
    """Process-wide settings. The user's Gemini key is never part of them."""

    bot_token: str = ""
    log_level: str = "INFO"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_image_model: str = "gemini-2.5-flash-image-preview"
    request_timeout: float = 120.0
    generation_deadline: float = 180.0
    max_upload_bytes: int = 10 * 1024 * 1024


def _build_settings() -> FittingRoomSettings:
    _load_env_file()
    return FittingRoomSettings(
        bot_token=os.getenv("TELEGRAM_BOT_TOKEN", ""),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        gemini_base_url=os.getenv(
            "GEMINI_BASE_URL",
            "https://generativelanguage.googleapis.com/v1beta",
        ),
        gemini_image_model=os.getenv("GEMINI_IMAGE_MODEL", "gemini-2.5-flash-image-preview"),
        request_timeout=float(os.getenv("REQUEST_TIMEOUT", "120")),
        generation_deadline=float(os.getenv("GENERATION_DEADLINE", "180")),
        max_upload_bytes=int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024))),
    )


@lru_cache(maxsize=1)
def get_settings() -> FittingRoomSettings:
    """Return cached settings instance."""

    return _build_settings()
