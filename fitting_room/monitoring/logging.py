"""Root logger setup for the bot process."""

from __future__ import annotations

import logging

from fitting_room.config.settings import get_settings

# httpx reports every request line at INFO, which floods the log on each try-on.
CHATTY_LOGGERS = ("httpx", "httpcore")


def configure_logging() -> None:
    """Configure the root logger and quieten HTTP client chatter unless debugging."""

    settings = get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if level <= logging.DEBUG else logging.WARNING)
