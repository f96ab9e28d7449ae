"""Entrypoint for the fitting room Telegram bot."""

from __future__ import annotations

import asyncio
import logging
from contextlib import suppress

from aiogram import Bot, Dispatcher, Router
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode

from fitting_room.api import GeminiImageClient
from fitting_room.bot_service.context import BotContext
from fitting_room.bot_service.handlers import setup_handlers
from fitting_room.config.settings import get_settings
from fitting_room.logic import FittingRoomLogic
from fitting_room.monitoring.logging import configure_logging
from fitting_room.session import SessionStore

logger = logging.getLogger(__name__)


async def main() -> None:
    """Initialise dependencies and start polling Telegram."""

    configure_logging()

    settings = get_settings()
    if not settings.bot_token:
        raise RuntimeError("TELEGRAM_BOT_TOKEN is not configured.")

    store = SessionStore()
    client = GeminiImageClient(settings)
    logic = FittingRoomLogic(settings, store, client)

    bot = Bot(token=settings.bot_token, default=DefaultBotProperties(parse_mode=ParseMode.HTML))
    dispatcher = Dispatcher()
    router = Router()
    setup_handlers(router, BotContext(settings=settings, store=store, logic=logic))
    dispatcher.include_router(router)

    try:
        logger.info("Starting fitting room bot polling.")
        await dispatcher.start_polling(bot)
    finally:
        with suppress(Exception):
            await bot.session.close()
        with suppress(Exception):
            await client.close()


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
