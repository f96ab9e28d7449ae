"""Handler that stores the user's Gemini API key for the session."""

from __future__ import annotations

import logging
from contextlib import suppress

from aiogram import Router
from aiogram.exceptions import TelegramBadRequest
from aiogram.filters import Command, CommandObject
from aiogram.types import Message

from fitting_room.bot_service.context import BotContext
from fitting_room.session.state import set_credential

logger = logging.getLogger(__name__)


def setup(router: Router, context: BotContext) -> None:
    """Register /key handler."""

    @router.message(Command("key"))
    async def handle_key(message: Message, command: CommandObject) -> None:
        key = (command.args or "").strip()
        if not key:
            await message.answer("Send your key as <code>/key YOUR_GOOGLE_API_KEY</code>.")
            return

        user_id = str(message.from_user.id)
        await context.store.apply(user_id, set_credential, key)
        # Keep the secret out of the chat history.
        with suppress(TelegramBadRequest):
            await message.delete()
        logger.info("API key updated for user %s", user_id)
        await message.answer("API key saved for this session. I removed your message with it.")
