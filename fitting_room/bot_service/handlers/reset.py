"""Handler that clears the user's session."""

from __future__ import annotations

from aiogram import Router
from aiogram.filters import Command
from aiogram.types import Message

from fitting_room.bot_service.context import BotContext


def setup(router: Router, context: BotContext) -> None:
    """Register /reset handler."""

    @router.message(Command("reset"))
    async def handle_reset(message: Message) -> None:
        user_id = str(message.from_user.id)
        context.logic.cancel(user_id)
        await context.store.reset(user_id)
        await message.answer("Everything is cleared, including your API key. Send /key and a photo to start again.")
