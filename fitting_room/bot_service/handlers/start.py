"""Start and view command handlers."""

from __future__ import annotations

from aiogram import Router
from aiogram.filters import Command, CommandStart
from aiogram.types import Message

from fitting_room.bot_service.context import BotContext
from fitting_room.bot_service.panels import send_mirror, send_rack
from fitting_room.render import render_mirror, render_rack

INTRO = (
    "Welcome to the AI fitting room!\n"
    "1. Send <code>/key YOUR_GOOGLE_API_KEY</code>. The key is kept in memory for this session only.\n"
    "2. Send a photo of yourself.\n"
    "3. Send a photo of the clothing.\n"
    "4. Use /tryon to see the outfit on you.\n"
    "Use /me or /outfit to replace a photo, /view to see both panels, /cancel to stop a running "
    "try-on and /reset to start over."
)


def setup(router: Router, context: BotContext) -> None:
    """Register /start and /view handlers."""

    @router.message(CommandStart())
    async def handle_start(message: Message) -> None:
        await message.answer(INTRO)

    @router.message(Command("view"))
    async def handle_view(message: Message) -> None:
        session = await context.store.get(str(message.from_user.id))
        await send_mirror(message, render_mirror(session))
        await send_rack(message, render_rack(session))
