"""Command handlers that run and cancel the try-on generation."""

from __future__ import annotations

from aiogram import Router, html
from aiogram.enums import ChatAction
from aiogram.filters import Command
from aiogram.types import Message

from fitting_room.bot_service.context import BotContext
from fitting_room.bot_service.panels import send_mirror
from fitting_room.errors import FittingRoomError
from fitting_room.render import render_mirror
from fitting_room.session import FittingSession


def setup(router: Router, context: BotContext) -> None:
    """Register /tryon and /cancel handlers."""

    @router.message(Command("tryon"))
    async def handle_tryon(message: Message) -> None:
        user_id = str(message.from_user.id)

        async def show_generating(session: FittingSession) -> None:
            await send_mirror(message, render_mirror(session))
            await message.bot.send_chat_action(message.chat.id, ChatAction.UPLOAD_PHOTO)

        try:
            session = await context.logic.generate(user_id, on_start=show_generating)
        except FittingRoomError as exc:
            await message.answer(html.quote(str(exc)))
            return

        await send_mirror(message, render_mirror(session))

    @router.message(Command("cancel"))
    async def handle_cancel(message: Message) -> None:
        user_id = str(message.from_user.id)
        if not context.logic.is_generating(user_id):
            await message.answer("Nothing is being generated right now.")
            return
        # The waiting /tryon handler replies once the request has stopped.
        context.logic.cancel(user_id)
