"""Register message and command handlers."""

from __future__ import annotations

from aiogram import Router

from fitting_room.bot_service.context import BotContext

from . import credential, reset, start, tryon, upload


def setup_handlers(router: Router, context: BotContext) -> None:
    """Attach all handler groups to the provided router."""

    start.setup(router, context)
    credential.setup(router, context)
    reset.setup(router, context)
    tryon.setup(router, context)
    upload.setup(router, context)
