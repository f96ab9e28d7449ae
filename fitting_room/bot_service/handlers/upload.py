"""Handlers responsible for the subject and garment uploads."""

from __future__ import annotations

import logging

from aiogram import F, Router, html
from aiogram.exceptions import TelegramBadRequest, TelegramNetworkError
from aiogram.filters import Command
from aiogram.types import Message

from fitting_room.bot_service.context import BotContext
from fitting_room.bot_service.panels import send_mirror, send_rack
from fitting_room.errors import InvalidUploadError
from fitting_room.intake import validate_upload
from fitting_room.render import render_mirror, render_rack
from fitting_room.session import Slot
from fitting_room.session.state import choose_slot, select_pending_image

logger = logging.getLogger(__name__)

SLOT_PROMPTS = {
    Slot.SUBJECT: "Send a photo of yourself.",
    Slot.GARMENT: "Send a photo of the clothing you want to try on.",
}


def setup(router: Router, context: BotContext) -> None:
    """Register media upload handlers."""

    @router.message(Command("me"))
    async def handle_subject_command(message: Message) -> None:
        await context.store.apply(str(message.from_user.id), choose_slot, Slot.SUBJECT)
        await message.answer(SLOT_PROMPTS[Slot.SUBJECT])

    @router.message(Command("outfit"))
    async def handle_garment_command(message: Message) -> None:
        await context.store.apply(str(message.from_user.id), choose_slot, Slot.GARMENT)
        await message.answer(SLOT_PROMPTS[Slot.GARMENT])

    @router.message(F.photo)
    async def handle_photo(message: Message) -> None:
        # Telegram re-encodes compressed photos as JPEG.
        photo = message.photo[-1]
        await _accept_upload(message, context, photo.file_id, photo.file_size, "image/jpeg", None)

    @router.message(F.document)
    async def handle_document(message: Message) -> None:
        document = message.document
        await _accept_upload(
            message,
            context,
            document.file_id,
            document.file_size,
            document.mime_type,
            document.file_name,
        )


async def _accept_upload(
    message: Message,
    context: BotContext,
    file_id: str,
    file_size: int | None,
    media_type: str | None,
    filename: str | None,
) -> None:
    user_id = str(message.from_user.id)
    max_bytes = context.settings.max_upload_bytes
    if file_size and file_size > max_bytes:
        await message.answer(f"The file is too large. Limit is {max_bytes // 1024} KiB.")
        return

    try:
        file_info = await message.bot.get_file(file_id)
        file_stream = await message.bot.download_file(file_info.file_path)
    except (TelegramNetworkError, TelegramBadRequest):
        logger.warning("Failed to download upload %s for user %s", file_id, user_id)
        await message.answer("Could not download the file from Telegram. Please try again.")
        return

    data = file_stream.read()
    file_stream.close()

    try:
        image = validate_upload(
            data,
            preview_ref=file_id,
            declared_media_type=media_type,
            filename=filename,
            max_bytes=max_bytes,
        )
    except InvalidUploadError as exc:
        await message.answer(html.quote(str(exc)))
        return

    session = await context.store.apply(user_id, select_pending_image, image)
    slot = Slot.SUBJECT if session.subject is image else Slot.GARMENT
    logger.info("Stored %s image (%s, %d bytes) for user %s", slot.value, image.media_type, len(data), user_id)

    if slot is Slot.SUBJECT:
        await send_mirror(message, render_mirror(session))
    else:
        await send_rack(message, render_rack(session))

    missing = session.missing_inputs()
    if missing:
        await message.answer(f"Still needed: {', '.join(missing)}.")
    else:
        await message.answer("All set! Use /tryon to see the outfit on you.")
