"""Send rendered mirror and rack panels as Telegram messages."""

from __future__ import annotations

import mimetypes

from aiogram.exceptions import TelegramBadRequest
from aiogram.types import BufferedInputFile, Message

from fitting_room.render import MirrorKind, MirrorPanel, RackKind, RackPanel


async def send_mirror(message: Message, panel: MirrorPanel) -> None:
    if panel.kind is MirrorKind.RESULT and panel.result is not None:
        extension = mimetypes.guess_extension(panel.result.media_type) or ".png"
        photo = BufferedInputFile(panel.result.data, filename=f"try_on{extension}")
        await message.answer_photo(photo, caption=panel.text)
    elif panel.kind is MirrorKind.SUBJECT_PREVIEW and panel.preview_ref:
        await _send_preview(message, panel.preview_ref, panel.text)
    else:
        await message.answer(panel.text)


async def send_rack(message: Message, panel: RackPanel) -> None:
    if panel.kind is RackKind.GARMENT_PREVIEW and panel.preview_ref:
        await _send_preview(message, panel.preview_ref, panel.text)
    else:
        await message.answer(panel.text)


async def _send_preview(message: Message, file_id: str, caption: str) -> None:
    # Images sent as files carry a document file_id, which Telegram refuses as a photo.
    try:
        await message.answer_photo(file_id, caption=caption)
    except TelegramBadRequest:
        await message.answer_document(file_id, caption=caption)
