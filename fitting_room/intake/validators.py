"""Checks applied to every upload before it enters a session."""

from __future__ import annotations

from io import BytesIO
from typing import Collection

from PIL import Image, UnidentifiedImageError

from fitting_room.errors import InvalidUploadError
from fitting_room.session.state import UploadedImage

ALLOWED_FORMATS = frozenset({"JPEG", "PNG", "WEBP", "GIF"})


def validate_upload(
    data: bytes,
    *,
    preview_ref: str,
    declared_media_type: str | None = None,
    filename: str | None = None,
    max_bytes: int,
    allowed_formats: Collection[str] = ALLOWED_FORMATS,
) -> UploadedImage:
    """Return an :class:`UploadedImage` or raise :class:`InvalidUploadError`.

    The declared media type is kept when it is an ``image/*`` type; otherwise
    the type detected by Pillow is used.
    """

    if not data:
        raise InvalidUploadError("The uploaded file is empty.")
    if len(data) > max_bytes:
        raise InvalidUploadError(
            f"The file is too large ({len(data) // 1024} KiB). Limit is {max_bytes // 1024} KiB.",
        )

    try:
        with Image.open(BytesIO(data)) as img:
            detected_format = img.format
            img.verify()
    except Image.DecompressionBombError as exc:
        raise InvalidUploadError(f"{filename or 'The image'} has too many pixels.") from exc
    except (UnidentifiedImageError, OSError, SyntaxError) as exc:
        raise InvalidUploadError(f"{filename or 'The file'} is not a supported image.") from exc

    if detected_format not in allowed_formats:
        raise InvalidUploadError(
            f"Image format {detected_format} is not supported. Use one of: {', '.join(sorted(allowed_formats))}.",
        )

    media_type = declared_media_type or ""
    if not media_type.startswith("image/"):
        media_type = Image.MIME.get(detected_format, "image/jpeg")

    return UploadedImage(
        data=data,
        media_type=media_type,
        preview_ref=preview_ref,
        filename=filename,
    )
