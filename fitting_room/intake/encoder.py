"""Base64 helpers for sending uploads inline to the image service."""

from __future__ import annotations

import asyncio
import base64
import binascii
from pathlib import Path
from typing import BinaryIO, Union

from fitting_room.errors import ImageReadError

ImageSource = Union[bytes, Path, BinaryIO]


def _read(source: ImageSource) -> bytes:
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    if isinstance(source, Path):
        return source.read_bytes()
    return source.read()


async def encode(source: ImageSource) -> str:
    """Read ``source`` and return its content as bare base64 text.

    Raises :class:`ImageReadError` when the content cannot be read.
    """

    try:
        data = await asyncio.to_thread(_read, source)
    except (OSError, ValueError) as exc:
        raise ImageReadError(f"Could not read the uploaded file: {exc}") from exc
    return base64.b64encode(data).decode("ascii")


def strip_data_uri_prefix(payload: str) -> str:
    """Drop a leading ``data:<type>;base64,`` header if there is one."""

    if payload.startswith("data:") and "," in payload:
        _, payload = payload.split(",", 1)
    return payload


def to_data_uri(payload: str, media_type: str) -> str:
    return f"data:{media_type};base64,{strip_data_uri_prefix(payload)}"


def decode_payload(payload: str) -> bytes:
    """Decode base64 text (with or without data-URI header) back to bytes."""

    try:
        return base64.b64decode(strip_data_uri_prefix(payload), validate=True)
    except (ValueError, binascii.Error) as exc:
        raise ValueError("Payload is not valid base64 image data.") from exc
