"""Tests for base64 transport encoding."""

from __future__ import annotations

import base64
from io import BytesIO
from pathlib import Path

import pytest

from fitting_room.errors import ImageReadError
from fitting_room.intake import decode_payload, encode, strip_data_uri_prefix, to_data_uri


@pytest.mark.asyncio
async def test_encode_round_trip(jpeg_bytes: bytes, tmp_path: Path) -> None:
    path = tmp_path / "subject.jpg"
    path.write_bytes(jpeg_bytes)

    for source in (jpeg_bytes, path, BytesIO(jpeg_bytes)):
        payload = await encode(source)
        assert not payload.startswith("data:")
        assert decode_payload(payload) == jpeg_bytes


@pytest.mark.asyncio
async def test_encode_missing_file_raises_read_error(tmp_path: Path) -> None:
    with pytest.raises(ImageReadError):
        await encode(tmp_path / "missing.png")


@pytest.mark.asyncio
async def test_encode_closed_stream_raises_read_error() -> None:
    stream = BytesIO(b"data")
    stream.close()

    with pytest.raises(ImageReadError):
        await encode(stream)


def test_data_uri_prefix_is_stripped(png_bytes: bytes) -> None:
    raw = base64.b64encode(png_bytes).decode("ascii")
    uri = to_data_uri(raw, "image/png")

    assert uri.startswith("data:image/png;base64,")
    assert strip_data_uri_prefix(uri) == raw
    assert decode_payload(uri) == png_bytes


def test_decode_payload_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        decode_payload("not base64!!")
