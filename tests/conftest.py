"""Shared fixtures: tiny real images and a session ready for generation."""

from __future__ import annotations

from io import BytesIO

import pytest
from PIL import Image

from fitting_room.config.settings import FittingRoomSettings
from fitting_room.session import FittingSession, Slot, UploadedImage
from fitting_room.session.state import select_image, set_credential


def make_image_bytes(fmt: str, color: tuple[int, int, int] = (200, 30, 30)) -> bytes:
    buffer = BytesIO()
    Image.new("RGB", (8, 8), color).save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def jpeg_bytes() -> bytes:
    return make_image_bytes("JPEG")


@pytest.fixture
def png_bytes() -> bytes:
    return make_image_bytes("PNG", (10, 120, 240))


@pytest.fixture
def settings() -> FittingRoomSettings:
    return FittingRoomSettings(
        bot_token="test-token",
        gemini_base_url="https://gemini.test/v1beta",
        gemini_image_model="gemini-test-image",
        request_timeout=5.0,
        generation_deadline=5.0,
    )


@pytest.fixture
def subject_image(jpeg_bytes: bytes) -> UploadedImage:
    return UploadedImage(data=jpeg_bytes, media_type="image/jpeg", preview_ref="subject-file-id", filename="subject.jpg")


@pytest.fixture
def garment_image(png_bytes: bytes) -> UploadedImage:
    return UploadedImage(data=png_bytes, media_type="image/png", preview_ref="garment-file-id", filename="garment.png")


@pytest.fixture
def ready_session(subject_image: UploadedImage, garment_image: UploadedImage) -> FittingSession:
    session = select_image(FittingSession(), Slot.SUBJECT, subject_image)
    session = select_image(session, Slot.GARMENT, garment_image)
    return set_credential(session, "abc123")
