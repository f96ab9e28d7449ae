"""Tests for the Gemini generateContent wrapper."""

from __future__ import annotations

import base64
import json

import httpx
import pytest

from fitting_room.api import GeminiImageClient, GeminiRequestError
from fitting_room.config.settings import FittingRoomSettings


def _inline(data: bytes, mime: str = "image/png") -> dict:
    return {"inlineData": {"mimeType": mime, "data": base64.b64encode(data).decode()}}


@pytest.mark.asyncio
async def test_generate_content_posts_single_user_turn(settings: FittingRoomSettings) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"candidates": []})

    client = GeminiImageClient(settings, transport=httpx.MockTransport(handler))
    parts = [{"text": "hello"}, _inline(b"a", "image/jpeg")]
    try:
        result = await client.generate_content("abc123", parts)
    finally:
        await client.close()

    assert result == {"candidates": []}
    assert len(seen) == 1
    request = seen[0]
    assert request.url.host == "gemini.test"
    assert request.url.path == "/v1beta/models/gemini-test-image:generateContent"
    assert request.headers["x-goog-api-key"] == "abc123"
    assert json.loads(request.content) == {"contents": [{"role": "user", "parts": parts}]}


@pytest.mark.asyncio
async def test_status_error_carries_provider_message(settings: FittingRoomSettings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"error": {"code": 400, "message": "API key not valid."}})

    client = GeminiImageClient(settings, transport=httpx.MockTransport(handler))
    try:
        with pytest.raises(GeminiRequestError, match="API key not valid") as info:
            await client.generate_content("bad", [{"text": "x"}])
    finally:
        await client.close()

    assert info.value.status_code == 400


@pytest.mark.asyncio
async def test_transport_error_is_wrapped(settings: FittingRoomSettings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("network timeout", request=request)

    client = GeminiImageClient(settings, transport=httpx.MockTransport(handler))
    try:
        with pytest.raises(GeminiRequestError, match="network timeout"):
            await client.generate_content("abc123", [{"text": "x"}])
    finally:
        await client.close()


@pytest.mark.asyncio
async def test_malformed_body_is_reported(settings: FittingRoomSettings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>oops</html>")

    client = GeminiImageClient(settings, transport=httpx.MockTransport(handler))
    try:
        with pytest.raises(GeminiRequestError, match="malformed"):
            await client.generate_content("abc123", [{"text": "x"}])
    finally:
        await client.close()


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [[], ["candidates"], "text", 42])
async def test_non_object_body_is_malformed(settings: FittingRoomSettings, body: object) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=body)

    client = GeminiImageClient(settings, transport=httpx.MockTransport(handler))
    try:
        with pytest.raises(GeminiRequestError, match="malformed"):
            await client.generate_content("abc123", [{"text": "x"}])
    finally:
        await client.close()


def test_extract_inline_image_picks_first_image_part() -> None:
    payload = {
        "candidates": [
            {
                "content": {
                    "parts": [
                        {"text": "Here you go"},
                        _inline(b"first", "image/webp"),
                        _inline(b"second"),
                    ],
                },
            },
        ],
    }

    result = GeminiImageClient.extract_inline_image(payload)

    assert result is not None
    assert result.data == b"first"
    assert result.media_type == "image/webp"


def test_extract_inline_image_accepts_snake_case() -> None:
    payload = {
        "candidates": [
            {"content": {"parts": [{"inline_data": {"data": base64.b64encode(b"x").decode()}}]}},
        ],
    }

    result = GeminiImageClient.extract_inline_image(payload)

    assert result is not None
    assert result.data == b"x"
    assert result.media_type == "image/png"


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"candidates": []},
        {"candidates": [{"content": {"parts": [{"text": "I cannot do that."}]}}]},
        {"candidates": [{"finishReason": "SAFETY"}]},
        {"candidates": ["oops"]},
        {"candidates": [None]},
        {"candidates": {"content": {}}},
        {"candidates": [{"content": "oops"}]},
        {"candidates": [{"content": {"parts": "oops"}}]},
        {"candidates": [{"content": {"parts": [{"inlineData": {"data": 12}}]}}]},
    ],
)
def test_extract_inline_image_returns_none_without_image(payload: dict) -> None:
    assert GeminiImageClient.extract_inline_image(payload) is None
