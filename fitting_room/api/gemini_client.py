"""Async wrapper around the Gemini ``generateContent`` endpoint."""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Any, Mapping, Sequence

import httpx

from fitting_room.config.settings import FittingRoomSettings
from fitting_room.session.state import GenerationResult


class GeminiRequestError(RuntimeError):
    """Raised when Gemini responds with an error or cannot be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


logger = logging.getLogger(__name__)


class GeminiImageClient:
    """Sends multimodal prompts to an image-capable Gemini model.

    The API key is supplied per call because every user brings their own.
    """

    def __init__(self, settings: FittingRoomSettings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._settings = settings
        self._client = httpx.AsyncClient(
            base_url=settings.gemini_base_url.rstrip("/"),
            timeout=settings.request_timeout,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""

        await self._client.aclose()

    async def generate_content(self, credential: str, parts: Sequence[Mapping[str, Any]]) -> dict[str, Any]:
        """Send one ``generateContent`` request with ``parts`` as a single user turn."""

        endpoint = f"/models/{self._settings.gemini_image_model}:generateContent"
        body = {
            "contents": [
                {
                    "role": "user",
                    "parts": list(parts),
                },
            ],
        }
        try:
            response = await self._client.post(
                endpoint,
                json=body,
                headers={"x-goog-api-key": credential},
            )
            response.raise_for_status()
            if not response.content:
                return {}
            payload = response.json()
            if not isinstance(payload, Mapping):
                raise ValueError("response body is not a JSON object")
            return dict(payload)
        except httpx.HTTPStatusError as exc:
            message = self._provider_message(exc.response)
            raise GeminiRequestError(
                f"Gemini returned error {exc.response.status_code}: {message}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise GeminiRequestError(str(exc) or exc.__class__.__name__) from exc
        except ValueError as exc:
            raise GeminiRequestError("Gemini returned a malformed response.") from exc

    @staticmethod
    def _provider_message(response: httpx.Response) -> str:
        try:
            payload = response.json()
        except ValueError:
            return response.text
        error = payload.get("error") if isinstance(payload, Mapping) else None
        if isinstance(error, Mapping) and error.get("message"):
            return str(error["message"])
        return response.text

    @staticmethod
    def extract_inline_image(payload: Mapping[str, Any]) -> GenerationResult | None:
        """Return the first inline image in the first candidate, if any."""

        candidates = payload.get("candidates") or []
        if not isinstance(candidates, list) or not candidates:
            logger.warning("Gemini response has no candidates.")
            return None
        candidate = candidates[0]
        content = candidate.get("content") if isinstance(candidate, Mapping) else None
        if not isinstance(content, Mapping):
            logger.warning("Gemini candidate carries no content.")
            return None
        parts = content.get("parts")
        for part in parts if isinstance(parts, list) else []:
            if not isinstance(part, Mapping):
                continue
            inline = part.get("inlineData") or part.get("inline_data")
            if not isinstance(inline, Mapping) or not inline.get("data"):
                continue
            media_type = inline.get("mimeType") or inline.get("mime_type") or "image/png"
            try:
                data = base64.b64decode(inline["data"])
            except (TypeError, ValueError, binascii.Error):
                logger.warning("Skipping inline part with undecodable data.")
                continue
            return GenerationResult(data=data, media_type=media_type)

        logger.info("Gemini response contains no inline image part.")
        return None
