"""Try-on orchestration: guard the inputs, call Gemini, record the outcome."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

from fitting_room.api import GeminiImageClient, GeminiRequestError
from fitting_room.config.settings import FittingRoomSettings
from fitting_room.errors import (
    GenerationCancelledError,
    GenerationFailedError,
    GenerationTimeoutError,
    ImageReadError,
)
from fitting_room.imggen import EncodedImage, PromptBuilder
from fitting_room.intake import encode
from fitting_room.session import FittingSession, GenerationResult, SessionStore, UploadedImage
from fitting_room.session.state import (
    begin_generation,
    complete_generation,
    fail_generation,
)

logger = logging.getLogger(__name__)


class FittingRoomLogic:
    """Runs at most one generation per user and keeps the session phase honest."""

    def __init__(
        self,
        settings: FittingRoomSettings,
        store: SessionStore,
        client: GeminiImageClient,
    ) -> None:
        self._settings = settings
        self._store = store
        self._client = client
        self._prompt_builder = PromptBuilder()
        self._inflight: dict[str, asyncio.Task[GenerationResult | None]] = {}
        self._cancel_requested: set[str] = set()

    async def generate(
        self,
        user_id: str,
        *,
        on_start: Callable[[FittingSession], Awaitable[None]] | None = None,
    ) -> FittingSession:
        """Compose the user's photo with the garment and return the updated session.

        Raises :class:`MissingInputError` or :class:`GenerationInProgressError`
        before anything is sent. ``on_start`` is awaited once the session has
        entered the generating phase. Failures after that point leave the
        session idle without a result and are raised as
        :class:`GenerationFailedError` (or its timeout subclass) or
        :class:`GenerationCancelledError`. An empty response is not an error:
        the returned session has no result.
        """

        session = await self._store.apply(user_id, begin_generation)
        revision = session.revision
        logger.info("Starting try-on generation for user %s", user_id)

        outcome: FittingSession | None = None
        error_message: str | None = None
        # Registered before on_start runs so that a cancel or reset issued meanwhile
        # stops the request before anything is sent.
        task = asyncio.ensure_future(self._run(session, on_start))
        self._inflight[user_id] = task
        try:
            try:
                result = await asyncio.wait_for(task, timeout=self._settings.generation_deadline)
            except asyncio.TimeoutError as exc:
                error_message = (
                    f"Generation took longer than {self._settings.generation_deadline:g} seconds and was stopped."
                )
                logger.error("Try-on generation for user %s timed out", user_id)
                raise GenerationTimeoutError(error_message) from exc
            except asyncio.CancelledError:
                if user_id not in self._cancel_requested:
                    raise
                logger.info("Try-on generation for user %s cancelled", user_id)
                raise GenerationCancelledError("Generation cancelled.") from None
            except ImageReadError as exc:
                error_message = str(exc)
                logger.error("Failed to encode uploads for user %s: %s", user_id, exc)
                raise GenerationFailedError(error_message) from exc
            except GeminiRequestError as exc:
                error_message = f"Request failed: {exc}"
                logger.error("Gemini request failed for user %s: %s", user_id, exc)
                raise GenerationFailedError(error_message) from exc

            outcome = await self._store.apply(user_id, complete_generation, result, revision)
            if result is None:
                logger.info("Gemini returned no image for user %s", user_id)
            elif outcome.result is None:
                logger.info("Discarding result for user %s: uploads changed during generation", user_id)
            return outcome
        finally:
            if not task.done():
                task.cancel()
            self._inflight.pop(user_id, None)
            self._cancel_requested.discard(user_id)
            if outcome is None:
                await self._store.apply(user_id, fail_generation, error_message)

    def cancel(self, user_id: str) -> bool:
        """Cancel the user's in-flight generation. Returns ``False`` if none runs."""

        task = self._inflight.get(user_id)
        if task is None or task.done():
            return False
        self._cancel_requested.add(user_id)
        task.cancel()
        return True

    def is_generating(self, user_id: str) -> bool:
        task = self._inflight.get(user_id)
        return task is not None and not task.done()

    async def _run(
        self,
        session: FittingSession,
        on_start: Callable[[FittingSession], Awaitable[None]] | None,
    ) -> GenerationResult | None:
        if on_start is not None:
            await on_start(session)
        # begin_generation guarantees both images and the key are present.
        return await self._compose(session.credential, session.subject, session.garment)  # type: ignore[arg-type]

    async def _compose(
        self,
        credential: str,
        subject_image: UploadedImage,
        garment_image: UploadedImage,
    ) -> GenerationResult | None:
        subject = EncodedImage(await encode(subject_image.data), subject_image.media_type)
        garment = EncodedImage(await encode(garment_image.data), garment_image.media_type)
        parts = self._prompt_builder.build(subject, garment)
        response = await self._client.generate_content(credential, parts)
        return GeminiImageClient.extract_inline_image(response)
