"""Immutable fitting session and the transitions that produce new sessions.

Every function here is pure: it takes a :class:`FittingSession` and returns a
new one (or raises). Ownership of the current session lives in
:class:`fitting_room.session.store.SessionStore`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from fitting_room.errors import GenerationInProgressError, MissingInputError


class Slot(str, Enum):
    """Which photo an upload fills."""

    SUBJECT = "subject"
    GARMENT = "garment"


class Phase(str, Enum):
    """Coarse generation status."""

    IDLE = "idle"
    GENERATING = "generating"


class WorkflowState(str, Enum):
    """Observable stage of the whole try-on workflow."""

    EMPTY = "empty"
    READY_PARTIAL = "ready_partial"
    READY_FULL = "ready_full"
    GENERATING = "generating"
    DONE = "done"
    FAILED = "failed"


@dataclass(slots=True, frozen=True)
class UploadedImage:
    """An accepted upload together with the handle used to show it again."""

    data: bytes
    media_type: str
    preview_ref: str
    filename: str | None = None


@dataclass(slots=True, frozen=True)
class GenerationResult:
    """Decoded image returned by the image service."""

    data: bytes
    media_type: str = "image/png"


@dataclass(slots=True, frozen=True)
class FittingSession:
    """Everything a single user has supplied in the current session."""

    subject: UploadedImage | None = None
    garment: UploadedImage | None = None
    credential: str = ""
    result: GenerationResult | None = None
    phase: Phase = Phase.IDLE
    error: str | None = None
    pending_slot: Slot = Slot.SUBJECT
    revision: int = 0

    def image(self, slot: Slot) -> UploadedImage | None:
        return self.subject if slot is Slot.SUBJECT else self.garment

    def missing_inputs(self) -> list[str]:
        """Names of the inputs still required before a generation may start."""

        missing: list[str] = []
        if not self.credential:
            missing.append("API key")
        if self.subject is None:
            missing.append("your photo")
        if self.garment is None:
            missing.append("clothing photo")
        return missing


def select_image(session: FittingSession, slot: Slot, image: UploadedImage) -> FittingSession:
    """Put ``image`` into ``slot`` and drop any result produced from older inputs."""

    changes: dict[str, object] = {
        slot.value: image,
        "result": None,
        "error": None,
        "revision": session.revision + 1,
    }
    if slot is Slot.SUBJECT:
        changes["pending_slot"] = Slot.GARMENT
    return replace(session, **changes)


def select_pending_image(session: FittingSession, image: UploadedImage) -> FittingSession:
    return select_image(session, session.pending_slot, image)


def choose_slot(session: FittingSession, slot: Slot) -> FittingSession:
    return replace(session, pending_slot=slot)


def set_credential(session: FittingSession, credential: str) -> FittingSession:
    """Store the user's API key. Surrounding whitespace is ignored."""

    return replace(session, credential=credential.strip())


def begin_generation(session: FittingSession) -> FittingSession:
    """Enter the generating phase or raise if the inputs do not allow it."""

    if session.phase is Phase.GENERATING:
        raise GenerationInProgressError("A try-on is already being generated. Please wait.")
    missing = session.missing_inputs()
    if missing:
        raise MissingInputError(f"API key and both photos are required. Missing: {', '.join(missing)}.")
    return replace(session, phase=Phase.GENERATING, result=None, error=None)


def complete_generation(
    session: FittingSession,
    result: GenerationResult | None,
    revision: int,
) -> FittingSession:
    """Leave the generating phase, keeping ``result`` only if inputs did not change meanwhile."""

    if revision != session.revision:
        result = None
    return replace(session, phase=Phase.IDLE, result=result, error=None)


def fail_generation(session: FittingSession, message: str | None) -> FittingSession:
    """Leave the generating phase without a result."""

    return replace(session, phase=Phase.IDLE, result=None, error=message)


def workflow_state(session: FittingSession) -> WorkflowState:
    """Derive the workflow stage from the session contents."""

    if session.phase is Phase.GENERATING:
        return WorkflowState.GENERATING
    if session.result is not None:
        return WorkflowState.DONE
    if session.error:
        return WorkflowState.FAILED
    present = (session.subject is not None) + (session.garment is not None)
    if present == 0:
        return WorkflowState.EMPTY
    if present == 2 and session.credential:
        return WorkflowState.READY_FULL
    return WorkflowState.READY_PARTIAL
