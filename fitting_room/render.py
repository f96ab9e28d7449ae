"""Derive what the mirror and the clothes rack show for a session."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fitting_room.session.state import FittingSession, GenerationResult, Phase

GENERATING_TEXT = "Generating outfit..."
RESULT_CAPTION = "Here is your new look!"
SUBJECT_CAPTION = "Mirror view"
MIRROR_PLACEHOLDER = "Upload your photo to see it here."
GARMENT_CAPTION = "Clothes rack"
RACK_PLACEHOLDER = "Upload clothing to display it here."


class MirrorKind(str, Enum):
    GENERATING = "generating"
    RESULT = "result"
    SUBJECT_PREVIEW = "subject_preview"
    PLACEHOLDER = "placeholder"


class RackKind(str, Enum):
    GARMENT_PREVIEW = "garment_preview"
    PLACEHOLDER = "placeholder"


@dataclass(slots=True, frozen=True)
class MirrorPanel:
    kind: MirrorKind
    text: str
    preview_ref: str | None = None
    result: GenerationResult | None = None


@dataclass(slots=True, frozen=True)
class RackPanel:
    kind: RackKind
    text: str
    preview_ref: str | None = None


def render_mirror(session: FittingSession) -> MirrorPanel:
    """Pick exactly one view: generating, result, subject preview, placeholder."""

    if session.phase is Phase.GENERATING:
        return MirrorPanel(MirrorKind.GENERATING, GENERATING_TEXT)
    if session.result is not None:
        return MirrorPanel(MirrorKind.RESULT, RESULT_CAPTION, result=session.result)
    if session.subject is not None:
        return MirrorPanel(MirrorKind.SUBJECT_PREVIEW, SUBJECT_CAPTION, preview_ref=session.subject.preview_ref)
    return MirrorPanel(MirrorKind.PLACEHOLDER, MIRROR_PLACEHOLDER)


def render_rack(session: FittingSession) -> RackPanel:
    # Independent of the generation phase.
    if session.garment is not None:
        return RackPanel(RackKind.GARMENT_PREVIEW, GARMENT_CAPTION, preview_ref=session.garment.preview_ref)
    return RackPanel(RackKind.PLACEHOLDER, RACK_PLACEHOLDER)
