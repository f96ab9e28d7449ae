"""Request parts for the try-on composition."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

TRY_ON_INSTRUCTION = (
    "Generate an image of the person in the first image wearing the garment from the second image. "
    "Preserve the person's identity, facial features, pose, and proportions, and blend the garment "
    "naturally and realistically onto them."
)


@dataclass(slots=True, frozen=True)
class EncodedImage:
    """Base64 payload paired with the media type it was uploaded with."""

    data: str
    media_type: str

    def as_part(self) -> dict[str, Any]:
        return {"inlineData": {"mimeType": self.media_type, "data": self.data}}


class PromptBuilder:
    """Builds the ordered content parts sent to Gemini."""

    def __init__(self, instruction: str = TRY_ON_INSTRUCTION) -> None:
        self._instruction = instruction

    def build(self, subject: EncodedImage, garment: EncodedImage) -> list[dict[str, Any]]:
        """Return instruction, subject and garment parts, in that order."""

        return [
            {"text": self._instruction},
            subject.as_part(),
            garment.as_part(),
        ]
