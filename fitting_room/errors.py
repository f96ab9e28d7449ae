"""Exceptions surfaced to the user as a single notice."""

from __future__ import annotations


class FittingRoomError(RuntimeError):
    """Base class for every user-facing fitting room failure."""


class MissingInputError(FittingRoomError):
    """Raised when a generation is requested without key or photos."""


class GenerationInProgressError(FittingRoomError):
    """Raised when a generation is requested while another one runs."""


class InvalidUploadError(FittingRoomError):
    """Raised when an uploaded file is not an acceptable image."""


class ImageReadError(FittingRoomError):
    """Raised when an uploaded file cannot be read for encoding."""


class GenerationFailedError(FittingRoomError):
    """Raised when the image service rejects or the request cannot be sent."""


class GenerationTimeoutError(GenerationFailedError):
    """Raised when the generation deadline elapses."""


class GenerationCancelledError(FittingRoomError):
    """Raised in the waiting caller when a generation is cancelled."""
