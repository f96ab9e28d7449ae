"""Per-user fitting session state and its in-memory store."""

from .state import (
    FittingSession,
    GenerationResult,
    Phase,
    Slot,
    UploadedImage,
    WorkflowState,
)
from .store import SessionStore

__all__ = [
    "FittingSession",
    "GenerationResult",
    "Phase",
    "SessionStore",
    "Slot",
    "UploadedImage",
    "WorkflowState",
]
