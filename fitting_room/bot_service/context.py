"""Shared dependencies passed into handler setup functions."""

from __future__ import annotations

from dataclasses import dataclass

from fitting_room.config.settings import FittingRoomSettings
from fitting_room.logic import FittingRoomLogic
from fitting_room.session import SessionStore


@dataclass(slots=True)
class BotContext:
    """Container for objects shared across handlers."""

    settings: FittingRoomSettings
    store: SessionStore
    logic: FittingRoomLogic
