"""Configuration helpers."""

from .settings import FittingRoomSettings, get_settings

__all__ = ["FittingRoomSettings", "get_settings"]
