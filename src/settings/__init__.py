"""Projector settings module."""

from src.settings.schemas import (
    DisplayConstraints,
    DisplaySettings,
    ProjectorSettings,
    SettingsUpdate,
    WifiSettings,
)
from src.settings.store import SettingsStore, get_settings_store

__all__ = [
    "DisplayConstraints",
    "DisplaySettings",
    "ProjectorSettings",
    "SettingsStore",
    "SettingsUpdate",
    "WifiSettings",
    "get_settings_store",
]
