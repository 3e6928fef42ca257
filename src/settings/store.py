"""Settings store - persists projector settings in a YAML file.

The store keeps the parsed settings in memory and writes them back on every
change. It doubles as the player's settings provider: current() hands out
the pagination limits, read fresh on every call.
"""

import logging
from pathlib import Path
from typing import Optional, Protocol

import yaml

from src.data_paths import SETTINGS_PATH
from src.settings.schemas import (
    DisplayConstraints,
    ProjectorSettings,
    SettingsUpdate,
)

logger = logging.getLogger(__name__)


class SettingsNotifier(Protocol):
    def notify_settings_changed(self) -> None: ...


class SettingsStore:
    """YAML-backed projector settings."""

    def __init__(
        self,
        settings_path: Optional[Path] = None,
        notifier: Optional[SettingsNotifier] = None,
    ):
        self.settings_path = settings_path or SETTINGS_PATH
        self.notifier = notifier
        self._settings = ProjectorSettings()
        self._loaded = False

    def load(self) -> None:
        """Load settings from disk, creating the file with defaults if missing."""
        if self._loaded:
            return
        self._loaded = True

        if not self.settings_path.exists():
            logger.info(f"Settings file not found, writing defaults: {self.settings_path}")
            self.save()
            return

        try:
            with open(self.settings_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            self._settings = _merge_with_defaults(data)
            logger.info(f"Loaded settings from {self.settings_path}")
        except Exception as e:
            logger.error(f"Failed to load settings, using defaults: {e}")
            self._settings = ProjectorSettings()

    def save(self) -> None:
        """Write current settings to disk."""
        self.settings_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.settings_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(
                self._settings.model_dump(),
                f,
                indent=2,
                sort_keys=False,
                allow_unicode=True,
            )

    def get(self) -> ProjectorSettings:
        """Get a copy of the current settings."""
        self.load()
        return self._settings.model_copy(deep=True)

    def current(self) -> DisplayConstraints:
        """Current pagination limits."""
        self.load()
        display = self._settings.display
        return DisplayConstraints(
            max_chars_per_line=display.max_chars_per_line,
            max_lines_per_page=display.max_lines_per_page,
        )

    def update(self, patch: SettingsUpdate) -> ProjectorSettings:
        """Apply a partial update, persist it and notify listeners."""
        self.load()
        merged = _deep_merge(
            self._settings.model_dump(),
            patch.model_dump(exclude_none=True),
        )
        self._settings = ProjectorSettings.model_validate(merged)
        self.save()
        logger.info("Settings updated")
        self._notify()
        return self.get()

    def reset(self) -> ProjectorSettings:
        """Restore default settings, persist them and notify listeners."""
        self.load()
        self._settings = ProjectorSettings()
        self.save()
        logger.info("Settings reset to defaults")
        self._notify()
        return self.get()

    def _notify(self) -> None:
        if self.notifier is not None:
            self.notifier.notify_settings_changed()


def _deep_merge(base: dict, update: dict) -> dict:
    """Recursively merge update into a copy of base."""
    result = dict(base)
    for key, value in update.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _merge_with_defaults(data: dict) -> ProjectorSettings:
    """Fill fields missing from a loaded file with defaults."""
    defaults = ProjectorSettings().model_dump()
    return ProjectorSettings.model_validate(_deep_merge(defaults, data))


# Global store instance
_store: Optional[SettingsStore] = None


def get_settings_store() -> SettingsStore:
    """Get the global settings store instance."""
    global _store
    if _store is None:
        from src.notifications.hub import get_notification_hub

        _store = SettingsStore(notifier=get_notification_hub())
        _store.load()
    return _store
