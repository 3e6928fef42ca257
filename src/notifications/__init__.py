"""Change notifications for connected screens."""

from src.notifications.hub import (
    SCREEN_CHANGED,
    SETTINGS_CHANGED,
    NotificationHub,
    get_notification_hub,
)

__all__ = [
    "SCREEN_CHANGED",
    "SETTINGS_CHANGED",
    "NotificationHub",
    "get_notification_hub",
]
