"""Notification hub - pushes change events to connected screens.

Remote displays and control panels keep a WebSocket open and re-fetch
state when they receive an event. Sending is fire-and-forget: callers never
wait for delivery and never see delivery errors.
"""

import asyncio
import logging
from typing import Optional

from fastapi import WebSocket

logger = logging.getLogger(__name__)

SCREEN_CHANGED = "screen:changed"
SETTINGS_CHANGED = "settings:changed"


class NotificationHub:
    """Tracks connected WebSockets and broadcasts events to them."""

    def __init__(self) -> None:
        self.active_websockets: list[WebSocket] = []
        self._pending: set[asyncio.Task] = set()

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self.active_websockets.append(websocket)
        logger.info(f"Client connected ({len(self.active_websockets)} active)")

    def disconnect(self, websocket: WebSocket) -> None:
        if websocket in self.active_websockets:
            self.active_websockets.remove(websocket)
            logger.info(f"Client disconnected ({len(self.active_websockets)} active)")

    def notify_screen_changed(self) -> None:
        self._emit(SCREEN_CHANGED)

    def notify_settings_changed(self) -> None:
        self._emit(SETTINGS_CHANGED)

    def _emit(self, event: str) -> None:
        """Schedule a broadcast on the running loop, if any."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug(f"No running event loop, dropping {event} event")
            return

        logger.info(f"Emitting {event} event")
        task = loop.create_task(self.broadcast(event))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def broadcast(self, event: str) -> None:
        """Send an event to every client, dropping connections that fail."""
        for websocket in list(self.active_websockets):
            try:
                await websocket.send_json({"event": event})
            except Exception as e:
                logger.warning(f"Dropping client after failed send: {e}")
                self.disconnect(websocket)


# Global hub instance
_hub: Optional[NotificationHub] = None


def get_notification_hub() -> NotificationHub:
    """Get the global notification hub instance."""
    global _hub
    if _hub is None:
        _hub = NotificationHub()
    return _hub
