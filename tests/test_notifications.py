"""
Tests for the notification hub
"""

import asyncio
from unittest.mock import AsyncMock

from src.notifications.hub import SCREEN_CHANGED, SETTINGS_CHANGED, NotificationHub


def fake_socket(fail: bool = False) -> AsyncMock:
    websocket = AsyncMock()
    if fail:
        websocket.send_json.side_effect = RuntimeError("connection reset")
    return websocket


async def drain(hub: NotificationHub) -> None:
    await asyncio.gather(*list(hub._pending))


class TestNotificationHub:
    """Tests for connection tracking and broadcasting."""

    def test_connect_accepts_and_tracks(self):
        hub = NotificationHub()
        websocket = fake_socket()
        asyncio.run(hub.connect(websocket))
        websocket.accept.assert_awaited_once()
        assert hub.active_websockets == [websocket]

    def test_disconnect_is_idempotent(self):
        hub = NotificationHub()
        websocket = fake_socket()
        asyncio.run(hub.connect(websocket))
        hub.disconnect(websocket)
        hub.disconnect(websocket)
        assert hub.active_websockets == []

    def test_broadcast_reaches_every_client(self):
        hub = NotificationHub()
        first, second = fake_socket(), fake_socket()

        async def scenario():
            await hub.connect(first)
            await hub.connect(second)
            await hub.broadcast(SCREEN_CHANGED)

        asyncio.run(scenario())
        first.send_json.assert_awaited_once_with({"event": "screen:changed"})
        second.send_json.assert_awaited_once_with({"event": "screen:changed"})

    def test_failed_client_is_dropped(self):
        hub = NotificationHub()
        healthy, broken = fake_socket(), fake_socket(fail=True)

        async def scenario():
            await hub.connect(broken)
            await hub.connect(healthy)
            await hub.broadcast(SETTINGS_CHANGED)

        asyncio.run(scenario())
        healthy.send_json.assert_awaited_once_with({"event": "settings:changed"})
        assert hub.active_websockets == [healthy]

    def test_notify_schedules_without_waiting(self):
        hub = NotificationHub()
        websocket = fake_socket()

        async def scenario():
            await hub.connect(websocket)
            hub.notify_screen_changed()
            hub.notify_settings_changed()
            websocket.send_json.assert_not_awaited()
            await drain(hub)

        asyncio.run(scenario())
        sent = [call.args[0]["event"] for call in websocket.send_json.await_args_list]
        assert sent == [SCREEN_CHANGED, SETTINGS_CHANGED]
        assert not hub._pending

    def test_notify_without_event_loop_is_dropped(self):
        hub = NotificationHub()
        hub.notify_screen_changed()
        assert not hub._pending
