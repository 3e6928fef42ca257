"""Notifications WebSocket.

Clients connect to /ws/notifications and receive {"event": "screen:changed"}
or {"event": "settings:changed"}; they re-fetch state over HTTP.
"""

import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from src.notifications.hub import get_notification_hub

logger = logging.getLogger(__name__)

router = APIRouter(tags=["notifications"])


@router.websocket("/ws/notifications")
async def notifications(websocket: WebSocket):
    """Keep a client subscribed until it disconnects."""
    hub = get_notification_hub()
    await hub.connect(websocket)
    try:
        while True:
            message = await websocket.receive_text()
            if message == "ping":
                await websocket.send_json({"event": "pong"})
    except WebSocketDisconnect:
        pass
    finally:
        hub.disconnect(websocket)
