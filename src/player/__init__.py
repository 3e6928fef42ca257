"""Player module - the presentation state engine.

Decides what is on screen: an ad-hoc text/media/QR item or a position in a
scenario, paginated to fit the display settings.
"""

from src.player.engine import NotFoundError, PlayerEngine, PlayerError, get_player_engine
from src.player.schemas import (
    DisplayItem,
    EmptyScreenState,
    ScenarioScreenState,
    ScreenState,
    SingleScreenState,
    TextDisplayItem,
)
from src.player.state_store import ScreenStateStore

__all__ = [
    "DisplayItem",
    "EmptyScreenState",
    "NotFoundError",
    "PlayerEngine",
    "PlayerError",
    "ScenarioScreenState",
    "ScreenState",
    "ScreenStateStore",
    "SingleScreenState",
    "TextDisplayItem",
    "get_player_engine",
]
