"""Projector v2 API.

Controls what a projection screen shows during live events:
- Texts (songs, readings, announcements) split into slides and pages
- Scenarios (ordered playlists of texts, media, headings, blanks)
- Player (the current screen state and its navigation)
- Settings (display typography and wifi)
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src import __version__
from src.api.routes import notifications, player, scenarios, settings, texts
from src.notifications.hub import get_notification_hub
from src.player.engine import get_player_engine
from src.scenarios.registry import get_scenario_registry
from src.settings.store import get_settings_store
from src.texts.registry import get_text_registry

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: Pre-load all registries
    logger.info("Loading settings...")
    settings_store = get_settings_store()
    constraints = settings_store.current()
    logger.info(
        f"Display limits: {constraints.max_chars_per_line} chars/line, "
        f"{constraints.max_lines_per_page} lines/page"
    )

    logger.info("Loading texts...")
    text_registry = get_text_registry()
    logger.info(f"Loaded {text_registry.count()} texts")

    logger.info("Loading scenarios...")
    scenario_registry = get_scenario_registry()
    logger.info(f"Loaded {scenario_registry.count()} scenarios")

    get_player_engine()
    logger.info("Projector v2 API ready")
    yield
    # Shutdown
    logger.info("Shutting down Projector v2 API")


# Create FastAPI app
app = FastAPI(
    title="Projector v2 API",
    description="""
## Projection Screen Control

### Key Endpoints

- `GET /api/player/state` - What is on screen now
- `POST /api/player/text` - Show a text slide
- `POST /api/player/scenario` - Start a scenario
- `POST /api/player/slide` / `POST /api/player/step` - Navigate
- `GET /api/texts` - List texts
- `GET /api/scenarios` - List scenarios
- `GET /api/settings` - Display settings
- `WS /ws/notifications` - Change notifications
""",
    version=__version__,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers with /api prefix
app.include_router(player.router, prefix="/api")
app.include_router(texts.router, prefix="/api")
app.include_router(scenarios.router, prefix="/api")
app.include_router(settings.router, prefix="/api")
app.include_router(notifications.router)


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "service": "Projector v2 API",
        "version": __version__,
        "docs": "/docs",
        "endpoints": {
            "player": "/api/player/state",
            "texts": "/api/texts",
            "scenarios": "/api/scenarios",
            "settings": "/api/settings",
            "notifications": "/ws/notifications",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "texts_loaded": get_text_registry().count(),
        "scenarios_loaded": get_scenario_registry().count(),
        "screen_mode": get_player_engine().get_state().mode,
        "connected_clients": len(get_notification_hub().active_websockets),
    }


def main() -> None:
    import uvicorn

    uvicorn.run(
        "src.api.main:app",
        host=os.environ.get("PROJECTOR_HOST", "0.0.0.0"),
        port=int(os.environ.get("PROJECTOR_PORT", "8001")),
    )


if __name__ == "__main__":
    main()
