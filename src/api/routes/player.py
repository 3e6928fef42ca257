"""Player API routes - screen control.

Endpoints:
    GET  /api/player/state              Current screen state
    POST /api/player/state              Install a screen state verbatim
    POST /api/player/clear              Clear the screen
    POST /api/player/text               Show a text slide
    POST /api/player/media              Show an image/video/audio file
    POST /api/player/qrcode             Show a QR code
    POST /api/player/scenario           Start a scenario
    POST /api/player/slide              Previous/next page of the current text
    POST /api/player/step               Previous/next scenario step
    POST /api/player/toggle-visibility  Show/hide current content
    POST /api/player/visibility         Set visibility explicitly
"""

import logging

from fastapi import APIRouter, Body, HTTPException
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from src.player.engine import NotFoundError, get_player_engine
from src.player.schemas import (
    NavigateRequest,
    ScreenState,
    SetMediaRequest,
    SetQRCodeRequest,
    SetScenarioRequest,
    SetTextRequest,
    SetVisibilityRequest,
    screen_state_adapter,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/player", tags=["player"])


@router.get("/state", response_model=ScreenState)
async def get_state():
    """Get the current screen state."""
    return get_player_engine().get_state()


@router.post("/state", response_model=ScreenState)
async def set_state(payload: dict = Body(...)):
    """Install a screen state as-is (direct control, fixtures)."""
    try:
        state = screen_state_adapter.validate_python(payload)
    except ValidationError as e:
        raise RequestValidationError(e.errors())
    return get_player_engine().set_state(state)


@router.post("/clear", response_model=ScreenState)
async def clear_screen():
    """Clear the screen."""
    return get_player_engine().clear()


@router.post("/text", response_model=ScreenState)
async def set_text(request: SetTextRequest):
    """Show a text slide. Starts hidden."""
    try:
        return get_player_engine().set_text(request.text_ref, request.slide_index)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/media", response_model=ScreenState)
async def set_media(request: SetMediaRequest):
    """Show a media file. Starts hidden."""
    return get_player_engine().set_media(request.type, request.path)


@router.post("/qrcode", response_model=ScreenState)
async def set_qrcode(request: SetQRCodeRequest):
    """Show a QR code. Starts hidden."""
    return get_player_engine().set_qrcode(request.value, request.label)


@router.post("/scenario", response_model=ScreenState)
async def set_scenario(request: SetScenarioRequest):
    """Start a scenario at a step. Starts hidden."""
    try:
        return get_player_engine().set_scenario(request.scenario_id, request.step_index)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/slide", response_model=ScreenState)
async def navigate_slide(request: NavigateRequest):
    """Move to the previous/next page of the current text."""
    return get_player_engine().navigate_slide(request.direction)


@router.post("/step", response_model=ScreenState)
async def navigate_step(request: NavigateRequest):
    """Move to the previous/next scenario step."""
    return get_player_engine().navigate_step(request.direction)


@router.post("/toggle-visibility", response_model=ScreenState)
async def toggle_visibility():
    return get_player_engine().toggle_visibility()


@router.post("/visibility", response_model=ScreenState)
async def set_visibility(request: SetVisibilityRequest):
    return get_player_engine().set_visibility(request.visible)
