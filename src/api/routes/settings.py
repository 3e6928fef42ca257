"""Settings API routes."""

from fastapi import APIRouter

from src.settings.schemas import ProjectorSettings, SettingsUpdate
from src.settings.store import get_settings_store

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=ProjectorSettings)
async def get_settings() -> ProjectorSettings:
    """Get current projector settings."""
    return get_settings_store().get()


@router.patch("", response_model=ProjectorSettings)
async def update_settings(body: SettingsUpdate) -> ProjectorSettings:
    """Partially update projector settings."""
    return get_settings_store().update(body)


@router.delete("", response_model=ProjectorSettings)
async def reset_settings() -> ProjectorSettings:
    """Reset projector settings to defaults."""
    return get_settings_store().reset()
