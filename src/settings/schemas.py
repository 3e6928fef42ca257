"""Projector settings schemas.

Settings are persisted as YAML and split into two groups: display styling
(which also carries the pagination limits) and wifi credentials shown to
the audience via QR code.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

TextAlign = Literal["left", "center", "right"]


class DisplayPadding(BaseModel):
    """Screen padding in pixels."""

    top: int = 40
    right: int = 60
    bottom: int = 40
    left: int = 60


class DisplaySettings(BaseModel):
    """Display styling and text layout limits."""

    font_size: int = Field(default=48, ge=8)
    font_family: str = "Arial, sans-serif"
    padding: DisplayPadding = Field(default_factory=DisplayPadding)
    line_height: float = Field(default=1.4, ge=0.5)
    letter_spacing: float = 0
    text_align: TextAlign = "center"
    background_color: str = "#000000"
    text_color: str = "#ffffff"
    max_lines_per_page: int = Field(
        default=8,
        description="Lines per page; 0 or less disables pagination",
    )
    max_chars_per_line: int = Field(
        default=50,
        description="Characters per line; 0 or less disables wrapping",
    )


class WifiSettings(BaseModel):
    """Wifi network advertised on screen."""

    ssid: str = ""
    password: str = ""


class ProjectorSettings(BaseModel):
    """Complete projector settings (persisted in YAML)."""

    display: DisplaySettings = Field(default_factory=DisplaySettings)
    wifi: WifiSettings = Field(default_factory=WifiSettings)


class DisplayConstraints(BaseModel):
    """Typographic limits the paginator works against."""

    max_chars_per_line: int
    max_lines_per_page: int


# --- Partial updates ---


class PaddingUpdate(BaseModel):
    top: Optional[int] = Field(default=None, ge=0)
    right: Optional[int] = Field(default=None, ge=0)
    bottom: Optional[int] = Field(default=None, ge=0)
    left: Optional[int] = Field(default=None, ge=0)


class DisplaySettingsUpdate(BaseModel):
    """Partial display update; unset fields keep their current value."""

    font_size: Optional[int] = Field(default=None, ge=8)
    font_family: Optional[str] = None
    padding: Optional[PaddingUpdate] = None
    line_height: Optional[float] = Field(default=None, ge=0.5)
    letter_spacing: Optional[float] = None
    text_align: Optional[TextAlign] = None
    background_color: Optional[str] = None
    text_color: Optional[str] = None
    max_lines_per_page: Optional[int] = None
    max_chars_per_line: Optional[int] = None


class WifiSettingsUpdate(BaseModel):
    ssid: Optional[str] = None
    password: Optional[str] = None


class SettingsUpdate(BaseModel):
    """PATCH /api/settings body."""

    display: Optional[DisplaySettingsUpdate] = None
    wifi: Optional[WifiSettingsUpdate] = None
