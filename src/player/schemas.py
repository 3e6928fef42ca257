"""Player schemas - what is on screen right now.

Two closed tagged unions describe the screen:

- DisplayItem (discriminated by ``type``): the resolved, screen-ready
  content of one text page, media file, heading, blank slide or QR code.
- ScreenState (discriminated by ``mode``): empty, a single ad-hoc item, or
  a position inside a scenario.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter

Direction = Literal["next", "prev"]
MediaType = Literal["image", "video", "audio"]


# --- Display items ---


class TextDisplayItem(BaseModel):
    """One page of one slide of a text."""

    type: Literal["text"] = "text"
    text_ref: str = Field(..., description="Text reference (domain/slug__id)")
    slide_index: int = Field(default=0, description="Current slide (0-based)")
    total_slides: int = 0
    page_index: int = Field(default=0, description="Current page within the slide (0-based)")
    total_pages: int = 1
    slide_content: str = Field(default="", description="Text of the current page")


class MediaDisplayItem(BaseModel):
    type: MediaType
    path: str = Field(..., description="Media path relative to the media root")


class HeadingDisplayItem(BaseModel):
    """Section divider."""

    type: Literal["heading"] = "heading"
    content: str


class BlankDisplayItem(BaseModel):
    type: Literal["blank"] = "blank"


class QRCodeDisplayItem(BaseModel):
    type: Literal["qrcode"] = "qrcode"
    value: str = Field(..., description="Value encoded in the QR code")
    label: Optional[str] = Field(default=None, description="Caption under the code")


DisplayItem = Annotated[
    Union[
        TextDisplayItem,
        MediaDisplayItem,
        HeadingDisplayItem,
        BlankDisplayItem,
        QRCodeDisplayItem,
    ],
    Field(discriminator="type"),
]


# --- Screen state ---


class EmptyScreenState(BaseModel):
    mode: Literal["empty"] = "empty"


class SingleScreenState(BaseModel):
    """One ad-hoc item chosen by the operator."""

    mode: Literal["single"] = "single"
    visible: bool = Field(default=True, description="Missing means visible")
    item: DisplayItem


class ScenarioScreenState(BaseModel):
    """A position inside a running scenario."""

    mode: Literal["scenario"] = "scenario"
    visible: bool = Field(default=True, description="Missing means visible")
    scenario_id: str
    scenario_title: str = ""
    step_index: int = 0
    total_steps: int = 0
    current_item: DisplayItem


ScreenState = Annotated[
    Union[EmptyScreenState, SingleScreenState, ScenarioScreenState],
    Field(discriminator="mode"),
]

screen_state_adapter = TypeAdapter(ScreenState)


def current_text_item(state: ScreenState) -> Optional[TextDisplayItem]:
    """The text item on screen, if the current item is text."""
    if isinstance(state, SingleScreenState):
        item = state.item
    elif isinstance(state, ScenarioScreenState):
        item = state.current_item
    else:
        return None
    return item if isinstance(item, TextDisplayItem) else None


def is_visible(state: ScreenState) -> bool:
    """Whether anything is actually shown to the audience."""
    if isinstance(state, EmptyScreenState):
        return False
    return state.visible is not False


# --- Request bodies ---


class SetTextRequest(BaseModel):
    text_ref: str = Field(..., min_length=1)
    slide_index: int = 0


class SetMediaRequest(BaseModel):
    type: MediaType
    path: str = Field(..., min_length=1)


class SetQRCodeRequest(BaseModel):
    value: str = Field(..., min_length=1)
    label: Optional[str] = None


class SetScenarioRequest(BaseModel):
    scenario_id: str = Field(..., min_length=1)
    step_index: int = 0


class NavigateRequest(BaseModel):
    direction: Direction


class SetVisibilityRequest(BaseModel):
    visible: bool
