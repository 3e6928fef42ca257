"""Scenario schemas.

A scenario is an ordered playlist of steps. Each step carries exactly one
key naming its kind, which is also how it reads in the YAML file:

    - text: songs/barka__01HXZ3R8E7Q2V4VJ6T9G2J8N1P
    - image: announcements/logo.png
    - heading: Songs
    - blank: true
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

StepKind = Literal["text", "image", "video", "audio", "heading", "blank"]

STEP_KINDS: tuple[str, ...] = ("text", "image", "video", "audio", "heading", "blank")

# Same rule the file parser applies: trimmed, non-empty
StepValue = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class _Step(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class TextStep(_Step):
    text: StepValue = Field(..., description="Text reference (domain/slug__id)")


class ImageStep(_Step):
    image: StepValue


class VideoStep(_Step):
    video: StepValue


class AudioStep(_Step):
    audio: StepValue


class HeadingStep(_Step):
    heading: StepValue


class BlankStep(_Step):
    blank: Literal[True]


ScenarioStep = Union[TextStep, ImageStep, VideoStep, AudioStep, HeadingStep, BlankStep]


def step_kind(step: ScenarioStep) -> StepKind:
    """Name of the populated field of a step."""
    if isinstance(step, TextStep):
        return "text"
    if isinstance(step, ImageStep):
        return "image"
    if isinstance(step, VideoStep):
        return "video"
    if isinstance(step, AudioStep):
        return "audio"
    if isinstance(step, HeadingStep):
        return "heading"
    return "blank"


class ScenarioMeta(BaseModel):
    """Scenario header."""

    schema_version: Literal["scenario-1"] = "scenario-1"
    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    description: str = ""


class ScenarioDoc(BaseModel):
    """A parsed scenario."""

    meta: ScenarioMeta
    steps: list[ScenarioStep] = Field(default_factory=list)

    @property
    def id(self) -> str:
        return self.meta.id

    @property
    def title(self) -> str:
        return self.meta.title


class ScenarioSummary(BaseModel):
    id: str
    title: str
    description: str = ""
    step_count: int


class CreateScenarioRequest(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = ""
    steps: list[ScenarioStep] = Field(default_factory=list)


class UpdateScenarioRequest(BaseModel):
    """Partial update; unset fields are left unchanged."""

    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    steps: Optional[list[ScenarioStep]] = None
