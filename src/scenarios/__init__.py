"""Scenario (playlist) definitions module."""

from src.scenarios.parser import ScenarioParseError, build_scenario_file, parse_scenario_file
from src.scenarios.registry import ScenarioRegistry, get_scenario_registry
from src.scenarios.schemas import (
    AudioStep,
    BlankStep,
    HeadingStep,
    ImageStep,
    ScenarioDoc,
    ScenarioMeta,
    ScenarioStep,
    ScenarioSummary,
    TextStep,
    VideoStep,
    step_kind,
)

__all__ = [
    "AudioStep",
    "BlankStep",
    "HeadingStep",
    "ImageStep",
    "ScenarioDoc",
    "ScenarioMeta",
    "ScenarioParseError",
    "ScenarioRegistry",
    "ScenarioStep",
    "ScenarioSummary",
    "TextStep",
    "VideoStep",
    "build_scenario_file",
    "get_scenario_registry",
    "parse_scenario_file",
    "step_kind",
]
