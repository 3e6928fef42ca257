"""Scenario file parsing and serialization (YAML)."""

from typing import Any

import yaml

from src.scenarios.schemas import (
    STEP_KINDS,
    AudioStep,
    BlankStep,
    HeadingStep,
    ImageStep,
    ScenarioDoc,
    ScenarioMeta,
    ScenarioStep,
    TextStep,
    VideoStep,
    step_kind,
)

_STEP_MODELS = {
    "text": TextStep,
    "image": ImageStep,
    "video": VideoStep,
    "audio": AudioStep,
    "heading": HeadingStep,
}


class ScenarioParseError(ValueError):
    """Raised when a scenario file cannot be parsed."""


def validate_step(step: Any, index: int) -> ScenarioStep:
    """Validate one raw step mapping."""
    if not isinstance(step, dict):
        raise ScenarioParseError(f"Step {index}: must be an object")

    if len(step) != 1:
        raise ScenarioParseError(
            f"Step {index}: must have exactly one key ({', '.join(STEP_KINDS)})"
        )

    key, value = next(iter(step.items()))
    if key not in STEP_KINDS:
        raise ScenarioParseError(
            f'Step {index}: invalid type "{key}". Valid types: {", ".join(STEP_KINDS)}'
        )

    if key == "blank":
        if value is not True:
            raise ScenarioParseError(f"Step {index}: blank must be true")
        return BlankStep(blank=True)

    if not isinstance(value, str) or not value.strip():
        raise ScenarioParseError(f"Step {index}: {key} must be a non-empty string")

    return _STEP_MODELS[key](**{key: value.strip()})


def validate_meta(data: Any) -> ScenarioMeta:
    if not isinstance(data, dict):
        raise ScenarioParseError("Invalid YAML structure")

    if data.get("schemaVersion") != "scenario-1":
        raise ScenarioParseError('Invalid or missing schemaVersion (expected "scenario-1")')

    scenario_id = data.get("id")
    if not isinstance(scenario_id, str) or not scenario_id:
        raise ScenarioParseError("Invalid or missing id")

    title = data.get("title")
    if not isinstance(title, str) or not title:
        raise ScenarioParseError("Invalid or missing title")

    description = data.get("description")
    if description is None:
        description = ""
    if not isinstance(description, str):
        raise ScenarioParseError("Invalid description (must be string)")

    return ScenarioMeta(id=scenario_id, title=title, description=description)


def parse_scenario_file(content: str) -> ScenarioDoc:
    """Parse a scenario YAML document."""
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ScenarioParseError(f"YAML parse error: {e}") from e

    meta = validate_meta(data)

    steps = data.get("steps")
    if not isinstance(steps, list):
        raise ScenarioParseError("Missing or invalid steps array")

    return ScenarioDoc(
        meta=meta,
        steps=[validate_step(step, i) for i, step in enumerate(steps)],
    )


def _dump_step(step: ScenarioStep) -> dict[str, Any]:
    kind = step_kind(step)
    return {kind: getattr(step, kind)}


def build_scenario_file(doc: ScenarioDoc) -> str:
    """Serialize a scenario to YAML."""
    data = {
        "schemaVersion": doc.meta.schema_version,
        "id": doc.meta.id,
        "title": doc.meta.title,
        "description": doc.meta.description,
        "steps": [_dump_step(step) for step in doc.steps],
    }
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, width=10_000)
