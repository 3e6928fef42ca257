"""Scenario API routes."""

import logging

from fastapi import APIRouter, HTTPException

from src.scenarios.registry import get_scenario_registry
from src.scenarios.schemas import (
    CreateScenarioRequest,
    ScenarioDoc,
    ScenarioSummary,
    UpdateScenarioRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scenarios", tags=["scenarios"])


@router.get("", response_model=list[ScenarioSummary])
async def list_scenarios() -> list[ScenarioSummary]:
    """List all scenarios."""
    return get_scenario_registry().list_summaries()


@router.post("/reload")
async def reload_scenarios():
    """Force reload all scenarios from disk."""
    registry = get_scenario_registry()
    registry.reload()
    return {"status": "reloaded", "count": registry.count()}


@router.get("/{scenario_id}", response_model=ScenarioDoc)
async def get_scenario(scenario_id: str) -> ScenarioDoc:
    """Get a scenario with its steps."""
    scenario = get_scenario_registry().find_by_id(scenario_id)
    if scenario is None:
        raise HTTPException(status_code=404, detail=f"Scenario not found: {scenario_id}")
    return scenario


@router.post("", response_model=ScenarioDoc, status_code=201)
async def create_scenario(body: CreateScenarioRequest) -> ScenarioDoc:
    """Create a new scenario."""
    return get_scenario_registry().create(
        title=body.title,
        description=body.description,
        steps=body.steps,
    )


@router.put("/{scenario_id}", response_model=ScenarioDoc)
async def update_scenario(scenario_id: str, body: UpdateScenarioRequest) -> ScenarioDoc:
    """Update title, description or steps of a scenario."""
    scenario = get_scenario_registry().update(
        scenario_id,
        title=body.title,
        description=body.description,
        steps=body.steps,
    )
    if scenario is None:
        raise HTTPException(status_code=404, detail=f"Scenario not found: {scenario_id}")
    return scenario


@router.delete("/{scenario_id}")
async def delete_scenario(scenario_id: str):
    """Delete a scenario file."""
    if not get_scenario_registry().delete(scenario_id):
        raise HTTPException(status_code=404, detail=f"Scenario not found: {scenario_id}")
    return {"deleted": scenario_id}
