# Role: Read/reset endpoints for the presentation layer. Exposes the current playthrough snapshot and the
# "New Scenario" command. Does NOT contain any scenario logic.

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from trainer.api.deps import get_engine
from trainer.core.scenario_engine import ScenarioEngine
from trainer.models.message import Message

router = APIRouter(tags=["state"])


class ChecklistEntry(BaseModel):
    id: str
    description: str
    completed: bool


class EmailTaskView(BaseModel):
    subject_hint: str
    required_keywords: List[str]
    instruction: str


class StateSnapshot(BaseModel):
    scenario_id: str
    scenario_name: str
    counterpart_name: str
    phase: str
    checklist: List[ChecklistEntry]
    messages: List[Message]
    suggestions: List[str]
    banner: str
    composing: bool
    email_task: EmailTaskView
    script_step: Optional[str] = None


class NewScenarioRequest(BaseModel):
    scenario_id: Optional[str] = None


def snapshot_of(engine: ScenarioEngine) -> StateSnapshot:
    return StateSnapshot(**engine.snapshot())


@router.get("/state", response_model=StateSnapshot)
async def get_state(engine: ScenarioEngine = Depends(get_engine)) -> StateSnapshot:
    return snapshot_of(engine)


@router.post("/scenario/new", response_model=StateSnapshot)
async def new_scenario(
    req: Optional[NewScenarioRequest] = None,
    engine: ScenarioEngine = Depends(get_engine),
) -> StateSnapshot:
    scenario_id = req.scenario_id if req else None
    try:
        await engine.start_new_scenario(scenario_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return snapshot_of(engine)
