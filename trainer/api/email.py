# Role: HTTP adapter for the email exercise. Grades a submission and returns the itemized feedback;
# a valid email completes the playthrough as a side effect.

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from trainer.api.deps import get_engine
from trainer.core.errors import PhaseError
from trainer.core.scenario_engine import ScenarioEngine

router = APIRouter(tags=["email"])


class EmailRequest(BaseModel):
    subject: str
    body: str


class EmailResponse(BaseModel):
    is_valid: bool
    errors: List[str]
    missing_keywords: List[str]
    phase: str


@router.post("/email", response_model=EmailResponse)
async def submit_email(req: EmailRequest, engine: ScenarioEngine = Depends(get_engine)) -> EmailResponse:
    try:
        feedback = engine.submit_email(req.subject, req.body)
    except PhaseError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    return EmailResponse(**feedback.to_dict(), phase=engine.phase.value)
