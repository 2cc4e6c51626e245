# Role: Thin HTTP adapter for chat input. Forwards raw text to the ScenarioEngine and returns whether it was
# accepted plus the current snapshot; the counterpart's reply arrives asynchronously (poll GET /state).

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from trainer.api.deps import get_engine
from trainer.api.state import StateSnapshot, snapshot_of
from trainer.core.scenario_engine import ScenarioEngine

router = APIRouter(tags=["chat"])


class ChatRequest(BaseModel):
    text: str


class ChatResponse(BaseModel):
    accepted: bool
    state: StateSnapshot


@router.post("/chat", response_model=ChatResponse)
async def chat(req: ChatRequest, engine: ScenarioEngine = Depends(get_engine)) -> ChatResponse:
    accepted = await engine.submit_user_text(req.text)
    return ChatResponse(accepted=accepted, state=snapshot_of(engine))


@router.post("/chat/proceed", response_model=ChatResponse)
async def proceed(engine: ScenarioEngine = Depends(get_engine)) -> ChatResponse:
    accepted = await engine.proceed()
    return ChatResponse(accepted=accepted, state=snapshot_of(engine))
