# Role: Per-playthrough state container. Holds the active scenario, the append-only message log,
# objective completion flags, quick replies and banner, plus the scripted-scenario sub-state.

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from trainer.models.message import Message
from trainer.models.scenario import Scenario


class Phase(str, Enum):
    CHAT = "CHAT"
    TRANSITION = "TRANSITION"
    EMAIL = "EMAIL"
    COMPLETE = "COMPLETE"


PHASE_ORDER = (Phase.CHAT, Phase.TRANSITION, Phase.EMAIL, Phase.COMPLETE)


class ScriptStep(IntEnum):
    IDENTIFY = 1
    CLARIFY = 2
    DELAY_REACTION = 3
    AUTHORITY_BLOCK = 4
    AUTHORITY_JUSTIFICATION = 5
    CLOSING = 10


class Actor(BaseModel):
    name: str
    label: str

    @property
    def display_name(self) -> str:
        return f"{self.name} ({self.label})"


class ScriptState(BaseModel):
    step: ScriptStep = ScriptStep.IDENTIFY
    active_curveball_id: Optional[str] = None
    outcome_id: Optional[str] = None
    agent_name: str

    # Key line: top of the stack is whoever speaks for the counterpart right now.
    actors: List[Actor] = Field(default_factory=list)

    @property
    def speaker(self) -> Actor:
        return self.actors[-1]


class Progress(BaseModel):
    scenario: Scenario
    phase: Phase = Phase.CHAT
    completed: Dict[str, bool] = Field(default_factory=dict)
    messages: List[Message] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)
    banner: str = ""
    composing: bool = False

    # Key line: the item whose hint was shown last; short affirmations can confirm it.
    last_hinted_item: Optional[str] = None

    script: Optional[ScriptState] = None

    def open_items(self) -> List[str]:
        return [item.id for item in self.scenario.checklist if not self.completed.get(item.id)]

    def complete(self, item_id: str) -> bool:
        # Returns True only when the item flips from open to done.
        if self.completed.get(item_id):
            return False
        self.completed[item_id] = True
        return True

    def all_complete(self) -> bool:
        return not self.open_items()
