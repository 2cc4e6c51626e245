# Role: Data contracts for the branching "Parts Ordering (Advanced)" script: parts catalog,
# clarification curveballs, outcomes and the negotiation/escalation texts.

from __future__ import annotations

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class Part(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    code: str


class OpeningContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    text: str


class Curveball(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    keywords: List[str]
    hint: str


class OutcomeType(str, Enum):
    SUCCESS = "success"
    NEGOTIATION = "negotiation"


class Outcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    type: OutcomeType


class NegotiationScript(BaseModel):
    model_config = ConfigDict(frozen=True)

    offer_tradeoff: str
    block_authority: str
    manager_intro: str
    manager_approval: str


class PartsScript(BaseModel):
    model_config = ConfigDict(frozen=True)

    agent_names: List[str]
    agent_label: str = "BYD Support"
    manager_name: str = "Mr. Nowak"
    manager_label: str = "Fleet Mgr"
    parts: List[Part]
    contexts: List[OpeningContext]
    curveballs: List[Curveball]
    outcomes: Dict[str, Outcome]
    negotiation: NegotiationScript

    # Keyword sets per decision point; substring matched against the lower-cased utterance.
    accept_keywords: List[str] = Field(default_factory=list)
    reject_keywords: List[str] = Field(default_factory=list)
    back_down_keywords: List[str] = Field(default_factory=list)
    escalate_keywords: List[str] = Field(default_factory=list)
    self_authorize_keywords: List[str] = Field(default_factory=list)
    valid_reason_keywords: List[str] = Field(default_factory=list)

    def curveball(self, curveball_id: str) -> Curveball:
        for c in self.curveballs:
            if c.id == curveball_id:
                return c
        raise KeyError(curveball_id)
