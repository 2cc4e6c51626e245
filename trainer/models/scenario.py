# Role: Static scenario contracts. A Scenario bundles the checklist the user must cover in chat,
# the hint shown for each open item, and the EmailTask graded afterwards. Loaded once, never mutated.

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ScenarioKind(str, Enum):
    GENERIC = "generic"
    SCRIPTED = "scripted"


class ChecklistItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    description: str
    keywords: List[str] = Field(default_factory=list)
    suggestion: str = ""


class EmailTask(BaseModel):
    model_config = ConfigDict(frozen=True)

    subject_hint: str
    required_keywords: List[str] = Field(default_factory=list)
    instruction: str = ""


class Scenario(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    counterpart_name: str
    kind: ScenarioKind = ScenarioKind.GENERIC
    checklist: List[ChecklistItem]
    hints: Dict[str, str] = Field(default_factory=dict)
    email_task: EmailTask

    # Optional first line for generic scenarios (otherwise a random opening is used).
    intro_text: Optional[str] = None

    # Reply used instead of the generic fallback when the user pushes back (no / not / can't).
    negation_reply: Optional[str] = None

    @model_validator(mode="after")
    def _check_ids(self):
        ids = [item.id for item in self.checklist]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Duplicate checklist ids in scenario '{self.id}'")
        unknown = set(self.hints) - set(ids)
        if unknown:
            raise ValueError(f"Hints reference unknown checklist ids: {sorted(unknown)}")
        return self

    def item(self, item_id: str) -> ChecklistItem:
        for item in self.checklist:
            if item.id == item_id:
                return item
        raise KeyError(item_id)
