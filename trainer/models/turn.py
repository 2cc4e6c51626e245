# Role: Small typed contract between a scenario behaviour and the engine. A behaviour decides WHAT to say;
# the engine decides WHEN (pacing, enrichment, epoch checks) and applies the banner/suggestion updates.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from trainer.models.message import Role


@dataclass(frozen=True)
class Emission:
    role: Role
    text: str
    sender: Optional[str] = None
    # Seconds to wait before this line appears (typing latency).
    delay: float = 0.0
    # Only enrichable lines are offered to the rephrasing call.
    enrichable: bool = False


@dataclass(frozen=True)
class TurnOutcome:
    emissions: List[Emission] = field(default_factory=list)
    banner: Optional[str] = None
    suggestions: Optional[List[str]] = None
    # True when the chat objectives are done and the playthrough moves to TRANSITION.
    finished: bool = False
