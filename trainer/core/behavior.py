# Role: Picks how a scenario is played. Chosen once when a playthrough starts, from the scenario's kind:
# keyword-checklist matching for generic scenarios, the parts step machine for the scripted one.

from __future__ import annotations

import random
from typing import Union

from trainer.core.checklist_matcher import GenericBehavior
from trainer.core.parts_script_machine import ScriptedBehavior
from trainer.core.scheduler import Pacing
from trainer.models.scenario import Scenario, ScenarioKind

ScenarioBehavior = Union[GenericBehavior, ScriptedBehavior]


def behavior_for(scenario: Scenario, *, rng: random.Random, pacing: Pacing) -> ScenarioBehavior:
    if scenario.kind == ScenarioKind.SCRIPTED:
        return ScriptedBehavior(scenario, rng=rng, pacing=pacing)
    return GenericBehavior(scenario, rng=rng, pacing=pacing)
