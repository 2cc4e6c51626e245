# Role: Behaviour for the keyword-checklist scenarios. Each user turn ticks off every open objective whose
# trigger keywords appear in the utterance, then answers with the scenario's closing "answer" (all done),
# an acknowledgement + next hint (progress), the scenario's pushback reply, or a fallback + next hint.

from __future__ import annotations

import logging
import random
from typing import List, Optional

from trainer.core.scheduler import Pacing
from trainer.data.dialogues import ACKNOWLEDGEMENTS, ANSWERS, GENERIC_ERROR, OPENINGS
from trainer.models.scenario import Scenario
from trainer.models.state import Progress
from trainer.models.turn import Emission, TurnOutcome
from trainer.utils.keyword_rules import contains_any, has_negation, is_short_affirmation

log = logging.getLogger("trainer.checklist_matcher")

OBJECTIVES_DONE_BANNER = "Objective Complete. Wrap up the conversation."


class GenericBehavior:
    def __init__(self, scenario: Scenario, *, rng: random.Random, pacing: Pacing) -> None:
        self.scenario = scenario
        self.rng = rng
        self.pacing = pacing

    def sender(self, progress: Progress) -> str:
        return self.scenario.counterpart_name

    def start(self, progress: Progress) -> TurnOutcome:
        # 1) Reset objectives
        # 2) Opening line: the scenario's own intro if it has one, else a random bank variation
        s = self.scenario
        progress.completed = {item.id: False for item in s.checklist}
        progress.last_hinted_item = None
        progress.banner = f"Connected to {s.counterpart_name}. Cover every objective on the checklist."

        opening = s.intro_text or self.rng.choice(OPENINGS[s.id])
        return TurnOutcome(
            emissions=[
                Emission(
                    role="counterpart",
                    text=opening,
                    sender=self.sender(progress),
                    delay=self.pacing.opening,
                    enrichable=True,
                )
            ],
            suggestions=self._open_suggestions(progress),
        )

    def respond(self, progress: Progress, text: str) -> TurnOutcome:
        # 1) Keyword pass over every open item (several can complete in one turn)
        # 2) Short "yes/right" confirms the item we hinted at last
        # 3) Pick the reply: answer / acknowledgement / pushback override / fallback
        newly = self._match_keywords(progress, text)

        pending = progress.last_hinted_item
        if pending and not progress.completed.get(pending) and is_short_affirmation(text):
            progress.complete(pending)
            newly.append(pending)

        if newly:
            log.info("Scenario %s: completed %s", self.scenario.id, newly)

        suggestions = self._open_suggestions(progress)

        if progress.all_complete():
            answer = self.rng.choice(ANSWERS.get(self.scenario.id) or ACKNOWLEDGEMENTS)
            return TurnOutcome(
                emissions=[self._reply(progress, answer)],
                banner=OBJECTIVES_DONE_BANNER,
                suggestions=suggestions,
                finished=True,
            )

        next_id = progress.open_items()[0]
        hint = self._hint(next_id)
        progress.last_hinted_item = next_id

        if newly:
            reply = f"{self.rng.choice(ACKNOWLEDGEMENTS)} {hint}"
        elif self.scenario.negation_reply and has_negation(text):
            reply = self.scenario.negation_reply
        else:
            reply = f"{self.rng.choice(GENERIC_ERROR)} {hint}"

        return TurnOutcome(
            emissions=[self._reply(progress, reply)],
            banner=f"Hint: {hint}",
            suggestions=suggestions,
        )

    def _match_keywords(self, progress: Progress, text: str) -> List[str]:
        newly: List[str] = []
        for item in self.scenario.checklist:
            if progress.completed.get(item.id):
                continue
            if contains_any(text, item.keywords) and progress.complete(item.id):
                newly.append(item.id)
        return newly

    def _open_suggestions(self, progress: Progress) -> List[str]:
        return [self.scenario.item(item_id).suggestion for item_id in progress.open_items()]

    def _hint(self, item_id: str) -> str:
        hint: Optional[str] = self.scenario.hints.get(item_id)
        return hint or self.scenario.item(item_id).description

    def _reply(self, progress: Progress, text: str) -> Emission:
        return Emission(role="counterpart", text=text, sender=self.sender(progress), enrichable=True)
