# Role: Behaviour for "Parts Ordering (Advanced)". An explicit step machine:
#   IDENTIFY -> CLARIFY -> (success) CLOSING
#                       -> (stock empty) DELAY_REACTION -> AUTHORITY_BLOCK -> AUTHORITY_JUSTIFICATION -> CLOSING
# with early exits to CLOSING when the user accepts the delay. Unmatched input re-prompts and keeps the step.

from __future__ import annotations

import logging
import random
from typing import Dict, FrozenSet, List, Optional

from trainer.core.errors import ScriptTransitionError
from trainer.core.scheduler import Pacing
from trainer.data.parts_script import ESCALATION_OUTCOME_ID, PARTS_SCRIPT
from trainer.models.message import SYSTEM_SENDER
from trainer.models.scenario import Scenario
from trainer.models.script import PartsScript
from trainer.models.state import Actor, Progress, ScriptState, ScriptStep
from trainer.models.turn import Emission, TurnOutcome
from trainer.utils.keyword_rules import contains_any

log = logging.getLogger("trainer.parts_script_machine")

_TRANSITIONS: Dict[ScriptStep, FrozenSet[ScriptStep]] = {
    ScriptStep.IDENTIFY: frozenset({ScriptStep.CLARIFY}),
    ScriptStep.CLARIFY: frozenset({ScriptStep.DELAY_REACTION, ScriptStep.CLOSING}),
    ScriptStep.DELAY_REACTION: frozenset({ScriptStep.AUTHORITY_BLOCK, ScriptStep.CLOSING}),
    ScriptStep.AUTHORITY_BLOCK: frozenset({ScriptStep.AUTHORITY_JUSTIFICATION, ScriptStep.CLOSING}),
    ScriptStep.AUTHORITY_JUSTIFICATION: frozenset({ScriptStep.CLOSING}),
    ScriptStep.CLOSING: frozenset(),
}

OUTCOME_IDS = ("D1", "D2", "D3")

CONNECTING_NOTICE = "CONNECTING FLEET MANAGER..."
CLOSING_BANNER = "Objective Complete. Close the conversation professionally."
CLOSING_SUGGESTIONS = ["Thank you, noted.", "Thanks for the help.", "Understood, bye."]
FAREWELL = "You're welcome, Darek. Have a good day."

UNKNOWN_PART_REPLY = "I can't find that code. Please check the catalog (e.g., BYD-FB-2024)."
ACCEPTED_DELAY_REPLY = "Understood. 2 weeks it is. I'll process the order."
BACKED_DOWN_REPLY = (
    "Understood. The cost is high, so we will stick to the standard shipment (2 weeks). I've booked it."
)
NEED_DECISION_REPLY = "I need a decision. Wait 2 weeks or look for alternatives?"
NEED_CHOICE_REPLY = "Please be clear: Do we 'accept the delay' or should I 'ask Mr. Nowak'?"
WEAK_REASON_REPLY = (
    "That's not a good enough reason to spend +35%. Give me a business reason (e.g. Reputation)."
)


def check_transition(current: ScriptStep, target: ScriptStep) -> None:
    if target not in _TRANSITIONS[current]:
        raise ScriptTransitionError(f"No script transition {current.name} -> {target.name}")


class ScriptedBehavior:
    def __init__(
        self,
        scenario: Scenario,
        *,
        rng: random.Random,
        pacing: Pacing,
        script: PartsScript = PARTS_SCRIPT,
    ) -> None:
        self.scenario = scenario
        self.rng = rng
        self.pacing = pacing
        self.script = script

    def sender(self, progress: Progress) -> str:
        return self._state(progress).speaker.display_name

    def start(self, progress: Progress) -> TurnOutcome:
        # Key line: draw order is fixed (agent name, then opening context) so a seed replays the same intro.
        agent_name = self.rng.choice(self.script.agent_names)
        context = self.rng.choice(self.script.contexts)

        progress.completed = {item.id: False for item in self.scenario.checklist}
        progress.script = ScriptState(
            agent_name=agent_name,
            actors=[Actor(name=agent_name, label=self.script.agent_label)],
        )
        progress.banner = f"Connected to {agent_name} (BYD Logistics). Identify the correct part."

        return TurnOutcome(
            emissions=[
                Emission(
                    role="counterpart",
                    text=context.text,
                    sender=self.sender(progress),
                    delay=self.pacing.opening,
                )
            ],
            suggestions=[p.code for p in self.script.parts],
        )

    def respond(self, progress: Progress, text: str) -> TurnOutcome:
        state = self._state(progress)
        handler = {
            ScriptStep.IDENTIFY: self._identify,
            ScriptStep.CLARIFY: self._clarify,
            ScriptStep.DELAY_REACTION: self._delay_reaction,
            ScriptStep.AUTHORITY_BLOCK: self._authority_block,
            ScriptStep.AUTHORITY_JUSTIFICATION: self._authority_justification,
            ScriptStep.CLOSING: self._closing,
        }[state.step]
        before = state.step
        outcome = handler(progress, text.lower())
        if state.step != before:
            log.info("Parts script: %s -> %s", before.name, state.step.name)
        return outcome

    # ── Steps ─────────────────────────────────────────────────

    def _identify(self, progress: Progress, text: str) -> TurnOutcome:
        part = next((p for p in self.script.parts if p.code.lower() in text), None)
        if part is None:
            return self._say(progress, UNKNOWN_PART_REPLY)

        state = self._state(progress)
        curveball = self.rng.choice(self.script.curveballs)
        self._advance(state, ScriptStep.CLARIFY)
        state.active_curveball_id = curveball.id
        progress.complete("identify")
        return self._say(
            progress,
            curveball.text,
            banner=curveball.hint,
            suggestions=curveball.keywords[:3],
        )

    def _clarify(self, progress: Progress, text: str) -> TurnOutcome:
        state = self._state(progress)
        curveball = self.script.curveball(state.active_curveball_id)
        if not contains_any(text, curveball.keywords):
            return self._say(progress, f"Could you clarify that? {curveball.hint}")

        progress.complete("curveball")
        outcome_id = self.rng.choice(OUTCOME_IDS)
        outcome = self.script.outcomes[outcome_id]
        state.outcome_id = outcome_id

        if outcome_id == ESCALATION_OUTCOME_ID:
            self._advance(state, ScriptStep.DELAY_REACTION)
            return self._say(
                progress,
                outcome.text,
                banner="Stock is empty. Accept delay or negotiate?",
                suggestions=["Okay, 2 weeks is fine.", "I can't wait 2 weeks.", "Is there a faster way?"],
            )

        return self._close(progress, outcome.text)

    def _delay_reaction(self, progress: Progress, text: str) -> TurnOutcome:
        accepts = contains_any(text, self.script.accept_keywords)
        rejects = contains_any(text, self.script.reject_keywords)

        if accepts and not rejects:
            return self._close(progress, ACCEPTED_DELAY_REPLY)

        if rejects:
            self._advance(self._state(progress), ScriptStep.AUTHORITY_BLOCK)
            return self._say(
                progress,
                self.script.negotiation.offer_tradeoff,
                banner="Air Freight costs +35%. You need authorization.",
                suggestions=["Let's do Air Freight.", "Can we ask Mr. Nowak?", "Actually, I'll wait."],
            )

        return self._say(progress, NEED_DECISION_REPLY)

    def _authority_block(self, progress: Progress, text: str) -> TurnOutcome:
        # Order matters: backing down wins over escalation, escalation over self-approval.
        if contains_any(text, self.script.back_down_keywords):
            return self._close(progress, BACKED_DOWN_REPLY)

        if contains_any(text, self.script.escalate_keywords):
            return self._escalate(progress)

        if contains_any(text, self.script.self_authorize_keywords):
            return self._say(progress, self.script.negotiation.block_authority)

        return self._say(progress, NEED_CHOICE_REPLY)

    def _authority_justification(self, progress: Progress, text: str) -> TurnOutcome:
        if contains_any(text, self.script.valid_reason_keywords):
            return self._close(progress, self.script.negotiation.manager_approval)
        return self._say(progress, WEAK_REASON_REPLY)

    def _closing(self, progress: Progress, text: str) -> TurnOutcome:
        return TurnOutcome(
            emissions=[Emission(role="counterpart", text=FAREWELL, sender=self.sender(progress))],
            finished=True,
        )

    # ── Helpers ───────────────────────────────────────────────

    def _escalate(self, progress: Progress) -> TurnOutcome:
        state = self._state(progress)
        self._advance(state, ScriptStep.AUTHORITY_JUSTIFICATION)
        state.actors.append(Actor(name=self.script.manager_name, label=self.script.manager_label))
        return TurnOutcome(
            emissions=[
                Emission(role="system", text=CONNECTING_NOTICE, sender=SYSTEM_SENDER),
                Emission(
                    role="counterpart",
                    text=self.script.negotiation.manager_intro,
                    sender=self.sender(progress),
                    delay=self.pacing.connect,
                ),
            ],
            banner=f"Justify the cost to {self.script.manager_name}.",
            suggestions=["The customer is furious.", "It protects our reputation."],
        )

    def _close(self, progress: Progress, text: str) -> TurnOutcome:
        self._advance(self._state(progress), ScriptStep.CLOSING)
        progress.complete("negotiate")
        return self._say(progress, text, banner=CLOSING_BANNER, suggestions=list(CLOSING_SUGGESTIONS))

    def _say(
        self,
        progress: Progress,
        text: str,
        *,
        banner: Optional[str] = None,
        suggestions: Optional[List[str]] = None,
    ) -> TurnOutcome:
        return TurnOutcome(
            emissions=[Emission(role="counterpart", text=text, sender=self.sender(progress))],
            banner=banner,
            suggestions=suggestions,
        )

    def _advance(self, state: ScriptState, target: ScriptStep) -> None:
        check_transition(state.step, target)
        state.step = target

    @staticmethod
    def _state(progress: Progress) -> ScriptState:
        if progress.script is None:
            raise ScriptTransitionError("Parts script used before start()")
        return progress.script
