# Role: Orchestrator for one playthrough. Owns the phase machine (CHAT -> TRANSITION -> EMAIL -> COMPLETE),
# feeds user text to the scenario behaviour, paces the counterpart's replies through the scheduler,
# optionally rephrases them, and grades the final email.

from __future__ import annotations

import logging
import random
from typing import Any, Dict, List, Optional, Sequence

import trainer.config as config
from trainer.core.behavior import ScenarioBehavior, behavior_for
from trainer.core.email_validator import EmailValidator
from trainer.core.errors import PhaseError
from trainer.core.scheduler import Pacing, ReplyScheduler
from trainer.data.dialogues import GENERIC_CLOSER
from trainer.data.scenarios import SCENARIOS
from trainer.llm.reply_enricher import ReplyEnricher
from trainer.models.feedback import EmailFeedback
from trainer.models.message import SYSTEM_SENDER, Message
from trainer.models.scenario import Scenario
from trainer.models.state import PHASE_ORDER, Phase, Progress
from trainer.models.turn import Emission, TurnOutcome
from trainer.prompts.persona_prompt import build_persona, build_rephrase_task

log = logging.getLogger("trainer.scenario_engine")

USER_SENDER = "You (Darek)"

TRANSITION_BANNER = "Step 3: Send a formal follow-up email to close the ticket."
TRANSITION_SUGGESTIONS = ["Thank you. I will send the confirmation email now."]
COMPLETE_BANNER = "SCENARIO COMPLETE! Start a new scenario to play again."

_ACTIVE_PHASES = (Phase.CHAT, Phase.TRANSITION)


class ScenarioEngine:
    def __init__(
        self,
        *,
        rng: Optional[random.Random] = None,
        enricher: Optional[ReplyEnricher] = None,
        pacing: Optional[Pacing] = None,
        scenarios: Optional[Sequence[Scenario]] = None,
        validator: Optional[EmailValidator] = None,
        scheduler: Optional[ReplyScheduler] = None,
    ) -> None:
        # Key line: randomness and the enrichment call are injectable so tests can pin every branch.
        self.rng = rng or random.Random()
        self.enricher = enricher
        self.pacing = pacing or Pacing.from_config()
        self.scenarios: List[Scenario] = list(scenarios or SCENARIOS)
        self.validator = validator or EmailValidator()
        self.scheduler = scheduler or ReplyScheduler()

        self._progress: Optional[Progress] = None
        self._behavior: Optional[ScenarioBehavior] = None
        self._busy = False

    # ── Observable state ──────────────────────────────────────

    @property
    def started(self) -> bool:
        return self._progress is not None

    @property
    def progress(self) -> Progress:
        if self._progress is None:
            raise PhaseError("No scenario started yet")
        return self._progress

    @property
    def phase(self) -> Phase:
        return self.progress.phase

    @property
    def messages(self) -> List[Message]:
        return list(self.progress.messages)

    @property
    def completed(self) -> Dict[str, bool]:
        return dict(self.progress.completed)

    @property
    def suggestions(self) -> List[str]:
        return list(self.progress.suggestions)

    @property
    def banner(self) -> str:
        return self.progress.banner

    @property
    def is_composing(self) -> bool:
        return self.progress.composing

    @property
    def busy(self) -> bool:
        return self._busy

    def snapshot(self) -> Dict[str, Any]:
        p = self.progress
        script = p.script
        return {
            "scenario_id": p.scenario.id,
            "scenario_name": p.scenario.name,
            "counterpart_name": p.scenario.counterpart_name,
            "phase": p.phase.value,
            "checklist": [
                {"id": item.id, "description": item.description, "completed": bool(p.completed.get(item.id))}
                for item in p.scenario.checklist
            ],
            "messages": [m.model_dump() for m in p.messages],
            "suggestions": list(p.suggestions),
            "banner": p.banner,
            "composing": p.composing,
            "email_task": p.scenario.email_task.model_dump(),
            "script_step": script.step.name if script else None,
        }

    # ── Commands ──────────────────────────────────────────────

    async def start_new_scenario(self, scenario_id: Optional[str] = None) -> Progress:
        # 1) Pick a scenario (uniform, or the requested id) and its behaviour
        # 2) Invalidate everything in flight for the previous playthrough
        # 3) Schedule the opening line
        scenario = self._pick_scenario(scenario_id)
        epoch = self.scheduler.reset()
        self._busy = False

        behavior = behavior_for(scenario, rng=self.rng, pacing=self.pacing)
        progress = Progress(scenario=scenario)

        self._progress = progress
        self._behavior = behavior

        opening = behavior.start(progress)
        log.info("Started scenario %s (epoch=%d)", scenario.id, epoch)

        self._begin_turn(progress)
        self.scheduler.schedule(lambda e: self._play(e, progress, opening, last_user_text=""))
        return progress

    async def submit_user_text(self, text: str) -> bool:
        # Returns True when the text was accepted for processing.
        progress = self.progress
        text = (text or "").strip()

        if progress.phase not in _ACTIVE_PHASES:
            log.info("Ignoring chat input in phase %s", progress.phase.value)
            return False
        if not text:
            return False
        if self._busy:
            # Key line: one outstanding reply at a time; nothing else mutates the log meanwhile.
            log.info("Ignoring chat input while a reply is in flight")
            return False

        progress.messages.append(Message(role="user", text=text, sender=USER_SENDER))
        self._begin_turn(progress)

        if progress.phase == Phase.CHAT:
            self.scheduler.schedule(lambda e: self._chat_turn(e, progress, text), delay=self.pacing.reply)
        else:
            self.scheduler.schedule(lambda e: self._transition_turn(e, progress, text), delay=self.pacing.reply)
        return True

    async def proceed(self) -> bool:
        """Explicit TRANSITION -> EMAIL signal (no user text needed)."""
        progress = self.progress
        if progress.phase != Phase.TRANSITION or self._busy:
            return False
        self._begin_turn(progress)
        self.scheduler.schedule(lambda e: self._transition_turn(e, progress, ""))
        return True

    def submit_email(self, subject: str, body: str) -> EmailFeedback:
        progress = self.progress
        if progress.phase not in (Phase.EMAIL, Phase.COMPLETE):
            raise PhaseError(f"Email submitted in phase {progress.phase.value}")

        feedback = self.validator.validate(subject, body, progress.scenario.email_task)
        log.info("Email graded: valid=%s errors=%d", feedback.is_valid, len(feedback.errors))

        # Re-grading after COMPLETE is allowed but never moves the phase again.
        if feedback.is_valid and progress.phase == Phase.EMAIL:
            self._advance_phase(progress, Phase.COMPLETE)
            progress.banner = COMPLETE_BANNER
            progress.suggestions = []
        return feedback

    async def wait_idle(self) -> None:
        await self.scheduler.wait_idle()

    # ── Turns ─────────────────────────────────────────────────

    async def _chat_turn(self, epoch: int, progress: Progress, text: str) -> None:
        outcome = self._behavior.respond(progress, text)
        if config.DEBUG:
            self._debug_dump(progress, text, outcome)
        next_phase = Phase.TRANSITION if outcome.finished else None
        await self._play(epoch, progress, outcome, last_user_text=text, next_phase=next_phase)

    async def _transition_turn(self, epoch: int, progress: Progress, text: str) -> None:
        closer = Emission(
            role="counterpart",
            text=self.rng.choice(GENERIC_CLOSER),
            sender=SYSTEM_SENDER,
        )
        await self._play(epoch, progress, TurnOutcome(emissions=[closer]), last_user_text=text, next_phase=Phase.EMAIL)

    async def _play(
        self,
        epoch: int,
        progress: Progress,
        outcome: TurnOutcome,
        *,
        last_user_text: str,
        next_phase: Optional[Phase] = None,
    ) -> None:
        # 1) Emit each line after its delay (optionally rephrased)
        # 2) Apply banner/suggestion updates
        # 3) Move phase after the closing pause, if the turn finished the stage
        # Every await is followed by an epoch check: a restart makes the rest of this turn a no-op.
        try:
            for emission in outcome.emissions:
                if not await self.scheduler.sleep(epoch, emission.delay):
                    return
                text = await self._render(epoch, progress, emission, last_user_text)
                if not self.scheduler.is_current(epoch):
                    return
                progress.messages.append(Message(role=emission.role, text=text, sender=emission.sender))

            if outcome.banner is not None:
                progress.banner = outcome.banner
            if outcome.suggestions is not None:
                progress.suggestions = list(outcome.suggestions)

            if next_phase is not None:
                if not await self.scheduler.sleep(epoch, self.pacing.closing):
                    return
                self._enter_phase(progress, next_phase)
        finally:
            if self.scheduler.is_current(epoch):
                self._end_turn(progress)

    async def _render(self, epoch: int, progress: Progress, emission: Emission, last_user_text: str) -> str:
        if not emission.enrichable or self.enricher is None:
            return emission.text

        return await self.enricher.generate_reply(
            persona=build_persona(progress.scenario, emission.sender or progress.scenario.counterpart_name),
            task_instruction=build_rephrase_task(emission.text),
            last_user_text=last_user_text,
            fallback_text=emission.text,
        )

    # ── Phase machine ─────────────────────────────────────────

    def _enter_phase(self, progress: Progress, target: Phase) -> None:
        self._advance_phase(progress, target)
        if target == Phase.TRANSITION:
            progress.banner = TRANSITION_BANNER
            progress.suggestions = list(TRANSITION_SUGGESTIONS)
        elif target == Phase.EMAIL:
            progress.banner = progress.scenario.email_task.instruction
            progress.suggestions = []

    @staticmethod
    def _advance_phase(progress: Progress, target: Phase) -> None:
        current = PHASE_ORDER.index(progress.phase)
        if PHASE_ORDER.index(target) != current + 1:
            raise PhaseError(f"Illegal phase change {progress.phase.value} -> {target.value}")
        log.info("Phase %s -> %s", progress.phase.value, target.value)
        progress.phase = target

    # ── Helpers ───────────────────────────────────────────────

    def _pick_scenario(self, scenario_id: Optional[str]) -> Scenario:
        if scenario_id is None:
            return self.rng.choice(self.scenarios)
        for scenario in self.scenarios:
            if scenario.id == scenario_id:
                return scenario
        raise KeyError(f"Unknown scenario id: {scenario_id}")

    def _begin_turn(self, progress: Progress) -> None:
        self._busy = True
        progress.composing = True

    def _end_turn(self, progress: Progress) -> None:
        self._busy = False
        progress.composing = False

    def _debug_dump(self, progress: Progress, text: str, outcome: TurnOutcome) -> None:
        log.debug("--- TURN DEBUG ---")
        log.debug("SCENARIO: %s", progress.scenario.id)
        log.debug("USER: %s", text)
        log.debug("PHASE: %s", progress.phase.value)
        log.debug("COMPLETED: %s", progress.completed)
        if progress.script is not None:
            log.debug("SCRIPT STEP: %s", progress.script.step.name)
            log.debug("CURVEBALL: %s OUTCOME: %s", progress.script.active_curveball_id, progress.script.outcome_id)
        log.debug("REPLIES: %s", [e.text for e in outcome.emissions])
        log.debug("FINISHED: %s", outcome.finished)
