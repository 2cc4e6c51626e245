"""Tests for ScriptedBehavior: the parts-ordering step machine."""

import random

import pytest

from conftest import PinnedRandom
from trainer.core.errors import ScriptTransitionError
from trainer.core.parts_script_machine import (
    ACCEPTED_DELAY_REPLY,
    BACKED_DOWN_REPLY,
    CLOSING_BANNER,
    CONNECTING_NOTICE,
    FAREWELL,
    NEED_CHOICE_REPLY,
    NEED_DECISION_REPLY,
    UNKNOWN_PART_REPLY,
    WEAK_REASON_REPLY,
    ScriptedBehavior,
    check_transition,
)
from trainer.core.scheduler import Pacing
from trainer.data.parts_script import PARTS_SCRIPT
from trainer.data.scenarios import PARTS_ORDERING_ADVANCED_ID, get_scenario
from trainer.models.state import Progress, ScriptStep


def start(rng):
    scenario = get_scenario(PARTS_ORDERING_ADVANCED_ID)
    behavior = ScriptedBehavior(scenario, rng=rng, pacing=Pacing())
    progress = Progress(scenario=scenario)
    opening = behavior.start(progress)
    return behavior, progress, opening


def at_delay_reaction():
    rng = PinnedRandom(PARTS_SCRIPT.curveball("C3"), "D2")
    behavior, progress, _ = start(rng)
    behavior.respond(progress, "I need BYD-FB-2024")
    behavior.respond(progress, "Praga shop please")
    assert progress.script.step == ScriptStep.DELAY_REACTION
    return behavior, progress


def at_authority_block():
    behavior, progress = at_delay_reaction()
    behavior.respond(progress, "That is too long, it's urgent")
    assert progress.script.step == ScriptStep.AUTHORITY_BLOCK
    return behavior, progress


class TestStart:
    def test_opening_is_a_context_from_the_agent(self):
        _, progress, opening = start(random.Random(1))
        assert progress.script.step == ScriptStep.IDENTIFY
        assert progress.script.agent_name in PARTS_SCRIPT.agent_names
        assert opening.emissions[0].text in [c.text for c in PARTS_SCRIPT.contexts]
        assert opening.emissions[0].sender == f"{progress.script.agent_name} (BYD Support)"
        assert opening.suggestions == [p.code for p in PARTS_SCRIPT.parts]

    def test_same_seed_same_intro(self):
        _, p1, o1 = start(random.Random(7))
        _, p2, o2 = start(random.Random(7))
        assert p1.script.agent_name == p2.script.agent_name
        assert o1.emissions[0].text == o2.emissions[0].text


class TestIdentify:
    def test_known_code_moves_to_clarify(self):
        behavior, progress, _ = start(random.Random(3))
        outcome = behavior.respond(progress, "Please check byd-fb-2024 for me")
        assert progress.script.step == ScriptStep.CLARIFY
        assert progress.script.active_curveball_id in {"C1", "C2", "C3"}
        assert progress.completed["identify"] is True
        curveball = PARTS_SCRIPT.curveball(progress.script.active_curveball_id)
        assert outcome.emissions[0].text == curveball.text
        assert outcome.banner == curveball.hint

    def test_same_seed_same_curveball(self):
        picks = set()
        for _ in range(3):
            behavior, progress, _ = start(random.Random(11))
            behavior.respond(progress, "BYD-FB-2024")
            picks.add(progress.script.active_curveball_id)
        assert len(picks) == 1

    def test_unknown_code_stays(self):
        behavior, progress, _ = start(random.Random(0))
        outcome = behavior.respond(progress, "BYD-XX-0000")
        assert progress.script.step == ScriptStep.IDENTIFY
        assert outcome.emissions[0].text == UNKNOWN_PART_REPLY


class TestClarify:
    def test_unrelated_answer_reprompts(self):
        rng = PinnedRandom(PARTS_SCRIPT.curveball("C3"))
        behavior, progress, _ = start(rng)
        behavior.respond(progress, "BYD-FB-2024")
        outcome = behavior.respond(progress, "hmm")
        assert progress.script.step == ScriptStep.CLARIFY
        assert outcome.emissions[0].text == "Could you clarify that? Choose a location."

    @pytest.mark.parametrize("outcome_id", ["D1", "D3"])
    def test_success_outcome_closes(self, outcome_id):
        rng = PinnedRandom(PARTS_SCRIPT.curveball("C1"), outcome_id)
        behavior, progress, _ = start(rng)
        behavior.respond(progress, "BYD-FB-2024")
        outcome = behavior.respond(progress, "Yes, two units")
        assert progress.script.step == ScriptStep.CLOSING
        assert progress.all_complete()
        assert outcome.emissions[0].text == PARTS_SCRIPT.outcomes[outcome_id].text
        assert outcome.banner == CLOSING_BANNER

    def test_stock_empty_moves_to_delay_reaction(self):
        behavior, progress = at_delay_reaction()
        assert progress.script.outcome_id == "D2"
        assert progress.completed["negotiate"] is False


class TestDelayReaction:
    def test_accepting_closes(self):
        behavior, progress = at_delay_reaction()
        outcome = behavior.respond(progress, "Okay, 2 weeks is fine.")
        assert progress.script.step == ScriptStep.CLOSING
        assert outcome.emissions[0].text == ACCEPTED_DELAY_REPLY

    def test_rejecting_offers_air_freight(self):
        behavior, progress = at_delay_reaction()
        outcome = behavior.respond(progress, "That is too long, it's urgent")
        assert progress.script.step == ScriptStep.AUTHORITY_BLOCK
        assert outcome.emissions[0].text == PARTS_SCRIPT.negotiation.offer_tradeoff

    def test_undecided_reprompts(self):
        behavior, progress = at_delay_reaction()
        outcome = behavior.respond(progress, "hmm")
        assert progress.script.step == ScriptStep.DELAY_REACTION
        assert outcome.emissions[0].text == NEED_DECISION_REPLY


class TestAuthorityBlock:
    def test_backing_down_closes(self):
        behavior, progress = at_authority_block()
        outcome = behavior.respond(progress, "Actually, I'll wait.")
        assert progress.script.step == ScriptStep.CLOSING
        assert outcome.emissions[0].text == BACKED_DOWN_REPLY

    def test_self_approval_is_blocked(self):
        behavior, progress = at_authority_block()
        outcome = behavior.respond(progress, "Let's do Air Freight.")
        assert progress.script.step == ScriptStep.AUTHORITY_BLOCK
        assert outcome.emissions[0].text == PARTS_SCRIPT.negotiation.block_authority

    def test_unclear_reprompts(self):
        behavior, progress = at_authority_block()
        outcome = behavior.respond(progress, "hmm")
        assert outcome.emissions[0].text == NEED_CHOICE_REPLY

    def test_escalation_brings_in_fleet_manager(self):
        behavior, progress = at_authority_block()
        outcome = behavior.respond(progress, "Can we ask Mr. Nowak?")
        assert progress.script.step == ScriptStep.AUTHORITY_JUSTIFICATION
        notice, intro = outcome.emissions
        assert (notice.role, notice.text) == ("system", CONNECTING_NOTICE)
        assert intro.text == PARTS_SCRIPT.negotiation.manager_intro
        assert intro.sender == "Mr. Nowak (Fleet Mgr)"
        assert behavior.sender(progress) == "Mr. Nowak (Fleet Mgr)"


class TestAuthorityJustification:
    def _escalated(self):
        behavior, progress = at_authority_block()
        behavior.respond(progress, "Can we ask Mr. Nowak?")
        return behavior, progress

    def test_weak_reason(self):
        behavior, progress = self._escalated()
        outcome = behavior.respond(progress, "Because I said so.")
        assert progress.script.step == ScriptStep.AUTHORITY_JUSTIFICATION
        assert outcome.emissions[0].text == WEAK_REASON_REPLY

    def test_business_reason_gets_approval(self):
        behavior, progress = self._escalated()
        outcome = behavior.respond(progress, "The customer is angry")
        assert progress.script.step == ScriptStep.CLOSING
        assert outcome.emissions[0].text == PARTS_SCRIPT.negotiation.manager_approval
        assert outcome.emissions[0].sender == "Mr. Nowak (Fleet Mgr)"
        assert progress.all_complete()

    def test_closing_remark_finishes(self):
        behavior, progress = self._escalated()
        behavior.respond(progress, "The customer is angry")
        outcome = behavior.respond(progress, "Thank you, noted.")
        assert outcome.finished is True
        assert outcome.emissions[0].text == FAREWELL


class TestTransitions:
    def test_illegal_jump_raises(self):
        with pytest.raises(ScriptTransitionError):
            check_transition(ScriptStep.IDENTIFY, ScriptStep.CLOSING)

    def test_closing_is_terminal(self):
        with pytest.raises(ScriptTransitionError):
            check_transition(ScriptStep.CLOSING, ScriptStep.IDENTIFY)
