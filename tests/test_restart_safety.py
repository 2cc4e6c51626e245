"""A restart must never let a reply from the previous playthrough reach the new one."""

import asyncio

import pytest

from conftest import FakeEnricher, make_engine
from trainer.data.dialogues import OPENINGS
from trainer.data.scenarios import get_scenario


class StubbornEnricher(FakeEnricher):
    """Swallows cancellation, like a blocking client call that cannot be interrupted."""

    def __init__(self, release):
        super().__init__(release)
        self.cancelled = 0

    async def generate_reply(self, persona, task_instruction, last_user_text, fallback_text):
        self.calls.append(fallback_text)
        while not self.release.is_set():
            try:
                await self.release.wait()
            except asyncio.CancelledError:
                self.cancelled += 1
        return f"[enriched] {fallback_text}"


async def until(predicate, rounds=50):
    for _ in range(rounds):
        if predicate():
            return
        await asyncio.sleep(0)
    raise AssertionError("condition never became true")


class TestRestartSafety:
    @pytest.mark.asyncio
    async def test_cancelled_opening_never_appears(self):
        release = asyncio.Event()
        enricher = FakeEnricher(release)
        engine = make_engine(enricher=enricher)

        await engine.start_new_scenario("parts_delivery")
        await until(lambda: len(enricher.calls) == 1)

        await engine.start_new_scenario("invoice_check")
        release.set()
        await engine.wait_idle()

        texts = [m.text for m in engine.messages]
        assert texts == [f"[enriched] {get_scenario('invoice_check').intro_text}"]

    @pytest.mark.asyncio
    async def test_stale_reply_finishing_late_is_discarded(self):
        release = asyncio.Event()
        enricher = StubbornEnricher(release)
        engine = make_engine(enricher=enricher)

        await engine.start_new_scenario("parts_delivery")
        await until(lambda: len(enricher.calls) == 1)
        old_opening = enricher.calls[0]
        assert old_opening in OPENINGS["parts_delivery"]

        await engine.start_new_scenario("invoice_check")
        await until(lambda: enricher.cancelled == 1)
        release.set()
        await engine.wait_idle()
        # Let the stale task run to its end.
        for _ in range(5):
            await asyncio.sleep(0)

        texts = [m.text for m in engine.messages]
        assert all(old_opening not in t for t in texts)
        assert len(texts) == 1
        assert engine.is_composing is False

    @pytest.mark.asyncio
    async def test_stale_chat_reply_is_discarded(self):
        release = asyncio.Event()
        enricher = StubbornEnricher(release)
        engine = make_engine(enricher=enricher)

        await engine.start_new_scenario("repair_timeline")
        release.set()
        await engine.wait_idle()

        release.clear()
        await engine.submit_user_text("The part is in China.")
        await until(lambda: len(enricher.calls) == 2)

        await engine.start_new_scenario("invoice_check")
        release.set()
        await engine.wait_idle()
        for _ in range(5):
            await asyncio.sleep(0)

        assert engine.progress.scenario.id == "invoice_check"
        assert all(m.role == "counterpart" for m in engine.messages)
        assert len(engine.messages) == 1
