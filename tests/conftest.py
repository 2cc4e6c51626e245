import asyncio
import random
from typing import List, Optional

import pytest

from trainer.core.scenario_engine import ScenarioEngine
from trainer.core.scheduler import Pacing


class PinnedRandom(random.Random):
    """random.Random whose choice() returns a pinned value whenever it is one of the options."""

    def __init__(self, *pinned, seed: int = 0):
        super().__init__(seed)
        self.pinned = pinned

    def choice(self, seq):
        for value in self.pinned:
            if value in seq:
                return value
        return super().choice(seq)


class FakeEnricher:
    """Stand-in for ReplyEnricher: records calls and tags the text it returns."""

    def __init__(self, release: Optional[asyncio.Event] = None):
        self.release = release
        self.calls: List[str] = []

    async def generate_reply(self, persona, task_instruction, last_user_text, fallback_text):
        self.calls.append(fallback_text)
        if self.release is not None:
            await self.release.wait()
        return f"[enriched] {fallback_text}"


def make_engine(rng=None, enricher=None, **kwargs) -> ScenarioEngine:
    return ScenarioEngine(
        rng=rng if rng is not None else random.Random(0),
        enricher=enricher,
        pacing=Pacing(),
        **kwargs,
    )


@pytest.fixture
def engine_factory():
    return make_engine
