# Role: Shared singletons for the HTTP layer. One engine per process: the trainer is single-user by design,
# so every request talks to the same in-memory playthrough.

from __future__ import annotations

from typing import Optional

import trainer.config as config
from trainer.core.scenario_engine import ScenarioEngine
from trainer.llm.reply_enricher import ReplyEnricher


def build_engine() -> ScenarioEngine:
    # Key line: enrichment is opt-in; without it every reply is the canned text.
    enricher: Optional[ReplyEnricher] = ReplyEnricher() if config.ENRICH_REPLIES else None
    return ScenarioEngine(enricher=enricher)


engine = build_engine()


async def get_engine() -> ScenarioEngine:
    # Lazily open the first playthrough so GET /state always has something to show.
    if not engine.started:
        await engine.start_new_scenario()
    return engine
