# Role: Optional enrichment of canned counterpart replies. One bounded Gemini call per reply; on ANY failure
# (missing key, network, timeout, empty output) the canned fallback text is returned verbatim.

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import trainer.config as config
from trainer.llm.gemini_client import GeminiClient
from trainer.prompts.persona_prompt import build_reply_prompt
from trainer.prompts.system_prompt import build_system_prompt

log = logging.getLogger("trainer.reply_enricher")


class ReplyEnricher:
    def __init__(self, client: Optional[GeminiClient] = None, timeout: Optional[float] = None) -> None:
        # Key line: lazy-init avoids crashing if GEMINI_API_KEY is missing (fallback text still works).
        self._client = client
        self.timeout = timeout if timeout is not None else config.ENRICH_TIMEOUT_SECONDS

    def _get_client(self) -> GeminiClient:
        if self._client is None:
            # The request timeout bounds the network call; wait_for below is only a backstop.
            self._client = GeminiClient(timeout=self.timeout)
        return self._client

    async def generate_reply(
        self,
        persona: str,
        task_instruction: str,
        last_user_text: str,
        fallback_text: str,
    ) -> str:
        # 1) Build prompt
        # 2) Single call in a worker thread, bounded by timeout
        # 3) Any failure -> fallback_text
        prompt = build_reply_prompt(
            system_prompt=build_system_prompt(),
            persona=persona,
            task_instruction=task_instruction,
            last_user_text=last_user_text,
        )

        try:
            client = self._get_client()
            text = await asyncio.wait_for(asyncio.to_thread(client.generate_text, prompt), timeout=self.timeout)
        except asyncio.TimeoutError:
            log.warning("Reply enrichment timed out after %.1fs; using canned reply", self.timeout)
            return fallback_text
        except Exception as e:
            log.warning("Reply enrichment failed (%s); using canned reply", e)
            return fallback_text

        text = _clean(text)
        if not text:
            log.warning("Reply enrichment returned nothing usable; using canned reply")
            return fallback_text

        if config.DEBUG:
            log.debug("ENRICHED: %r -> %r", fallback_text, text)
        return text


def _clean(text: Optional[str]) -> str:
    # Models sometimes wrap the line in quotes despite the instruction.
    cleaned = (text or "").strip()
    if len(cleaned) >= 2 and cleaned[0] == cleaned[-1] and cleaned[0] in {'"', "'"}:
        cleaned = cleaned[1:-1].strip()
    return cleaned
