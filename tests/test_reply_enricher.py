"""Tests for ReplyEnricher: every failure falls back to the canned text verbatim."""

import threading

import pytest

from trainer.llm import gemini_client
from trainer.llm.reply_enricher import ReplyEnricher

CANNED = "Got it. Ask when it arrives."


class FakeClient:
    def __init__(self, reply=None, error=None, block=None):
        self.reply = reply
        self.error = error
        self.block = block
        self.prompts = []

    def generate_text(self, prompt):
        self.prompts.append(prompt)
        if self.block is not None:
            self.block.wait(timeout=2)
        if self.error is not None:
            raise self.error
        return self.reply


async def enrich(enricher, last_user_text="I need BYD-FB-2024"):
    return await enricher.generate_reply(
        persona="You are BYD Parts Dept.",
        task_instruction=f"Rephrase: {CANNED}",
        last_user_text=last_user_text,
        fallback_text=CANNED,
    )


class TestReplyEnricher:
    @pytest.mark.asyncio
    async def test_returns_model_text(self):
        client = FakeClient(reply="Noted! When do you need it to arrive?")
        assert await enrich(ReplyEnricher(client=client)) == "Noted! When do you need it to arrive?"

    @pytest.mark.asyncio
    async def test_strips_wrapping_quotes(self):
        client = FakeClient(reply='"Sure, noted."')
        assert await enrich(ReplyEnricher(client=client)) == "Sure, noted."

    @pytest.mark.asyncio
    async def test_client_error_falls_back(self):
        client = FakeClient(error=RuntimeError("Gemini API call failed: 503"))
        assert await enrich(ReplyEnricher(client=client)) == CANNED

    @pytest.mark.asyncio
    async def test_empty_output_falls_back(self):
        client = FakeClient(reply="  ")
        assert await enrich(ReplyEnricher(client=client)) == CANNED

    @pytest.mark.asyncio
    async def test_timeout_falls_back(self):
        block = threading.Event()
        client = FakeClient(reply="too late", block=block)
        try:
            assert await enrich(ReplyEnricher(client=client, timeout=0.05)) == CANNED
        finally:
            block.set()

    @pytest.mark.asyncio
    async def test_missing_api_key_falls_back(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        assert await enrich(ReplyEnricher()) == CANNED

    @pytest.mark.asyncio
    async def test_prompt_carries_user_text_and_draft(self):
        client = FakeClient(reply="ok")
        await enrich(ReplyEnricher(client=client))
        prompt = client.prompts[0]
        assert 'User (Darek) said: "I need BYD-FB-2024"' in prompt
        assert CANNED in prompt

    @pytest.mark.asyncio
    async def test_conversation_start_marker(self):
        client = FakeClient(reply="ok")
        await enrich(ReplyEnricher(client=client), last_user_text="")
        assert "(Conversation Start)" in client.prompts[0]


class RecordingGenaiClient:
    def __init__(self, **kwargs):
        self.kwargs = kwargs


class TestRequestTimeout:
    def test_gemini_client_bounds_the_http_request(self, monkeypatch):
        monkeypatch.setattr(gemini_client.genai, "Client", RecordingGenaiClient)
        client = gemini_client.GeminiClient(api_key="test-key", timeout=2.5)
        assert client.client.kwargs["http_options"].timeout == 2500

    def test_no_timeout_leaves_http_options_unset(self, monkeypatch):
        monkeypatch.setattr(gemini_client.genai, "Client", RecordingGenaiClient)
        client = gemini_client.GeminiClient(api_key="test-key")
        assert client.client.kwargs["http_options"] is None

    def test_enricher_passes_its_timeout_to_the_client(self, monkeypatch):
        monkeypatch.setattr(gemini_client.genai, "Client", RecordingGenaiClient)
        monkeypatch.setenv("GEMINI_API_KEY", "test-key")
        enricher = ReplyEnricher(timeout=3)
        client = enricher._get_client()
        assert client.timeout == 3
        assert client.client.kwargs["http_options"].timeout == 3000
