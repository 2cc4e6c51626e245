# Role: Thin Gemini wrapper used by the reply enricher. One method, generate_text(prompt), one attempt,
# with the HTTP round trip itself bounded by a request timeout so a slow call never outlives its caller.

import os
from typing import Optional

from google import genai
from google.genai import types

DEFAULT_MODEL = "gemini-2.0-flash"


class GeminiClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: float = 0.7,
        timeout: Optional[float] = None,
    ) -> None:
        api_key = api_key or os.getenv("GEMINI_API_KEY")
        if not api_key:
            raise RuntimeError("Missing GEMINI_API_KEY in environment or .env")

        self.model_name = model or os.getenv("GEMINI_MODEL", DEFAULT_MODEL)
        # Rephrasing wants some variety.
        self.temperature = temperature
        self.timeout = timeout

        # Key line: google-genai takes the request timeout in milliseconds.
        http_options = types.HttpOptions(timeout=int(timeout * 1000)) if timeout else None
        self.client = genai.Client(api_key=api_key, http_options=http_options)

    def generate_text(self, prompt: str) -> str:
        if not prompt or not prompt.strip():
            raise ValueError("Prompt must be non-empty.")

        try:
            resp = self.client.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=types.GenerateContentConfig(temperature=self.temperature),
            )
        except Exception as e:
            raise RuntimeError(f"Gemini request failed: {e}") from e

        text = (getattr(resp, "text", None) or "").strip()
        if not text:
            raise RuntimeError("Gemini returned no text.")
        return text
