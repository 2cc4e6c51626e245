# Role: Central configuration module. Loads .env into environment variables and computes runtime flags
# (DEBUG, reply pacing, enrichment). Importers read trainer.config.<FLAG> instead of threading flags through calls.

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

DEBUG: bool = False
ENRICH_REPLIES: bool = False

# Typing-latency pacing (seconds). Purely cosmetic; tests run with zero.
OPENING_DELAY_SECONDS: float = 0.5
REPLY_DELAY_SECONDS: float = 0.8
CONNECT_DELAY_SECONDS: float = 1.0
CLOSING_DELAY_SECONDS: float = 1.0

ENRICH_TIMEOUT_SECONDS: float = 10.0

_TRUTHY = {"1", "true", "yes"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def load_env() -> None:
    """
    Load .env into os.environ, then recompute every flag.
    This makes the flags correct even if load_env() is called after import.
    """
    global DEBUG, ENRICH_REPLIES
    global OPENING_DELAY_SECONDS, REPLY_DELAY_SECONDS, CONNECT_DELAY_SECONDS, CLOSING_DELAY_SECONDS
    global ENRICH_TIMEOUT_SECONDS

    load_dotenv()
    # Key line: accept common truthy values.
    DEBUG = os.getenv("DEBUG", "0").lower() in _TRUTHY
    ENRICH_REPLIES = os.getenv("ENRICH_REPLIES", "0").lower() in _TRUTHY

    OPENING_DELAY_SECONDS = _env_float("OPENING_DELAY_SECONDS", 0.5)
    REPLY_DELAY_SECONDS = _env_float("REPLY_DELAY_SECONDS", 0.8)
    CONNECT_DELAY_SECONDS = _env_float("CONNECT_DELAY_SECONDS", 1.0)
    CLOSING_DELAY_SECONDS = _env_float("CLOSING_DELAY_SECONDS", 1.0)
    ENRICH_TIMEOUT_SECONDS = _env_float("ENRICH_TIMEOUT_SECONDS", 10.0)

    setup_logging()


def setup_logging() -> None:
    # Plain console logging; DEBUG also turns on the per-turn state dumps.
    logging.basicConfig(
        level=logging.DEBUG if DEBUG else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
