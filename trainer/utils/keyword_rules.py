# Role: Deterministic keyword helpers shared by both scenario behaviours. Matching is plain
# case-insensitive substring search on purpose ("no" also matches inside "know"); scenarios rely on it.

from __future__ import annotations

import re
from typing import Iterable

AFFIRMATIONS = ("yes", "correct", "right", "sure")
NEGATIONS = ("no", "not", "can't", "cant")

# Affirmations only count on short replies ("Yes, correct."), not inside long sentences.
MAX_AFFIRMATION_WORDS = 4

_WORD = re.compile(r"[a-z']+")


def normalize(text: str) -> str:
    return (text or "").strip().lower()


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    # Key line: substring, not word match.
    low = normalize(text)
    return any(k.lower() in low for k in keywords if k)


def is_short_affirmation(text: str) -> bool:
    words = _WORD.findall(normalize(text))
    if not words or len(words) > MAX_AFFIRMATION_WORDS:
        return False
    # Whole-word check: "No, that's not right." is a refusal, but "I know, right" is not.
    if any(w in NEGATIONS for w in words):
        return False
    return any(w in AFFIRMATIONS for w in words)


def has_negation(text: str) -> bool:
    return contains_any(text, NEGATIONS)
