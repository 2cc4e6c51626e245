# Role: Ordered lint rules for the email exercise. Each rule is pattern -> message -> suggested fix.
# Order matters: findings are reported in this order. Case-sensitive patterns are intentional
# (e.g. lower-case "i" or "monday" is the mistake being flagged).

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Pattern


@dataclass(frozen=True)
class GrammarRule:
    pattern: Pattern[str]
    message: str
    fix: str


def _rule(pattern: str, message: str, fix: str, *, ignore_case: bool = True) -> GrammarRule:
    flags = re.IGNORECASE if ignore_case else 0
    return GrammarRule(pattern=re.compile(pattern, flags), message=message, fix=fix)


GRAMMAR_RULES: List[GrammarRule] = [
    # Spelling
    _rule(r"\btomorow\b", "Spelling", "tomorrow"),
    _rule(r"\brecived\b", "Spelling", "received"),
    _rule(r"\brecieved\b", "Spelling", "received"),
    _rule(r"\bwich\b", "Spelling", "which"),
    _rule(r"\buntill\b", "Spelling", "until"),
    _rule(r"\boccured\b", "Spelling", "occurred"),
    _rule(r"\bforeward\b", "Spelling", "forward"),
    _rule(r"\badress\b", "Spelling", "address"),
    _rule(r"\btruely\b", "Spelling", "truly"),
    _rule(r"\bbecouse\b", "Spelling", "because"),

    # Capitalization
    _rule(r"\bi\b", "Capitalization: 'I' is always capitalized.", "I", ignore_case=False),
    _rule(r"\bmonday\b", "Capitalization: Days of the week.", "Monday", ignore_case=False),
    _rule(r"\btuesday\b", "Capitalization: Days of the week.", "Tuesday", ignore_case=False),
    _rule(r"\bwednesday\b", "Capitalization: Days of the week.", "Wednesday", ignore_case=False),
    _rule(r"\bthursday\b", "Capitalization: Days of the week.", "Thursday", ignore_case=False),
    _rule(r"\bfriday\b", "Capitalization: Days of the week.", "Friday", ignore_case=False),
    _rule(r"\bjanuary\b", "Capitalization: Months.", "January", ignore_case=False),
    _rule(r"\boctober\b", "Capitalization: Months.", "October", ignore_case=False),
    _rule(r"\bnov(ember)?\b", "Capitalization: Months.", "November", ignore_case=False),

    # Grammar
    _rule(r"\b(have|has) send\b", "Grammar: Past participle required.", "have sent"),
    _rule(r"\binformation are\b", "Grammar: 'Information' is singular.", "information is"),
    _rule(r"\bplease to\b", "Grammar: Do not use 'to' after 'Please'.", "please [verb]"),
    _rule(r"\bdiscuss about\b", "Grammar: We 'discuss' something, not 'discuss about' it.", "discuss the..."),
    _rule(r"\bwaiting for answer\b", "Grammar: Missing article.", "waiting for an answer"),
    _rule(r"\bon next week\b", "Grammar: We say 'next week', not 'on next week'.", "next week"),
    _rule(r"\bon last week\b", "Grammar: We say 'last week', not 'on last week'.", "last week"),
    _rule(r"\bi sent email\b", "Grammar: Missing article.", "I sent the email"),

    # Tone
    _rule(r"\bthx\b", "Tone: Too informal for business.", "Thank you"),
    _rule(r"\bpls\b", "Tone: Too informal.", "Please"),
    _rule(r"\basap\b", "Tone: Can seem rude. Try full words.", "as soon as possible"),
    _rule(r"\bu\b", "Tone: Text speak.", "you"),
    _rule(r"\bwanna\b", "Tone: Slang.", "want to"),
    _rule(r"\bgonna\b", "Tone: Slang.", "going to"),
    _rule(r"\bi want\b", "Tone: A bit too direct.", "I would like"),
    _rule(r"\bgive me\b", "Tone: Too direct/imperative.", "Could you please give me"),

    # Punctuation
    _rule(r"\s+(?=[.,;:?!])", "Punctuation: No space before comma/period.", "Remove space", ignore_case=False),

    # Professionalism
    _rule(
        r"\b(bitch|fuck|shit|ass|idiot|stupid|hell|damn|crap)\b",
        "🚨 Professionalism: Inappropriate language for a business email.",
        "Remove offensive term",
    ),
    _rule(
        r"\b(hate|kill|die|fire)\b",
        "Tone: This language is too aggressive.",
        "Use professional language",
    ),

    # Mechanics
    _rule(
        r"\b[a-z]+[A-Z][a-zA-Z]*\b",
        "Mechanics: Fix the capitalization inside this word.",
        "lowercase",
        ignore_case=False,
    ),
    _rule(
        r"\b(jotform|byd|cmpl)\b",
        "Capitalization: Proper nouns/Brand names must be capitalized.",
        "Capitalize (e.g., JotForm)",
        ignore_case=False,
    ),
]
