# Role: Email gatekeeper for the final exercise. Checks length, subject, greeting, sign-off, first-letter
# capitalization and every grammar rule, then (if the task lists any) the required content keywords.
# Pure and deterministic: same subject/body + same rule set -> same EmailFeedback.

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from trainer.data.grammar_rules import GRAMMAR_RULES, GrammarRule
from trainer.models.feedback import EmailFeedback
from trainer.models.scenario import EmailTask

MIN_SUBJECT_LENGTH = 5
MIN_BODY_LENGTH = 15
SIGN_OFF_WINDOW = 100

TOO_SHORT_ERROR = "Too short. Please write a complete professional email."
MISSING_SUBJECT_ERROR = "🚨 Critical: You must write a Subject line."
TRIVIAL_SUBJECT_ERROR = "💡 Style: Subject should be descriptive."
GREETING_ERROR = "💡 Structure: Start with a greeting."
SIGN_OFF_ERROR = "💡 Structure: End with a sign-off."
CAPITAL_START_ERROR = "🔠 Mechanics: Start first sentence with capital letter."

_TRIVIAL_SUBJECTS = {"hi", "hello"}
_GREETING = re.compile(r"^\s*(Dear|Hi|Hello|Good morning|Good afternoon)", re.IGNORECASE)
_SIGN_OFF = re.compile(r"(regards|sincerely|thank|cheers|best)", re.IGNORECASE)
_LOWER_START = re.compile(r"^[a-z]")


def format_rule_error(rule: GrammarRule) -> str:
    return f'⚠️ {rule.message} (Try: "{rule.fix}")'


def missing_keywords_error(missing: Sequence[str]) -> str:
    return f"📝 Content: Your email is missing key details: {', '.join(missing)}."


class EmailValidator:
    def __init__(self, rules: Optional[Sequence[GrammarRule]] = None) -> None:
        self.rules = list(rules) if rules is not None else GRAMMAR_RULES

    def validate(self, subject: str, body: str, email_task: Optional[EmailTask] = None) -> EmailFeedback:
        # 1) Length floor short-circuits everything else
        # 2) Collect structure/style/mechanics findings
        # 3) Collect grammar rule findings (deduplicated, rule order)
        # 4) Only a clean email is checked for required content keywords

        subject = subject or ""
        body = body or ""

        if len(subject) < MIN_SUBJECT_LENGTH or len(body) < MIN_BODY_LENGTH:
            return EmailFeedback(is_valid=False, errors=[TOO_SHORT_ERROR])

        errors: List[str] = []

        if not subject.strip():
            errors.append(MISSING_SUBJECT_ERROR)
        elif subject.strip().lower() in _TRIVIAL_SUBJECTS:
            errors.append(TRIVIAL_SUBJECT_ERROR)

        if not _GREETING.search(body):
            errors.append(GREETING_ERROR)

        if not _SIGN_OFF.search(body[-SIGN_OFF_WINDOW:]):
            errors.append(SIGN_OFF_ERROR)

        if _LOWER_START.search(body.strip()):
            errors.append(CAPITAL_START_ERROR)

        full_text = f"{subject} {body}"
        for rule in self.rules:
            if rule.pattern.search(full_text):
                msg = format_rule_error(rule)
                if msg not in errors:
                    errors.append(msg)

        if errors:
            return EmailFeedback(is_valid=False, errors=errors)

        if email_task is not None and email_task.required_keywords:
            low = full_text.lower()
            missing = [k for k in email_task.required_keywords if k.lower() not in low]
            if missing:
                return EmailFeedback(
                    is_valid=False,
                    errors=[missing_keywords_error(missing)],
                    missing_keywords=missing,
                )

        return EmailFeedback(is_valid=True)


_default_validator = EmailValidator()


def validate(subject: str, body: str, email_task: Optional[EmailTask] = None) -> EmailFeedback:
    return _default_validator.validate(subject, body, email_task)
