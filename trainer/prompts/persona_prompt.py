# Role: Builds the per-reply prompt for the optional rephrasing call: who is speaking, what the user just said,
# and what the reply has to achieve. Output rules keep the text short and quote-free.

from __future__ import annotations

from trainer.models.scenario import Scenario


def build_persona(scenario: Scenario, sender: str) -> str:
    return (
        f"You are {sender}, speaking to Darek in the '{scenario.name}' scenario. "
        f"Counterpart role: {scenario.counterpart_name}."
    )


def build_rephrase_task(draft: str) -> str:
    return f"Rephrase this reply in your own words, keeping its meaning and facts:\n{draft}"


def build_reply_prompt(
    *,
    system_prompt: str,
    persona: str,
    task_instruction: str,
    last_user_text: str,
) -> str:
    user_line = last_user_text.strip() if last_user_text and last_user_text.strip() else "(Conversation Start)"
    return f"""
{system_prompt}

PERSONA:
{persona}

CURRENT INTERACTION:
User (Darek) said: "{user_line}"

YOUR TASK:
{task_instruction}

REMEMBER:
- Keep it under 40 words.
- Sound natural, not robotic.
- Do not output quotes around the text.
""".strip()
