# Role: Local developer CLI to play a scenario without the web UI.
# Useful for deterministic runs (--seed) and seeing debug logs in the terminal.

from __future__ import annotations

import argparse
import asyncio
import random

import trainer.config
trainer.config.load_env()

from trainer.core.scenario_engine import ScenarioEngine
from trainer.llm.reply_enricher import ReplyEnricher
from trainer.models.state import Phase


def _print_new_messages(engine: ScenarioEngine, seen: int) -> int:
    messages = engine.messages
    for msg in messages[seen:]:
        if msg.role == "user":
            continue
        label = msg.sender or msg.role
        print(f"\n{label}: {msg.text}")
    return len(messages)


def _print_status(engine: ScenarioEngine) -> None:
    if engine.banner:
        print(f"\n[{engine.banner}]")
    checks = " ".join(f"{'x' if done else ' '}:{item_id}" for item_id, done in engine.completed.items())
    print(f"Objectives: {checks}")
    if engine.suggestions:
        print("Suggestions: " + " | ".join(engine.suggestions))


def _read(prompt: str) -> str:
    return input(prompt).strip()


async def run(scenario_id: str | None, seed: int | None) -> None:
    # 1) Create engine (seeded if asked)
    # 2) Route user input -> engine -> print counterpart output
    # 3) In EMAIL phase, read subject/body and print feedback
    print("CMPL Role-Play Trainer CLI")
    print("Commands: /new (new scenario), /proceed (skip to email), /exit")
    print("-" * 50)

    rng = random.Random(seed) if seed is not None else None
    enricher = ReplyEnricher() if trainer.config.ENRICH_REPLIES else None
    engine = ScenarioEngine(rng=rng, enricher=enricher)

    await engine.start_new_scenario(scenario_id)
    await engine.wait_idle()
    print(f"Scenario: {engine.progress.scenario.name}")
    seen = _print_new_messages(engine, 0)
    _print_status(engine)

    while True:
        try:
            if engine.phase in {Phase.EMAIL, Phase.COMPLETE}:
                if engine.phase == Phase.COMPLETE:
                    print("\nScenario complete. Type /new to play again or /exit.")
                    cmd = _read("\n> ")
                else:
                    print(f"\nEmail task: {engine.progress.scenario.email_task.instruction}")
                    cmd = _read("Subject (or a command): ")
                    if not cmd.startswith("/"):
                        body = _read("Body (one line): ")
                        feedback = engine.submit_email(cmd, body)
                        if feedback.is_valid:
                            print("Email accepted!")
                        else:
                            for err in feedback.errors:
                                print(f" - {err}")
                        continue
            else:
                cmd = _read("\nYou: ")
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not cmd:
            continue

        low = cmd.lower()
        if low in {"/exit", "exit", "quit", "/quit"}:
            print("Bye!")
            return

        if low in {"/new", "new"}:
            await engine.start_new_scenario()
            await engine.wait_idle()
            print(f"\nScenario: {engine.progress.scenario.name}")
            seen = _print_new_messages(engine, 0)
            _print_status(engine)
            continue

        if low == "/proceed":
            await engine.proceed()
        elif not await engine.submit_user_text(cmd):
            print("(ignored)")
            continue

        await engine.wait_idle()
        seen = _print_new_messages(engine, seen)
        _print_status(engine)


def main() -> None:
    parser = argparse.ArgumentParser(description="Play a CMPL role-play scenario in the terminal.")
    parser.add_argument("--scenario", help="Scenario id (default: random)")
    parser.add_argument("--seed", type=int, help="Seed for reproducible runs")
    args = parser.parse_args()
    asyncio.run(run(args.scenario, args.seed))


if __name__ == "__main__":
    main()
