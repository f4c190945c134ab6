from __future__ import annotations

import asyncio
import json
from typing import Any, Dict, Optional, Tuple

from .config import HostedBackend, get_settings
from .logging_setup import configure_logging
from .tools.executor import BridgeToolExecutor

INTRO = """
🧠 NL Bridge — natural language to SQL / email + SMS
What I can do:
- Turn a question into a parameterized PostgreSQL query (never executed)
- Draft an email subject/body and a short SMS from your rules
Commands:
- sql <question>                        → e.g. sql customers in Oregon
- email <contact> | <company> | <rules>  → e.g. email Jane | Contoso | order has shipped
- help  → show this text
- exit  → quit
""".strip()

HELP_TEXT = INTRO


def parse_command(line: str) -> Tuple[Optional[str], Dict[str, Any]]:
    """
    Split a prompt line into (command, arguments).

    Returns (None, {}) for anything that isn't a recognised command.
    """
    text = (line or "").strip()
    if not text:
        return None, {}

    head, _, rest = text.partition(" ")
    cmd = head.lower()
    rest = rest.strip()

    if cmd in ("exit", "quit", "bye", "q"):
        return "exit", {}
    if cmd == "help":
        return "help", {}
    if cmd == "sql" and rest:
        return "sql", {"prompt": rest}
    if cmd == "email" and rest:
        parts = [p.strip() for p in rest.split("|")]
        if len(parts) < 3 or not parts[2]:
            return None, {}
        return "email", {
            "contact_name": parts[0],
            "company": parts[1],
            "prompt": "|".join(parts[2:]).strip(),
        }
    return None, {}


def _print_result(result: Dict[str, Any]) -> None:
    if result.get("success"):
        print("\n✅ " + json.dumps(result, indent=2) + "\n")
    else:
        print("\n⚠️  " + (result.get("error") or "No result (see logs).") + "\n")


def run_agent(executor: Optional[BridgeToolExecutor] = None) -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    executor = executor or BridgeToolExecutor(settings=settings)

    print("\n" + INTRO + "\n")
    if isinstance(executor.client.backend, HostedBackend):
        print(f"🔗 Backend: Azure OpenAI deployment '{executor.client.backend.model}'\n")
    elif settings.api_key:
        print(f"🔗 Backend: OpenAI ({executor.client.backend.model})\n")
    else:
        print("⚠️  OPENAI_API_KEY is not set. Requests will fail.\n")

    while True:
        try:
            line = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n👋 Goodbye!\n")
            break

        cmd, args = parse_command(line)
        if cmd == "exit":
            print("\n👋 Goodbye!\n")
            break
        if cmd == "help":
            print("\n" + HELP_TEXT + "\n")
            continue
        if cmd == "sql":
            _print_result(asyncio.run(executor.generate_sql(args["prompt"])))
            continue
        if cmd == "email":
            _print_result(asyncio.run(executor.compose_messages(**args)))
            continue
        if line:
            print("\n❓ Unknown command. Type 'help' for examples.\n")


if __name__ == "__main__":
    run_agent()
