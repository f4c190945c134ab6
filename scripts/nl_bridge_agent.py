"""
NL Bridge interactive agent.

Loads .env from the project root, then starts the prompt loop.
"""

from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parents[1]
load_dotenv(ROOT / ".env")

from nl_bridge.agent import run_agent  # noqa: E402

if __name__ == "__main__":
    run_agent()
