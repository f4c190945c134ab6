"""
Pytest configuration and shared fixtures.
"""
import json
from types import SimpleNamespace

import httpx
import pytest

from nl_bridge.config import DirectBackend, HostedBackend


ENV_VARS = [
    "OPENAI_API_KEY",
    "OPENAI_ENDPOINT",
    "OPENAI_MODEL",
    "OPENAI_API_VERSION",
    "NL_BRIDGE_SCHEMA_PATH",
    "NL_BRIDGE_DIRECT_MODEL",
    "NL_BRIDGE_LOG_LEVEL",
]

SAMPLE_SCHEMA = """
- customers (id integer, company text, first_name text, last_name text, email text, phone text)
- orders (id integer, customer_id integer, total numeric, created_at timestamp)
""".strip()


class FakeCompletionClient:
    """Stands in for CompletionClient; returns a canned reply and records calls."""

    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.calls = []
        self.backend = DirectBackend(api_key="test-key")

    async def complete(self, system_prompt, user_prompt, temperature=0.0):
        self.calls.append({
            "system_prompt": system_prompt,
            "user_prompt": user_prompt,
            "temperature": temperature,
        })
        if self.error is not None:
            raise self.error
        return self.reply


class FakeOpenAIClient:
    """Mimics AsyncOpenAI().chat.completions.create()."""

    def __init__(self, content="", error=None):
        self.content = content
        self.error = error
        self.requests = []
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    async def _create(self, **kwargs):
        self.requests.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def azure_reply(content, status_code=200):
    """httpx.MockTransport handler body for an Azure chat completion."""
    return httpx.Response(
        status_code,
        json={"choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]},
    )


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Remove all NL Bridge variables and run from an empty directory (no .env)."""
    for name in ENV_VARS:
        # setenv first so monkeypatch also undoes values load_dotenv() adds
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def schema_file(tmp_path):
    """Write a db.schema file and return its path."""
    path = tmp_path / "db.schema"
    path.write_text(SAMPLE_SCHEMA, encoding="utf-8")
    return path


@pytest.fixture
def hosted_backend():
    return HostedBackend(
        api_key="azure-key",
        endpoint="https://example.openai.azure.com",
        model="gpt-35",
        api_version="2023-05-15",
    )


@pytest.fixture
def recorded_requests():
    return []


@pytest.fixture
def mock_transport(recorded_requests):
    """Build a MockTransport that records requests and returns the given response."""
    def _make(response):
        def handler(request):
            recorded_requests.append({
                "url": str(request.url),
                "headers": dict(request.headers),
                "body": json.loads(request.content) if request.content else None,
            })
            return response
        return httpx.MockTransport(handler)
    return _make


# Markers
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests that wire real clients to mock transports")
    config.addinivalue_line("markers", "mcp: marks tests related to MCP functionality")
