"""
Tool executor for NL Bridge.

This is the tool boundary used by the MCP server and the interactive agent.
It holds one CompletionClient (backend chosen once) and returns plain,
JSON-serializable dicts.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from nl_bridge.completion import CompletionClient
from nl_bridge.config import Settings, get_settings
from nl_bridge.synthesis import complete_email_sms_messages, get_sql


def _require_text(value: Any, name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{name} must be a non-empty string.")
    return value.strip()


class BridgeToolExecutor:
    """
    Runs the synthesis flows behind a dict-in / dict-out interface.

    Used by:
    - MCP server (scripts/mcp_server.py)
    - Interactive agent (nl_bridge.agent)
    """

    def __init__(
        self,
        client: Optional[CompletionClient] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.client = client or CompletionClient.from_settings(self.settings)

    async def generate_sql(self, prompt: str) -> Dict[str, Any]:
        """
        Generate a parameterized SQL query.

        Returns:
            dict with success, sql, paramValues, error
        """
        prompt = _require_text(prompt, "prompt")
        result = await get_sql(prompt, client=self.client, schema_path=self.settings.schema_path)
        return {"success": bool(result.sql) and not result.error, **result.to_dict()}

    async def compose_messages(self, prompt: str, company: str = "", contact_name: str = "") -> Dict[str, Any]:
        """
        Generate an email and SMS message pair.

        Returns:
            dict with success, status, email, emailSubject, emailBody, sms, error
        """
        prompt = _require_text(prompt, "prompt")
        result = await complete_email_sms_messages(
            prompt, company or "", contact_name or "", client=self.client
        )
        return {"success": result.status, **result.to_dict()}
