"""
MCP Server for NL Bridge.

Exposes the two synthesis flows as Model Context Protocol tools so an AI
assistant can request a SQL query or an email/SMS draft.

Run over stdio:
    python -m scripts.mcp_server --serve

For more info: https://modelcontextprotocol.io/
"""

from typing import Any, Dict, List
import json
import sys

from nl_bridge.config import get_settings
from nl_bridge.logging_setup import configure_logging
from nl_bridge.tools.executor import BridgeToolExecutor


# =============================================================================
# MCP Tool Definitions
# =============================================================================
MCP_TOOLS = [
    {
        "name": "generate_sql",
        "description": (
            "Turn a natural language question into a parameterized PostgreSQL "
            "query. The query is returned, never executed. "
            "Example: 'customers who ordered in the last 30 days'"
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "prompt": {
                    "type": "string",
                    "description": "Natural language question about the database"
                }
            },
            "required": ["prompt"]
        }
    },
    {
        "name": "compose_messages",
        "description": (
            "Draft an email (subject + body) and an SMS of at most 160 "
            "characters from free-text rules, addressed to a contact."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "prompt": {
                    "type": "string",
                    "description": "Rules describing what the messages should say"
                },
                "company": {
                    "type": "string",
                    "description": "Contact's company"
                },
                "contact_name": {
                    "type": "string",
                    "description": "Name used in the greeting"
                }
            },
            "required": ["prompt", "contact_name"]
        }
    },
]


# =============================================================================
# MCP Handler Class
# =============================================================================
class BridgeMCPHandler:
    """
    MCP handler for NL Bridge.

    Routes MCP tool calls to the BridgeToolExecutor.
    """

    def __init__(self, executor: BridgeToolExecutor = None):
        self.executor = executor or BridgeToolExecutor()

    def list_tools(self) -> List[Dict[str, Any]]:
        """Return list of available MCP tools."""
        return MCP_TOOLS

    async def handle_tool_call(self, tool_name: str, arguments: Dict[str, Any]) -> Dict[str, Any]:
        """
        Handle an MCP tool call.

        Returns:
            Tool result dict with 'success' and either the result fields or 'error'
        """
        arguments = arguments or {}
        try:
            if not isinstance(arguments, dict):
                raise ValueError("Tool arguments must be a JSON object.")

            if tool_name == "generate_sql":
                return await self.executor.generate_sql(arguments.get("prompt", ""))

            elif tool_name == "compose_messages":
                return await self.executor.compose_messages(
                    arguments.get("prompt", ""),
                    arguments.get("company", ""),
                    arguments.get("contact_name", ""),
                )

            else:
                return {
                    "success": False,
                    "error": f"Unknown tool: {tool_name}"
                }

        except Exception as e:
            return {
                "success": False,
                "error": str(e)
            }


# =============================================================================
# MCP Server (stdio transport)
# =============================================================================
def create_mcp_server(handler: BridgeMCPHandler = None):
    """Build a FastMCP server with both tools registered."""
    from mcp.server.fastmcp import FastMCP

    handler = handler or BridgeMCPHandler()
    server = FastMCP("nl-bridge")

    @server.tool(name="generate_sql", description=MCP_TOOLS[0]["description"])
    async def generate_sql(prompt: str) -> str:
        return json.dumps(await handler.handle_tool_call("generate_sql", {"prompt": prompt}))

    @server.tool(name="compose_messages", description=MCP_TOOLS[1]["description"])
    async def compose_messages(prompt: str, contact_name: str, company: str = "") -> str:
        result = await handler.handle_tool_call(
            "compose_messages",
            {"prompt": prompt, "company": company, "contact_name": contact_name},
        )
        return json.dumps(result)

    return server


if __name__ == "__main__":
    configure_logging(get_settings().log_level)

    if "--serve" in sys.argv:
        print("NL Bridge MCP Server started", file=sys.stderr)
        print(f"Available tools: {[t['name'] for t in MCP_TOOLS]}", file=sys.stderr)
        create_mcp_server().run()
    else:
        print("Available tools:")
        for tool in MCP_TOOLS:
            print(f"  - {tool['name']}: {tool['description'][:50]}...")
        print("\nTo run as MCP server: python -m scripts.mcp_server --serve")
