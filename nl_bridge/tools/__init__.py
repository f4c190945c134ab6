"""
Tools module for NL Bridge (MCP boundary).
"""

from .executor import BridgeToolExecutor

__all__ = [
    "BridgeToolExecutor",
]
