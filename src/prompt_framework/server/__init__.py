"""
MCP transport wiring.
"""

from prompt_framework.server.mcp_server import create_mcp_server, main

__all__ = ["create_mcp_server", "main"]
