"""
text-to-json-mcp framework.

Rule-based prompt analysis: structure a free-form prompt into JSON, find its
clarity gaps, and refine it. Exposed to tool-call hosts over MCP and to the
command line.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
