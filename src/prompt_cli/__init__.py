"""
text-to-json-mcp - Structure, analyze and refine prompts from the command line.

Converts free-form prompts to structured JSON, reports clarity gaps, and
produces refined rewrites. Also starts the MCP server for IDE integration.
"""

from prompt_framework import __version__

__author__ = "text-to-json-mcp Team"
__license__ = "MIT"

__all__ = ["__version__"]
