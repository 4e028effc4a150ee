"""
Runtime for dispatching tool calls.

Provides the dispatcher shared by the MCP server and the CLI, and the
exceptions it raises.
"""

from prompt_framework.runtime.dispatcher import ToolDispatcher
from prompt_framework.runtime.exceptions import (
    InvalidInputError,
    PromptFrameworkError,
    ResponseValidationError,
    ToolNotFoundError,
)

__all__ = [
    "ToolDispatcher",
    "InvalidInputError",
    "PromptFrameworkError",
    "ResponseValidationError",
    "ToolNotFoundError",
]
