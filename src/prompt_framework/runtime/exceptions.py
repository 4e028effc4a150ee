"""
Runtime exception hierarchy.

This module defines all exceptions that can be raised while dispatching
tool calls.
"""

from typing import Any, Dict, List, Optional


class PromptFrameworkError(Exception):
    """
    Base exception for all framework errors.

    All dispatch-specific exceptions inherit from this class.
    """
    pass


class InvalidInputError(PromptFrameworkError):
    """
    Tool parameters failed validation.

    Raised when a call arrives with missing or empty text.
    """

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []


class ToolNotFoundError(PromptFrameworkError):
    """
    Requested tool is not found in the registry.

    Raised when trying to dispatch a tool name that isn't registered.
    """

    def __init__(self, tool_name: str):
        super().__init__(f"Tool not found: {tool_name}")
        self.tool_name = tool_name


class ResponseValidationError(PromptFrameworkError):
    """
    Tool output did not match its response schema.
    """

    def __init__(self, tool_name: str, reason: str):
        super().__init__(f"Invalid response from {tool_name}: {reason}")
        self.tool_name = tool_name
        self.reason = reason
