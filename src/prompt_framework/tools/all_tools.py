"""
Unified Tool Registry

This module provides easy access to all available tools.
Import from here to get pre-registered tools.
"""
from typing import Optional

from .tool_base import BaseTool, ToolRegistry
from .prompt_tools import ConvertPromptTool, FindClarityGapsTool, HealthTool, RefinePromptTool

# Global registry instance
registry = ToolRegistry()


def create_all_tools(version: Optional[str] = None) -> list[BaseTool]:
    """Instantiate every tool, in the order hosts list them."""
    health = HealthTool(version=version) if version else HealthTool()
    return [
        ConvertPromptTool(),
        FindClarityGapsTool(),
        RefinePromptTool(),
        health,
    ]


def register_all_tools(
    target: Optional[ToolRegistry] = None,
    version: Optional[str] = None,
) -> ToolRegistry:
    """
    Register all tools in a registry.

    Args:
        target: Registry to populate. Defaults to the global registry.
        version: Version reported by the health tool.

    Returns:
        The populated registry
    """
    target = target if target is not None else registry
    for tool_obj in create_all_tools(version):
        target.register(tool_obj)
    return target


__all__ = [
    'registry',
    'create_all_tools',
    'register_all_tools',
    'ConvertPromptTool',
    'FindClarityGapsTool',
    'RefinePromptTool',
    'HealthTool',
]
