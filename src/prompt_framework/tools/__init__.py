from .tool_base import BaseTool, ToolRegistry, TEXT_PARAMETERS
from .prompt_tools import ConvertPromptTool, FindClarityGapsTool, HealthTool, RefinePromptTool
from .all_tools import create_all_tools, register_all_tools, registry

__all__ = [
    "BaseTool",
    "ToolRegistry",
    "TEXT_PARAMETERS",
    "ConvertPromptTool",
    "FindClarityGapsTool",
    "HealthTool",
    "RefinePromptTool",
    "create_all_tools",
    "register_all_tools",
    "registry",
]
