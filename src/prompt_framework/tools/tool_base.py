from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, List, Optional, Type

from pydantic import BaseModel


# JSON schema shared by every text operation
TEXT_PARAMETERS: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "text": {
            "type": "string",
            "description": "The prompt text to process",
            "minLength": 1,
        }
    },
    "required": ["text"],
}


class BaseTool(ABC, BaseModel):
    """Base class for all host-facing operations."""

    name: str
    description: str
    parameters: Optional[dict] = None

    # Schema every successful or failed response must satisfy
    response_model: ClassVar[Type[BaseModel]]

    class Config:
        arbitrary_types_allowed = True

    async def __call__(self, **kwargs) -> BaseModel:
        """Execute the tool with given parameters."""
        return await self.execute(**kwargs)

    @abstractmethod
    async def execute(self, **kwargs) -> BaseModel:
        """Execute the tool with given parameters."""

    def failure_response(self, error: str, params: Dict[str, Any]) -> Optional[BaseModel]:
        """
        Response envelope reported when the call cannot be completed.

        Returns None for tools without one; the dispatcher then re-raises.
        """
        return None

    @property
    def takes_text(self) -> bool:
        return bool(self.parameters and "text" in self.parameters.get("required", []))


class ToolRegistry:
    """Registry of tools keyed by their stable name."""

    def __init__(self):
        self.tools: Dict[str, BaseTool] = {}

    def register(self, tool: BaseTool) -> None:
        """Register a tool."""
        self.tools[tool.name] = tool

    def get(self, name: str) -> Optional[BaseTool]:
        """Get a tool by name."""
        return self.tools.get(name)

    def list_tools(self) -> List[BaseTool]:
        """Get all registered tools."""
        return list(self.tools.values())

    def names(self) -> List[str]:
        return list(self.tools)

    def clear(self) -> None:
        """Clear all tools (useful for testing)."""
        self.tools = {}
