"""
Tool dispatcher - routes an operation name to its tool.

Both hosts (the MCP server and the CLI) go through here, so input
validation, response validation and failure envelopes behave the same
regardless of how the call arrived.

- Unknown names raise ToolNotFoundError
- Empty or missing text never reaches the tool; it yields the tool's
  failure envelope
- Unexpected exceptions are logged and reported as the failure envelope,
  never propagated to the host
"""

import logging
import time
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ValidationError

from ..schemas import TextInput, validate_input
from ..tools.all_tools import register_all_tools
from ..tools.tool_base import BaseTool, ToolRegistry
from .exceptions import InvalidInputError, ResponseValidationError, ToolNotFoundError

logger = logging.getLogger(__name__)


class ToolDispatcher:
    """Dispatch tool calls by name with validated input and output."""

    def __init__(self, registry: Optional[ToolRegistry] = None, version: Optional[str] = None):
        """
        Initialize the dispatcher.

        Args:
            registry: Registry to dispatch from. A fresh registry with all
                tools is created when omitted.
            version: Version reported by the health tool
        """
        self.registry = registry if registry is not None else register_all_tools(
            ToolRegistry(), version=version
        )

    def list_tools(self) -> List[str]:
        return self.registry.names()

    def get_tool(self, name: str) -> BaseTool:
        tool = self.registry.get(name)
        if tool is None:
            raise ToolNotFoundError(name)
        return tool

    async def dispatch(self, name: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Run a tool and return its JSON-serializable response.

        Args:
            name: Stable operation name (e.g. "findClarityGaps")
            params: Tool parameters, typically {"text": "..."}

        Returns:
            The validated response as a dict

        Raises:
            ToolNotFoundError: If no tool is registered under name
        """
        tool = self.get_tool(name)
        params = params if params is not None else {}
        start_time = time.time()

        logger.info(f"Dispatching tool '{name}'")

        try:
            kwargs = self._validate_params(tool, params)
            response = await tool(**kwargs)
            validated = self._validate_response(tool, response)
        except Exception as e:
            logger.error(f"Error in {name}: {e}", exc_info=not isinstance(e, InvalidInputError))
            failure = tool.failure_response(str(e), params)
            if failure is None:
                raise
            return failure.model_dump(mode="json", exclude_none=True)

        logger.info(f"Tool '{name}' completed in {time.time() - start_time:.3f}s")
        return validated.model_dump(mode="json", exclude_none=True)

    def _validate_params(self, tool: BaseTool, params: Dict[str, Any]) -> Dict[str, Any]:
        if not tool.takes_text:
            return {}

        if not isinstance(params, dict) or params.get("text") is None:
            raise InvalidInputError("Text parameter is required")

        validation = validate_input(TextInput, {"text": params["text"]})
        if not validation["success"]:
            raise InvalidInputError(validation["error"], errors=validation["errors"])

        return {"text": validation["data"].text}

    def _validate_response(self, tool: BaseTool, response: Any) -> BaseModel:
        payload = response.model_dump() if isinstance(response, BaseModel) else response
        try:
            return tool.response_model.model_validate(payload)
        except ValidationError as e:
            raise ResponseValidationError(tool.name, str(e)) from e
