"""Text-to-JSON MCP server.

Exposes the prompt tools to IDE agents (Cursor, VS Code and other
MCP-compatible clients) over the stdio transport.

Tools:
    - convertPromptToJson: structure a prompt into JSON
    - findClarityGaps: clarity gaps and score
    - refinePrompt: refined prompt with a change log
    - health: liveness check

Usage::

    text-to-json-mcp server
    # or
    python -m prompt_framework.server.mcp_server
"""

import logging
import os
from typing import Any, Dict, Optional

from mcp.server.fastmcp import FastMCP

from ..config import Settings, configure_logging, load_settings
from ..runtime.dispatcher import ToolDispatcher
from ..tools.tool_base import BaseTool

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TEXT2JSON_CONFIG"

INSTRUCTIONS = (
    "Rule-based prompt tooling. Call findClarityGaps to see what a prompt is "
    "missing, refinePrompt to get a rewritten prompt with placeholders for the "
    "missing pieces, and convertPromptToJson to get a structured record with "
    "task, intent, inputs and outputs."
)


def _register_text_tool(mcp: FastMCP, dispatcher: ToolDispatcher, tool: BaseTool) -> None:
    tool_name = tool.name

    async def handler(text: str) -> Dict[str, Any]:
        return await dispatcher.dispatch(tool_name, {"text": text})

    handler.__name__ = tool_name
    mcp.tool(name=tool_name, description=tool.description)(handler)


def _register_plain_tool(mcp: FastMCP, dispatcher: ToolDispatcher, tool: BaseTool) -> None:
    tool_name = tool.name

    async def handler() -> Dict[str, Any]:
        return await dispatcher.dispatch(tool_name, {})

    handler.__name__ = tool_name
    mcp.tool(name=tool_name, description=tool.description)(handler)


def create_mcp_server(
    settings: Optional[Settings] = None,
    dispatcher: Optional[ToolDispatcher] = None,
) -> FastMCP:
    """
    Create and configure the FastMCP server with all tools registered.

    Args:
        settings: Application settings (loaded from env when omitted)
        dispatcher: Dispatcher to route calls through

    Returns:
        Configured FastMCP instance, not yet running
    """
    settings = settings or load_settings()
    dispatcher = dispatcher or ToolDispatcher(version=settings.APP_VERSION)

    mcp = FastMCP(name=settings.SERVER_NAME, instructions=INSTRUCTIONS)

    for tool in dispatcher.registry.list_tools():
        if tool.takes_text:
            _register_text_tool(mcp, dispatcher, tool)
        else:
            _register_plain_tool(mcp, dispatcher, tool)

    logger.debug(f"Registered MCP tools: {', '.join(dispatcher.list_tools())}")
    return mcp


def main(config_path: Optional[str] = None) -> None:
    """Start the MCP server (stdio transport)."""
    settings = load_settings(config_path or os.environ.get(CONFIG_ENV_VAR))
    configure_logging(settings.log_level_value)

    dispatcher = ToolDispatcher(version=settings.APP_VERSION)
    mcp = create_mcp_server(settings, dispatcher)

    logger.info(f"{settings.APP_NAME} MCP server v{settings.APP_VERSION} starting")
    logger.info(f"Available methods: {', '.join(dispatcher.list_tools())}")

    try:
        mcp.run(transport="stdio")
    except KeyboardInterrupt:
        logger.info("Shutting down MCP server...")


if __name__ == "__main__":
    main()
