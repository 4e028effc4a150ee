"""
Pytest configuration and fixtures for all tests.
"""

import logging

import pytest

from prompt_framework.runtime import ToolDispatcher
from prompt_framework.tools import all_tools


@pytest.fixture(scope="session", autouse=True)
def register_all_tools():
    """
    Register all tools in the global registry before running any tests.

    Dispatchers build their own registry; the global one is populated for
    callers that import tools from all_tools directly.
    """
    all_tools.register_all_tools()

    yield

    all_tools.registry.clear()


@pytest.fixture
def dispatcher() -> ToolDispatcher:
    """Dispatcher with a fresh registry holding every tool."""
    return ToolDispatcher(version="9.9.9")


@pytest.fixture
def restore_root_logger():
    """Undo handler and level changes made by configure_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level

    yield root_logger

    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)
