"""
Pydantic schemas for prompt records and tool responses.
"""

from .prompt import PromptInputs, PromptOutputs, PromptRecord
from .responses import (
    ClarityGap,
    ClarityGapsResponse,
    ConvertPromptResponse,
    HealthResponse,
    Improvement,
    RefinePromptResponse,
    TextInput,
    validate_input,
)

__all__ = [
    "PromptInputs",
    "PromptOutputs",
    "PromptRecord",
    "ClarityGap",
    "ClarityGapsResponse",
    "ConvertPromptResponse",
    "HealthResponse",
    "Improvement",
    "RefinePromptResponse",
    "TextInput",
    "validate_input",
]
