"""Prompt tools - the operations exposed to tool-call hosts and the CLI.

Stable names:
- convertPromptToJson: structure a prompt into a PromptRecord
- findClarityGaps: list clarity gaps and the clarity score
- refinePrompt: rewrite a prompt to address its gaps
- health: liveness check
"""

from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, Type

from pydantic import BaseModel

from .. import __version__
from ..analysis.gap_analyzer import analyze_text_for_gaps
from ..processing.prompt_processor import convert_prompt_to_json, refine_prompt
from ..schemas import (
    ClarityGap,
    ClarityGapsResponse,
    ConvertPromptResponse,
    HealthResponse,
    RefinePromptResponse,
)
from .tool_base import TEXT_PARAMETERS, BaseTool


class ConvertPromptTool(BaseTool):
    """Convert a text prompt into the fixed structured JSON record."""

    name: str = "convertPromptToJson"
    description: str = (
        "Convert a free-form text prompt into structured JSON with task, intent, "
        "inputs (required, optional, constraints), outputs (primary, secondary, format) "
        "and the clarity gaps found in the prompt."
    )
    parameters: Dict = TEXT_PARAMETERS

    response_model: ClassVar[Type[BaseModel]] = ConvertPromptResponse

    async def execute(self, text: str) -> ConvertPromptResponse:
        return convert_prompt_to_json(text)

    def failure_response(self, error: str, params: Dict[str, Any]) -> ConvertPromptResponse:
        return ConvertPromptResponse(success=False, error=error, processing_time_ms=0)


class FindClarityGapsTool(BaseTool):
    """Analyze a prompt for missing context, ambiguity, unclear outputs and missing constraints."""

    name: str = "findClarityGaps"
    description: str = (
        "Find clarity gaps in a text prompt: missing context, ambiguous requirements, "
        "unclear outputs and missing constraints. Returns each gap with a suggestion "
        "and severity, plus an overall clarity score from 0 to 100."
    )
    parameters: Dict = TEXT_PARAMETERS

    response_model: ClassVar[Type[BaseModel]] = ClarityGapsResponse

    async def execute(self, text: str) -> ClarityGapsResponse:
        analysis = analyze_text_for_gaps(text)
        return ClarityGapsResponse(
            success=True,
            gaps=[ClarityGap(**gap.to_dict()) for gap in analysis.gaps],
            overall_clarity_score=analysis.overall_clarity_score,
        )

    def failure_response(self, error: str, params: Dict[str, Any]) -> ClarityGapsResponse:
        return ClarityGapsResponse(success=False, error=error, gaps=[], overall_clarity_score=0)


class RefinePromptTool(BaseTool):
    """Rewrite a prompt to address its clarity gaps."""

    name: str = "refinePrompt"
    description: str = (
        "Refine a text prompt for better clarity. Adds a context section, replaces "
        "subjective terms, and appends output and constraint requirements depending "
        "on the gaps found. Returns the refined prompt and a log of each change."
    )
    parameters: Dict = TEXT_PARAMETERS

    response_model: ClassVar[Type[BaseModel]] = RefinePromptResponse

    async def execute(self, text: str) -> RefinePromptResponse:
        return refine_prompt(text)

    def failure_response(self, error: str, params: Dict[str, Any]) -> RefinePromptResponse:
        text = params.get("text") if isinstance(params, dict) else None
        return RefinePromptResponse(
            success=False,
            error=error,
            original_prompt=text if isinstance(text, str) else "",
            refined_prompt="",
            improvements=[],
        )


class HealthTool(BaseTool):
    """Report that the server is up."""

    name: str = "health"
    description: str = "Health check. Returns status, current UTC timestamp and server version."
    parameters: Dict = {"type": "object", "properties": {}, "required": []}
    version: str = __version__

    response_model: ClassVar[Type[BaseModel]] = HealthResponse

    async def execute(self) -> HealthResponse:
        return HealthResponse(
            status="healthy",
            timestamp=datetime.now(timezone.utc).isoformat(),
            version=self.version,
        )
