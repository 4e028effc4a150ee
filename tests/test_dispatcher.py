"""
Tests for the tool dispatcher.
"""

import pytest

from prompt_framework.runtime import ToolDispatcher, ToolNotFoundError
from prompt_framework.runtime.exceptions import InvalidInputError, ResponseValidationError
from prompt_framework.tools.prompt_tools import FindClarityGapsTool, HealthTool
from prompt_framework.tools.tool_base import ToolRegistry


class ExplodingGapsTool(FindClarityGapsTool):
    async def execute(self, text: str):
        raise RuntimeError("boom")


class MalformedGapsTool(FindClarityGapsTool):
    async def execute(self, text: str):
        return {"success": True, "overall_clarity_score": 150}


class ExplodingHealthTool(HealthTool):
    async def execute(self):
        raise RuntimeError("health broke")


def _dispatcher_with(tool) -> ToolDispatcher:
    registry = ToolRegistry()
    registry.register(tool)
    return ToolDispatcher(registry=registry)


class TestDispatch:

    def test_list_tools(self, dispatcher):
        assert dispatcher.list_tools() == [
            "convertPromptToJson", "findClarityGaps", "refinePrompt", "health",
        ]

    @pytest.mark.asyncio
    async def test_unknown_tool(self, dispatcher):
        with pytest.raises(ToolNotFoundError) as exc_info:
            await dispatcher.dispatch("summarize", {"text": "hi"})
        assert exc_info.value.tool_name == "summarize"

    @pytest.mark.asyncio
    async def test_find_clarity_gaps(self, dispatcher):
        result = await dispatcher.dispatch("findClarityGaps", {"text": "Make something good"})
        assert result["success"] is True
        assert result["overall_clarity_score"] == 60
        assert result["gaps"][0]["category"] == "ambiguous_requirement"
        assert "error" not in result

    @pytest.mark.asyncio
    async def test_convert_returns_plain_dict(self, dispatcher):
        result = await dispatcher.dispatch(
            "convertPromptToJson",
            {"text": "Generate a product catalog for corrugated boxes with pricing and specs"},
        )
        assert result["success"] is True
        assert result["data"]["outputs"]["primary"] == "Catalog"
        assert isinstance(result["data"]["inputs"]["required"], list)

    @pytest.mark.asyncio
    async def test_refine(self, dispatcher):
        result = await dispatcher.dispatch("refinePrompt", {"text": "Make it nice."})
        assert result["success"] is True
        assert [item["type"] for item in result["improvements"]] == ["clarity", "specificity"]

    @pytest.mark.asyncio
    async def test_health(self, dispatcher):
        result = await dispatcher.dispatch("health")
        assert result["status"] == "healthy"
        assert result["version"] == "9.9.9"
        assert result["timestamp"]


class TestInvalidInput:

    @pytest.mark.asyncio
    async def test_missing_text(self, dispatcher):
        result = await dispatcher.dispatch("refinePrompt", {})
        assert result == {
            "success": False,
            "error": "Text parameter is required",
            "original_prompt": "",
            "refined_prompt": "",
            "improvements": [],
        }

    @pytest.mark.asyncio
    async def test_empty_text_convert(self, dispatcher):
        result = await dispatcher.dispatch("convertPromptToJson", {"text": ""})
        assert result["success"] is False
        assert result["error"]
        assert "data" not in result
        assert result["processing_time_ms"] == 0

    @pytest.mark.asyncio
    async def test_blank_text_gaps(self, dispatcher):
        result = await dispatcher.dispatch("findClarityGaps", {"text": "   "})
        assert result["success"] is False
        assert "Text input cannot be empty" in result["error"]
        assert result["gaps"] == []
        assert result["overall_clarity_score"] == 0

    @pytest.mark.asyncio
    async def test_blank_text_refine_echoes_input(self, dispatcher):
        result = await dispatcher.dispatch("refinePrompt", {"text": "  "})
        assert result["success"] is False
        assert result["original_prompt"] == "  "

    @pytest.mark.asyncio
    async def test_non_string_text(self, dispatcher):
        result = await dispatcher.dispatch("findClarityGaps", {"text": 123})
        assert result["success"] is False

    def test_validate_params_raises(self, dispatcher):
        tool = dispatcher.get_tool("findClarityGaps")
        with pytest.raises(InvalidInputError) as exc_info:
            dispatcher._validate_params(tool, {"text": ""})
        assert exc_info.value.errors

    def test_validate_params_message(self, dispatcher):
        tool = dispatcher.get_tool("findClarityGaps")
        with pytest.raises(InvalidInputError) as exc_info:
            dispatcher._validate_params(tool, {"text": "  "})
        assert str(exc_info.value) == "Value error, Text input cannot be empty"


class TestToolFailures:

    @pytest.mark.asyncio
    async def test_exception_becomes_envelope(self):
        dispatcher = _dispatcher_with(ExplodingGapsTool())
        result = await dispatcher.dispatch("findClarityGaps", {"text": "Make something good"})
        assert result == {
            "success": False,
            "gaps": [],
            "overall_clarity_score": 0,
            "error": "boom",
        }

    @pytest.mark.asyncio
    async def test_malformed_response_becomes_envelope(self):
        dispatcher = _dispatcher_with(MalformedGapsTool())
        result = await dispatcher.dispatch("findClarityGaps", {"text": "Make something good"})
        assert result["success"] is False
        assert "Invalid response from findClarityGaps" in result["error"]

    def test_malformed_response_raises_validation_error(self):
        dispatcher = _dispatcher_with(MalformedGapsTool())
        tool = dispatcher.get_tool("findClarityGaps")
        with pytest.raises(ResponseValidationError):
            dispatcher._validate_response(tool, {"success": True, "overall_clarity_score": 150})

    @pytest.mark.asyncio
    async def test_tool_without_envelope_reraises(self):
        dispatcher = _dispatcher_with(ExplodingHealthTool())
        with pytest.raises(RuntimeError, match="health broke"):
            await dispatcher.dispatch("health")
