"""
Tests for the output renderer.
"""

from io import StringIO

import pytest
from rich.console import Console

from prompt_cli.output.renderer import OutputRenderer, score_style


@pytest.fixture
def test_console() -> Console:
    """Create a test console that writes to a StringIO."""
    return Console(file=StringIO(), width=120, legacy_windows=False)


@pytest.fixture
def renderer(test_console: Console) -> OutputRenderer:
    """Create a renderer with test console."""
    return OutputRenderer(console_instance=test_console)


def _output(test_console: Console) -> str:
    return test_console.file.getvalue()  # type: ignore[union-attr]


def test_renderer_init() -> None:
    """Test renderer initialization."""
    r = OutputRenderer()
    assert r.console is not None


def test_renderer_error(renderer: OutputRenderer, test_console: Console) -> None:
    """Test error message rendering."""
    renderer.error("Something went wrong")
    output = _output(test_console)
    assert "Error:" in output
    assert "Something went wrong" in output


def test_renderer_error_with_title(renderer: OutputRenderer, test_console: Console) -> None:
    """Test error message with custom title."""
    renderer.error("Bad input", title="Validation Error")
    assert "Validation Error:" in _output(test_console)


def test_renderer_success(renderer: OutputRenderer, test_console: Console) -> None:
    """Test success message rendering."""
    renderer.success("Operation completed")
    output = _output(test_console)
    assert "✓" in output
    assert "Operation completed" in output


def test_renderer_info_with_title(renderer: OutputRenderer, test_console: Console) -> None:
    """Test info message with title."""
    renderer.info("Loading data", title="Status")
    output = _output(test_console)
    assert "Status:" in output
    assert "Loading data" in output


def test_renderer_json(renderer: OutputRenderer, test_console: Console) -> None:
    """Test JSON rendering."""
    renderer.json({"success": True, "overall_clarity_score": 60})
    output = _output(test_console)
    assert '"overall_clarity_score"' in output
    assert "60" in output


def test_renderer_table(renderer: OutputRenderer, test_console: Console) -> None:
    """Test table rendering."""
    renderer.table("Test Table", ["Col1", "Col2"], [["A", 1], ["B", 2]])
    output = _output(test_console)
    assert "Test Table" in output
    assert "Col1" in output


@pytest.mark.parametrize("score,style", [(100, "green"), (80, "green"), (60, "yellow"), (10, "red")])
def test_score_style(score: int, style: str) -> None:
    assert score_style(score) == style


class TestClarityGaps:

    def test_gaps_table(self, renderer: OutputRenderer, test_console: Console) -> None:
        result = {
            "success": True,
            "overall_clarity_score": 60,
            "gaps": [
                {
                    "category": "ambiguous_requirement",
                    "description": 'Vague requirement: "good"',
                    "suggestion": 'Replace "good" with specific, measurable criteria',
                    "severity": "high",
                },
            ],
        }
        renderer.clarity_gaps(result, ["Use specific, measurable criteria instead of subjective terms"])
        output = _output(test_console)
        assert "60/100" in output
        assert "Clarity Gaps (1)" in output
        assert "ambiguous_requirement" in output
        assert "Suggestions:" in output

    def test_no_gaps(self, renderer: OutputRenderer, test_console: Console) -> None:
        renderer.clarity_gaps({"success": True, "overall_clarity_score": 100, "gaps": []})
        output = _output(test_console)
        assert "100/100" in output
        assert "No clarity gaps found" in output
        assert "Suggestions:" not in output


class TestPromptRecord:

    def test_record(self, renderer: OutputRenderer, test_console: Console) -> None:
        result = {
            "success": True,
            "processing_time_ms": 3,
            "data": {
                "task": "Build a site",
                "intent": "sell boxes",
                "inputs": {"required": ["customer data/information"], "optional": [], "constraints": []},
                "outputs": {"primary": "Catalog", "secondary": [], "format": "HTML"},
                "clarity_gaps": ['Unclear output: "data"'],
            },
        }
        renderer.prompt_record(result)
        output = _output(test_console)
        assert "Build a site" in output
        assert "customer data/information" in output
        assert "HTML" in output
        assert "Clarity gaps:" in output
        assert "Processed in 3ms" in output


class TestRefinement:

    def test_improvements(self, renderer: OutputRenderer, test_console: Console) -> None:
        result = {
            "success": True,
            "original_prompt": "Make it nice.",
            "refined_prompt": "Make it specific and measurable.",
            "improvements": [
                {
                    "type": "specificity",
                    "description": "Replaced subjective terms with objective criteria",
                    "before": "Make it nice.",
                    "after": "Make it specific and measurable.",
                },
            ],
        }
        renderer.refinement(result)
        output = _output(test_console)
        assert "Original" in output
        assert "Improvements (1)" in output
        assert "specificity" in output

    def test_nothing_to_refine(self, renderer: OutputRenderer, test_console: Console) -> None:
        renderer.refinement({
            "success": True,
            "original_prompt": "Clear prompt",
            "refined_prompt": "Clear prompt",
            "improvements": [],
        })
        assert "nothing to refine" in _output(test_console)
