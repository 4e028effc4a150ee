"""
Output renderer for the CLI.

Provides consistent formatting for operation results.
"""

import json
from typing import Any
import logging

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

# Global console instance
console = Console()
logger = logging.getLogger(__name__)

SEVERITY_STYLES = {
    "high": "bold red",
    "medium": "yellow",
    "low": "dim",
}


def score_style(score: int) -> str:
    """Color for a clarity score."""
    if score >= 80:
        return "green"
    elif score >= 50:
        return "yellow"
    else:
        return "red"


class OutputRenderer:
    """
    Renders output with consistent formatting using Rich.

    Provides methods for messages (errors, success, info) and for each
    operation's result.
    """

    def __init__(self, console_instance: Console | None = None) -> None:
        """
        Initialize the renderer.

        Args:
            console_instance: Optional Rich Console instance to use
        """
        self.console = console_instance or console

    def error(self, message: str, title: str | None = None) -> None:
        """
        Render an error message in red.

        Args:
            message: The error message
            title: Optional title for the error
        """
        if title:
            self.console.print(f"[bold red]{title}:[/bold red] {message}")
        else:
            self.console.print(f"[bold red]Error:[/bold red] {message}")

    def success(self, message: str, title: str | None = None) -> None:
        if title:
            self.console.print(f"[bold green]{title}:[/bold green] {message}")
        else:
            self.console.print(f"[green]✓[/green] {message}")

    def info(self, message: str, title: str | None = None) -> None:
        if title:
            self.console.print(f"[bold cyan]{title}:[/bold cyan] {message}")
        else:
            self.console.print(f"[cyan]ℹ[/cyan] {message}")

    def json(self, data: Any) -> None:
        """
        Render a JSON document with syntax highlighting.

        Args:
            data: JSON-serializable data
        """
        text = json.dumps(data, indent=2, ensure_ascii=False)
        self.console.print(Syntax(text, "json", theme="monokai", word_wrap=True))

    def table(self, title: str, columns: list[str], rows: list[list[Any]]) -> None:
        """
        Render a table.

        Args:
            title: Table title
            columns: Column headers
            rows: Table rows
        """
        table = Table(title=title)

        for column in columns:
            table.add_column(column)

        for row in rows:
            table.add_row(*[str(cell) for cell in row])

        self.console.print(table)

    def clarity_gaps(self, result: dict[str, Any], suggestions: list[str] | None = None) -> None:
        """
        Render a findClarityGaps result.

        Args:
            result: Response dict with gaps and overall_clarity_score
            suggestions: Optional category-level suggestions to list below the table
        """
        score = result.get("overall_clarity_score", 0)
        style = score_style(score)
        self.console.print(f"[bold]Clarity score:[/bold] [{style}]{score}/100[/{style}]")

        gaps = result.get("gaps", [])
        logger.debug(f"Rendering {len(gaps)} clarity gap(s), score={score}")
        if not gaps:
            self.success("No clarity gaps found")
        else:
            table = Table(title=f"Clarity Gaps ({len(gaps)})")
            table.add_column("Severity")
            table.add_column("Category")
            table.add_column("Description")
            table.add_column("Suggestion")
            for gap in gaps:
                severity = gap["severity"]
                table.add_row(
                    Text(severity, style=SEVERITY_STYLES.get(severity, "")),
                    gap["category"],
                    gap["description"],
                    gap["suggestion"],
                )
            self.console.print(table)

        if suggestions:
            self.console.print("\n[bold]Suggestions:[/bold]")
            for suggestion in suggestions:
                self.console.print(Text(f"  • {suggestion}"))

    def prompt_record(self, result: dict[str, Any]) -> None:
        """Render a convertPromptToJson result."""
        data = result.get("data") or {}
        inputs = data.get("inputs", {})
        outputs = data.get("outputs", {})

        self.console.print(Panel(Text(data.get("task", "")), title="Task", border_style="cyan"))
        self.console.print(Panel(Text(data.get("intent", "")), title="Intent", border_style="cyan"))

        rows = [
            ["Required", ", ".join(inputs.get("required", []))],
            ["Optional", ", ".join(inputs.get("optional", []))],
            ["Constraints", ", ".join(inputs.get("constraints", []))],
            ["Primary output", outputs.get("primary", "")],
            ["Secondary outputs", ", ".join(outputs.get("secondary", []))],
            ["Format", outputs.get("format", "")],
        ]
        self.table("Inputs & Outputs", ["Field", "Value"], rows)

        gaps = data.get("clarity_gaps", [])
        if gaps:
            self.console.print("\n[bold yellow]Clarity gaps:[/bold yellow]")
            for gap in gaps:
                self.console.print(Text(f"  • {gap}"))

        self.console.print(f"\n[dim]Processed in {result.get('processing_time_ms', 0)}ms[/dim]")

    def refinement(self, result: dict[str, Any]) -> None:
        """Render a refinePrompt result."""
        self.console.print(Panel(Text(result.get("original_prompt", "")), title="Original", border_style="blue"))
        self.console.print(Panel(Text(result.get("refined_prompt", "")), title="Refined", border_style="green"))

        improvements = result.get("improvements", [])
        if not improvements:
            self.success("Prompt is already clear; nothing to refine")
            return

        self.table(
            f"Improvements ({len(improvements)})",
            ["Type", "Description"],
            [[item["type"], item["description"]] for item in improvements],
        )

    def print(self, *args: Any, **kwargs: Any) -> None:
        """
        Direct access to console.print.

        Args:
            *args: Arguments to pass to console.print
            **kwargs: Keyword arguments to pass to console.print
        """
        self.console.print(*args, **kwargs)
