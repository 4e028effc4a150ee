"""
Main CLI entry point for text-to-json-mcp.
"""

import asyncio
import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from prompt_cli import __version__
from prompt_cli.output.renderer import OutputRenderer
from prompt_framework.analysis import GapAnalyzer
from prompt_framework.config import ConfigLoadError, Settings, configure_logging, load_settings
from prompt_framework.runtime import ToolDispatcher

console = Console()
error_console = Console(stderr=True)

FORMAT_CHOICES = ["json", "pretty"]


@click.group(invoke_without_command=True)
@click.option("--version", is_flag=True, help="Show version and exit")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option("--debug", "-d", is_flag=True, help="Enable debug logging")
@click.option("--info", "-i", is_flag=True, help="Enable info logging")
@click.pass_context
def cli(ctx: click.Context, version: bool, config: Path | None, debug: bool, info: bool) -> None:
    """
    text-to-json-mcp - Structure, analyze and refine prompts.

    Use the convert, gaps and refine subcommands on a prompt, or
    start the MCP server with the server subcommand.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config
    ctx.obj["debug"] = debug

    try:
        settings = load_settings(config)
    except ConfigLoadError as e:
        error_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        sys.exit(1)
    ctx.obj["settings"] = settings

    if debug or info:
        level = logging.DEBUG if debug else logging.INFO
        configure_logging(level, log_dir=settings.log_dir_path)
    else:
        # stderr only; the log file is opt-in through the flags
        configure_logging(settings.log_level_value)

    if version:
        click.echo(f"{settings.APP_NAME} v{__version__}")
        return

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _run_operation(ctx: click.Context, tool_name: str, words: tuple[str, ...]) -> dict:
    """Dispatch a text operation and return its response, exiting on failure."""
    text = " ".join(words)
    if not text.strip():
        error_console.print("[bold red]Error:[/bold red] Text input is required")
        error_console.print(f"Usage: text-to-json-mcp {ctx.info_name} \"your prompt here\"")
        sys.exit(1)

    dispatcher = ToolDispatcher(version=__version__)
    result = asyncio.run(dispatcher.dispatch(tool_name, {"text": text}))

    if not result.get("success", False):
        error_console.print(f"[bold red]Error:[/bold red] {escape(result.get('error', 'Unknown error'))}")
        sys.exit(1)

    return result


def _resolve_format(ctx: click.Context, output_format: str | None) -> str:
    if output_format:
        return output_format
    settings: Settings = ctx.obj["settings"]
    return settings.DEFAULT_OUTPUT_FORMAT


def _echo_json(result: dict) -> None:
    click.echo(json.dumps(result, indent=2, ensure_ascii=False))


@cli.command()
@click.argument("text", nargs=-1)
@click.option("--format", "output_format", type=click.Choice(FORMAT_CHOICES), help="Output format")
@click.pass_context
def convert(ctx: click.Context, text: tuple[str, ...], output_format: str | None) -> None:
    """Convert a prompt into a structured JSON record."""
    result = _run_operation(ctx, "convertPromptToJson", text)

    if _resolve_format(ctx, output_format) == "json":
        _echo_json(result)
    else:
        OutputRenderer(console).prompt_record(result)


@cli.command()
@click.argument("text", nargs=-1)
@click.option("--format", "output_format", type=click.Choice(FORMAT_CHOICES), help="Output format")
@click.pass_context
def gaps(ctx: click.Context, text: tuple[str, ...], output_format: str | None) -> None:
    """Find clarity gaps in a prompt and score it."""
    result = _run_operation(ctx, "findClarityGaps", text)

    if _resolve_format(ctx, output_format) == "json":
        _echo_json(result)
    else:
        suggestions = GapAnalyzer().suggest(" ".join(text))
        OutputRenderer(console).clarity_gaps(result, suggestions)


@cli.command()
@click.argument("text", nargs=-1)
@click.option("--format", "output_format", type=click.Choice(FORMAT_CHOICES), help="Output format")
@click.pass_context
def refine(ctx: click.Context, text: tuple[str, ...], output_format: str | None) -> None:
    """Rewrite a prompt to address its clarity gaps."""
    result = _run_operation(ctx, "refinePrompt", text)

    if _resolve_format(ctx, output_format) == "json":
        _echo_json(result)
    else:
        OutputRenderer(console).refinement(result)


@cli.command()
@click.pass_context
def server(ctx: click.Context) -> None:
    """Start the MCP server on stdio."""
    from prompt_framework.server.mcp_server import main as run_server

    # stdout carries the protocol; status goes to stderr
    error_console.print("[cyan]Starting MCP server...[/cyan]")
    config_path = ctx.obj.get("config_path")
    run_server(str(config_path) if config_path else None)


@cli.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Show version information."""
    settings: Settings = ctx.obj["settings"]
    click.echo(f"{settings.APP_NAME} v{__version__}")


if __name__ == "__main__":
    cli()
