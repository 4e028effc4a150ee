"""Rich output rendering for the CLI."""

from prompt_cli.output.renderer import OutputRenderer, console

__all__ = ["OutputRenderer", "console"]
