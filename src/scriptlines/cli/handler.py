"""Unified CLI handler for standardized error handling and output."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from scriptlines.cli.formatters.base import OutputFormat
from scriptlines.cli.formatters.json_formatter import JsonFormatter
from scriptlines.config import get_logger
from scriptlines.exceptions import ScriptLinesError, ValidationError

logger = get_logger(__name__)


class CLIHandler:
    """Unified handler for CLI commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize CLI handler.

        Args:
            console: Rich console for output
        """
        self.console = console or Console()
        self.json_formatter = JsonFormatter()

    def handle_error(
        self, error: Exception, json_output: bool = False, exit_code: int = 1
    ) -> NoReturn:
        """Handle and display errors consistently.

        Args:
            error: Exception to handle
            json_output: Whether to output JSON
            exit_code: Exit code to use

        Raises:
            typer.Exit: Always, with ``exit_code``
        """
        message = error.message if isinstance(error, ScriptLinesError) else str(error)
        logger.debug("Command failed", error=message, error_type=type(error).__name__)

        if json_output:
            # Pure JSON without ANSI escape codes
            print(self.json_formatter.format_error_response(error, exit_code))
        else:
            if isinstance(error, ValidationError):
                prefix = "Validation Error"
            else:
                prefix = "Error"
            self.console.print(f"[red]{prefix}: {escape(message)}[/red]")
            hint = getattr(error, "hint", None)
            if hint:
                self.console.print(f"[yellow]Hint: {escape(hint)}[/yellow]")

        raise typer.Exit(exit_code)

    def get_output_format(self, json: bool = False) -> OutputFormat:
        """Determine output format from flags."""
        return OutputFormat.JSON if json else OutputFormat.TABLE

    def read_script(self, path: Path) -> str:
        """Read a screenplay file as UTF-8 text.

        Args:
            path: File to read

        Returns:
            File contents with the newlines left as written

        Raises:
            ValidationError: If the file cannot be read or decoded
        """
        try:
            with path.open(encoding="utf-8", newline="") as handle:
                return handle.read()
        except UnicodeDecodeError as e:
            raise ValidationError(
                message=f"Cannot decode {path} as UTF-8",
                hint="Save the screenplay as UTF-8 plain text",
                details={"path": str(path)},
            ) from e
        except OSError as e:
            raise ValidationError(
                message=f"Cannot read {path}: {e.strerror or e}",
                details={"path": str(path)},
            ) from e
