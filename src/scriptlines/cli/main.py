"""Main CLI entry point for scriptlines."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from scriptlines import __version__
from scriptlines.autocomplete import SuggestionCorpus, resolve_context, suggest
from scriptlines.cli.formatters import (
    ClassificationFormatter,
    DocumentFormatter,
    JsonFormatter,
    SuggestionFormatter,
)
from scriptlines.cli.handler import CLIHandler
from scriptlines.config import (
    configure_logging,
    get_logger,
    get_settings,
    get_settings_for_cli,
    set_settings,
)
from scriptlines.parser import classify_document, extract
from scriptlines.utils import ScreenplayUtils

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="scriptlines",
    help="Classify, extract and autocomplete plain-text screenplays",
    pretty_exceptions_enable=False,
    add_completion=False,
    rich_markup_mode="rich",
)

ScriptFile = Annotated[
    Path,
    typer.Argument(
        help="Plain-text screenplay file",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
]
JsonOption = Annotated[bool, typer.Option("--json", help="Output as JSON")]


@app.command()
def classify(file: ScriptFile, json_output: JsonOption = False) -> None:
    """Show the element type of every line in a screenplay."""
    handler = CLIHandler(console)
    try:
        text = handler.read_script(file)
        classified = classify_document(text)
        ClassificationFormatter(console).print(
            classified, handler.get_output_format(json=json_output)
        )
    except Exception as e:
        handler.handle_error(e, json_output)


@app.command(name="extract")
def extract_command(file: ScriptFile, json_output: JsonOption = False) -> None:
    """List the scenes, characters and locations of a screenplay."""
    handler = CLIHandler(console)
    try:
        text = handler.read_script(file)
        document = extract(text)
        DocumentFormatter(console).print(
            document, handler.get_output_format(json=json_output)
        )
    except Exception as e:
        handler.handle_error(e, json_output)


@app.command(name="suggest")
def suggest_command(
    file: ScriptFile,
    cursor: Annotated[
        int | None,
        typer.Option(
            "--cursor",
            help="Cursor offset in characters (defaults to the end of the file)",
        ),
    ] = None,
    json_output: JsonOption = False,
) -> None:
    """Show autocomplete suggestions at a cursor position."""
    handler = CLIHandler(console)
    try:
        text = handler.read_script(file)
        offset = len(text) if cursor is None else cursor

        context = resolve_context(text, offset)
        # Names come from the rest of the document, not the line being typed
        line_end = context.line_start + len(context.line_content)
        corpus = SuggestionCorpus.from_document(
            extract(text[: context.line_start] + text[line_end:])
        )
        configuration = get_settings().editor_configuration()
        suggestions = suggest(text, offset, corpus, configuration)
        logger.debug(
            "Resolved suggestions",
            cursor=offset,
            trigger=context.type.value,
            count=len(suggestions),
        )

        SuggestionFormatter(console).print(
            (context, suggestions), handler.get_output_format(json=json_output)
        )
    except Exception as e:
        handler.handle_error(e, json_output)


@app.command()
def detect(file: ScriptFile, json_output: JsonOption = False) -> None:
    """Report whether a file looks like screenplay text."""
    handler = CLIHandler(console)
    try:
        text = handler.read_script(file)
        is_screenplay = ScreenplayUtils.looks_like_screenplay(text)
        logger.debug("Detected content", file=str(file), screenplay=is_screenplay)
    except Exception as e:
        handler.handle_error(e, json_output)

    if json_output:
        print(JsonFormatter().format({"file": str(file), "screenplay": is_screenplay}))
    elif is_screenplay:
        console.print(f"[green]{escape(str(file))} looks like a screenplay[/green]")
    else:
        console.print(
            f"[yellow]{escape(str(file))} does not look like a screenplay[/yellow]"
        )


@app.command()
def version(json_output: JsonOption = False) -> None:
    """Show scriptlines version."""
    version_info = {
        "name": "scriptlines",
        "version": __version__,
        "description": "Screenplay text model: classification and autocomplete",
    }

    if json_output:
        # Output pure JSON without ANSI escape codes
        print(JsonFormatter().format(version_info))
    else:
        console.print(f"scriptlines v{version_info['version']}")


@app.callback()
def main_callback(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file",
            envvar="SCRIPTLINES_CONFIG",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging (INFO level)"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug", help="Enable debug logging", envvar="SCRIPTLINES_DEBUG"
        ),
    ] = False,
) -> None:
    """Configure global options.

    Settings and logging are resolved here, once per invocation, so that
    importing the library never reads configuration.
    """
    overrides: dict[str, object] = {}
    if debug:
        overrides.update(debug=True, log_level="DEBUG")
    elif verbose:
        overrides["log_level"] = "INFO"

    try:
        settings = get_settings_for_cli(config_file=config, cli_overrides=overrides)
    except Exception as e:
        CLIHandler(console).handle_error(e)

    set_settings(settings)
    configure_logging(settings)
    logger.debug("Settings loaded", config=str(config) if config else None)


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
