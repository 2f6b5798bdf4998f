"""Rich table rendering for classified lines, documents and suggestions."""

from __future__ import annotations

import io
from dataclasses import asdict
from typing import Any

from rich.console import Console, RenderableType
from rich.markup import escape
from rich.table import Table

from scriptlines.autocomplete.models import AutocompleteContext, Suggestion
from scriptlines.cli.formatters.base import OutputFormat, OutputFormatter
from scriptlines.cli.formatters.json_formatter import JsonFormatter
from scriptlines.parser.models import ClassifiedLine, ScreenplayDocument

_TYPE_STYLES = {
    "scene-heading": "bold cyan",
    "character": "bold magenta",
    "parenthetical": "italic",
    "transition": "yellow",
    "action": "green",
    "empty": "dim",
}


class RenderableFormatter(OutputFormatter[Any]):
    """Formatter whose table output is a list of rich renderables."""

    def renderables(self, data: Any) -> list[RenderableType]:
        """Build the rich objects shown for ``data``."""
        raise NotImplementedError

    def to_json(self, data: Any) -> str:
        """Serialize ``data`` as JSON."""
        return JsonFormatter().format(data)

    def format(self, data: Any, format_type: OutputFormat = OutputFormat.TABLE) -> str:
        """Format data as JSON or as plain rendered tables."""
        if format_type == OutputFormat.JSON:
            return self.to_json(data)
        string_io = io.StringIO()
        temp_console = Console(file=string_io, width=120)
        for renderable in self.renderables(data):
            temp_console.print(renderable)
        return string_io.getvalue()

    def print(self, data: Any, format_type: OutputFormat = OutputFormat.TABLE) -> None:
        """Print tables straight to the console, or JSON without styling."""
        if format_type == OutputFormat.JSON:
            # Output pure JSON without ANSI escape codes or wrapping
            print(self.to_json(data))
            return
        for renderable in self.renderables(data):
            self.console.print(renderable)


class ClassificationFormatter(RenderableFormatter):
    """Formatter for per-line classification results."""

    def to_json(self, data: list[ClassifiedLine]) -> str:
        return JsonFormatter().format(
            [
                {
                    "line": item.line.index + 1,
                    "start": item.line.start,
                    "end": item.line.end,
                    "type": item.type.value,
                    "text": item.line.trimmed,
                }
                for item in data
            ]
        )

    def renderables(self, data: list[ClassifiedLine]) -> list[RenderableType]:
        table = Table(title="Line Classification", show_header=True)
        table.add_column("Line", justify="right", style="dim")
        table.add_column("Type")
        table.add_column("Text", no_wrap=False)
        for item in data:
            style = _TYPE_STYLES.get(item.type.value)
            label = f"[{style}]{item.type.value}[/]" if style else item.type.value
            table.add_row(str(item.line.index + 1), label, escape(item.line.trimmed))
        return [table]


class DocumentFormatter(RenderableFormatter):
    """Formatter for extracted scenes, characters and locations."""

    def to_json(self, data: ScreenplayDocument) -> str:
        return JsonFormatter().format(data.to_dict())

    def renderables(self, data: ScreenplayDocument) -> list[RenderableType]:
        if not data.scenes:
            return ["[yellow]No scenes found.[/yellow]"]

        scenes = Table(title="Scenes", show_header=True, header_style="bold magenta")
        scenes.add_column("#", justify="right")
        scenes.add_column("Heading", style="cyan")
        scenes.add_column("Location")
        scenes.add_column("Type")
        scenes.add_column("Time")
        scenes.add_column("Characters")
        for scene in data.scenes:
            scenes.add_row(
                str(scene.number),
                escape(scene.heading),
                escape(scene.location.name) or "-",
                scene.location.type.value,
                escape(scene.time_of_day) or "-",
                escape(", ".join(scene.characters)) or "-",
            )

        characters = Table(
            title="Characters", show_header=True, header_style="bold magenta"
        )
        characters.add_column("Name", style="cyan")
        characters.add_column("Scenes")
        characters.add_column("Dialogue Lines", justify="right")
        for character in data.characters:
            characters.add_row(
                escape(character.name),
                ", ".join(str(number) for number in character.scene_numbers) or "-",
                str(character.total_dialogue),
            )

        locations = Table(
            title="Locations", show_header=True, header_style="bold magenta"
        )
        locations.add_column("Name", style="cyan")
        locations.add_column("Type")
        locations.add_column("Scenes", justify="right")
        for location in data.locations:
            locations.add_row(
                escape(location.name) or "-",
                location.type.value,
                str(location.scene_count),
            )

        return [scenes, characters, locations]


class SuggestionFormatter(RenderableFormatter):
    """Formatter for an autocomplete context and its suggestions."""

    def to_json(self, data: tuple[AutocompleteContext, list[Suggestion]]) -> str:
        context, suggestions = data
        return JsonFormatter().format(
            {
                "context": asdict(context),
                "suggestions": [asdict(s) for s in suggestions],
            }
        )

    def renderables(
        self, data: tuple[AutocompleteContext, list[Suggestion]]
    ) -> list[RenderableType]:
        context, suggestions = data
        header = (
            f"Context: [bold]{context.type.value}[/bold] "
            f"(word: {escape(repr(context.current_word))})"
        )
        if not suggestions:
            return [header, "[yellow]No suggestions.[/yellow]"]

        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Suggestion", style="cyan")
        table.add_column("Category")
        for suggestion in suggestions:
            table.add_row(escape(suggestion.label), suggestion.category or "-")
        return [header, table]
