"""CLI output formatters."""

from scriptlines.cli.formatters.base import OutputFormat, OutputFormatter
from scriptlines.cli.formatters.document_formatter import (
    ClassificationFormatter,
    DocumentFormatter,
    SuggestionFormatter,
)
from scriptlines.cli.formatters.json_formatter import JsonFormatter

__all__ = [
    "ClassificationFormatter",
    "DocumentFormatter",
    "JsonFormatter",
    "OutputFormat",
    "OutputFormatter",
    "SuggestionFormatter",
]
