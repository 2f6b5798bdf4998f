"""JSON output formatter for CLI."""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from typing import Any

from scriptlines.cli.formatters.base import OutputFormat, OutputFormatter


def _default(value: Any) -> Any:
    """Serialize dataclasses and sets; fall back to ``str``."""
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, set | frozenset):
        return sorted(value)
    return str(value)


class JsonFormatter(OutputFormatter[Any]):
    """Generic JSON formatter for CLI output."""

    def format(
        self,
        data: Any,
        format_type: OutputFormat = OutputFormat.JSON,  # noqa: ARG002
    ) -> str:
        """Format data as JSON.

        Args:
            data: Data to format
            format_type: Output format type (ignored, always JSON)

        Returns:
            JSON string
        """
        if hasattr(data, "model_dump"):
            return json.dumps(data.model_dump(), default=_default, indent=2)
        if is_dataclass(data) and not isinstance(data, type):
            return json.dumps(asdict(data), default=_default, indent=2)
        if isinstance(data, dict | list | tuple):
            return json.dumps(data, default=_default, indent=2)
        return json.dumps({"value": data}, default=_default, indent=2)

    def format_error_response(self, error: str | Exception, code: int = 1) -> str:
        """Format an error response.

        Args:
            error: Error message or exception
            code: Error code

        Returns:
            JSON string
        """
        response: dict[str, Any] = {
            "success": False,
            "error": getattr(error, "message", None) or str(error),
            "code": code,
        }
        hint = getattr(error, "hint", None)
        if hint:
            response["hint"] = hint
        return json.dumps(response, indent=2)
