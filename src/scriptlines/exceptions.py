"""Custom exception hierarchy for scriptlines with helpful error messages."""

from __future__ import annotations

from typing import Any


class ScriptLinesError(Exception):
    """Base exception with helpful formatting for all scriptlines errors.

    Provides structured error messages with hints and details to help callers
    understand and fix problems.
    """

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize exception with structured error information.

        Args:
            message: Primary error message describing what went wrong
            hint: Optional hint suggesting how to fix the problem
            details: Optional dictionary with additional debugging information
        """
        self.message = message
        self.hint = hint
        self.details = details
        super().__init__(self.format_error())

    def format_error(self) -> str:
        """Format the error message with hint and details.

        Returns:
            Formatted error string with all available information
        """
        output = f"Error: {self.message}"
        if self.hint:
            output += f"\nHint: {self.hint}"
        if self.details:
            details_str = "\n".join(
                f"  {key}: {value}" for key, value in self.details.items()
            )
            output += f"\nDetails:\n{details_str}"
        return output


class ConfigurationError(ScriptLinesError):
    """Configuration errors including invalid settings and missing config files."""

    pass


class ValidationError(ScriptLinesError):
    """Input validation errors with details about what was expected."""

    pass


class InvalidArgumentError(ValidationError):
    """A caller passed an argument outside the accepted domain.

    Raised for out-of-range cursor offsets and unknown element types or
    trigger keys. Screenplay text itself is never invalid.
    """

    pass


def check_cursor_offset(text: str, cursor_offset: int) -> None:
    """Reject cursor offsets that do not address a position in ``text``.

    Args:
        text: Document text the offset refers to
        cursor_offset: Offset to check, valid range is ``0..len(text)``

    Raises:
        InvalidArgumentError: If the offset is negative, past the end of the
            text, or not an integer
    """
    if isinstance(cursor_offset, bool) or not isinstance(cursor_offset, int):
        raise InvalidArgumentError(
            message=(
                "Cursor offset must be an integer, "
                f"got {type(cursor_offset).__name__}"
            ),
            details={"cursor_offset": repr(cursor_offset)},
        )
    if cursor_offset < 0 or cursor_offset > len(text):
        raise InvalidArgumentError(
            message=f"Cursor offset {cursor_offset} is out of range",
            hint=f"Offsets must be between 0 and {len(text)} for this text",
            details={"cursor_offset": cursor_offset, "text_length": len(text)},
        )


def check_config_keys(config: dict[str, Any]) -> None:
    """Check for common configuration mistakes.

    Args:
        config: Configuration dictionary to validate

    Raises:
        ConfigurationError: With hints about correct configuration keys
    """
    wrong_keys = {
        "delay": "autocomplete_delay_ms",
        "delay_ms": "autocomplete_delay_ms",
        "autocomplete": "autocomplete_enabled",
    }

    for wrong, correct in wrong_keys.items():
        if wrong in config:
            raise ConfigurationError(
                message=f"Invalid configuration key '{wrong}'",
                hint=f"Use '{correct}' instead of '{wrong}'",
                details={
                    "found_keys": list(config.keys()),
                    "invalid_key": wrong,
                    "correct_key": correct,
                },
            )
