"""Smart Tab/Enter rules for moving between screenplay elements.

Each (element type, key) pair maps to the literal text inserted at the
cursor to seed the next element. An empty string means the key keeps its
ordinary behaviour.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from scriptlines.exceptions import InvalidArgumentError, check_cursor_offset
from scriptlines.parser.classifier import classify_at
from scriptlines.parser.models import ElementType

DIALOGUE_INDENT = " " * 20
CHARACTER_INDENT = " " * 30


class TriggerKey(str, Enum):
    """Keys that trigger smart formatting."""

    TAB = "tab"
    ENTER = "enter"


INSERTION_TABLE = MappingProxyType(
    {
        # Tab moves on to the next kind of element
        (ElementType.SCENE_HEADING, TriggerKey.TAB): "\n\n",
        (ElementType.ACTION, TriggerKey.TAB): "\n\n" + CHARACTER_INDENT,
        (ElementType.CHARACTER, TriggerKey.TAB): "\n" + DIALOGUE_INDENT,
        (ElementType.DIALOGUE, TriggerKey.TAB): "\n\n" + CHARACTER_INDENT,
        (ElementType.PARENTHETICAL, TriggerKey.TAB): "\n" + DIALOGUE_INDENT,
        (ElementType.TRANSITION, TriggerKey.TAB): "\n\n",
        (ElementType.EMPTY, TriggerKey.TAB): "",
        # Enter continues the element or opens its natural follower
        (ElementType.SCENE_HEADING, TriggerKey.ENTER): "\n\n",
        (ElementType.ACTION, TriggerKey.ENTER): "\n",
        (ElementType.CHARACTER, TriggerKey.ENTER): "\n" + DIALOGUE_INDENT + "(",
        (ElementType.DIALOGUE, TriggerKey.ENTER): "\n" + DIALOGUE_INDENT,
        (ElementType.PARENTHETICAL, TriggerKey.ENTER): "\n" + DIALOGUE_INDENT,
        (ElementType.TRANSITION, TriggerKey.ENTER): "\n\n",
        (ElementType.EMPTY, TriggerKey.ENTER): "",
    }
)


def _coerce(value: object, enum_type: type[Enum]) -> Enum:
    """Accept an enum member, its value or its name; reject anything else."""
    if isinstance(value, enum_type):
        return value
    if isinstance(value, str):
        member_name = value.strip().upper().replace("-", "_")
        if member_name in enum_type.__members__:
            return enum_type.__members__[member_name]
    try:
        return enum_type(value)
    except ValueError as e:
        raise InvalidArgumentError(
            message=f"Unknown {enum_type.__name__}: {value!r}",
            hint=f"Expected one of: {', '.join(m.value for m in enum_type)}",
        ) from e


def next_insertion(element_type: ElementType | str, key: TriggerKey | str) -> str:
    """Text to insert when ``key`` is pressed at the end of an element.

    Args:
        element_type: Type of the line the cursor is on
        key: Tab or Enter

    Returns:
        Literal insertion; empty when the key should behave normally

    Raises:
        InvalidArgumentError: If either argument is not a known member
    """
    element = _coerce(element_type, ElementType)
    trigger = _coerce(key, TriggerKey)
    return INSERTION_TABLE[(element, trigger)]


def column_at(text: str, offset: int) -> int:
    """Zero-based column of ``offset`` within its line."""
    return offset - (text.rfind("\n", 0, offset) + 1)


def apply_insertion(
    text: str,
    cursor_offset: int,
    key: TriggerKey | str,
    element_type: ElementType | str | None = None,
) -> tuple[str, int]:
    """Insert the smart-formatting text for ``key`` at the cursor.

    Args:
        text: Full document text
        cursor_offset: Cursor position (0 to ``len(text)``)
        key: Tab or Enter
        element_type: Type of the current line; classified from ``text``
            when omitted

    Returns:
        Tuple of (new text, new cursor offset)

    Raises:
        InvalidArgumentError: If the offset or arguments are invalid
    """
    check_cursor_offset(text, cursor_offset)
    if element_type is None:
        element_type = classify_at(text, cursor_offset)
    insertion = next_insertion(element_type, key)
    new_text = text[:cursor_offset] + insertion + text[cursor_offset:]
    return new_text, cursor_offset + len(insertion)
