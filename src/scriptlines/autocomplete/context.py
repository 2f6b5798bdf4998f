"""Resolve what the user is typing at a cursor position."""

from __future__ import annotations

from scriptlines.autocomplete.models import AutocompleteContext, SuggestionType
from scriptlines.exceptions import check_cursor_offset
from scriptlines.parser.classifier import is_scene_heading
from scriptlines.parser.patterns import (
    CURRENT_WORD_PATTERN,
    LOCATION_SEPARATOR,
    LOCATION_TRIGGER_PATTERN,
    PARTIAL_CHARACTER_PATTERN,
    PARTIAL_SCENE_PREFIX_PATTERN,
    TIME_OF_DAY_TRIGGER_PATTERN,
    TRANSITION_START_PATTERN,
)


def _detect_trigger(
    typed: str, previous_line: str, current_word: str
) -> tuple[SuggestionType, bool]:
    """Pick the first matching trigger for the text left of the cursor.

    The patterns are tuned for half-typed input, so they are narrower than
    the classifier's rules for completed lines.
    """
    trimmed = typed.strip()
    leading = typed.lstrip()
    after_blank = previous_line == ""

    if after_blank and PARTIAL_SCENE_PREFIX_PATTERN.match(trimmed):
        return SuggestionType.SCENE_HEADING, True

    if LOCATION_TRIGGER_PATTERN.match(leading) and LOCATION_SEPARATOR not in leading:
        return SuggestionType.LOCATION, len(current_word) >= 1

    if TIME_OF_DAY_TRIGGER_PATTERN.match(leading):
        return SuggestionType.TIME_OF_DAY, True

    if (
        after_blank
        and len(trimmed) >= 2
        and PARTIAL_CHARACTER_PATTERN.match(trimmed)
        and not is_scene_heading(trimmed)
        and not TRANSITION_START_PATTERN.match(trimmed)
    ):
        return SuggestionType.CHARACTER, True

    if after_blank and TRANSITION_START_PATTERN.match(trimmed):
        return SuggestionType.TRANSITION, True

    return SuggestionType.NONE, False


def resolve_context(text: str, cursor_offset: int) -> AutocompleteContext:
    """Work out which completion, if any, applies at ``cursor_offset``.

    Args:
        text: Full document text
        cursor_offset: Cursor position (0 to ``len(text)``)

    Returns:
        Autocomplete context for the cursor

    Raises:
        InvalidArgumentError: If the offset is outside the text
    """
    check_cursor_offset(text, cursor_offset)

    line_start = text.rfind("\n", 0, cursor_offset) + 1
    line_end = text.find("\n", cursor_offset)
    line_content = text[line_start : len(text) if line_end == -1 else line_end]
    typed = text[line_start:cursor_offset]

    if line_start == 0:
        previous_line = ""
    else:
        previous_start = text.rfind("\n", 0, line_start - 1) + 1
        previous_line = text[previous_start : line_start - 1].strip()

    word_match = CURRENT_WORD_PATTERN.search(typed)
    current_word = word_match.group(0) if word_match else ""
    word_start = cursor_offset - len(current_word)

    suggestion_type, should_show = _detect_trigger(typed, previous_line, current_word)

    return AutocompleteContext(
        should_show=should_show,
        type=suggestion_type,
        current_word=current_word,
        word_start=word_start,
        line_content=line_content,
        line_start=line_start,
        previous_line=previous_line,
    )
