"""Data models for autocomplete."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SuggestionType(str, Enum):
    """Category of completion that applies at the cursor."""

    SCENE_HEADING = "scene-heading"
    LOCATION = "location"
    TIME_OF_DAY = "time-of-day"
    CHARACTER = "character"
    TRANSITION = "transition"
    NONE = "none"


@dataclass(frozen=True)
class AutocompleteContext:
    """What is being typed at a cursor position.

    Recomputed from scratch for every (text, cursor) pair.
    """

    should_show: bool
    type: SuggestionType
    current_word: str
    word_start: int
    line_content: str
    line_start: int
    previous_line: str


@dataclass(frozen=True)
class Suggestion:
    """A single completion candidate."""

    value: str
    label: str
    category: str | None = None
