"""Context-sensitive autocomplete for screenplay text."""

from __future__ import annotations

from .context import resolve_context
from .corpus import (
    SCENE_HEADING_PREFIXES,
    TIMES_OF_DAY,
    TRANSITIONS,
    SuggestionCorpus,
)
from .models import AutocompleteContext, Suggestion, SuggestionType
from .suggestions import apply_suggestion, get_suggestions, suggest

__all__ = [
    "SCENE_HEADING_PREFIXES",
    "TIMES_OF_DAY",
    "TRANSITIONS",
    "AutocompleteContext",
    "Suggestion",
    "SuggestionCorpus",
    "SuggestionType",
    "apply_suggestion",
    "get_suggestions",
    "resolve_context",
    "suggest",
]
