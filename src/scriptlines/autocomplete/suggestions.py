"""Filter the suggestion corpus for an autocomplete context."""

from __future__ import annotations

from collections.abc import Iterable

from scriptlines.autocomplete.context import resolve_context
from scriptlines.autocomplete.corpus import SuggestionCorpus
from scriptlines.autocomplete.models import (
    AutocompleteContext,
    Suggestion,
    SuggestionType,
)
from scriptlines.config import EditorConfiguration
from scriptlines.exceptions import check_cursor_offset


def _by_prefix(candidates: Iterable[Suggestion], needle: str) -> list[Suggestion]:
    return [s for s in candidates if s.value.upper().startswith(needle)]


def get_suggestions(
    context: AutocompleteContext, corpus: SuggestionCorpus
) -> list[Suggestion]:
    """Return the completions that match the word being typed.

    Matching is case-insensitive. Locations match anywhere in the name and
    are de-duplicated first; every other category matches by prefix. Order
    follows the corpus.

    Args:
        context: Result of :func:`resolve_context`
        corpus: Vocabularies to draw from

    Returns:
        Matching suggestions, possibly empty
    """
    needle = context.current_word.upper()

    if context.type == SuggestionType.SCENE_HEADING:
        return _by_prefix(corpus.scene_heading_prefixes, needle)

    if context.type == SuggestionType.LOCATION:
        unique_locations = dict.fromkeys(corpus.location_names)
        return [
            Suggestion(value=name, label=name, category="Known location")
            for name in unique_locations
            if needle in name.upper()
        ]

    if context.type == SuggestionType.TIME_OF_DAY:
        return _by_prefix(corpus.times_of_day, needle)

    if context.type == SuggestionType.CHARACTER:
        return [
            Suggestion(value=name, label=name, category="Character")
            for name in corpus.character_names
            if name.upper().startswith(needle)
        ]

    if context.type == SuggestionType.TRANSITION:
        return _by_prefix(corpus.transitions, needle)

    return []


def suggest(
    text: str,
    cursor_offset: int,
    corpus: SuggestionCorpus,
    configuration: EditorConfiguration | None = None,
) -> list[Suggestion]:
    """Resolve the context at the cursor and return its suggestions.

    Args:
        text: Full document text
        cursor_offset: Cursor position (0 to ``len(text)``)
        corpus: Vocabularies to draw from
        configuration: Caller's editor options; autocomplete is on by default

    Returns:
        Suggestions to display; empty means the dropdown stays closed

    Raises:
        InvalidArgumentError: If the offset is outside the text
    """
    check_cursor_offset(text, cursor_offset)
    if configuration is not None and not configuration.autocomplete_enabled:
        return []

    context = resolve_context(text, cursor_offset)
    if not context.should_show:
        return []
    return get_suggestions(context, corpus)


def apply_suggestion(
    text: str, context: AutocompleteContext, suggestion: Suggestion
) -> tuple[str, int]:
    """Replace the word being typed with ``suggestion``.

    Returns:
        Tuple of (new text, cursor offset just after the inserted value)
    """
    before = text[: context.word_start]
    after = text[context.word_start + len(context.current_word) :]
    return before + suggestion.value + after, context.word_start + len(suggestion.value)
