"""Vocabularies that autocomplete suggestions are drawn from."""

from __future__ import annotations

from dataclasses import dataclass

from scriptlines.autocomplete.models import Suggestion
from scriptlines.parser.models import ScreenplayDocument

SCENE_HEADING_PREFIXES: tuple[Suggestion, ...] = (
    Suggestion(value="INT. ", label="INT.", category="Interior"),
    Suggestion(value="EXT. ", label="EXT.", category="Exterior"),
    Suggestion(value="INT./EXT. ", label="INT./EXT.", category="Interior/Exterior"),
    Suggestion(value="I/E. ", label="I/E.", category="Interior/Exterior (short)"),
)

TIMES_OF_DAY: tuple[Suggestion, ...] = tuple(
    Suggestion(value=value, label=value)
    for value in (
        "DAY",
        "NIGHT",
        "DAWN",
        "DUSK",
        "MORNING",
        "AFTERNOON",
        "EVENING",
        "CONTINUOUS",
        "MOMENTS LATER",
        "SAME",
        "LATER",
    )
)

TRANSITIONS: tuple[Suggestion, ...] = tuple(
    Suggestion(value=value, label=value)
    for value in (
        "CUT TO:",
        "FADE TO:",
        "FADE OUT.",
        "FADE IN:",
        "DISSOLVE TO:",
        "SMASH CUT TO:",
        "MATCH CUT TO:",
        "JUMP CUT TO:",
        "IRIS OUT.",
        "WIPE TO:",
    )
)


@dataclass(frozen=True)
class SuggestionCorpus:
    """Static keyword lists plus the names found in the current document.

    ``location_names`` may contain repeats (one entry per scene); they are
    collapsed when suggestions are filtered.
    """

    character_names: tuple[str, ...] = ()
    location_names: tuple[str, ...] = ()
    scene_heading_prefixes: tuple[Suggestion, ...] = SCENE_HEADING_PREFIXES
    times_of_day: tuple[Suggestion, ...] = TIMES_OF_DAY
    transitions: tuple[Suggestion, ...] = TRANSITIONS

    @classmethod
    def from_names(
        cls,
        character_names: list[str] | tuple[str, ...] = (),
        location_names: list[str] | tuple[str, ...] = (),
    ) -> SuggestionCorpus:
        """Build a corpus from explicit name lists and the default keywords."""
        return cls(
            character_names=tuple(character_names),
            location_names=tuple(location_names),
        )

    @classmethod
    def from_document(cls, document: ScreenplayDocument) -> SuggestionCorpus:
        """Build a corpus from an extraction result."""
        return cls.from_names(
            character_names=document.character_names(),
            location_names=document.location_names(),
        )
