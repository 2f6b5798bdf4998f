"""Scene, character and location extraction from screenplay text."""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from scriptlines.parser.classifier import classify_lines
from scriptlines.parser.models import (
    Character,
    CharacterAppearance,
    ClassifiedLine,
    ElementType,
    Location,
    Scene,
    SceneElement,
    SceneLocation,
    ScreenplayDocument,
)
from scriptlines.utils.screenplay import ScreenplayUtils

logger = structlog.get_logger(__name__)

# Element types that end dialogue attribution for the current speaker
_SPEAKER_RESETS = frozenset(
    {ElementType.ACTION, ElementType.TRANSITION, ElementType.SCENE_HEADING}
)


@dataclass
class _SceneDraft:
    """A scene that is still receiving lines."""

    heading: str
    location: SceneLocation
    time_of_day: str
    elements: list[SceneElement] = field(default_factory=list)
    # character name -> dialogue lines, in order of first appearance
    speakers: dict[str, int] = field(default_factory=dict)


@dataclass
class ExtractionState:
    """Accumulator threaded through the extraction fold."""

    current_scene: _SceneDraft | None = None
    current_speaker: str | None = None
    scenes: list[Scene] = field(default_factory=list)
    characters: dict[str, Character] = field(default_factory=dict)
    locations: dict[tuple[str, str], Location] = field(default_factory=dict)
    scene_ids: dict[str, int] = field(default_factory=dict)


class DocumentExtractor:
    """Build the scene/character/location graph from plain screenplay text.

    Each call to :meth:`extract` starts from a fresh :class:`ExtractionState`,
    so one extractor can be shared freely.
    """

    def extract(self, text: str) -> ScreenplayDocument:
        """Extract scenes, characters and locations from ``text``.

        Args:
            text: Full screenplay text

        Returns:
            Extracted document with 1-based, gap-free scene numbers
        """
        state = ExtractionState()
        for classified in classify_lines(text):
            state = self.step(state, classified)
        self._close_scene(state)

        document = ScreenplayDocument(
            scenes=state.scenes,
            characters=list(state.characters.values()),
            locations=list(state.locations.values()),
        )
        logger.debug(
            "Extracted screenplay document",
            scenes=len(document.scenes),
            characters=len(document.characters),
            locations=len(document.locations),
        )
        return document

    def step(
        self, state: ExtractionState, classified: ClassifiedLine
    ) -> ExtractionState:
        """Fold one classified line into the accumulator."""
        element_type = classified.type
        if element_type == ElementType.EMPTY:
            return state

        if element_type == ElementType.SCENE_HEADING:
            self._close_scene(state)
            self._open_scene(state, classified)
            return state

        # Lines before the first heading are not part of any scene
        if state.current_scene is None:
            return state

        line = classified.line
        text = line.trimmed
        character = None
        extension = None

        if element_type == ElementType.CHARACTER:
            character, extension = self._register_cue(state, text)
        elif element_type == ElementType.DIALOGUE:
            character = state.current_speaker
            if character is not None:
                speakers = state.current_scene.speakers
                speakers[character] = speakers.get(character, 0) + 1
        elif element_type == ElementType.PARENTHETICAL:
            character = state.current_speaker
        elif element_type in _SPEAKER_RESETS:
            state.current_speaker = None

        state.current_scene.elements.append(
            SceneElement(
                type=element_type,
                text=text,
                line_index=line.index,
                start=line.start,
                end=line.end,
                character=character,
                extension=extension,
            )
        )
        return state

    def _open_scene(self, state: ExtractionState, classified: ClassifiedLine) -> None:
        """Start a new scene from a heading line."""
        line = classified.line
        heading = line.trimmed
        location_type, location_name, time_of_day = (
            ScreenplayUtils.parse_scene_heading(heading)
        )
        draft = _SceneDraft(
            heading=heading,
            location=SceneLocation(name=location_name, type=location_type),
            time_of_day=time_of_day,
        )
        draft.elements.append(
            SceneElement(
                type=ElementType.SCENE_HEADING,
                text=heading,
                line_index=line.index,
                start=line.start,
                end=line.end,
            )
        )
        state.current_scene = draft
        state.current_speaker = None

    def _register_cue(self, state: ExtractionState, cue: str) -> tuple[str, str | None]:
        """Record a character cue in the roster and the current scene."""
        name, extension = ScreenplayUtils.parse_character_cue(cue)
        key = name.upper()
        if key not in state.characters:
            state.characters[key] = Character(name=name)
        canonical = state.characters[key].name

        if state.current_scene is not None:
            state.current_scene.speakers.setdefault(canonical, 0)
        state.current_speaker = canonical
        return canonical, extension

    def _close_scene(self, state: ExtractionState) -> None:
        """Turn the open draft into a numbered scene and update the rosters."""
        draft = state.current_scene
        if draft is None:
            return

        number = len(state.scenes) + 1
        scene_id = self._scene_id(state, draft)
        scene = Scene(
            id=scene_id,
            number=number,
            heading=draft.heading,
            location=draft.location,
            time_of_day=draft.time_of_day,
            characters=list(draft.speakers),
            elements=draft.elements,
        )
        state.scenes.append(scene)

        for name, dialogue_count in draft.speakers.items():
            state.characters[name.upper()].appearances.append(
                CharacterAppearance(
                    scene_number=number,
                    scene_id=scene_id,
                    dialogue_count=dialogue_count,
                )
            )

        location_key = (draft.location.name, draft.location.type.value)
        if location_key not in state.locations:
            state.locations[location_key] = Location(
                name=draft.location.name, type=draft.location.type
            )
        state.locations[location_key].scene_count += 1

        state.current_scene = None
        state.current_speaker = None

    @staticmethod
    def _scene_id(state: ExtractionState, draft: _SceneDraft) -> str:
        """Content hash of the scene, suffixed when an identical scene exists."""
        content = "\n".join(element.text for element in draft.elements)
        base_id = ScreenplayUtils.compute_scene_hash(content)
        seen = state.scene_ids.get(base_id, 0) + 1
        state.scene_ids[base_id] = seen
        return base_id if seen == 1 else f"{base_id}-{seen}"


def extract(text: str) -> ScreenplayDocument:
    """Extract scenes, characters and locations from screenplay text."""
    return DocumentExtractor().extract(text)
