"""Data models for screenplay line classification and extraction."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


class ElementType(str, Enum):
    """Semantic type of a single screenplay line."""

    SCENE_HEADING = "scene-heading"
    ACTION = "action"
    CHARACTER = "character"
    DIALOGUE = "dialogue"
    PARENTHETICAL = "parenthetical"
    TRANSITION = "transition"
    EMPTY = "empty"


class LocationType(str, Enum):
    """Interior/exterior marker taken from a scene heading."""

    INT = "INT"
    EXT = "EXT"
    INT_EXT = "INT/EXT"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class Line:
    """A view over one line of a document.

    ``start`` and ``end`` are absolute offsets; ``end`` excludes the newline.
    """

    index: int
    text: str
    start: int
    end: int

    @property
    def trimmed(self) -> str:
        """Line text without surrounding whitespace."""
        return self.text.strip()


@dataclass(frozen=True)
class ClassifiedLine:
    """A line together with its element type."""

    line: Line
    type: ElementType

    @property
    def line_range(self) -> tuple[int, int]:
        """Absolute ``(start, end)`` offsets of the line."""
        return (self.line.start, self.line.end)


@dataclass(frozen=True)
class SceneElement:
    """A classified, non-empty line that belongs to a scene."""

    type: ElementType
    text: str
    line_index: int
    start: int
    end: int
    character: str | None = None  # speaker, for character cues and dialogue
    extension: str | None = None  # (V.O.), (CONT'D) on a character cue


@dataclass(frozen=True)
class SceneLocation:
    """Location as written in one scene heading."""

    name: str
    type: LocationType = LocationType.UNKNOWN


@dataclass
class Scene:
    """Represents a scene in a screenplay."""

    id: str
    number: int
    heading: str
    location: SceneLocation
    time_of_day: str = ""
    characters: list[str] = field(default_factory=list)
    elements: list[SceneElement] = field(default_factory=list)
    synopsis: str | None = None

    def dialogue_for(self, character: str) -> list[SceneElement]:
        """Dialogue elements attributed to ``character`` in this scene."""
        return [
            element
            for element in self.elements
            if element.type == ElementType.DIALOGUE and element.character == character
        ]


@dataclass
class CharacterAppearance:
    """A character's presence in one scene."""

    scene_number: int
    scene_id: str
    dialogue_count: int = 0


@dataclass
class Character:
    """A speaking character, keyed by the uppercase cue name."""

    name: str
    appearances: list[CharacterAppearance] = field(default_factory=list)

    @property
    def total_dialogue(self) -> int:
        """Dialogue lines across all scenes."""
        return sum(appearance.dialogue_count for appearance in self.appearances)

    @property
    def scene_numbers(self) -> list[int]:
        """Numbers of the scenes this character appears in."""
        return [appearance.scene_number for appearance in self.appearances]


@dataclass
class Location:
    """A distinct location across the whole document."""

    name: str
    type: LocationType
    scene_count: int = 0


@dataclass
class ScreenplayDocument:
    """Entities extracted from a full screenplay text."""

    scenes: list[Scene] = field(default_factory=list)
    characters: list[Character] = field(default_factory=list)
    locations: list[Location] = field(default_factory=list)

    def character_names(self) -> list[str]:
        """Character names in roster order."""
        return [character.name for character in self.characters]

    def location_names(self) -> list[str]:
        """Location name of every scene, in scene order (may repeat)."""
        return [scene.location.name for scene in self.scenes if scene.location.name]

    def character_presence(self) -> dict[str, set[int]]:
        """Map each character to the numbers of the scenes they appear in."""
        presence: dict[str, set[int]] = {}
        for scene in self.scenes:
            for name in scene.characters:
                presence.setdefault(name, set()).add(scene.number)
        return presence

    def scene_connections(self) -> list[dict[str, Any]]:
        """Consecutive scene pairs that share at least one character."""
        connections = []
        for current, following in zip(self.scenes, self.scenes[1:], strict=False):
            shared = [
                name for name in current.characters if name in following.characters
            ]
            if shared:
                connections.append(
                    {
                        "from": current.number,
                        "to": following.number,
                        "characters": shared,
                    }
                )
        return connections

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form suitable for JSON output."""
        return asdict(self)
