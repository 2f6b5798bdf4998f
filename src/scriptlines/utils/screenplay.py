"""Screenplay-specific utility functions."""

from __future__ import annotations

import hashlib

from scriptlines.parser.models import LocationType
from scriptlines.parser.patterns import (
    CHARACTER_EXTENSION_PATTERN,
    HEADING_TOKEN_PATTERN,
    LOCATION_SEPARATOR,
    NUMBERED_SCENE_HEADING_PATTERN,
    SCREENPLAY_DETECTORS,
)

_TOKEN_TYPES = {
    "INT./EXT": LocationType.INT_EXT,
    "INT/EXT": LocationType.INT_EXT,
    "I/E": LocationType.INT_EXT,
    "INT": LocationType.INT,
    "EXT": LocationType.EXT,
}


class ScreenplayUtils:
    """Utility functions for screenplay processing."""

    @staticmethod
    def split_scene_number(heading: str) -> tuple[str | None, str]:
        """Split a leading scene number off a shooting-script heading.

        Args:
            heading: Heading text (e.g., "12. INT. HOUSE - DAY")

        Returns:
            Tuple of (scene number or None, heading without the number)
        """
        heading = heading.strip()
        match = NUMBERED_SCENE_HEADING_PATTERN.match(heading)
        if not match:
            return None, heading
        return match.group("number"), heading[match.end() :]

    @staticmethod
    def extract_location_type(heading: str) -> tuple[LocationType, str]:
        """Split the leading INT/EXT token off a scene heading.

        Args:
            heading: Scene heading text (e.g., "INT. COFFEE SHOP - DAY")

        Returns:
            Tuple of (location type, remainder of the heading). Headings
            without a recognised token yield ``UNKNOWN`` and the whole text.
        """
        _, heading = ScreenplayUtils.split_scene_number(heading)
        match = HEADING_TOKEN_PATTERN.match(heading)
        if not match:
            return LocationType.UNKNOWN, heading
        token = match.group("token").upper()
        return _TOKEN_TYPES[token], heading[match.end() :]

    @staticmethod
    def parse_scene_heading(heading: str) -> tuple[LocationType, str, str]:
        """Parse a scene heading into its components.

        The location runs up to the first " - "; everything after it is the
        time of day. Without a separator the whole remainder is the location
        and the time of day is empty.

        Args:
            heading: Scene heading text (e.g., "INT. COFFEE SHOP - DAY")

        Returns:
            Tuple of (location_type, location, time_of_day)
        """
        location_type, rest = ScreenplayUtils.extract_location_type(heading)
        if LOCATION_SEPARATOR in rest:
            location, time_of_day = rest.split(LOCATION_SEPARATOR, 1)
            return location_type, location.strip(), time_of_day.strip()
        return location_type, rest.strip(), ""

    @staticmethod
    def parse_character_cue(cue: str) -> tuple[str, str | None]:
        """Split a character cue into name and extension.

        Args:
            cue: Character cue line (e.g., "JOHN (CONT'D)")

        Returns:
            Tuple of (name, extension); extension is None when absent
        """
        cue = cue.strip()
        match = CHARACTER_EXTENSION_PATTERN.match(cue)
        if match:
            return match.group("name").strip(), match.group("extension")
        return cue, None

    @staticmethod
    def compute_scene_hash(scene_text: str, truncate: bool = True) -> str:
        """Compute a stable hash for scene content.

        Args:
            scene_text: Scene text, heading included
            truncate: If True, truncate hash to 16 characters (default: True)

        Returns:
            Hex digest of the scene content hash (SHA256)
        """
        hash_digest = hashlib.sha256(scene_text.strip().encode("utf-8")).hexdigest()
        return hash_digest[:16] if truncate else hash_digest

    @staticmethod
    def looks_like_screenplay(text: str) -> bool:
        """Guess whether pasted text is screenplay content.

        True when the text mentions a scene heading token, has an uppercase
        line followed by a lowercase one after a line break, or names a
        common transition.
        """
        return any(pattern.search(text) for pattern in SCREENPLAY_DETECTORS)
