"""Regex patterns and keyword tables for screenplay line recognition.

Completed-line patterns (used by the classifier and extractor) live next to
the narrower "still typing" patterns used by the autocomplete resolver so the
two sets can be compared side by side.
"""

from __future__ import annotations

import re

# Scene headings on a completed line: INT. / EXT. / INT./EXT. / I/E. or the
# same tokens followed by whitespace.
SCENE_HEADING_PATTERN = re.compile(r"^(INT|EXT|INT/EXT|I/E)[.\s]", re.IGNORECASE)

# Shooting-script headings carry a scene number: "12. INT. HOUSE - DAY".
NUMBERED_SCENE_HEADING_PATTERN = re.compile(
    r"^(?P<number>\d+)\.\s*(?=(?:INT\.|EXT\.|INT/EXT\.|I/E\.))", re.IGNORECASE
)

# Leading location-type token of a heading, longest alternatives first.
HEADING_TOKEN_PATTERN = re.compile(
    r"^(?P<token>INT\./EXT|INT/EXT|I/E|INT|EXT)(?:\.|\s|$)\s*", re.IGNORECASE
)

TRANSITION_KEYWORDS = (
    "CUT",
    "FADE",
    "DISSOLVE",
    "SMASH",
    "MATCH",
    "JUMP",
    "IRIS",
    "WIPE",
)
TRANSITION_START_PATTERN = re.compile(
    r"^(" + "|".join(TRANSITION_KEYWORDS) + ")", re.IGNORECASE
)
TRANSITION_EXACT = frozenset({"FADE IN:", "FADE OUT."})
TRANSITION_SUFFIX = "TO:"

CHARACTER_MAX_LENGTH = 40

# JOHN (CONT'D), JOHN (V.O.), JOHN (O.S.), JOHN (O.C.). Only (CONT'D) survives
# classification: the other extensions contain periods, so their lines are
# Action and reach this pattern only through ScreenplayUtils.parse_character_cue.
CHARACTER_EXTENSION_PATTERN = re.compile(
    r"^(?P<name>.+?)\s*(?P<extension>\((?:V\.O\.|O\.S\.|O\.C\.|CONT'D)\))$"
)

# Autocomplete triggers, evaluated against the text left of the cursor.
PARTIAL_SCENE_PREFIX_PATTERN = re.compile(r"^(INT|EXT|I/E)?\.?$", re.IGNORECASE)
LOCATION_TRIGGER_PATTERN = re.compile(r"^(INT|EXT|INT/EXT|I/E)\.\s*", re.IGNORECASE)
TIME_OF_DAY_TRIGGER_PATTERN = re.compile(
    r"^(INT|EXT|INT/EXT|I/E)\.\s+.+\s+-\s*", re.IGNORECASE
)
PARTIAL_CHARACTER_PATTERN = re.compile(r"^[A-Z][A-Z\s'.-]*$")
CURRENT_WORD_PATTERN = re.compile(r"[A-Za-z0-9.'/-]+$")

LOCATION_SEPARATOR = " - "

# Whole-text detectors for deciding whether pasted content is a screenplay.
# Any one hit is enough.
HAS_SCENE_HEADING_PATTERN = re.compile(r"INT\.|EXT\.|INT/EXT\.|I/E\.", re.IGNORECASE)
HAS_CHARACTER_DIALOGUE_PATTERN = re.compile(r"\n[A-Z][A-Z\s]+\n\s*[a-z]")
HAS_TRANSITION_PATTERN = re.compile(r"FADE IN:|CUT TO:|FADE OUT", re.IGNORECASE)
SCREENPLAY_DETECTORS = (
    HAS_SCENE_HEADING_PATTERN,
    HAS_CHARACTER_DIALOGUE_PATTERN,
    HAS_TRANSITION_PATTERN,
)
