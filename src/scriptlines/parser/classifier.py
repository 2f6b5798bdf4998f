"""Line classifier for plain-text screenplays.

A line's element type depends on its own trimmed text and on the line right
above it: the previous line's text decides whether an uppercase line can be a
character cue, and the previous line's *type* decides whether a mixed-case
line is dialogue. Two entry points resolve that second dependency:

* :func:`classify_document` walks the text once and carries the running
  previous type forward.
* :func:`classify_at` answers a single-line query by classifying the previous
  line on demand from the two lines above the cursor.

Both produce the same labels for every line of a document.
"""

from __future__ import annotations

from collections.abc import Iterator

import structlog

from scriptlines.exceptions import check_cursor_offset
from scriptlines.parser.models import ClassifiedLine, ElementType, Line
from scriptlines.parser.patterns import (
    CHARACTER_MAX_LENGTH,
    SCENE_HEADING_PATTERN,
    TRANSITION_EXACT,
    TRANSITION_START_PATTERN,
    TRANSITION_SUFFIX,
)

logger = structlog.get_logger(__name__)

_SPEECH_OPENERS = frozenset({ElementType.CHARACTER, ElementType.PARENTHETICAL})


def is_scene_heading(line: str) -> bool:
    """Check whether a trimmed line opens a scene."""
    return SCENE_HEADING_PATTERN.match(line) is not None


def is_transition(line: str) -> bool:
    """Check whether a trimmed line is a transition such as ``CUT TO:``."""
    return (
        TRANSITION_START_PATTERN.match(line) is not None
        or line.endswith(TRANSITION_SUFFIX)
        or line in TRANSITION_EXACT
    )


def is_parenthetical(line: str) -> bool:
    """Check whether a trimmed line is wrapped in parentheses."""
    return line.startswith("(") and line.endswith(")")


def could_be_character(line: str, previous_line: str) -> bool:
    """Check the character cue heuristic for a trimmed line.

    A cue follows a blank line, is entirely uppercase and shorter than
    ``CHARACTER_MAX_LENGTH``. Periods are only allowed when the line also has
    an apostrophe, so ``O'BRIEN`` qualifies while ``DR. SMITH`` does not.
    """
    return (
        previous_line == ""
        and line == line.upper()
        and len(line) < CHARACTER_MAX_LENGTH
        and not is_scene_heading(line)
        and not line.endswith(TRANSITION_SUFFIX)
        and ("." not in line or "'" in line)
    )


def _apply_rules(
    line: str, previous_line: str, previous_type: ElementType
) -> ElementType:
    """Run the precedence-ordered rules on trimmed input; first match wins."""
    if line == "":
        return ElementType.EMPTY
    if is_scene_heading(line):
        return ElementType.SCENE_HEADING
    if is_transition(line):
        return ElementType.TRANSITION
    if is_parenthetical(line):
        return ElementType.PARENTHETICAL
    if could_be_character(line, previous_line):
        return ElementType.CHARACTER
    if previous_type in _SPEECH_OPENERS and line != line.upper():
        return ElementType.DIALOGUE
    return ElementType.ACTION


def classify(
    line: str,
    previous_line: str = "",
    previous_type: ElementType | None = None,
) -> ElementType:
    """Classify one line given the line directly above it.

    Args:
        line: Current line (surrounding whitespace is ignored)
        previous_line: Line directly above, empty for the first line
        previous_type: Known type of the previous line. When omitted it is
            derived from ``previous_line`` alone, treating that line as the
            start of a block (as if a blank line preceded it)

    Returns:
        Element type of ``line``; every input string maps to exactly one type
    """
    current = line.strip()
    previous = previous_line.strip()
    if previous_type is None:
        previous_type = _apply_rules(previous, "", ElementType.EMPTY)
    return _apply_rules(current, previous, previous_type)


def iter_lines(text: str) -> Iterator[Line]:
    """Yield every line of ``text`` with its absolute offsets."""
    start = 0
    for index, raw in enumerate(text.split("\n")):
        end = start + len(raw)
        yield Line(index=index, text=raw, start=start, end=end)
        start = end + 1


def classify_lines(text: str) -> Iterator[ClassifiedLine]:
    """Classify lines lazily in a single forward pass."""
    previous_text = ""
    previous_type = ElementType.EMPTY
    for line in iter_lines(text):
        trimmed = line.trimmed
        element_type = _apply_rules(trimmed, previous_text, previous_type)
        yield ClassifiedLine(line=line, type=element_type)
        previous_text = trimmed
        previous_type = element_type


def classify_document(text: str) -> list[ClassifiedLine]:
    """Classify every line of a document.

    Args:
        text: Full screenplay text

    Returns:
        One entry per line, in document order, carrying the line's offsets
    """
    classified = list(classify_lines(text))
    logger.debug("Classified document", lines=len(classified))
    return classified


def _line_bounds(text: str, offset: int) -> tuple[int, int]:
    """Start and end offsets of the line containing ``offset``."""
    start = text.rfind("\n", 0, offset) + 1
    end = text.find("\n", offset)
    return start, len(text) if end == -1 else end


def _line_above(text: str, line_start: int) -> tuple[str, int] | None:
    """Text and start offset of the line above the one starting at ``line_start``."""
    if line_start == 0:
        return None
    end = line_start - 1
    start = text.rfind("\n", 0, end) + 1
    return text[start:end], start


def classify_at(text: str, cursor_offset: int) -> ElementType:
    """Classify the line containing ``cursor_offset``.

    The previous line's type is recomputed from the two lines above the
    cursor, so no state from earlier calls is needed.

    Args:
        text: Full document text
        cursor_offset: Position inside ``text`` (0 to ``len(text)``)

    Returns:
        Element type of the line under the cursor

    Raises:
        InvalidArgumentError: If the offset is outside the text
    """
    check_cursor_offset(text, cursor_offset)

    line_start, line_end = _line_bounds(text, cursor_offset)
    current = text[line_start:line_end]

    above = _line_above(text, line_start)
    if above is None:
        return _apply_rules(current.strip(), "", ElementType.EMPTY)

    previous, previous_start = above
    before_previous = _line_above(text, previous_start)
    previous_type = classify(previous, before_previous[0] if before_previous else "")
    return _apply_rules(current.strip(), previous.strip(), previous_type)
