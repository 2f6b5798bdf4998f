"""Tests for screenplay line classification."""

import pytest

from scriptlines.exceptions import InvalidArgumentError
from scriptlines.parser.classifier import (
    classify,
    classify_at,
    classify_document,
    could_be_character,
    is_parenthetical,
    is_scene_heading,
    is_transition,
    iter_lines,
)
from scriptlines.parser.models import ElementType


class TestRuleHelpers:
    """Test the individual recognition rules."""

    @pytest.mark.parametrize(
        "line",
        [
            "INT. COFFEE SHOP - DAY",
            "EXT. STREET - NIGHT",
            "INT./EXT. CAR - MOVING",
            "INT/EXT CAR",
            "I/E. HALLWAY",
            "ext. beach",
            "INT HOUSE",
        ],
    )
    def test_scene_headings(self, line):
        """Test the heading tokens followed by a period or whitespace."""
        assert is_scene_heading(line)

    @pytest.mark.parametrize("line", ["INTERIOR", "EXTRA", "INT", "The INT. sign"])
    def test_not_scene_headings(self, line):
        """Test that a token must open the line and be terminated."""
        assert not is_scene_heading(line)

    @pytest.mark.parametrize(
        "line",
        [
            "CUT TO:",
            "FADE IN:",
            "FADE OUT.",
            "fade to black",
            "SMASH CUT TO:",
            "DISSOLVE TO:",
            "HE WALKS TO:",
            "WIPE",
        ],
    )
    def test_transitions(self, line):
        """Test keyword starts, the TO: suffix and the exact forms."""
        assert is_transition(line)

    def test_not_transition(self):
        """Test that ordinary action is not a transition."""
        assert not is_transition("He cuts the rope.")

    def test_parenthetical(self):
        """Test parenthetical recognition."""
        assert is_parenthetical("(beat)")
        assert is_parenthetical("()")
        assert not is_parenthetical("(beat")
        assert not is_parenthetical("beat)")

    def test_character_requires_blank_previous_line(self):
        """Test that a cue must follow a blank line."""
        assert could_be_character("JOHN", "")
        assert not could_be_character("JOHN", "He waits.")

    def test_character_length_limit(self):
        """Test the exclusive 40 character limit."""
        assert could_be_character("A" * 39, "")
        assert not could_be_character("A" * 40, "")

    def test_character_period_rule(self):
        """Test that periods are only allowed alongside an apostrophe."""
        assert could_be_character("O'BRIEN", "")
        assert could_be_character("MRS. O'NEIL", "")
        assert not could_be_character("DR. SMITH", "")


class TestClassify:
    """Test the two-string classify entry point."""

    def test_empty_and_whitespace(self):
        """Test that blank lines classify as empty."""
        assert classify("") == ElementType.EMPTY
        assert classify("   \t ") == ElementType.EMPTY

    def test_scene_heading(self):
        """Test scene heading classification."""
        assert classify("INT. COFFEE SHOP - DAY") == ElementType.SCENE_HEADING

    def test_scene_heading_beats_transition_suffix(self):
        """Test rule precedence: heading is checked before transition."""
        assert classify("INT. WAY TO:") == ElementType.SCENE_HEADING

    def test_transition_beats_character(self):
        """Test rule precedence: an uppercase transition is not a cue."""
        assert classify("CUT TO:") == ElementType.TRANSITION
        assert classify("FADE IN:") == ElementType.TRANSITION

    def test_parenthetical_anywhere(self):
        """Test that parentheticals do not depend on the previous line."""
        assert classify("(beat)", "JOHN") == ElementType.PARENTHETICAL
        assert classify("(BEAT)", "") == ElementType.PARENTHETICAL

    def test_character(self):
        """Test character cue classification."""
        assert classify("JOHN", "") == ElementType.CHARACTER
        assert classify("  JOHN  ", "   ") == ElementType.CHARACTER
        assert classify("O'BRIEN") == ElementType.CHARACTER

    def test_abbreviated_name_is_action(self):
        """Test the documented heuristic: DR. SMITH is not a cue."""
        assert classify("DR. SMITH", "") == ElementType.ACTION

    def test_extension_with_periods_is_action(self):
        """Test that (V.O.) cues fail the period rule."""
        assert classify("JANE (V.O.)", "") == ElementType.ACTION
        assert classify("JANE (CONT'D)", "") == ElementType.CHARACTER

    def test_uppercase_after_text_is_action(self):
        """Test that an uppercase line without a blank line above is action."""
        assert classify("BANG!", "He fires.") == ElementType.ACTION

    def test_dialogue_after_character(self):
        """Test dialogue derived from the previous line's own type."""
        assert classify("Hello there.", "JOHN") == ElementType.DIALOGUE

    def test_dialogue_after_parenthetical(self):
        """Test dialogue following a parenthetical."""
        assert classify("Hello there.", "(quietly)") == ElementType.DIALOGUE

    def test_uppercase_after_character_is_action(self):
        """Test that shouted all-caps lines are not dialogue."""
        assert classify("HELLO!", "JOHN") == ElementType.ACTION

    def test_explicit_previous_type(self):
        """Test that a supplied previous type overrides derivation."""
        assert (
            classify("Yes.", "He nods.", ElementType.CHARACTER) == ElementType.DIALOGUE
        )
        assert classify("Yes.", "JOHN", ElementType.ACTION) == ElementType.ACTION

    def test_action_fallback(self):
        """Test that anything else is action."""
        assert classify("The door creaks open.", "") == ElementType.ACTION
        assert classify("\x00 static \x07", "") == ElementType.ACTION


class TestClassifyDocument:
    """Test the forward-pass classification of whole documents."""

    def test_sample_script(self, sample_script):
        """Test every line of the sample screenplay."""
        types = [item.type for item in classify_document(sample_script)]
        assert types == [
            ElementType.TRANSITION,
            ElementType.EMPTY,
            ElementType.SCENE_HEADING,
            ElementType.EMPTY,
            ElementType.ACTION,
            ElementType.EMPTY,
            ElementType.CHARACTER,
            ElementType.DIALOGUE,
            ElementType.EMPTY,
            ElementType.CHARACTER,
            ElementType.PARENTHETICAL,
            ElementType.DIALOGUE,
            ElementType.EMPTY,
            ElementType.CHARACTER,
            ElementType.DIALOGUE,
            ElementType.EMPTY,
            ElementType.TRANSITION,
            ElementType.EMPTY,
            ElementType.SCENE_HEADING,
            ElementType.EMPTY,
            ElementType.ACTION,
            ElementType.EMPTY,
            ElementType.CHARACTER,
            ElementType.DIALOGUE,
            ElementType.EMPTY,
            ElementType.SCENE_HEADING,
            ElementType.EMPTY,
            ElementType.CHARACTER,
            ElementType.DIALOGUE,
            ElementType.EMPTY,
        ]

    def test_dialogue_attribution_reset(self):
        """Test that intervening action stops a later line being dialogue."""
        text = "CHARACTER A\nline1\n\naction.\n\nline2"
        types = [item.type for item in classify_document(text)]
        assert types == [
            ElementType.CHARACTER,
            ElementType.DIALOGUE,
            ElementType.EMPTY,
            ElementType.ACTION,
            ElementType.EMPTY,
            ElementType.ACTION,
        ]

    def test_second_dialogue_line_is_action(self):
        """Test that only the line right after a cue or parenthetical is dialogue."""
        types = [item.type for item in classify_document("\nJOHN\nHello.\nAgain.")]
        assert types[2:] == [ElementType.DIALOGUE, ElementType.ACTION]

    def test_blank_line_after_cue(self):
        """Test that a blank line between cue and text breaks the dialogue link."""
        types = [item.type for item in classify_document("JOHN\n\nHello.")]
        assert types == [ElementType.CHARACTER, ElementType.EMPTY, ElementType.ACTION]

    def test_offsets(self):
        """Test that each line carries absolute offsets."""
        classified = classify_document("INT. A\n\nJOHN")
        assert [item.line_range for item in classified] == [(0, 6), (7, 7), (8, 12)]

    def test_empty_document(self):
        """Test that the empty string is a single empty line."""
        classified = classify_document("")
        assert len(classified) == 1
        assert classified[0].type == ElementType.EMPTY

    def test_iter_lines_trailing_newline(self):
        """Test that a trailing newline yields a final empty line."""
        lines = list(iter_lines("A\n"))
        assert [(line.text, line.start, line.end) for line in lines] == [
            ("A", 0, 1),
            ("", 2, 2),
        ]


class TestClassifyAt:
    """Test single-line classification at a cursor offset."""

    def test_matches_forward_pass(self, sample_script):
        """Test that every line gets the same label as the forward pass."""
        for item in classify_document(sample_script):
            for offset in (item.line.start, item.line.end):
                assert classify_at(sample_script, offset) == item.type

    def test_dialogue_needs_two_lines_of_lookback(self):
        """Test that the previous line's type uses the line above it."""
        text = "He waits.\nJOHN\nHello."
        # JOHN follows text, so it is action and Hello. is action too
        assert classify_at(text, len(text)) == ElementType.ACTION
        text = "\nJOHN\nHello."
        assert classify_at(text, len(text)) == ElementType.DIALOGUE

    def test_first_line(self):
        """Test classification of the first line."""
        assert classify_at("JOHN", 2) == ElementType.CHARACTER

    def test_cursor_on_newline(self):
        """Test that an offset at a line end belongs to that line."""
        text = "INT. HOUSE\nSomething happens."
        assert classify_at(text, 10) == ElementType.SCENE_HEADING
        assert classify_at(text, 11) == ElementType.ACTION

    @pytest.mark.parametrize("offset", [-1, 5])
    def test_out_of_range(self, offset):
        """Test that offsets outside the text are rejected."""
        with pytest.raises(InvalidArgumentError):
            classify_at("JOHN", offset)

    def test_end_of_text_is_valid(self):
        """Test that len(text) is a valid offset."""
        assert classify_at("", 0) == ElementType.EMPTY
