"""Tests for smart Tab/Enter formatting rules."""

import pytest

from scriptlines.exceptions import InvalidArgumentError
from scriptlines.formatting import (
    CHARACTER_INDENT,
    DIALOGUE_INDENT,
    INSERTION_TABLE,
    TriggerKey,
    apply_insertion,
    column_at,
    next_insertion,
)
from scriptlines.parser.models import ElementType


class TestInsertionTable:
    """Test the static insertion table."""

    def test_exhaustive(self):
        """Test that every element type has an entry for both keys."""
        expected = {(element, key) for element in ElementType for key in TriggerKey}
        assert set(INSERTION_TABLE) == expected
        assert len(INSERTION_TABLE) == 14

    def test_read_only(self):
        """Test that the table cannot be modified."""
        with pytest.raises(TypeError):
            INSERTION_TABLE[(ElementType.ACTION, TriggerKey.TAB)] = ""

    def test_insertions_are_whitespace_or_parenthesis(self):
        """Test that insertions only seed layout."""
        for insertion in INSERTION_TABLE.values():
            assert insertion.replace("(", "").strip() == ""

    def test_indents(self):
        """Test the indentation widths."""
        assert len(DIALOGUE_INDENT) == 20
        assert len(CHARACTER_INDENT) == 30


class TestNextInsertion:
    """Test insertion lookups."""

    @pytest.mark.parametrize(
        ("element", "key", "expected"),
        [
            (ElementType.SCENE_HEADING, TriggerKey.TAB, "\n\n"),
            (ElementType.ACTION, TriggerKey.TAB, "\n\n" + " " * 30),
            (ElementType.CHARACTER, TriggerKey.TAB, "\n" + " " * 20),
            (ElementType.DIALOGUE, TriggerKey.TAB, "\n\n" + " " * 30),
            (ElementType.PARENTHETICAL, TriggerKey.TAB, "\n" + " " * 20),
            (ElementType.TRANSITION, TriggerKey.TAB, "\n\n"),
            (ElementType.EMPTY, TriggerKey.TAB, ""),
            (ElementType.SCENE_HEADING, TriggerKey.ENTER, "\n\n"),
            (ElementType.ACTION, TriggerKey.ENTER, "\n"),
            (ElementType.CHARACTER, TriggerKey.ENTER, "\n" + " " * 20 + "("),
            (ElementType.DIALOGUE, TriggerKey.ENTER, "\n" + " " * 20),
            (ElementType.PARENTHETICAL, TriggerKey.ENTER, "\n" + " " * 20),
            (ElementType.TRANSITION, TriggerKey.ENTER, "\n\n"),
            (ElementType.EMPTY, TriggerKey.ENTER, ""),
        ],
    )
    def test_table(self, element, key, expected):
        """Test every entry of the table."""
        assert next_insertion(element, key) == expected

    @pytest.mark.parametrize(
        ("element", "key"),
        [
            ("character", "tab"),
            ("CHARACTER", "TAB"),
            ("Character", "Tab"),
            ("scene-heading", "enter"),
            ("SCENE_HEADING", "ENTER"),
        ],
    )
    def test_accepts_names_and_values(self, element, key):
        """Test that strings naming a member are accepted."""
        assert isinstance(next_insertion(element, key), str)

    @pytest.mark.parametrize(
        ("element", "key"),
        [
            ("monologue", TriggerKey.TAB),
            (ElementType.ACTION, "space"),
            (None, TriggerKey.TAB),
            (3, TriggerKey.ENTER),
        ],
    )
    def test_rejects_unknown(self, element, key):
        """Test that anything else raises."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            next_insertion(element, key)
        assert exc_info.value.hint is not None


class TestApplyInsertion:
    """Test applying an insertion to text."""

    def test_character_tab_lands_on_dialogue_column(self):
        """Test that Tab after a cue positions the cursor at the dialogue indent."""
        text = "\nJOHN"
        new_text, cursor = apply_insertion(text, len(text), TriggerKey.TAB)
        assert new_text == "\nJOHN\n" + DIALOGUE_INDENT
        assert cursor == len(new_text)
        assert column_at(new_text, cursor) == len(DIALOGUE_INDENT)
        assert column_at(new_text, cursor) != len(CHARACTER_INDENT)

    def test_action_tab_lands_on_character_column(self):
        """Test that Tab after action opens a character cue."""
        text = "The door opens."
        new_text, cursor = apply_insertion(text, len(text), "tab")
        assert column_at(new_text, cursor) == len(CHARACTER_INDENT)

    def test_character_enter_opens_parenthetical(self):
        """Test Enter after a cue."""
        new_text, cursor = apply_insertion("\nJOHN", 5, TriggerKey.ENTER)
        assert new_text.endswith("(")
        assert cursor == len(new_text)

    def test_explicit_element_type(self):
        """Test that a given type skips classification."""
        new_text, cursor = apply_insertion(
            "anything", 8, TriggerKey.ENTER, ElementType.TRANSITION
        )
        assert new_text == "anything\n\n"
        assert cursor == 10

    def test_insertion_in_the_middle(self):
        """Test that text after the cursor is kept."""
        text = "INT. HOUSE\nrest"
        new_text, cursor = apply_insertion(text, 10, TriggerKey.ENTER)
        assert new_text == "INT. HOUSE\n\n\nrest"
        assert cursor == 12

    def test_empty_line_inserts_nothing(self):
        """Test that an empty line leaves the text alone."""
        assert apply_insertion("", 0, TriggerKey.TAB) == ("", 0)

    def test_invalid_offset(self):
        """Test that out-of-range offsets raise."""
        with pytest.raises(InvalidArgumentError):
            apply_insertion("JOHN", -1, TriggerKey.TAB)


class TestColumnAt:
    """Test column computation."""

    def test_columns(self):
        """Test columns on the first and later lines."""
        assert column_at("abc", 2) == 2
        assert column_at("abc\nde", 6) == 2
        assert column_at("abc\n", 4) == 0
