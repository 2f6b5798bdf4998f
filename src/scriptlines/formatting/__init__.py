"""Smart formatting rules for the screenplay editor."""

from __future__ import annotations

from .rules import (
    CHARACTER_INDENT,
    DIALOGUE_INDENT,
    INSERTION_TABLE,
    TriggerKey,
    apply_insertion,
    column_at,
    next_insertion,
)

__all__ = [
    "CHARACTER_INDENT",
    "DIALOGUE_INDENT",
    "INSERTION_TABLE",
    "TriggerKey",
    "apply_insertion",
    "column_at",
    "next_insertion",
]
