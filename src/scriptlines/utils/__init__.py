"""scriptlines utilities module."""

from scriptlines.utils.screenplay import ScreenplayUtils

__all__ = ["ScreenplayUtils"]
