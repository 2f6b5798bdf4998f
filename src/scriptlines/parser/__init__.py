"""Screenplay text model: line classification and entity extraction."""

from __future__ import annotations

from .classifier import classify, classify_at, classify_document, iter_lines
from .extractor import DocumentExtractor, extract
from .models import (
    Character,
    CharacterAppearance,
    ClassifiedLine,
    ElementType,
    Line,
    Location,
    LocationType,
    Scene,
    SceneElement,
    SceneLocation,
    ScreenplayDocument,
)

__all__ = [
    "Character",
    "CharacterAppearance",
    "ClassifiedLine",
    "DocumentExtractor",
    "ElementType",
    "Line",
    "Location",
    "LocationType",
    "Scene",
    "SceneElement",
    "SceneLocation",
    "ScreenplayDocument",
    "classify",
    "classify_at",
    "classify_document",
    "extract",
    "iter_lines",
]
