"""scriptlines: a plain-text screenplay model.

Classifies screenplay lines, extracts scenes, characters and locations, and
answers autocomplete and smart-formatting queries for an editor.
"""

from __future__ import annotations

# parser first: utils.screenplay depends on parser.models
from scriptlines.parser import (
    ElementType,
    ScreenplayDocument,
    classify,
    classify_at,
    classify_document,
    extract,
)

from scriptlines.autocomplete import (  # isort: skip
    SuggestionCorpus,
    apply_suggestion,
    get_suggestions,
    resolve_context,
    suggest,
)
from scriptlines.config import EditorConfiguration  # isort: skip
from scriptlines.exceptions import (  # isort: skip
    ConfigurationError,
    InvalidArgumentError,
    ScriptLinesError,
    ValidationError,
)
from scriptlines.formatting import (  # isort: skip
    TriggerKey,
    apply_insertion,
    next_insertion,
)

__version__ = "0.1.0"
__author__ = "scriptlines contributors"

__all__ = [
    "ConfigurationError",
    "EditorConfiguration",
    "ElementType",
    "InvalidArgumentError",
    "ScreenplayDocument",
    "ScriptLinesError",
    "SuggestionCorpus",
    "TriggerKey",
    "ValidationError",
    "__version__",
    "apply_insertion",
    "apply_suggestion",
    "classify",
    "classify_at",
    "classify_document",
    "extract",
    "get_suggestions",
    "next_insertion",
    "resolve_context",
    "suggest",
]
