"""Documentation generation package."""

from .extractor import extract_doc
from .generator import build_document, generate_preferences_doc, write_documentation_file
from .loader import inline_entities, load_sources, parse_defaults, parse_markup
from .models import (
    DefaultValue,
    DuplicatePreferenceError,
    KeyMismatchError,
    MissingLabelError,
    MissingSourceError,
    Namespace,
    PreferenceRecord,
    PreferencesDocError,
    UndocumentedPreferencesError,
    UnknownPreferenceError,
    UnlabelledPreferenceError,
    UnsupportedPreferenceError,
    ValueType,
    WalkContext,
)
from .renderer import collapse_blank_lines, render_document
from .validation import cross_reference
from .walker import apply_label_elements, walk_tree

__all__ = [
    "extract_doc",
    "build_document",
    "generate_preferences_doc",
    "write_documentation_file",
    "inline_entities",
    "load_sources",
    "parse_defaults",
    "parse_markup",
    "DefaultValue",
    "DuplicatePreferenceError",
    "KeyMismatchError",
    "MissingLabelError",
    "MissingSourceError",
    "Namespace",
    "PreferenceRecord",
    "PreferencesDocError",
    "UndocumentedPreferencesError",
    "UnknownPreferenceError",
    "UnlabelledPreferenceError",
    "UnsupportedPreferenceError",
    "ValueType",
    "WalkContext",
    "collapse_blank_lines",
    "render_document",
    "cross_reference",
    "apply_label_elements",
    "walk_tree",
]
