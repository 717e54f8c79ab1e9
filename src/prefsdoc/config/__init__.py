"""Configuration for prefsdoc."""

from .defaults import (
    DEFAULT_OUTPUT,
    DEFAULT_SOURCES,
    DEFAULT_TRUNCATE_LENGTH,
    DISABLED_PANEL_ID,
    EMPTY_DEFAULT_MARKER,
    HIDDEN_SECTION_TITLE,
    KEY_PREFIX,
    SOURCE_URL,
    TARGET_NAMESPACE,
    TRUNCATION_SUFFIX,
)
from .settings import GeneratorConfig, get_config, load_config, set_config

__all__ = [
    "DEFAULT_OUTPUT",
    "DEFAULT_SOURCES",
    "DEFAULT_TRUNCATE_LENGTH",
    "DISABLED_PANEL_ID",
    "EMPTY_DEFAULT_MARKER",
    "HIDDEN_SECTION_TITLE",
    "KEY_PREFIX",
    "SOURCE_URL",
    "TARGET_NAMESPACE",
    "TRUNCATION_SUFFIX",
    "GeneratorConfig",
    "get_config",
    "load_config",
    "set_config",
]
