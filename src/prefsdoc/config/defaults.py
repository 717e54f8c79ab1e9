"""Default configuration values for prefsdoc.

This module centralizes the fixed identifiers and formatting constants used
by the preferences documentation generator. All modules should import these
constants instead of hard-coding values.

Usage:
    from prefsdoc.config import (
        TARGET_NAMESPACE,
        KEY_PREFIX,
        DISABLED_PANEL_ID,
    )
"""

from __future__ import annotations

# =============================================================================
# Preference Namespace
# =============================================================================

# Preferences owned by this component; everything else belongs to the host
TARGET_NAMESPACE = "extensions.zotero.translators.better-bibtex."

# Prefix of the `id` attribute on <preference> declarations in the pane
KEY_PREFIX = "pref-better-bibtex-"

# Tab id whose preferences are documented as hidden
DISABLED_PANEL_ID = "better-bibtex-prefs-disabled"


# =============================================================================
# Sources
# =============================================================================

DEFAULT_SOURCES = [
    "defaults/preferences/defaults.yml",
    "chrome/content/zotero-better-bibtex/preferences/preferences.xul",
    "chrome/locale/en-US/zotero-better-bibtex/zotero-better-bibtex.dtd",
]

DEFAULT_OUTPUT = "wiki/Configuration.md"

MARKUP_SUFFIXES = (".xul",)
ENTITY_SUFFIXES = (".dtd",)
DEFAULTS_SUFFIXES = (".yml", ".yaml")

# Project-level config file, looked up in the working directory
CONFIG_FILENAME = "prefsdoc.yaml"
CONFIG_SECTION = "prefsdoc"


# =============================================================================
# Rendering
# =============================================================================

SOURCE_URL = (
    "https://github.com/retorquere/zotero-better-bibtex/blob/master/"
    "chrome/content/zotero-better-bibtex/preferences/preferences.xul"
)

DEFAULT_TRUNCATE_LENGTH = 10
TRUNCATION_SUFFIX = "..."
EMPTY_DEFAULT_MARKER = "`empty`"

HIDDEN_SECTION_TITLE = "Hidden preferences"
