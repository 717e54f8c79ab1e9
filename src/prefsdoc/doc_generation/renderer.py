"""Rendering the correlated preferences as a Markdown page."""

from __future__ import annotations

import re
from typing import List

from prefsdoc.config.defaults import HIDDEN_SECTION_TITLE, SOURCE_URL

from .models import PreferenceRecord, UnlabelledPreferenceError, WalkContext

_BLANK_RUNS = re.compile(r"\n\n+")

_HEADER_LINES = [
    "",
    "<!-- DO NOT EDIT THIS FILE ON THE GITHUB WIKI",
    "This page is generated automatically from comments in",
    "{source_url}.",
    "Any edits made directly in this file will be overwritten the next time it is generated.",
    "-->",
]


def render_header(source_url: str = SOURCE_URL) -> str:
    return "\n".join(_HEADER_LINES).format(source_url=source_url) + "\n"


def collapse_blank_lines(text: str) -> str:
    """Reduce every run of blank lines to a single one."""
    return _BLANK_RUNS.sub("\n\n", text)


def render_preference(heading: str, record: PreferenceRecord) -> str:
    default = record.default.render() if record.default is not None else ""
    return f"\n\n### {heading}\n*default: {default}*\n\n{record.doc}"


def _panel_records(records: List[PreferenceRecord], panel: str) -> List[PreferenceRecord]:
    return [r for r in records if r.panel == panel and r.is_target]


def render_document(context: WalkContext, source_url: str = SOURCE_URL) -> str:
    """Build the whole page: header, preface, panels, then hidden preferences."""
    parts = [render_header(source_url), context.preface, "\n\n"]

    for panel in context.panels:
        if panel is None:
            # preferences on an unnamed tab are listed as hidden
            continue
        parts.append(f"\n\n## {panel}\n\n")
        for record in _panel_records(context.records, panel):
            if not record.label:
                raise UnlabelledPreferenceError(record)
            parts.append(render_preference(record.label, record))

    parts.append(f"\n\n## {HIDDEN_SECTION_TITLE}\n\n")
    for record in context.records:
        if record.is_target and record.panel is None:
            parts.append(render_preference(record.name, record))

    return collapse_blank_lines("".join(parts))
