"""Core documentation generation functions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from prefsdoc.config import GeneratorConfig, get_config

from .loader import load_sources
from .models import LoadedSources, Namespace
from .renderer import render_document
from .validation import cross_reference
from .walker import apply_label_elements, walk_tree

logger = logging.getLogger(__name__)


def build_document(sources: LoadedSources, config: GeneratorConfig) -> str:
    """Run the pre-pass, walk, validation and rendering over loaded sources."""
    namespace = Namespace(prefix=config.namespace, key_prefix=config.key_prefix)
    root = sources.tree.getroot()

    apply_label_elements(root)
    context = walk_tree(root, namespace, config.disabled_panel_id)
    cross_reference(context.records, sources.defaults, namespace)
    return render_document(context, config.source_url)


def write_documentation_file(output: Path, markdown: str) -> Path:
    """Write the rendered page, creating parent directories as needed."""
    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)
    if not markdown.endswith("\n"):
        markdown += "\n"
    output.write_text(markdown, encoding="utf-8")
    return output


def generate_preferences_doc(config: Optional[GeneratorConfig] = None) -> Path:
    """
    Generate the preferences reference page.

    Nothing is written unless every source loads and validates.

    Returns:
        Path of the written Markdown file.
    """
    config = config or get_config()
    sources = load_sources(config)
    markdown = build_document(sources, config)
    path = write_documentation_file(config.output, markdown)
    logger.info("Wrote %s", path)
    return path
