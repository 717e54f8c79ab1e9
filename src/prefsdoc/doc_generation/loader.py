"""Reading and parsing the preferences pane, its DTD and the defaults file."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from lxml import etree

from prefsdoc.config import GeneratorConfig

from .models import (
    DefaultValue,
    DefaultsFormatError,
    LoadedSources,
    MarkupSyntaxError,
    MissingSourceError,
)

logger = logging.getLogger(__name__)

# External DTD reference in the DOCTYPE, replaced by an internal subset
_SYSTEM_REFERENCE = re.compile(r'SYSTEM ".*?"')


def _require(path: Optional[Path], role: str) -> Path:
    if path is None:
        raise MissingSourceError(role)
    if not path.is_file():
        raise MissingSourceError(role, path)
    return path


def inline_entities(markup: str, entities: str) -> str:
    """Swap the DOCTYPE's SYSTEM reference for the DTD text itself."""
    subset = "[\n" + entities + "\n]"
    return _SYSTEM_REFERENCE.sub(lambda _m: subset, markup, count=1)


def parse_markup(markup: str) -> Any:
    """Parse expanded markup strictly, substituting entities and keeping comments."""
    parser = etree.XMLParser(
        resolve_entities=True,
        remove_comments=False,
        remove_blank_text=False,
        no_network=True,
    )
    try:
        root = etree.fromstring(markup.encode("utf-8"), parser)
    except etree.XMLSyntaxError as e:
        raise MarkupSyntaxError(f"Could not parse preferences pane: {e}") from e
    return root.getroottree()


def parse_defaults(text: str, source: str = "<defaults>") -> Dict[str, DefaultValue]:
    """Parse the defaults YAML into typed default values."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DefaultsFormatError(f"{source}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DefaultsFormatError(f"{source}: expected a mapping, got {type(data).__name__}")
    return {str(key): DefaultValue.from_yaml(value) for key, value in data.items()}


def load_sources(config: GeneratorConfig) -> LoadedSources:
    """Read all three sources named by `config` and parse them."""
    markup_path = _require(config.markup_path, "markup (.xul)")
    entities_path = _require(config.entities_path, "entity (.dtd)")
    defaults_path = _require(config.defaults_path, "defaults (.yml)")

    markup = inline_entities(
        markup_path.read_text(encoding="utf-8"),
        entities_path.read_text(encoding="utf-8"),
    )
    if config.dump_expanded is not None:
        config.dump_expanded.parent.mkdir(parents=True, exist_ok=True)
        config.dump_expanded.write_text(markup, encoding="utf-8")
        logger.info("Wrote expanded markup to %s", config.dump_expanded)

    tree = parse_markup(markup)
    defaults = parse_defaults(defaults_path.read_text(encoding="utf-8"), str(defaults_path))
    logger.debug(
        "Loaded %s (%d defaults from %s)", markup_path, len(defaults), defaults_path
    )
    return LoadedSources(tree=tree, defaults=defaults)
