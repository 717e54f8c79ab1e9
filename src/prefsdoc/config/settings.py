"""
Generator configuration - where the sources live and how the page is rendered.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .defaults import (
    CONFIG_FILENAME,
    CONFIG_SECTION,
    DEFAULT_OUTPUT,
    DEFAULT_SOURCES,
    DEFAULTS_SUFFIXES,
    DISABLED_PANEL_ID,
    ENTITY_SUFFIXES,
    KEY_PREFIX,
    MARKUP_SUFFIXES,
    SOURCE_URL,
    TARGET_NAMESPACE,
)

logger = logging.getLogger(__name__)

_PATH_FIELDS = ("markup", "entities", "defaults", "output", "dump_expanded")


@dataclass
class GeneratorConfig:
    """Configuration for one documentation run."""

    # Sources are detected by extension unless given explicitly
    sources: List[Path] = field(default_factory=lambda: [Path(p) for p in DEFAULT_SOURCES])
    markup: Optional[Path] = None
    entities: Optional[Path] = None
    defaults: Optional[Path] = None

    output: Path = Path(DEFAULT_OUTPUT)

    namespace: str = TARGET_NAMESPACE
    key_prefix: str = KEY_PREFIX
    disabled_panel_id: str = DISABLED_PANEL_ID
    source_url: str = SOURCE_URL

    # Debug copy of the markup after entity substitution
    dump_expanded: Optional[Path] = None

    @classmethod
    def from_dict(cls, data: dict) -> "GeneratorConfig":
        """Create config from dict. Unknown keys are ignored."""
        values: Dict[str, Any] = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        if "name" in data and "output" not in values:
            # the original configuration called the output page `name`
            values["output"] = data["name"]
        if "sources" in values:
            values["sources"] = [Path(p) for p in values["sources"] or []]
        for key in _PATH_FIELDS:
            if values.get(key) is not None:
                values[key] = Path(values[key])
        return cls(**values)

    @classmethod
    def from_env(cls, base: Optional["GeneratorConfig"] = None) -> "GeneratorConfig":
        """Overlay PREFSDOC_* environment variables on top of `base`."""
        data = (base or cls()).to_dict()
        env_map = {
            "PREFSDOC_MARKUP": "markup",
            "PREFSDOC_ENTITIES": "entities",
            "PREFSDOC_DEFAULTS": "defaults",
            "PREFSDOC_OUTPUT": "output",
            "PREFSDOC_NAMESPACE": "namespace",
            "PREFSDOC_KEY_PREFIX": "key_prefix",
            "PREFSDOC_SOURCE_URL": "source_url",
        }
        for var, key in env_map.items():
            value = os.environ.get(var)
            if value:
                data[key] = value
        return cls.from_dict(data)

    def to_dict(self) -> dict:
        """Convert config to dict."""
        return {
            "sources": [str(p) for p in self.sources],
            "markup": str(self.markup) if self.markup else None,
            "entities": str(self.entities) if self.entities else None,
            "defaults": str(self.defaults) if self.defaults else None,
            "output": str(self.output),
            "namespace": self.namespace,
            "key_prefix": self.key_prefix,
            "disabled_panel_id": self.disabled_panel_id,
            "source_url": self.source_url,
            "dump_expanded": str(self.dump_expanded) if self.dump_expanded else None,
        }

    def source_for(self, suffixes: Sequence[str]) -> Optional[Path]:
        """First entry of `sources` whose extension is one of `suffixes`."""
        for source in self.sources:
            if source.suffix in suffixes:
                return source
        return None

    @property
    def markup_path(self) -> Optional[Path]:
        return self.markup or self.source_for(MARKUP_SUFFIXES)

    @property
    def entities_path(self) -> Optional[Path]:
        return self.entities or self.source_for(ENTITY_SUFFIXES)

    @property
    def defaults_path(self) -> Optional[Path]:
        return self.defaults or self.source_for(DEFAULTS_SUFFIXES)


# Global config instance
_config: Optional[GeneratorConfig] = None


def get_config() -> GeneratorConfig:
    """Get the global generator config."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: GeneratorConfig) -> None:
    """Set the global generator config."""
    global _config
    _config = config


def load_config(config_path: Optional[Path] = None) -> GeneratorConfig:
    """Load config from a YAML file, then apply environment overrides.

    The file is `prefsdoc.yaml` in the working directory unless
    `config_path` (or PREFSDOC_CONFIG) names another one. Settings live either
    at the top level or under a `prefsdoc:` section.
    """
    if config_path is None:
        env_path = os.environ.get("PREFSDOC_CONFIG")
        config_path = Path(env_path) if env_path else Path.cwd() / CONFIG_FILENAME

    config = GeneratorConfig()
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{config_path}: expected a mapping, got {type(data).__name__}")
        if CONFIG_SECTION in data:
            data = data[CONFIG_SECTION] or {}
        config = GeneratorConfig.from_dict(data)
        logger.debug("Loaded config from %s", config_path)

    return GeneratorConfig.from_env(config)
