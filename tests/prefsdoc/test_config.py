"""Tests for generator configuration."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from prefsdoc.config import (
    DEFAULT_OUTPUT,
    TARGET_NAMESPACE,
    GeneratorConfig,
    get_config,
    load_config,
    set_config,
)


class TestGeneratorConfig:
    """Tests for GeneratorConfig."""

    def test_defaults(self):
        config = GeneratorConfig()
        assert config.output == Path(DEFAULT_OUTPUT)
        assert config.namespace == TARGET_NAMESPACE
        assert config.markup_path.suffix == ".xul"
        assert config.entities_path.suffix == ".dtd"
        assert config.defaults_path.suffix == ".yml"

    def test_explicit_paths_win_over_sources(self):
        config = GeneratorConfig(markup=Path("custom.xul"))
        assert config.markup_path == Path("custom.xul")

    def test_no_matching_source(self):
        config = GeneratorConfig(sources=[Path("Rakefile")])
        assert config.markup_path is None
        assert config.defaults_path is None

    def test_from_dict_accepts_original_shape(self):
        config = GeneratorConfig.from_dict({
            "sources": ["Rakefile", "prefs.yaml", "pane.xul", "pane.dtd"],
            "name": "wiki/Prefs.md",
            "unknown": 1,
        })
        assert config.output == Path("wiki/Prefs.md")
        assert config.defaults_path == Path("prefs.yaml")
        assert config.markup_path == Path("pane.xul")

    def test_dict_round_trip(self):
        config = GeneratorConfig(markup=Path("a.xul"), namespace="x.")
        assert GeneratorConfig.from_dict(config.to_dict()) == config

    def test_from_env(self):
        with patch.dict(os.environ, {
            "PREFSDOC_OUTPUT": "out/Config.md",
            "PREFSDOC_NAMESPACE": "extensions.other.",
        }, clear=True):
            config = GeneratorConfig.from_env()
        assert config.output == Path("out/Config.md")
        assert config.namespace == "extensions.other."


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_file_gives_defaults(self, tmp_path):
        with patch.dict(os.environ, {}, clear=True):
            config = load_config(tmp_path / "absent.yaml")
        assert config == GeneratorConfig()

    def test_section(self, tmp_path):
        path = tmp_path / "prefsdoc.yaml"
        path.write_text("prefsdoc:\n  output: docs/Prefs.md\n  disabled_panel_id: hidden-tab\n")
        with patch.dict(os.environ, {}, clear=True):
            config = load_config(path)
        assert config.output == Path("docs/Prefs.md")
        assert config.disabled_panel_id == "hidden-tab"

    def test_env_overrides_file(self, tmp_path):
        path = tmp_path / "prefsdoc.yaml"
        path.write_text("output: docs/Prefs.md\n")
        with patch.dict(os.environ, {"PREFSDOC_OUTPUT": "env.md"}, clear=True):
            config = load_config(path)
        assert config.output == Path("env.md")

    def test_env_names_config_file(self, tmp_path):
        path = tmp_path / "elsewhere.yaml"
        path.write_text("source_url: https://example.com/pane\n")
        with patch.dict(os.environ, {"PREFSDOC_CONFIG": str(path)}, clear=True):
            config = load_config()
        assert config.source_url == "https://example.com/pane"

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "prefsdoc.yaml"
        path.write_text("- a\n")
        with pytest.raises(ValueError):
            load_config(path)


def test_global_config_accessors():
    config = GeneratorConfig(namespace="x.")
    set_config(config)
    try:
        assert get_config() is config
    finally:
        set_config(None)
