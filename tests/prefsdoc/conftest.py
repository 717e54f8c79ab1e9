"""Shared fixtures: a small preferences pane with its DTD and defaults."""

from __future__ import annotations

from pathlib import Path

import pytest

from prefsdoc.config import GeneratorConfig

PANE = """<?xml version="1.0"?>
<!DOCTYPE prefwindow SYSTEM "chrome://zotero-better-bibtex/locale/zotero-better-bibtex.dtd">
<prefwindow xmlns="http://www.mozilla.org/keymaster/gatekeeper/there.is.only.xul">
  <prefpane id="zotero-better-bibtex-prefpane" label="&better-bibtex.prefs.title;">
    <!--
      Better BibTeX is configured here.
    -->
    <preferences>
      <preference name="extensions.zotero.translators.better-bibtex.citekeyFormat" id="pref-better-bibtex-citekeyFormat" type="string"/>
      <!-- The pattern used to generate citation keys. -->
      <preference name="extensions.zotero.translators.better-bibtex.autoExport" id="pref-better-bibtex-autoExport" type="string"/>
      <preference name="extensions.zotero.translators.better-bibtex.warnBulkModify" id="pref-better-bibtex-warnBulkModify" type="int"/>
      <!-- Warn before changing more than this many keys. -->
      <preference name="extensions.zotero.translators.better-bibtex.debug" id="pref-better-bibtex-debug" type="bool"/>
      <!-- Log debug output. -->
      <preference name="extensions.zotero.cache" id="pref-zotero-cache" type="bool"/>
    </preferences>
    <tabbox>
      <tabs>
        <tab label="&better-bibtex.prefs.citekeys;"/>
        <tab label="Automatic export"/>
        <tab id="better-bibtex-prefs-disabled" label="Disabled"/>
      </tabs>
      <tabpanels>
        <tabpanel>
          <label value="Citation key format"/>
          <textbox preference="pref-better-bibtex-citekeyFormat"/>
          <hbox>
            <label>Bulk warning</label>
            <textbox preference="pref-better-bibtex-warnBulkModify"/>
          </hbox>
        </tabpanel>
        <tabpanel>
          <radiogroup preference="pref-better-bibtex-autoExport" label="Automatic export">
            <!-- When automatic exports run. -->
            <radio label="On change" value="immediate"/>
            <!-- Export as soon as anything changes. -->
            <radio label="When idle" value="idle"/>
            <radio label="Disabled" value="off"/>
            <!-- Only export on demand. -->
          </radiogroup>
        </tabpanel>
        <tabpanel>
          <checkbox docpreference="pref-better-bibtex-debug"/>
        </tabpanel>
      </tabpanels>
    </tabbox>
  </prefpane>
</prefwindow>
"""

DTD = """<!ENTITY better-bibtex.prefs.title "Better BibTeX Preferences">
<!ENTITY better-bibtex.prefs.citekeys "Citation keys">
"""

DEFAULTS = """citekeyFormat: "[auth][year]"
autoExport: immediate
warnBulkModify: 10
debug: false
"""


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Directory holding preferences.xul, prefs.dtd and defaults.yml."""
    (tmp_path / "preferences.xul").write_text(PANE, encoding="utf-8")
    (tmp_path / "prefs.dtd").write_text(DTD, encoding="utf-8")
    (tmp_path / "defaults.yml").write_text(DEFAULTS, encoding="utf-8")
    return tmp_path


@pytest.fixture
def config(source_dir: Path) -> GeneratorConfig:
    return GeneratorConfig(
        sources=[
            source_dir / "defaults.yml",
            source_dir / "preferences.xul",
            source_dir / "prefs.dtd",
        ],
        output=source_dir / "wiki" / "Configuration.md",
    )


@pytest.fixture
def expanded_pane() -> str:
    """The sample pane with its DTD inlined."""
    from prefsdoc.doc_generation.loader import inline_entities

    return inline_entities(PANE, DTD)
