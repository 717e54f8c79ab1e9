"""Walking the preferences pane and correlating preferences with their docs."""

from __future__ import annotations

import logging
from typing import Any, Optional

from lxml import etree

from prefsdoc.config.defaults import DISABLED_PANEL_ID

from .extractor import extract_doc, local_name
from .models import (
    KeyMismatchError,
    MissingLabelError,
    Namespace,
    PreferenceRecord,
    WalkContext,
)

logger = logging.getLogger(__name__)

BINDING_ATTRIBUTES = ("preference", "docpreference")


def binding_of(node: Any) -> Optional[str]:
    """Key of the preference `node` is bound to, if any."""
    for attribute in BINDING_ATTRIBUTES:
        value = node.get(attribute)
        if value is not None:
            return value
    return None


def _next_element(node: Any) -> Optional[Any]:
    sibling = node.getnext()
    while sibling is not None and not isinstance(sibling.tag, str):
        sibling = sibling.getnext()
    return sibling


def apply_label_elements(root: Any) -> None:
    """Copy each <label> onto the unlabelled bound control that follows it.

    The label text is the element's `value` attribute, or its text content
    when there is no `value`. Controls that already carry a `label` keep it.
    """
    for node in root.iter(tag=etree.Element):
        if local_name(node) != "label":
            continue
        target = _next_element(node)
        if target is None or binding_of(target) is None or target.get("label") is not None:
            continue

        label = node.get("value")
        if label is None:
            label = node.xpath("string()")
        target.set("label", label)
        if label == "":
            raise MissingLabelError(binding_of(target))


def _declare(node: Any, context: WalkContext, namespace: Namespace) -> None:
    name = node.get("name", "")
    record = PreferenceRecord(
        name=name,
        key=node.get("id", ""),
        type=node.get("type", ""),
        is_target=namespace.owns(name),
    )
    if record.is_target and namespace.short_name(record.name) != namespace.short_key(record.key):
        raise KeyMismatchError(record.name, record.key)
    record.append_doc(extract_doc(node))
    context.declare(record)
    logger.debug("Declared %s", record.name)


def _bind(node: Any, key: str, context: WalkContext) -> None:
    record = context.lookup(key)
    record.panel = context.current_panel

    label = node.get("label")
    if label is not None and record.label is None:
        record.label = label

    record.append_doc(extract_doc(node))

    if local_name(node) == "radiogroup":
        for option in node.iterdescendants(tag=etree.Element):
            if local_name(option) != "radio":
                continue
            doc = extract_doc(option)
            if doc:
                record.append_doc(f"* **{option.get('label', '')}**: {doc}")


def visit(
    node: Any,
    context: WalkContext,
    namespace: Namespace,
    disabled_panel_id: str = DISABLED_PANEL_ID,
) -> WalkContext:
    """Apply one element to the walk state."""
    name = local_name(node)
    if name == "prefpane":
        context.preface = extract_doc(node)
    elif name == "preference":
        _declare(node, context, namespace)
    elif name == "tab":
        if node.get("id") != disabled_panel_id:
            context.add_panel(node.get("label"))
    elif name == "tabpanel":
        context.advance_panel()

    key = binding_of(node)
    if key is not None:
        _bind(node, key, context)
    return context


def walk_tree(
    root: Any,
    namespace: Optional[Namespace] = None,
    disabled_panel_id: str = DISABLED_PANEL_ID,
) -> WalkContext:
    """Walk every element of the pane in document order."""
    namespace = namespace or Namespace()
    context = WalkContext()
    for node in root.iter(tag=etree.Element):
        visit(node, context, namespace, disabled_panel_id)
    logger.info(
        "Found %d preferences (%d owned) across %d panels",
        len(context.records),
        len(context.targets),
        len(context.panels),
    )
    return context
