"""Cross-checking walked preferences against the defaults mapping."""

from __future__ import annotations

import logging
from typing import Dict, List

from .models import (
    DefaultValue,
    Namespace,
    PreferenceRecord,
    UndocumentedPreferencesError,
    UnsupportedPreferenceError,
)

logger = logging.getLogger(__name__)


def qualify_defaults(
    defaults: Dict[str, DefaultValue], namespace: Namespace
) -> Dict[str, DefaultValue]:
    """Prefix defaults keys that are given without the target namespace."""
    return {namespace.qualify(key): value for key, value in defaults.items()}


def declaration_hint(name: str, default: DefaultValue, namespace: Namespace) -> str:
    """The <preference> line that would declare `name` in the pane."""
    return (
        f'<preference name="{name}" id="{namespace.declaration_id(name)}" '
        f'type="{default.kind.value}"/>'
    )


def check_supported(records: List[PreferenceRecord], defaults: Dict[str, DefaultValue]) -> None:
    """Every owned preference in the pane must have a default."""
    for record in records:
        if not record.is_target:
            continue
        if record.name not in defaults:
            raise UnsupportedPreferenceError(record.name)
        if not record.label:
            if record.panel is None:
                logger.debug("No label for hidden preference %s", record.name)
            else:
                logger.warning("No label for %s", record.name)


def attach_defaults(
    records: List[PreferenceRecord],
    defaults: Dict[str, DefaultValue],
    namespace: Namespace,
) -> None:
    """Attach defaults to records; report defaults the pane never declares."""
    by_name: Dict[str, PreferenceRecord] = {}
    for record in records:
        by_name.setdefault(record.name, record)

    undocumented: List[str] = []
    for name, default in defaults.items():
        record = by_name.get(name)
        if record is None:
            undocumented.append(declaration_hint(name, default, namespace))
        else:
            record.default = default

    if undocumented:
        raise UndocumentedPreferencesError(undocumented)


def check_documented(records: List[PreferenceRecord]) -> None:
    """Every owned preference must have documentation text."""
    undocumented = [r.describe() for r in records if r.is_target and not r.doc]
    if undocumented:
        raise UndocumentedPreferencesError(undocumented)


def cross_reference(
    records: List[PreferenceRecord],
    defaults: Dict[str, DefaultValue],
    namespace: Namespace,
) -> Dict[str, DefaultValue]:
    """
    Validate the walked records against the defaults mapping.

    Unsupported preferences fail immediately. Missing declarations and
    missing documentation are each reported as one batch.

    Returns:
        The defaults mapping with every key qualified.
    """
    qualified = qualify_defaults(defaults, namespace)
    check_supported(records, qualified)
    attach_defaults(records, qualified, namespace)
    check_documented(records)
    logger.debug("Cross-referenced %d defaults", len(qualified))
    return qualified
