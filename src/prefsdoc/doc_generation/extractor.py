"""Finding the documentation comment attached to a markup node.

A node is documented by a comment that is either its first non-text child,
or, for a node without children, the first non-text sibling after it.
"""

from __future__ import annotations

from typing import Any, Optional

from lxml import etree


def is_comment(node: Any) -> bool:
    return isinstance(node, etree._Comment)


def local_name(node: Any) -> str:
    """Tag without namespace; empty for comments and processing instructions."""
    if not isinstance(node.tag, str):
        return ""
    return etree.QName(node).localname


def _has_children(node: Any) -> bool:
    # text content counts as a child, whitespace included
    return len(node) > 0 or node.text is not None


def attached_comment(node: Any) -> Optional[Any]:
    """The comment node documenting `node`, if there is one."""
    if _has_children(node):
        candidate = node[0] if len(node) > 0 else None
    else:
        candidate = node.getnext()
    if candidate is not None and is_comment(candidate):
        return candidate
    return None


def normalize_doc(text: str) -> str:
    lines = text.split("\n")
    # trailing empty fields are dropped, whitespace-only ones are kept
    while lines and lines[-1] == "":
        lines.pop()
    return "\n".join(line.strip() for line in lines) + "\n"


def extract_doc(node: Any) -> str:
    """Documentation text for `node`, or '' when it has none."""
    comment = attached_comment(node)
    if comment is None:
        return ""
    return normalize_doc(comment.text or "")
