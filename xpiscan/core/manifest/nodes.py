from __future__ import annotations

from typing import List, Optional
from xml.etree.ElementTree import Element


def child_elements(node: Element) -> List[Element]:
    """Direct child elements of node, in document order."""
    return list(node)


def local_name(tag: str) -> str:
    return tag.split("}", 1)[1] if "}" in tag else tag


def qualified_name(namespace: str, name: str) -> str:
    """Return the ElementTree (Clark notation) tag for name in namespace."""
    if not namespace:
        return name
    return f"{{{namespace}}}{name}"


def node_text(node: Optional[Element]) -> Optional[str]:
    """Return the leading text of node, or None when it has none.

    An absent node, a node without text, and a node whose text is the empty
    string all read as None.
    """
    if node is None:
        return None
    text = node.text
    if not text:
        return None
    return text
