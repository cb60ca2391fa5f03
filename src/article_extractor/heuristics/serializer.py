"""Flattening of a chosen subtree into readable text."""

import html
from collections.abc import Collection
from typing import Optional

from bs4 import Tag

from ..dom.tree import is_element, is_text
from ..models.config import SPACE_TAGS


def _flatten(element: Tag, space_tags: Collection[str]) -> str:
    # descendants walks the tree in document order without recursing
    parts: list[str] = []
    for node in element.descendants:
        if is_text(node):
            parts.append(str(node))
        elif is_element(node) and node.name in space_tags:
            # Block tags lose their separation once the markup is gone
            parts.append(" ")
    return "".join(parts)


def serialize_text(element: Optional[Tag], space_tags: Collection[str] = SPACE_TAGS) -> Optional[str]:
    """
    Convert an element subtree into flat text.

    Text nodes are kept verbatim, a space is put in front of every space tag,
    and HTML entities are decoded at the end. No other whitespace is touched.

    Args:
        element: Root of the subtree, or None
        space_tags: Tag names preceded by a space

    Returns:
        The text, or None if no element was given
    """
    if element is None:
        return None
    return html.unescape(_flatten(element, space_tags))
