"""Collection of candidate content nodes."""

import logging
from collections.abc import Collection

from bs4 import Tag

from ..dom.tree import is_element
from ..models.config import VALID_ROOT_TAGS

logger = logging.getLogger(__name__)


def _element_children(element: Tag) -> list[Tag]:
    return [child for child in element.children if is_element(child)]


def collect_candidates(element: Tag, valid_root_tags: Collection[str] = VALID_ROOT_TAGS) -> list[Tag]:
    """
    Collect candidate nodes below an element, descendants first.

    Every child is walked whatever its tag, so candidates nested inside
    non-candidate containers are still reached. A child with a root tag is
    appended after its own descendants' candidates. The element passed in is
    never a candidate itself.

    The walk keeps its own stack: pages with unclosed ``<p>`` tags nest far
    deeper than the interpreter's recursion limit.

    Args:
        element: Root of the (cleaned) tree
        valid_root_tags: Tag names eligible as candidates

    Returns:
        Candidates in post-order
    """
    candidates: list[Tag] = []
    # (node, expanded): a node is emitted on its second visit, after its subtree
    stack = [(child, False) for child in reversed(_element_children(element))]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            if node.name in valid_root_tags:
                candidates.append(node)
            continue
        stack.append((node, True))
        stack.extend((child, False) for child in reversed(_element_children(node)))
    return candidates
