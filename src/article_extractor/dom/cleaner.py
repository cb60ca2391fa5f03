"""Removal of non-content subtrees before analysis."""

import logging
from collections.abc import Iterable

from bs4 import Tag

from ..models.config import REMOVABLE_TAGS

logger = logging.getLogger(__name__)


def clean_document(root: Tag, removable_tags: Iterable[str] = REMOVABLE_TAGS) -> int:
    """
    Delete every subtree rooted at a removable tag, in place.

    Args:
        root: Document (or element) to clean
        removable_tags: Tag names whose elements are deleted

    Returns:
        Number of subtrees removed
    """
    tags = list(removable_tags)
    if not tags:
        return 0

    removed = 0
    for element in root.find_all(tags):
        # Already gone with an enclosing removed subtree
        if element.decomposed:
            continue
        element.decompose()
        removed += 1

    logger.debug(f"Removed {removed} non-content subtrees")
    return removed
