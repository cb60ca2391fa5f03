"""Sibling peer analysis that can widen the selection to the parent."""

import logging
from typing import Optional

from bs4 import Tag

from ..dom.tree import count_words, describe, node_text, tag_name
from ..models.events import EventEmitter, EventType, ExtractionEvent

logger = logging.getLogger(__name__)


def count_close_peers(
    element: Tag,
    peer_range: float = 0.5,
    emit: Optional[EventEmitter] = None,
) -> int:
    """
    Count the parent's children whose word count is close to the element's.

    The element itself is one of the parent's children and counts when it
    has words. Children without words are ignored. A PEER_FOUND event is
    emitted for every close peer.
    """
    parent = element.parent
    if parent is None:
        return 0

    element_wc = count_words(node_text(element))
    lower = element_wc * (1 - peer_range)
    upper = element_wc * (1 + peer_range)

    peers = 0
    for child in parent.children:
        child_wc = count_words(node_text(child))
        if child_wc == 0:
            continue
        if lower < child_wc < upper:
            logger.debug(f"Good peer found: {describe(child)} wc: {child_wc}")
            peers += 1
            if emit:
                emit(ExtractionEvent(type=EventType.PEER_FOUND, tag=tag_name(child), word_count=child_wc))
    return peers


def analyze_peers(
    element: Tag,
    peer_range: float = 0.5,
    min_close_peers: int = 2,
    emit: Optional[EventEmitter] = None,
) -> Tag:
    """
    Promote the selection to its parent when content is split across siblings.

    Args:
        element: Node chosen by the scorer
        peer_range: Relative word count window around the element's count
        min_close_peers: Promote only when close peers exceed this number
        emit: Optional callback for trace events

    Returns:
        The parent when more than min_close_peers siblings are close peers,
        otherwise the element itself
    """
    parent = element.parent
    if parent is None:
        logger.debug(f"{describe(element)} has no parent, keeping it")
        return element

    peers = count_close_peers(element, peer_range, emit)

    if peers > min_close_peers:
        logger.debug(f"{peers} close peers for {describe(element)}, promoting to {describe(parent)}")
        if emit:
            emit(ExtractionEvent(type=EventType.NODE_PROMOTED, tag=parent.name, count=peers))
        return parent

    logger.debug(f"Not enough close peers ({peers}) for {describe(element)}, keeping it")
    if emit:
        emit(ExtractionEvent(type=EventType.PROMOTION_SKIPPED, tag=element.name, count=peers))
    return element
